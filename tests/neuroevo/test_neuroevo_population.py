import numpy as np
import pytest
from evo_agents.genetic_algorithm import GaussianMutation
from evo_agents.neuroevo import NeuroEvoParams, NeuroEvoPopulation


def _params(**kwargs):
    values = dict(population_size=10, topology=[2, 3, 1], mutation_chance=0.1,
                  mutation_magnitude=0.3, seed=42)
    values.update(kwargs)
    return NeuroEvoParams(**values)

def test_ctor():

    population = NeuroEvoPopulation(_params())

    assert len(population.agents) == 10
    assert population.evo_steps == 0
    assert population.history == []
    assert np.all(population.evaluations == 0)

def test_ctor_empty_population():

    with pytest.raises(ValueError):
        NeuroEvoPopulation(_params(population_size=0))

def test_same_seed_same_agents():

    population1 = NeuroEvoPopulation(_params())
    population2 = NeuroEvoPopulation(_params())
    population3 = NeuroEvoPopulation(_params(seed=1))

    chromosomes1 = [a.chromosome for a in population1.agents]
    assert chromosomes1 == [a.chromosome for a in population2.agents]
    assert chromosomes1 != [a.chromosome for a in population3.agents]

def test_exploit():

    population = NeuroEvoPopulation(_params())
    observations = np.ones((10, 2))

    actions = population.exploit(observations)
    assert len(actions) == 10
    assert all(a.shape == (1,) and a[0] >= 0.0 for a in actions)

    with pytest.raises(ValueError):
        population.exploit(np.ones((9, 2)))

def test_add_fitness():

    population = NeuroEvoPopulation(_params())
    population.add_fitness(np.arange(10))
    population.add_fitness(np.ones(10))

    assert np.array_equal(population.evaluations, np.arange(10) + 1)
    assert population.best_agent() is population.agents[9]

    with pytest.raises(ValueError):
        population.add_fitness(np.ones(3))

def test_update():

    population = NeuroEvoPopulation(_params())
    old_agents = list(population.agents)
    population.add_fitness(np.arange(10, dtype=float))
    statistics = population.update()

    assert population.evo_steps == 1
    assert population.history == [statistics]
    assert statistics.min_fitness == 0.0
    assert statistics.max_fitness == 9.0
    assert statistics.avg_fitness == pytest.approx(4.5)
    assert len(population.agents) == 10
    assert all(a not in old_agents for a in population.agents)
    assert np.all(population.evaluations == 0)

def test_custom_mutation():

    population = NeuroEvoPopulation(_params(), mutation=GaussianMutation(0.0, 0.0))
    population.add_fitness(np.eye(10)[4])
    best = population.agents[4].chromosome
    population.update()

    assert all(a.chromosome == best for a in population.agents)

def test_learns_to_maximize_output():

    population = NeuroEvoPopulation(_params(population_size=20, mutation_chance=0.3, seed=0))
    observations = np.tile([0.5, -0.5], (20, 1))

    for _ in range(25):
        rewards = [float(a[0]) for a in population.exploit(observations)]
        population.add_fitness(rewards)
        population.update()

    assert population.history[-1].avg_fitness > population.history[0].avg_fitness

def test_best_agent_survives_update():

    population = NeuroEvoPopulation(_params(population_size=4))
    population.add_fitness([0.0, 0.0, 5.0, 0.0])
    best = population.agents[2]
    population.update()

    assert population.best_agent() is best

    population.add_fitness([0.0, 1.0, 0.0, 0.0])
    assert population.best_agent() is population.agents[1]
