"""
A neuroevolutionary algorithm to train a population of agents
"""
import logging
from typing import List, Optional
import numpy as np
from evo_agents.genetic_algorithm import (
    CrossoverMethod, GaussianMutation, GeneticAlgorithm, MutationMethod,
    RouletteWheelSelection, SelectionMethod, Statistics, UniformCrossover)
from .neuroevo_params import NeuroEvoParams
from .neuroevo_agent import NeuroEvoAgent

logger = logging.getLogger(__name__)

Actions = np.ndarray
Observations = np.ndarray
Rewards = np.ndarray


class NeuroEvoPopulation:
    """Maintains a population of networks and evolves it generation by generation.

    The host evaluates the agents (exploit), reports their rewards
    (add_fitness) and calls update once the generation has been scored.
    Selection, crossover and mutation default to roulette wheel, uniform
    crossover and a GaussianMutation built from the params.
    """

    def __init__(
            self,
            params: Optional[NeuroEvoParams] = None,
            selection: Optional[SelectionMethod] = None,
            crossover: Optional[CrossoverMethod] = None,
            mutation: Optional[MutationMethod] = None):
        if params is None:
            params = NeuroEvoParams()
        if params.population_size <= 0:
            raise ValueError("population size must be positive, got {}".format(
                params.population_size))
        self.params = params
        self.rng = np.random.default_rng(params.seed)
        self.pop_size = params.population_size
        self.genetic_algorithm = GeneticAlgorithm(
            selection or RouletteWheelSelection(),
            crossover or UniformCrossover(),
            mutation or GaussianMutation(params.mutation_chance, params.mutation_magnitude))
        self.evaluations = np.zeros((self.pop_size,))
        self.history: List[Statistics] = []
        self.last_best: Optional[NeuroEvoAgent] = None
        self._rewarded = False

        self.agents = [NeuroEvoAgent.random(self.rng, params.topology)
                       for _ in range(self.pop_size)]

        self.evo_steps = 0

    def exploit(self, observations: Observations) -> List[Actions]:
        """Let every agent act on its own slice of observations.

        observations[i] goes to agent i; it is either one observation vector
        or a batch of them.
        """
        if len(observations) != self.pop_size:
            raise ValueError("expected observations for {} agents, got {}".format(
                self.pop_size, len(observations)))
        return [agent.exploit(obs) for agent, obs in zip(self.agents, observations)]

    def add_fitness(self, rewards: Rewards):
        """Accumulate rewards earned by each agent during this generation"""
        rewards = np.asarray(rewards, dtype=np.float64)
        if rewards.shape != (self.pop_size,):
            raise ValueError("expected one reward per agent ({}), got shape {}".format(
                self.pop_size, rewards.shape))
        self.evaluations += rewards
        self._rewarded = True

    def best_agent(self) -> NeuroEvoAgent:
        """Fittest agent of the generation being scored.

        Between update and the next add_fitness the new generation has no
        rewards yet, so the fittest agent of the last evolved generation is
        returned instead.
        """
        if not self._rewarded and self.last_best is not None:
            return self.last_best
        return self.agents[int(np.argmax(self.evaluations))]

    def update(self) -> Statistics:
        """Perform evolutionary step"""
        for agent, evaluation in zip(self.agents, self.evaluations):
            agent.fitness = float(evaluation)
        self.last_best = self.agents[int(np.argmax(self.evaluations))]

        self.agents, statistics = self.genetic_algorithm.evolve(self.rng, self.agents)

        self.history.append(statistics)
        logger.info("generation %d: %s", self.evo_steps, statistics)
        self.evaluations[:] = 0
        self._rewarded = False
        self.evo_steps += 1
        return statistics
