"""Parametrization for a neuroevolutionary population"""
from typing import NamedTuple, Tuple
import gin


@gin.configurable
class NeuroEvoParams(NamedTuple):
    """Parametrization for a neuroevolutionary population

    Internal variables:
        population_size -- Number of neuroevo agents.
        topology -- Neuron count of every network layer, inputs first.
                    Fixed for the whole run.
        mutation_chance -- Probability for each gene to be mutated.
        mutation_magnitude -- Largest offset a mutation adds to a gene.
        seed -- random seed.
    """
    population_size: int = 20
    topology: Tuple[int, ...] = (3, 2, 1)
    mutation_chance: float = 0.01
    mutation_magnitude: float = 0.3
    seed: int = 42
