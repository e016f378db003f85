"""Summary of a population's fitness"""
from typing import NamedTuple, Sequence
import numpy as np
from .individual import Individual


class Statistics(NamedTuple):
    """Fitness statistics of one generation, taken before it was evolved."""
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float

    @staticmethod
    def from_population(population: Sequence[Individual]) -> 'Statistics':
        if len(population) == 0:
            raise ValueError("cannot summarize an empty population")
        fitness = np.array([individual.fitness for individual in population], dtype=np.float64)
        return Statistics(
            min_fitness=float(fitness.min()),
            max_fitness=float(fitness.max()),
            avg_fitness=float(fitness.mean()),
            median_fitness=float(np.median(fitness)))

    def __str__(self):
        return "min={:.3f} max={:.3f} avg={:.3f} median={:.3f}".format(*self)
