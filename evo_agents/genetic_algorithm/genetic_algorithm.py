"""
A genetic algorithm evolving a population of individuals, one generation per call
"""
import logging
from typing import List, Sequence, Tuple, TypeVar
import numpy as np
from .crossover import CrossoverMethod
from .individual import Individual
from .mutation import MutationMethod
from .selection import SelectionMethod
from .statistics import Statistics

logger = logging.getLogger(__name__)

I = TypeVar('I', bound=Individual)


class GeneticAlgorithm:
    """Generational replacement built from interchangeable operators.

    Every slot of the next generation is filled the same way: select two
    parents (with replacement), cross their chromosomes over, mutate the child
    and wrap it into a new individual. Slots are filled in order, so the
    random stream is consumed the same way on every run with the same seed.
    """

    def __init__(
            self,
            selection_method: SelectionMethod,
            crossover_method: CrossoverMethod,
            mutation_method: MutationMethod):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, rng: np.random.Generator, population: Sequence[I]) -> Tuple[List[I], Statistics]:
        """Produce the next generation.

        Returns the new population, of the same size, together with the
        statistics of the population that was passed in. Fitness of the new
        individuals is meaningless until they are evaluated again.
        """
        if len(population) == 0:
            raise ValueError("cannot evolve an empty population")

        new_population = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population)
            parent_b = self.selection_method.select(rng, population)
            child = self.crossover_method.crossover(rng, parent_a.chromosome, parent_b.chromosome)
            self.mutation_method.mutate(rng, child)
            new_population.append(parent_a.create(child))

        statistics = Statistics.from_population(population)
        logger.debug("evolved %d individuals, %s", len(population), statistics)
        return new_population, statistics
