"""Crossover -- a way to recombine two chromosomes"""
import abc
import numpy as np
from .chromosome import Chromosome


class CrossoverMethod(abc.ABC):
    """Recombine two parent chromosomes into one child"""

    @abc.abstractmethod
    def crossover(
            self,
            rng: np.random.Generator,
            parent_a: Chromosome,
            parent_b: Chromosome) -> Chromosome:
        pass


class UniformCrossover(CrossoverMethod):
    """Every gene of the child comes from either parent with a fair coin flip."""

    def crossover(
            self,
            rng: np.random.Generator,
            parent_a: Chromosome,
            parent_b: Chromosome) -> Chromosome:
        parent_a = np.asarray(parent_a, dtype=np.float32)
        parent_b = np.asarray(parent_b, dtype=np.float32)
        if len(parent_a) != len(parent_b):
            raise ValueError("parents differ in length: {} and {}".format(
                len(parent_a), len(parent_b)))

        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(from_a, parent_a, parent_b))
