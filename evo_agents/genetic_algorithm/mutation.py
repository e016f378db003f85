"""Mechanism for altering chromosomes."""
import abc
import numpy as np
from .chromosome import Chromosome


class MutationMethod(abc.ABC):
    """Perturb a chromosome in place."""

    @abc.abstractmethod
    def mutate(self, rng: np.random.Generator, chromosome: Chromosome):
        pass


class GaussianMutation(MutationMethod):
    """Mutate each gene with a fixed probability by a bounded uniform offset.

    Despite the name, offsets are drawn from a uniform distribution, not a
    normal one.

    Arguments:
        chance -- Probability for each gene to be mutated, in [0, 1].
        magnitude -- A mutated gene moves by an offset drawn uniformly from
                     [-magnitude, magnitude]. Genes are not clamped afterwards.
    """

    def __init__(self, chance: float, magnitude: float):
        if not 0.0 <= chance <= 1.0:
            raise ValueError("mutation chance must lie in [0, 1], got {}".format(chance))
        if not magnitude >= 0.0:
            raise ValueError("mutation magnitude must be non-negative, got {}".format(magnitude))
        self.chance = chance
        self.magnitude = magnitude

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome):
        """Mutate chromosome according to the mutation chance"""
        keys = rng.random(len(chromosome))
        offsets = rng.uniform(-self.magnitude, self.magnitude, size=len(chromosome))
        mutated = keys < self.chance
        chromosome.genes[mutated] += offsets[mutated].astype(np.float32)
