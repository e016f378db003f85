"""Container representing a chromosome"""
from typing import Iterable
import numpy as np


class Chromosome:
    """Chromosome is the evolvable part of an individual.

    Arguments:
        genes -- Real valued genes, stored as float32. The number of genes
                 stays the same for a whole evolutionary run.

    Functions:
        __len__ -- Number of genes.
        __getitem__, __setitem__ -- Indexed (or sliced) access to the genes.
    """

    __hash__ = None

    def __init__(self, genes: Iterable[float]):
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        self.genes = np.array(genes, dtype=np.float32).ravel()

    def __len__(self):
        return len(self.genes)

    def __getitem__(self, index):
        return self.genes[index]

    def __setitem__(self, index, value):
        self.genes[index] = value

    def __iter__(self):
        return iter(self.genes)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.genes
        return self.genes.astype(dtype)

    def __eq__(self, other):
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    def __repr__(self):
        return "Chromosome({})".format(self.genes.tolist())
