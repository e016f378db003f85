"""Selection -- a way to pick parents from a population"""
import abc
import logging
from typing import Sequence, TypeVar
import numpy as np
from .individual import Individual

logger = logging.getLogger(__name__)

I = TypeVar('I', bound=Individual)


class SelectionMethod(abc.ABC):
    """Pick one individual of a population, favouring the fitter ones."""

    @abc.abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I:
        pass


class RouletteWheelSelection(SelectionMethod):
    """Fitness proportionate selection.

    Each individual is picked with probability fitness / total fitness.
    Negative and NaN fitness count as zero. If nobody has a positive fitness
    the wheel has no area, and the pick is uniform over the population instead.
    Infinite fitness takes the whole wheel, shared evenly between the
    individuals that have it. Weights whose sum overflows are rescaled first.
    """

    @staticmethod
    def _sum(weights: np.ndarray) -> float:
        with np.errstate(over='ignore'):
            return weights.sum()

    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I:
        if len(population) == 0:
            raise ValueError("cannot select from an empty population")

        weights = np.array([individual.fitness for individual in population], dtype=np.float64)
        weights = np.where(weights > 0, weights, 0.0)
        if np.isinf(weights).any():
            weights = np.isinf(weights).astype(np.float64)
        elif not np.isfinite(self._sum(weights)):
            weights = weights / weights.max()
        total = self._sum(weights)
        if not total > 0:
            logger.debug("total fitness is %s, selecting uniformly", total)
            return population[rng.integers(len(population))]

        draw = rng.uniform(0.0, total)
        idx = int(np.searchsorted(np.cumsum(weights), draw, side='right'))
        if idx == len(population):
            # rounding in the cumulative sum left the draw past the last edge
            idx = int(np.flatnonzero(weights)[-1])
        return population[idx]
