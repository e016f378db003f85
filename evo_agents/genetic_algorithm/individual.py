"""Interface the genetic algorithm needs from the things it evolves."""
import abc
from .chromosome import Chromosome


class Individual(abc.ABC):
    """A unit of selection: a fitness score and the chromosome behind it.

    Fitness is assigned by whoever evaluates the individual. It is expected to
    be non-negative; see RouletteWheelSelection for what happens otherwise.
    """

    @property
    @abc.abstractmethod
    def fitness(self) -> float:
        """Fitness score of the last evaluation."""

    @property
    @abc.abstractmethod
    def chromosome(self) -> Chromosome:
        """Chromosome encoding this individual."""

    @abc.abstractmethod
    def create(self, chromosome: Chromosome) -> 'Individual':
        """Build an offspring of the same kind carrying the given chromosome."""
