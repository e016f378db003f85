from .chromosome import Chromosome
from .individual import Individual
from .selection import SelectionMethod, RouletteWheelSelection
from .crossover import CrossoverMethod, UniformCrossover
from .mutation import MutationMethod, GaussianMutation
from .statistics import Statistics
from .genetic_algorithm import GeneticAlgorithm
