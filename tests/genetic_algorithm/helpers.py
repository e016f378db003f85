from evo_agents.genetic_algorithm import Chromosome, Individual


class ScoredChromosome(Individual):
    """Individual whose fitness is given up front or derived from its genes."""

    def __init__(self, chromosome, fitness=None):
        self._chromosome = Chromosome(chromosome)
        self._fitness = fitness

    @property
    def fitness(self):
        if self._fitness is None:
            # sum of the positive genes
            return float(sum(max(gene, 0.0) for gene in self._chromosome))
        return self._fitness

    @property
    def chromosome(self):
        return self._chromosome

    def create(self, chromosome):
        return ScoredChromosome(chromosome)
