"""An agent trainable using neuroevolutionary algorithm"""
import numpy as np
from evo_agents.genetic_algorithm import Chromosome, Individual
from evo_agents.neural_network import Network
from evo_agents.neural_network.network import Topology, as_topology
from evo_agents.neural_network.haiku_network import HaikuPolicy

Observations = np.ndarray
Actions = np.ndarray


class NeuroEvoAgent(Individual):
    """Represents one specimen of the population.

    The agent owns its network; the chromosome is derived from the network on
    demand, and a new agent is built from every chromosome the genetic
    algorithm hands out.
    """

    def __init__(self, topology: Topology, network: Network, fitness: float = 0.0):
        self.topology = as_topology(topology)
        self.network = network
        self._fitness = fitness
        self._policy = None

    @staticmethod
    def random(rng: np.random.Generator, topology: Topology) -> 'NeuroEvoAgent':
        return NeuroEvoAgent(topology, Network.random(rng, topology))

    @staticmethod
    def from_chromosome(topology: Topology, chromosome: Chromosome) -> 'NeuroEvoAgent':
        return NeuroEvoAgent(topology, Network.from_chromosome(chromosome, topology))

    @property
    def fitness(self) -> float:
        return self._fitness

    @fitness.setter
    def fitness(self, fitness: float):
        self._fitness = fitness

    @property
    def chromosome(self) -> Chromosome:
        return Chromosome(self.network.to_chromosome())

    def create(self, chromosome: Chromosome) -> 'NeuroEvoAgent':
        return NeuroEvoAgent.from_chromosome(self.topology, chromosome)

    def exploit(self, observations: Observations) -> Actions:
        """Network outputs for a single observation, or for a batch of them.

        Batches of shape (batch, inputs) are evaluated through a jitted haiku
        policy built on first use.
        """
        observations = np.asarray(observations, dtype=np.float32)
        if observations.ndim == 1:
            return self.network.propagate(observations)
        if self._policy is None:
            self._policy = HaikuPolicy(self.network)
        return self._policy(observations)
