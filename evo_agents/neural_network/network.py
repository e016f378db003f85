"""Feedforward network with ReLU neurons.

Weights are never trained by gradients. A network is either drawn at random
or decoded from a flat gene vector (its chromosome), and encoded back the
same way: for each layer, for each neuron, the bias followed by the weights.
"""
from typing import NamedTuple, List, Sequence, Union
import numpy as np


class LayerTopology(NamedTuple):
    """Number of neurons in one layer."""
    neurons: int


Topology = Sequence[Union[LayerTopology, int]]


def as_topology(layers: Topology) -> List[LayerTopology]:
    """Normalize a sequence of neuron counts to LayerTopology entries."""
    topology = [LayerTopology(int(getattr(layer, 'neurons', layer))) for layer in layers]
    if len(topology) < 2:
        raise ValueError("topology needs at least 2 layers, got {}".format(len(topology)))
    if any(layer.neurons <= 0 for layer in topology):
        raise ValueError("every layer needs at least one neuron: {}".format(
            [layer.neurons for layer in topology]))
    return topology


class Neuron:
    """A bias and one weight per neuron of the previous layer."""

    def __init__(self, bias: float, weights: Sequence[float]):
        self.bias = np.float32(bias)
        self.weights = np.asarray(weights, dtype=np.float32)

    @staticmethod
    def random(rng: np.random.Generator, input_size: int) -> 'Neuron':
        # upper bound nudged so that 1.0 itself can be drawn
        high = np.nextafter(1.0, np.inf)
        bias = rng.uniform(-1.0, high)
        weights = rng.uniform(-1.0, high, size=input_size)
        return Neuron(bias, weights)

    def propagate(self, inputs: np.ndarray) -> np.float32:
        assert len(inputs) == len(self.weights), \
            "neuron expects {} inputs, got {}".format(len(self.weights), len(inputs))
        return max(self.bias + np.dot(inputs, self.weights), np.float32(0.0))

    def __len__(self):
        return len(self.weights) + 1


class Layer:
    """An ordered group of neurons fed by the same input vector."""

    def __init__(self, neurons: List[Neuron]):
        self.neurons = neurons

    @staticmethod
    def random(rng: np.random.Generator, input_size: int, output_size: int) -> 'Layer':
        return Layer([Neuron.random(rng, input_size) for _ in range(output_size)])

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([neuron.propagate(inputs) for neuron in self.neurons], dtype=np.float32)

    @property
    def input_size(self) -> int:
        return len(self.neurons[0].weights)


class Network:
    """Sequence of fully connected layers.

    Functions:
        random -- draw every bias and weight uniformly from [-1, 1].
        propagate -- feed an input vector through all layers.
        to_chromosome -- flatten biases and weights into one gene vector.
        from_chromosome -- rebuild a network of the given topology from genes.
    """

    def __init__(self, layers: List[Layer]):
        self.layers = layers

    @staticmethod
    def random(rng: np.random.Generator, topology: Topology) -> 'Network':
        topology = as_topology(topology)
        layers = [
            Layer.random(rng, inputs.neurons, outputs.neurons)
            for inputs, outputs in zip(topology[:-1], topology[1:])
        ]
        return Network(layers)

    @staticmethod
    def chromosome_len(topology: Topology) -> int:
        """Number of genes needed to encode a network of this topology."""
        topology = as_topology(topology)
        return sum(outputs.neurons * (inputs.neurons + 1)
                   for inputs, outputs in zip(topology[:-1], topology[1:]))

    @staticmethod
    def from_chromosome(chromosome: Sequence[float], topology: Topology) -> 'Network':
        topology = as_topology(topology)
        genes = np.array(chromosome, dtype=np.float32).ravel()
        expected = Network.chromosome_len(topology)
        if len(genes) != expected:
            raise ValueError("topology {} needs {} genes, got {}".format(
                [layer.neurons for layer in topology], expected, len(genes)))

        layers = []
        offset = 0
        for inputs, outputs in zip(topology[:-1], topology[1:]):
            neurons = []
            for _ in range(outputs.neurons):
                bias = genes[offset]
                weights = genes[offset + 1 : offset + 1 + inputs.neurons]
                neurons.append(Neuron(bias, weights))
                offset += inputs.neurons + 1
            layers.append(Layer(neurons))
        return Network(layers)

    def to_chromosome(self) -> np.ndarray:
        genes = []
        for layer in self.layers:
            for neuron in layer.neurons:
                genes.append(neuron.bias)
                genes.extend(neuron.weights)
        return np.array(genes, dtype=np.float32)

    @property
    def topology(self) -> List[LayerTopology]:
        return [LayerTopology(self.layers[0].input_size)] + \
               [LayerTopology(len(layer.neurons)) for layer in self.layers]

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """Compute the outputs of the last layer for one input vector."""
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.shape != (self.layers[0].input_size,):
            raise ValueError("network expects {} inputs, got shape {}".format(
                self.layers[0].input_size, inputs.shape))
        for layer in self.layers:
            inputs = layer.propagate(inputs)
        return inputs
