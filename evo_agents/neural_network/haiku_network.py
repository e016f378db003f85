"""Batched, jitted evaluation of a Network through haiku."""
from typing import Dict
import haiku as hk
import jax
from jax import numpy as jnp
import numpy as np
from .network import Network, Topology, as_topology

Observations = np.ndarray
Outputs = np.ndarray


def build_mlp_network(topology: Topology) -> hk.Transformed:
    """Build an MLP with ReLU after every layer, the last one included."""
    output_sizes = [layer.neurons for layer in as_topology(topology)[1:]]

    def forward(obs):
        network = hk.nets.MLP(output_sizes, activation=jax.nn.relu, activate_final=True)
        return network(obs)

    return hk.without_apply_rng(hk.transform(forward))


def to_haiku_params(network: Network) -> Dict[str, Dict[str, jnp.ndarray]]:
    """Lay the network's biases and weights out as parameters of build_mlp_network.

    haiku's Linear computes inputs @ w + b, so column j of w holds the weights
    of neuron j.
    """
    params = {}
    for i, layer in enumerate(network.layers):
        params["mlp/~/linear_{}".format(i)] = {
            "w": jnp.asarray(np.stack([n.weights for n in layer.neurons], axis=1), dtype=jnp.float32),
            "b": jnp.asarray([n.bias for n in layer.neurons], dtype=jnp.float32),
        }
    return params


class HaikuPolicy:
    """Evaluates a network on a batch of observations at once."""

    def __init__(self, network: Network):
        self.input_size = network.layers[0].input_size
        self.transformed = build_mlp_network(network.topology)
        self.params = to_haiku_params(network)
        self._apply = jax.jit(self.transformed.apply)

    def __call__(self, observations: Observations) -> Outputs:
        observations = np.asarray(observations, dtype=np.float32)
        if observations.ndim != 2 or observations.shape[1] != self.input_size:
            raise ValueError("expected observations of shape (batch, {}), got {}".format(
                self.input_size, observations.shape))
        return np.asarray(self._apply(self.params, observations))
