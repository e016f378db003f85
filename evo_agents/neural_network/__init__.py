from .network import LayerTopology, Neuron, Layer, Network, as_topology
