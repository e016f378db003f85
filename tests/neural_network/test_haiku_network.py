import jax
import numpy as np
import pytest
from evo_agents.neural_network import Network
from evo_agents.neural_network.haiku_network import HaikuPolicy, build_mlp_network, to_haiku_params


def test_params_layout():

    rng = np.random.default_rng(0)
    network = Network.random(rng, [3, 2, 1])
    params = to_haiku_params(network)

    assert set(params) == {"mlp/~/linear_0", "mlp/~/linear_1"}
    assert params["mlp/~/linear_0"]["w"].shape == (3, 2)
    assert params["mlp/~/linear_0"]["b"].shape == (2,)
    assert params["mlp/~/linear_1"]["w"].shape == (2, 1)
    np.testing.assert_allclose(
        np.asarray(params["mlp/~/linear_0"]["w"])[:, 1], network.layers[0].neurons[1].weights)

def test_params_match_init_structure():

    transformed = build_mlp_network([4, 8, 2])
    network = Network.random(np.random.default_rng(0), [4, 8, 2])
    init_params = transformed.init(jax.random.PRNGKey(0), np.ones((1, 4), dtype=np.float32))
    params = to_haiku_params(network)

    assert set(init_params) == set(params)
    for name in params:
        for key in ("w", "b"):
            assert init_params[name][key].shape == params[name][key].shape

def test_policy_matches_propagate():

    rng = np.random.default_rng(5)
    network = Network.random(rng, [4, 8, 8, 2])
    policy = HaikuPolicy(network)

    observations = rng.uniform(-2.0, 2.0, size=(16, 4)).astype(np.float32)
    outputs = policy(observations)

    assert outputs.shape == (16, 2)
    expected = np.stack([network.propagate(obs) for obs in observations])
    np.testing.assert_allclose(outputs, expected, rtol=1e-4, atol=1e-5)

def test_policy_shape_mismatch():

    policy = HaikuPolicy(Network.random(np.random.default_rng(0), [3, 2]))

    with pytest.raises(ValueError):
        policy(np.zeros((4, 2)))
    with pytest.raises(ValueError):
        policy(np.zeros(3))
