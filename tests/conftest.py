import pytest

from dense import Layer, Neuron


@pytest.fixture
def batch():
    return [[1.0, 2.0, 3.0, 2.5],
            [2.0, 5.0, -1.0, 2.0],
            [-1.5, 2.7, 3.3, -0.8]]


@pytest.fixture
def layer1():
    return Layer([
        Neuron([0.2, 0.8, -0.5, 1.0], 2.0),
        Neuron([0.5, -0.91, 0.26, -0.5], 3.0),
        Neuron([-0.26, -0.27, 0.17, 0.87], 0.5),
    ])


@pytest.fixture
def layer2():
    return Layer([
        Neuron([0.1, -0.14, 0.5], -1.0),
        Neuron([-0.5, 0.12, -0.33], 2.0),
        Neuron([-0.44, 0.73, -0.13], -0.5),
    ])
