import logging

import numpy as np

logger = logging.getLogger(__name__)

# Random weights are drawn from [WEIGHT_INIT_LOW, WEIGHT_INIT_HIGH), biases start at 0
WEIGHT_INIT_LOW = -0.01
WEIGHT_INIT_HIGH = 0.01


class ShapeError(ValueError):
    """Raised when a weight array or an input sample has the wrong width."""


def _as_vector(values, width, what):
    vector = np.asarray(values, dtype=np.float64)
    if vector.shape != (width,):
        raise ShapeError(f'{what} must have shape ({width},), got {vector.shape}')
    return vector


class Neuron:
    def __init__(self, weights, bias):
        weights = np.array(weights, dtype=np.float64)
        if weights.ndim != 1:
            raise ShapeError(f'neuron weights must be 1-D, got shape {weights.shape}')
        # Parameters never change after construction
        weights.flags.writeable = False
        self.weights = weights
        self.bias = float(bias)

    @property
    def size(self):
        return self.weights.shape[0]

    def forward(self, inputs):
        inputs = _as_vector(inputs, self.size, 'neuron input')
        # Accumulate in index order starting from the bias,
        # np.dot would sum in a different order
        output = self.bias
        for value, weight in zip(inputs, self.weights):
            output += value * weight
        return float(output)

    def __repr__(self):
        return f'Neuron(weights={self.weights.tolist()}, bias={self.bias})'


class Layer:
    def __init__(self, neurons):
        neurons = tuple(neurons)
        if not neurons:
            raise ShapeError('a layer needs at least one neuron')
        n_inputs = neurons[0].size
        for index, neuron in enumerate(neurons):
            if neuron.size != n_inputs:
                raise ShapeError(f'neuron {index} takes {neuron.size} inputs, '
                                 f'expected {n_inputs} like neuron 0')
        self.neurons = neurons
        self.n_inputs = n_inputs

    @classmethod
    def from_arrays(cls, weights, biases):
        """Build a layer from a (n_inputs, n_neurons) weight matrix and one bias per neuron.

        Column ``i`` of ``weights`` holds the weights of neuron ``i``. ``biases``
        may be flat or shaped (1, n_neurons).
        """
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 2:
            raise ShapeError(f'layer weights must be 2-D (n_inputs, n_neurons), got shape {weights.shape}')
        biases = np.asarray(biases, dtype=np.float64).reshape(-1)
        if biases.shape[0] != weights.shape[1]:
            raise ShapeError(f'got {biases.shape[0]} biases for {weights.shape[1]} neurons')
        return cls(Neuron(weights[:, i], biases[i]) for i in range(weights.shape[1]))

    @property
    def n_neurons(self):
        return len(self.neurons)

    # Same layout as the numpy dense layer: inputs along rows, neurons along columns
    @property
    def weights(self):
        return np.stack([neuron.weights for neuron in self.neurons], axis=1)

    @property
    def biases(self):
        return np.array([[neuron.bias for neuron in self.neurons]])

    def forward_sample(self, inputs):
        inputs = _as_vector(inputs, self.n_inputs, 'layer input')
        return np.array([neuron.forward(inputs) for neuron in self.neurons])

    def forward_batch(self, inputs):
        # One sample at a time so generators and endless streams work too
        for sample in inputs:
            yield self.forward_sample(sample)

    def __len__(self):
        return len(self.neurons)

    def __repr__(self):
        return f'Layer(n_inputs={self.n_inputs}, n_neurons={self.n_neurons})'


def sample_neuron(rng, size):
    if size < 0:
        raise ShapeError(f'neuron size must not be negative, got {size}')
    rng = np.random.default_rng(rng)
    weights = rng.uniform(WEIGHT_INIT_LOW, WEIGHT_INIT_HIGH, size=size)
    return Neuron(weights, 0.0)


def sample_layer(rng, n_inputs, n_neurons):
    """Sample ``n_neurons`` neurons of width ``n_inputs``, in order, from ``rng``.

    ``rng`` is a ``numpy.random.Generator`` or a seed for one.
    """
    if n_inputs < 0 or n_neurons < 1:
        raise ShapeError(f'cannot sample a layer of shape ({n_inputs}, {n_neurons})')
    rng = np.random.default_rng(rng)
    logger.debug('sampling dense layer %d -> %d', n_inputs, n_neurons)
    return Layer(sample_neuron(rng, n_inputs) for _ in range(n_neurons))
