import numpy as np

from dense import Layer, Neuron

X = [[1.0, 2.0, 3.0, 2.5],
     [2.0, 5.0, -1.0, 2.0],
     [-1.5, 2.7, 3.3, -0.8]]

# 4 inputs -> 3 neurons
layer1 = Layer([
    Neuron([0.2, 0.8, -0.5, 1.0], 2.0),
    Neuron([0.5, -0.91, 0.26, -0.5], 3.0),
    Neuron([-0.26, -0.27, 0.17, 0.87], 0.5),
])

# 3 inputs -> 3 neurons, fed by layer1
layer2 = Layer([
    Neuron([0.1, -0.14, 0.5], -1.0),
    Neuron([-0.5, 0.12, -0.33], 2.0),
    Neuron([-0.44, 0.73, -0.13], -0.5),
])


def main(inputs=None):
    if inputs is None:
        inputs = X
    output1 = list(layer1.forward_batch(inputs))
    print(np.array(output1))
    output2 = np.array(list(layer2.forward_batch(output1)))
    print(output2)
    return output2


if __name__ == '__main__':
    main()
