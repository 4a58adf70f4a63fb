import numpy as np
from nnfs.datasets import spiral_data

from dense import sample_layer

SEED = 0
SAMPLES = 100
CLASSES = 3


def main(seed=SEED, samples=SAMPLES, classes=CLASSES):
    # spiral_data draws from numpy's global generator
    np.random.seed(seed)
    X, y = spiral_data(samples=samples, classes=classes)

    rng = np.random.default_rng(seed)
    layer1 = sample_layer(rng, 2, 3)
    layer2 = sample_layer(rng, 3, 3)

    # Rows of X are streamed through both layers one sample at a time
    output = np.array(list(layer2.forward_batch(layer1.forward_batch(X))))
    print(output[:5])
    return output, y


if __name__ == '__main__':
    main()
