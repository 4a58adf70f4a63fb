import numpy as np

import forward_pass
import spiral_forward
from tests.helpers import exact


def test_forward_pass(capsys):
    output = forward_pass.main()
    assert output == exact([[0.5031, -1.04185, -2.03875],
                            [0.2434, -2.7332, -5.7633],
                            [-0.99314, 1.41254, -0.35655]])
    printed = capsys.readouterr().out
    assert '4.8' in printed
    assert '0.5031' in printed


def test_forward_pass_custom_inputs():
    output = forward_pass.main([[0.0, 0.0, 0.0, 0.0]])
    # Zero input only propagates the first layer's biases
    expected = forward_pass.layer2.forward_sample([2.0, 3.0, 0.5])
    assert np.array_equal(output[0], expected)


def test_spiral_forward(capsys):
    output, y = spiral_forward.main(samples=100, classes=3)
    assert output.shape == (300, 3)
    assert y.shape == (300,)
    assert set(y.tolist()) == {0, 1, 2}
    assert capsys.readouterr().out.strip()


def test_spiral_forward_is_seeded(capsys):
    first, _ = spiral_forward.main(seed=3, samples=20, classes=2)
    second, _ = spiral_forward.main(seed=3, samples=20, classes=2)
    assert np.array_equal(first, second)
    third, _ = spiral_forward.main(seed=4, samples=20, classes=2)
    assert not np.array_equal(first, third)


def test_spiral_outputs_stay_small():
    # Weights within 0.01 and points within the unit disc keep activations tiny
    output, _ = spiral_forward.main()
    assert np.all(np.abs(output) < 1e-3)
