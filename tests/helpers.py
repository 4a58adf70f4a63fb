import numpy as np
import pytest


def exact(expected):
    """Compare floats the way the reference fixtures were checked: absolute 1e-15."""
    if not np.isscalar(expected):
        expected = np.asarray(expected, dtype=np.float64)
    return pytest.approx(expected, abs=1e-15, rel=0)
