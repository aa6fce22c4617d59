"""Approximate floating point comparison shared by everything built on homogeneous coordinates.

Spatial components accumulate rounding error through chained arithmetic, so they are compared with a fixed
absolute tolerance. The homogeneous w component is a discrete tag and is always compared exactly.
"""
import numpy as np

__all__ = ['EPSILON', 'approx_eq', 'isclose']

EPSILON = 1e-5


def approx_eq(a, b):
    """True if |a - b| < EPSILON. NaN is never equal to anything.

    Floats give a bool. Arrays broadcast and give an elementwise boolean array.
    """
    return abs(a - b) < EPSILON


def isclose(a, b) -> bool:
    """Compare two ...x4 arrays: x, y & z within EPSILON, w exactly equal.

    Args:
        a, b (...x4 arrays): Homogeneous coordinates. Broadcast against each other.

    Returns:
        True if every element pair satisfies the comparison.
    """
    a = np.asarray(a, float)
    b = np.asarray(b, float)
    with np.errstate(invalid='ignore'):
        spatial = approx_eq(a[..., :3], b[..., :3])
    return bool(spatial.all() and (a[..., 3] == b[..., 3]).all())
