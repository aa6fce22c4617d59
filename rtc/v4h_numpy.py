"""numpy kernels for v4h."""
import numpy as np

__all__ = ['dot', 'norm_squared', 'norm', 'normalize', 'cross']


def dot(x, y):
    return float(np.dot(x, y))


def norm_squared(x):
    return dot(x, x)


def norm(x):
    return float(np.sqrt(norm_squared(x)))


def normalize(x):
    with np.errstate(divide='ignore', invalid='ignore'):
        return x/norm(x)


def cross(a, b):
    return np.r_[np.cross(a[:3], b[:3]), 0.]
