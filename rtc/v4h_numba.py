"""numba kernels for v4h.

error_model='numpy' so that division by zero gives inf/nan like the numpy kernels, rather than raising.
"""
import numpy as np
import numba

__all__ = ['dot', 'norm_squared', 'norm', 'normalize', 'cross']


@numba.njit("f8(f8[:], f8[:])", error_model='numpy')
def dot(x, y):
    s = 0.
    for i in range(len(x)):
        s += x[i]*y[i]
    return s


@numba.njit("f8(f8[:])", error_model='numpy')
def norm_squared(x):
    return dot(x, x)


@numba.njit("f8(f8[:])", error_model='numpy')
def norm(x):
    return np.sqrt(norm_squared(x))


@numba.njit(error_model='numpy')
def normalize(x):
    return x/norm(x)


@numba.njit(error_model='numpy')
def cross(a, b):
    return np.array((a[1]*b[2] - a[2]*b[1], a[2]*b[0] - a[0]*b[2], a[0]*b[1] - a[1]*b[0], 0.))
