"""Definitions and operations for homogeneous vectors in 3D space stored as numpy arrays of shape (4,).

Same semantics as tuples.Tuple, for code that keeps points and vectors as arrays. The arithmetic operators are
numpy's own; this module supplies classification, conversion and the geometric products.

The kernels are provided by a backend module, v4h_numpy or v4h_numba. The initial choice comes from the v4h_backend
key of the configuration file (see _utility.load_config), defaulting to numpy.
"""
import importlib
import logging
from typing import Sequence
import numpy as np
from . import _utility
from .tolerance import isclose
from .types import Vector4

__all__ = ['is_point', 'is_vector', 'to_point', 'to_vector', 'dot', 'norm_squared', 'norm', 'normalize', 'cross',
           'isclose', 'set_backend', 'get_backend', 'BACKENDS', 'origin', 'xhat', 'yhat', 'zhat', 'unit_vectors']

logger = logging.getLogger(__name__)

BACKENDS = 'numpy', 'numba'
DEFAULT_BACKEND = 'numpy'

backend = None
backend_name = None


def set_backend(name: str):
    global backend, backend_name
    if name not in BACKENDS:
        raise ValueError(f'Unknown v4h backend {name!r}. Choose from {BACKENDS}.')
    backend = importlib.import_module(f'.v4h_{name}', __package__)
    backend_name = name
    logger.info(f'Set v4h backend to {backend.__name__}.')


def get_backend() -> str:
    if backend is None:
        set_backend(_utility.load_config().get('v4h_backend', DEFAULT_BACKEND))
    return backend_name


def _kernels():
    get_backend()
    return backend


def is_point(x: Sequence[float]) -> bool:
    x = np.asarray(x, float)
    return (x.shape == (4,)) and bool(x[3] == 1.)


def is_vector(v: Sequence[float]) -> bool:
    v = np.asarray(v, float)
    return (v.shape == (4,)) and bool(v[3] == 0.)


def _to_homogeneous(x: Sequence[float], w: float, kind: str) -> Vector4:
    x = np.array(x, float)
    if x.shape == (3,):
        x = np.r_[x, w]
    elif x.shape != (4,):
        raise ValueError(f'Expected 3 or 4 components, got array of shape {x.shape}.')
    elif x[3] != w:
        raise ValueError(f'A {kind} must have w = {w:g}, got {x[3]:g}.')
    return x


def to_point(x: Sequence[float]) -> Vector4:
    """Convert 3 coordinates, or 4 with w = 1, to a point array."""
    return _to_homogeneous(x, 1., 'point')


def to_vector(x: Sequence[float]) -> Vector4:
    """Convert 3 components, or 4 with w = 0, to a vector array."""
    return _to_homogeneous(x, 0., 'vector')


def dot(a: Vector4, b: Vector4) -> float:
    """Sum of products of all four components."""
    return _kernels().dot(np.asarray(a, float), np.asarray(b, float))


def norm_squared(x: Vector4) -> float:
    return _kernels().norm_squared(np.asarray(x, float))


def norm(x: Vector4) -> float:
    return _kernels().norm(np.asarray(x, float))


def normalize(x: Vector4) -> Vector4:
    """Divide by norm. A zero vector gives nan entries."""
    return _kernels().normalize(np.asarray(x, float))


def cross(a: Vector4, b: Vector4) -> Vector4:
    """Right-handed cross product of the spatial parts. Result has w = 0."""
    return _kernels().cross(np.asarray(a, float), np.asarray(b, float))


xhat = to_vector((1, 0, 0))
yhat = to_vector((0, 1, 0))
zhat = to_vector((0, 0, 1))
origin = to_point((0, 0, 0))
unit_vectors = xhat, yhat, zhat
