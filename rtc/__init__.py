"""Homogeneous coordinates for ray tracing.

Points and vectors share one immutable value type, tuples.Tuple. v4h provides the same algebra on numpy arrays.
"""
from .tolerance import EPSILON, approx_eq
from .tuples import Tuple, point, vector, dot, cross, origin, xhat, yhat, zhat, unit_vectors
