"""Homogeneous coordinates in 3D space as an immutable value type.

A Tuple holds x, y, z and w. Points have w = 1, vectors have w = 0. Arithmetic acts on all four components, so the
usual rules fall out: point - point is a vector, point + vector is a point, vector + vector is a vector. Nothing
stops other combinations (point + point gives w = 2); callers are responsible for combining sensibly.

Equality is approximate in x, y & z (see tolerance.approx_eq) and exact in w.

No operation raises on floating point edge cases. Division by zero and normalizing a zero vector give inf/nan
components, as IEEE-754 arithmetic would.
"""
import math
import numbers
from dataclasses import dataclass
from typing import Iterator
import numpy as np
from .tolerance import approx_eq
from .types import Sequence4, Vector4

__all__ = ['Tuple', 'point', 'vector', 'dot', 'cross', 'origin', 'xhat', 'yhat', 'zhat', 'unit_vectors']


@dataclass(frozen=True, eq=False)
class Tuple:
    x: float
    y: float
    z: float
    w: float

    def __post_init__(self):
        for name in ('x', 'y', 'z', 'w'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def point(cls, x: float, y: float, z: float) -> 'Tuple':
        return cls(x, y, z, 1.)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> 'Tuple':
        return cls(x, y, z, 0.)

    @classmethod
    def from_array(cls, a: Sequence4) -> 'Tuple':
        """Make from a length 4 sequence or array. w is taken as is."""
        a = np.asarray(a, float)
        if a.shape != (4,):
            raise ValueError(f'Expected 4 components, got array of shape {a.shape}.')
        return cls(*a)

    def to_array(self) -> Vector4:
        return np.array((self.x, self.y, self.z, self.w))

    def __array__(self, dtype=None, copy=None):
        """Let numpy treat a Tuple as a (4,) array, so it can be passed straight to v4h."""
        a = self.to_array()
        return a if dtype is None else a.astype(dtype)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def is_point(self) -> bool:
        return self.w == 1.

    def is_vector(self) -> bool:
        return self.w == 0.

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (approx_eq(self.x, other.x) and approx_eq(self.y, other.y) and approx_eq(self.z, other.z) and
                self.w == other.w)

    # No hash is consistent with tolerance-based equality.
    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, k):
        """Scale all four components, w included."""
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return Tuple(self.x*k, self.y*k, self.z*k, self.w*k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        """Divide all four components, w included.

        Dividing by zero gives inf/nan components instead of raising ZeroDivisionError.
        """
        if not isinstance(k, numbers.Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            x, y, z, w = np.true_divide((self.x, self.y, self.z, self.w), k)
        return Tuple(x, y, z, w)

    # Named forms of the operators.
    def add(self, other: 'Tuple') -> 'Tuple':
        return self + other

    def sub(self, other: 'Tuple') -> 'Tuple':
        return self - other

    def negate(self) -> 'Tuple':
        return -self

    def scale(self, k: float) -> 'Tuple':
        return self*k

    def divide(self, k: float) -> 'Tuple':
        return self/k

    def mag(self) -> float:
        """Euclidean norm of all four components.

        For a vector this is the familiar 3D length. Products rather than powers so that overflow gives inf.
        """
        return math.sqrt(self.x*self.x + self.y*self.y + self.z*self.z + self.w*self.w)

    def norm(self) -> 'Tuple':
        """Divide by magnitude. A zero vector gives nan components."""
        return self/self.mag()

    def dot(self, other: 'Tuple') -> float:
        """Sum of products of all four components.

        >>> vector(1, 2, 3).dot(vector(2, 3, 4))
        20.0
        """
        return self.x*other.x + self.y*other.y + self.z*other.z + self.w*other.w

    def cross(self, other: 'Tuple') -> 'Tuple':
        """Right-handed cross product of the spatial parts. Always returns a vector, whatever the inputs' w.

        >>> vector(1, 2, 3).cross(vector(2, 3, 4))
        Tuple(x=-1.0, y=2.0, z=-1.0, w=0.0)
        """
        return Tuple.vector(self.y*other.z - self.z*other.y, self.z*other.x - self.x*other.z,
                            self.x*other.y - self.y*other.x)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple.vector(x, y, z)


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)


xhat = vector(1, 0, 0)
yhat = vector(0, 1, 0)
zhat = vector(0, 0, 1)
origin = point(0, 0, 0)
unit_vectors = xhat, yhat, zhat
