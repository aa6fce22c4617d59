import math
import numpy as np
from rtc.tolerance import EPSILON, approx_eq, isclose


def test_approx_eq():
    assert approx_eq(1, 1)
    assert approx_eq(1, 1 + EPSILON/2)
    assert approx_eq(-1e-6, 1e-6)
    assert not approx_eq(1, 1 + 2*EPSILON)
    assert not approx_eq(0, EPSILON*1.5)
    assert not approx_eq(math.nan, math.nan)
    assert not approx_eq(math.inf, math.inf)


def test_isclose():
    assert isclose([1, 2, 3, 1], [1 + EPSILON/2, 2, 3, 1])
    assert not isclose([1, 2, 3, 1], [1, 2 + 2*EPSILON, 3, 1])
    # w exact.
    assert not isclose([1, 2, 3, 1], [1, 2, 3, 1 + 1e-12])
    assert not isclose([math.nan, 0, 0, 0], [math.nan, 0, 0, 0])


def test_isclose_broadcast():
    a = np.array([[1, 2, 3, 0], [4, 5, 6, 1]], float)
    assert isclose(a, a + [EPSILON/2, 0, 0, 0])
    assert not isclose(a, a + [[0, 0, 0, 0], [0, 0, 2*EPSILON, 0]])


def test_isclose_stack_against_single():
    stack = np.array([[1, 2, 3, 0], [1, 2 + EPSILON/2, 3, 0], [1, 2, 3, 0]], float)
    assert isclose(stack, [1, 2, 3, 0])
    assert isclose([1, 2, 3, 0], stack)
    assert not isclose(stack, [1, 2, 3, 1])
    assert not isclose(stack, [1, 2, 3 + 2*EPSILON, 0])


def test_approx_eq_arrays():
    np.testing.assert_array_equal(approx_eq(np.array([1., 2, 3]), np.array([1 + EPSILON/2, 2 + 2*EPSILON, math.nan])),
                                  [True, False, False])
