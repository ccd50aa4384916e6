# core/utils.py
import math

# Offset used for over/under points and for "close enough to zero" tests.
EPSILON = 1e-5

INFINITY = math.inf


def approx(a: float, b: float, eps: float = EPSILON) -> bool:
    return abs(a - b) < eps


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
