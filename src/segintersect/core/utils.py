# core/utils.py
from typing import Optional, Tuple

import numpy as np

from segintersect.config import EPSILON
from segintersect.core.vector import Vector3


def are_independent(u: Vector3, v: Vector3, eps: float = EPSILON) -> bool:
    """
    Returns True when u and v span a plane.

    The squared cross product is compared against the product of the squared
    lengths, i.e. sin^2 of the angle between u and v must exceed eps. The
    test does not depend on how long u and v are; a zero vector never spans.
    """
    return u.cross(v).length_squared() > eps * u.length_squared() * v.length_squared()


def solve_span_coefficients(u: Vector3, v: Vector3, offset: Vector3) -> Optional[Tuple[float, float]]:
    """
    Solves offset = alpha * u + beta * v for (alpha, beta).

    The system has three equations and two unknowns, so it is solved in the
    least-squares sense. Returns None when u and v are linearly dependent and
    the system has no unique solution.
    """
    if not are_independent(u, v):
        return None

    m = np.column_stack((u.to_array(), v.to_array()))
    solution, _, rank, _ = np.linalg.lstsq(m, offset.to_array(), rcond=None)
    if rank < 2:
        return None
    return float(solution[0]), float(solution[1])


def within_unit_interval(value: float, eps: float = EPSILON) -> bool:
    """
    Returns True when value lies in [0, 1], widened by eps on both ends.
    """
    return -eps <= value <= 1.0 + eps
