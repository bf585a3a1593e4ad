# geometry/plane.py
from typing import Optional, Tuple

from segintersect.core.utils import are_independent, solve_span_coefficients, within_unit_interval
from segintersect.core.vector import Vector3


class BoundedPlane:
    """
    A finite parallelogram position + s * u + t * v with s, t in [0, 1].

    u and v are expected to be linearly independent. This is not checked on
    construction; see is_degenerate.
    """
    __slots__ = ("position", "u", "v")

    def __init__(self, position: Vector3, u: Vector3, v: Vector3):
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "u", u)
        object.__setattr__(self, "v", v)

    def __setattr__(self, name, value):
        raise AttributeError(f"BoundedPlane is immutable, cannot set '{name}'")

    @property
    def normal(self) -> Vector3:
        """Unnormalized normal u x v."""
        return self.u.cross(self.v)

    @property
    def is_degenerate(self) -> bool:
        return not are_independent(self.u, self.v)

    def point_at(self, s: float, t: float) -> Vector3:
        return self.position + self.u * s + self.v * t

    def coefficients(self, p: Vector3) -> Optional[Tuple[float, float]]:
        """
        Expresses p - position as alpha * u + beta * v and returns
        (alpha, beta), or None if the plane is degenerate.
        """
        return solve_span_coefficients(self.u, self.v, p - self.position)

    def contains_point(self, p: Vector3) -> bool:
        """
        Returns True if p, assumed to lie on the infinite plane, falls inside
        the finite parallelogram. A degenerate plane contains nothing.
        """
        coefficients = self.coefficients(p)
        if coefficients is None:
            return False
        alpha, beta = coefficients
        return within_unit_interval(alpha) and within_unit_interval(beta)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundedPlane):
            return NotImplemented
        return (self.position, self.u, self.v) == (other.position, other.u, other.v)

    def __hash__(self) -> int:
        return hash((self.position, self.u, self.v))

    def __repr__(self) -> str:
        return f"BoundedPlane({self.position!r}, {self.u!r}, {self.v!r})"
