# geometry/segment.py
from segintersect.config import EPSILON
from segintersect.core.vector import Vector3


class LineSegment:
    """
    Represents a finite line segment between two endpoints a and b.
    The endpoints may coincide.
    """
    __slots__ = ("a", "b")

    def __init__(self, a: Vector3, b: Vector3):
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    def __setattr__(self, name, value):
        raise AttributeError(f"LineSegment is immutable, cannot set '{name}'")

    @property
    def direction(self) -> Vector3:
        """Unnormalized direction b - a."""
        return self.b - self.a

    def length(self) -> float:
        return self.direction.length()

    def point_at(self, scalar: float) -> Vector3:
        """
        Returns a + scalar * (b - a). Scalars in [0, 1] stay on the segment.
        """
        return self.a + self.direction * scalar

    def contains_point(self, p: Vector3) -> bool:
        """
        Returns True if p lies on the segment, endpoints included.

        p must be colinear with a and b (the squared magnitude of
        (b - a) x (p - a) is at most EPSILON) and its projection onto b - a
        must fall between a and b, widened by EPSILON on both ends.
        """
        ab = self.b - self.a
        ap = p - self.a

        # A zero-length segment only contains its own endpoint.
        if ab == Vector3.zero():
            return ap.length_squared() <= EPSILON

        # Not on the infinite line through a and b.
        cross = ab.cross(ap)
        if cross.length_squared() > EPSILON:
            return False

        k_ap = ab.dot(ap)
        k_ab = ab.dot(ab)
        return -EPSILON <= k_ap <= k_ab + EPSILON

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __repr__(self) -> str:
        return f"LineSegment({self.a!r}, {self.b!r})"
