# geometry/triangle.py
from typing import Tuple

from segintersect.core.utils import are_independent
from segintersect.core.vector import Vector3


class Triangle:
    """Represents a single triangle in 3D space."""
    __slots__ = ("a", "b", "c")

    def __init__(self, a: Vector3, b: Vector3, c: Vector3):
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)

    def __setattr__(self, name, value):
        raise AttributeError(f"Triangle is immutable, cannot set '{name}'")

    @property
    def edges(self) -> Tuple[Vector3, Vector3]:
        return self.b - self.a, self.c - self.a

    @property
    def normal(self) -> Vector3:
        """Unnormalized face normal (b - a) x (c - a)."""
        edge1, edge2 = self.edges
        return edge1.cross(edge2)

    @property
    def is_degenerate(self) -> bool:
        edge1, edge2 = self.edges
        return not are_independent(edge1, edge2)

    def point_at(self, u: float, v: float) -> Vector3:
        """Point at the given barycentric coordinates."""
        edge1, edge2 = self.edges
        return self.a + edge1 * u + edge2 * v

    def __eq__(self, other) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return (self.a, self.b, self.c) == (other.a, other.b, other.c)

    def __hash__(self) -> int:
        return hash((self.a, self.b, self.c))

    def __repr__(self) -> str:
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"
