# geometry/hit.py
from enum import Enum
from typing import Optional

from segintersect.core.vector import Vector3


class MissReason(Enum):
    """
    Why a segment query did not produce an intersection point.
    """
    PARALLEL = "Line is parallel to the plane."
    OUTSIDE_SEGMENT = "Point lies outside of the line segment."
    OUTSIDE_PLANE = "Point lies outside of finite plane."
    DEGENERATE_PLANE = "Plane spanning vectors are linearly dependent."
    NO_HIT = "No hit."


class IntersectHit:
    """
    Outcome of a single segment query. Either a Hit carrying the intersection
    point, or a Miss carrying the reason. Instances are immutable.
    """
    __slots__ = ()

    @property
    def is_hit(self) -> bool:
        raise NotImplementedError("is_hit must be implemented by subclasses.")

    @property
    def point(self) -> Optional[Vector3]:
        return None

    @property
    def reason(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return self.is_hit

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'")


class Hit(IntersectHit):
    __slots__ = ("_point",)

    def __init__(self, point: Vector3):
        object.__setattr__(self, "_point", point)

    @property
    def is_hit(self) -> bool:
        return True

    @property
    def point(self) -> Vector3:
        return self._point

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hit):
            return NotImplemented
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(("hit", self._point))

    def __repr__(self) -> str:
        return f"Hit(point={self._point!r})"


class Miss(IntersectHit):
    __slots__ = ("_kind",)

    def __init__(self, kind: MissReason):
        object.__setattr__(self, "_kind", MissReason(kind))

    @property
    def is_hit(self) -> bool:
        return False

    @property
    def kind(self) -> MissReason:
        return self._kind

    @property
    def reason(self) -> str:
        return self._kind.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Miss):
            return NotImplemented
        return self._kind is other._kind

    def __hash__(self) -> int:
        return hash(("miss", self._kind))

    def __repr__(self) -> str:
        return f"Miss(reason={self.reason!r})"
