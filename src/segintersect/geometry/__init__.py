from segintersect.geometry.hit import Hit, IntersectHit, Miss, MissReason
from segintersect.geometry.plane import BoundedPlane
from segintersect.geometry.segment import LineSegment
from segintersect.geometry.triangle import Triangle

__all__ = [
    "BoundedPlane",
    "Hit",
    "IntersectHit",
    "LineSegment",
    "Miss",
    "MissReason",
    "Triangle",
]
