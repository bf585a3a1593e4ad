"""
Line segment intersection against bounded planes and triangles in 3D.
"""
from segintersect.config import EPSILON
from segintersect.core.vector import Vector3
from segintersect.geometry import (
    BoundedPlane,
    Hit,
    IntersectHit,
    LineSegment,
    Miss,
    MissReason,
    Triangle,
)
from segintersect.intersect import intersect, intersect_segment_plane, intersect_segment_triangle

__all__ = [
    "EPSILON",
    "BoundedPlane",
    "Hit",
    "IntersectHit",
    "LineSegment",
    "Miss",
    "MissReason",
    "Triangle",
    "Vector3",
    "intersect",
    "intersect_segment_plane",
    "intersect_segment_triangle",
]
