# intersect.py
import logging
from typing import Union

from segintersect.config import EPSILON
from segintersect.geometry.hit import Hit, IntersectHit, Miss, MissReason
from segintersect.geometry.plane import BoundedPlane
from segintersect.geometry.segment import LineSegment
from segintersect.geometry.triangle import Triangle

logger = logging.getLogger(__name__)


def _miss(kind: MissReason, surface, segment: LineSegment) -> Miss:
    logger.debug("%r vs %r: %s", surface, segment, kind.value)
    return Miss(kind)


def intersect_segment_plane(plane: BoundedPlane, segment: LineSegment) -> IntersectHit:
    """
    Intersects a line segment with a bounded plane.

    The segment's supporting line is intersected with the infinite plane
    through plane.position with normal u x v. The candidate point must then
    lie on the segment and inside the finite parallelogram.
    """
    if plane.is_degenerate:
        return _miss(MissReason.DEGENERATE_PLANE, plane, segment)

    direction = segment.direction
    normal = plane.normal
    denom = normal.dot(direction)

    # Segment is parallel to (or lies in) the plane.
    if abs(denom) <= EPSILON:
        return _miss(MissReason.PARALLEL, plane, segment)

    w = segment.a - plane.position
    fac = -normal.dot(w) / denom
    p = segment.a + direction * fac

    # fac is not range-checked; the segment containment test decides.
    if not segment.contains_point(p):
        return _miss(MissReason.OUTSIDE_SEGMENT, plane, segment)

    if not plane.contains_point(p):
        return _miss(MissReason.OUTSIDE_PLANE, plane, segment)

    logger.debug("%r vs %r: hit at %r", plane, segment, p)
    return Hit(p)


def intersect_segment_triangle(triangle: Triangle, segment: LineSegment) -> IntersectHit:
    """
    Intersects a line segment with a triangle using a determinant based
    (Möller–Trumbore style) solve along the normalized segment direction.

    u and v are the barycentric coordinates of the hit along edges b - a and
    c - a; t is the distance from segment.a along the unit direction, so the
    candidate point is re-validated against the unnormalized segment.
    """
    if triangle.is_degenerate:
        return _miss(MissReason.NO_HIT, triangle, segment)

    rd = segment.direction.normalize()

    edge1, edge2 = triangle.edges
    n = edge1.cross(edge2)
    det = -rd.dot(n)

    # Parallel ray or zero-length segment.
    if abs(det) < EPSILON:
        return _miss(MissReason.NO_HIT, triangle, segment)

    invdet = 1.0 / det
    ao = segment.a - triangle.a
    dao = ao.cross(rd)
    u = edge2.dot(dao) * invdet
    v = -edge1.dot(dao) * invdet
    t = ao.dot(n) * invdet

    if not (u >= -EPSILON and v >= -EPSILON and u + v <= 1.0 + EPSILON):
        return _miss(MissReason.NO_HIT, triangle, segment)

    p = segment.a + rd * t

    if not segment.contains_point(p):
        return _miss(MissReason.OUTSIDE_SEGMENT, triangle, segment)

    logger.debug("%r vs %r: hit at %r", triangle, segment, p)
    return Hit(p)


def intersect(surface: Union[BoundedPlane, Triangle], segment: LineSegment) -> IntersectHit:
    """
    Intersects a segment with either kind of bounded surface.
    """
    if isinstance(surface, BoundedPlane):
        return intersect_segment_plane(surface, segment)
    if isinstance(surface, Triangle):
        return intersect_segment_triangle(surface, segment)
    raise TypeError(f"Cannot intersect a segment with {type(surface).__name__}")
