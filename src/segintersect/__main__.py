# __main__.py
import argparse
import logging
from typing import List, Optional

from segintersect.core.vector import Vector3
from segintersect.geometry.plane import BoundedPlane
from segintersect.geometry.segment import LineSegment
from segintersect.geometry.triangle import Triangle
from segintersect.intersect import intersect_segment_plane, intersect_segment_triangle
from segintersect.logging_config import setup_logging


SCENE = {
    "plane": [(0, 0, 0.25), (1, 0, 0), (0, 1, 0)],
    "triangle": [(0, 0, 0), (1, 0, 0), (0, 1, 0)],
    "segment": [(0.5, 0.5, 0.5), (0.5, 0.5, 1.0)],
}


def build_scene(scene=SCENE):
    """
    Sample scene: a unit square at z = 0.25, a unit right triangle at z = 0
    and a vertical segment above both.
    """
    plane = BoundedPlane(*(Vector3.from_iterable(p) for p in scene["plane"]))
    triangle = Triangle(*(Vector3.from_iterable(p) for p in scene["triangle"]))
    line = LineSegment(*(Vector3.from_iterable(p) for p in scene["segment"]))
    return plane, triangle, line


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="segintersect",
        description="Intersect a sample line segment with a bounded plane and a triangle.",
    )
    parser.add_argument("--debug", action="store_true", help="log every query outcome")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    plane, triangle, line = build_scene()

    hit = intersect_segment_plane(plane, line)
    print(hit)

    t_hit = intersect_segment_triangle(triangle, line)
    print(t_hit)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
