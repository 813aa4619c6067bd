"""Angle, point and polygon primitives for the layout engine.

All functions are pure and operate on ``Point2D`` sequences in room
centimeters (Y-down, clockwise-positive angles).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from ..value_objects import BoundingBox2D, IntersectionMode, Point2D

__all__ = [
    "bounding_boxes_intersect",
    "degrees_to_radians",
    "get_bounding_box",
    "is_point_in_polygon",
    "polygons_intersect",
    "radians_to_degrees",
    "rotate_point",
]

# Intersections with less area than this (cm²) are treated as touching edges
MIN_OVERLAP_AREA = 1e-6


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def rotate_point(point: Point2D, center: Point2D, angle: float) -> Point2D:
    """Rotate a point about a center.

    Args:
        point: Point to rotate.
        center: Pivot of the rotation.
        angle: Rotation in degrees, clockwise on screen (Y-down).

    Returns:
        The rotated point.
    """
    rad = degrees_to_radians(angle)
    cos = math.cos(rad)
    sin = math.sin(rad)

    dx = point.x - center.x
    dy = point.y - center.y

    return Point2D(
        x=center.x + dx * cos - dy * sin,
        y=center.y + dx * sin + dy * cos,
    )


def is_point_in_polygon(point: Point2D, polygon: Sequence[Point2D]) -> bool:
    """Even-odd ray casting containment test.

    The polygon is implicitly closed by joining its last point to its first,
    so an open polyline such as a door swing arc is tested as the region it
    encloses with that closing chord.

    Args:
        point: Point to test.
        polygon: Ordered polygon vertices.

    Returns:
        True if the point is inside. Always False for fewer than 3 vertices.
    """
    if len(polygon) < 3:
        return False

    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        pi = polygon[i]
        pj = polygon[j]
        # The first clause guarantees pi.y != pj.y, so the division is safe
        if (pi.y > point.y) != (pj.y > point.y) and point.x < (pj.x - pi.x) * (
            point.y - pi.y
        ) / (pj.y - pi.y) + pi.x:
            inside = not inside
        j = i

    return inside


def get_bounding_box(points: Sequence[Point2D]) -> BoundingBox2D:
    """Axis-aligned bounding box of a non-empty point sequence.

    Raises:
        ValueError: If points is empty.
    """
    if not points:
        raise ValueError("Cannot compute the bounding box of an empty outline")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox2D(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def bounding_boxes_intersect(box1: BoundingBox2D, box2: BoundingBox2D) -> bool:
    return box1.intersects(box2)


def polygons_intersect(
    poly1: Sequence[Point2D],
    poly2: Sequence[Point2D],
    mode: IntersectionMode = IntersectionMode.VERTEX,
) -> bool:
    """Check whether two polygons overlap.

    With ``IntersectionMode.VERTEX`` the polygons overlap when any vertex of
    either one lies inside the other. Crossings where no vertex is contained
    (two thin rectangles forming a plus sign) are not detected.

    With ``IntersectionMode.EXACT`` the polygons overlap when their true
    intersection has positive area. Polygons sharing only an edge or a
    corner do not overlap.

    Args:
        poly1: First polygon.
        poly2: Second polygon.
        mode: Intersection algorithm.

    Returns:
        True if the polygons overlap. Always False if either polygon has
        fewer than 3 vertices.
    """
    if len(poly1) < 3 or len(poly2) < 3:
        return False

    if mode == IntersectionMode.EXACT:
        overlap = _to_shapely(poly1).intersection(_to_shapely(poly2))
        return overlap.area > MIN_OVERLAP_AREA

    if any(is_point_in_polygon(point, poly2) for point in poly1):
        return True
    return any(is_point_in_polygon(point, poly1) for point in poly2)


def _to_shapely(points: Sequence[Point2D]) -> BaseGeometry:
    """Build a shapely polygon, repairing self-intersecting custom outlines."""
    polygon = Polygon([(p.x, p.y) for p in points])
    if not polygon.is_valid:
        return make_valid(polygon)
    return polygon
