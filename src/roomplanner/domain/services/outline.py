"""Furniture outline generation.

Turns a furniture description (shape, size, position, rotation) into its
occupied outline in room centimeters.
"""

from __future__ import annotations

import math

from ..entities import Furniture
from ..value_objects import FurnitureShape, Point2D
from .geometry import degrees_to_radians, rotate_point

__all__ = [
    "CIRCLE_SEGMENTS",
    "L_SHAPE_RATIO",
    "get_furniture_corners",
]

# Number of points sampled around circular furniture
CIRCLE_SEGMENTS = 16

# Fraction of width/depth kept by each arm of an L-shaped footprint
L_SHAPE_RATIO = 0.6


def get_furniture_corners(furniture: Furniture) -> list[Point2D]:
    """Compute the rotated outline of a furniture item.

    Shapes:
    - rectangle: the 4 corners of the footprint box
    - circle: 16 points on a circle of radius max(width, depth)/2
    - l-shape: a 6-corner "L" keeping 60% of each side for the arms
    - custom: the stored path translated to (x, y); empty if no path

    Every shape is rotated about the box center (x + width/2, y + depth/2).

    Args:
        furniture: The furniture item.

    Returns:
        Ordered outline points. Empty for a custom shape without a path.
    """
    center = furniture.center

    if furniture.shape == FurnitureShape.CIRCLE:
        # Rotating a circle about its own center is a no-op
        radius = max(furniture.width, furniture.depth) / 2
        points = []
        for i in range(CIRCLE_SEGMENTS):
            angle = degrees_to_radians(i / CIRCLE_SEGMENTS * 360)
            points.append(
                Point2D(
                    x=center.x + radius * math.cos(angle),
                    y=center.y + radius * math.sin(angle),
                )
            )
        return points

    if furniture.shape == FurnitureShape.CUSTOM:
        if not furniture.custom_path:
            return []
        corners = [
            Point2D(furniture.x + p.x, furniture.y + p.y) for p in furniture.custom_path
        ]
    elif furniture.shape == FurnitureShape.L_SHAPE:
        corners = _l_shape_corners(furniture)
    else:
        corners = _rectangle_corners(furniture)

    return [rotate_point(corner, center, furniture.rotation) for corner in corners]


def _rectangle_corners(furniture: Furniture) -> list[Point2D]:
    x, y = furniture.x, furniture.y
    w, d = furniture.width, furniture.depth
    return [
        Point2D(x, y),
        Point2D(x + w, y),
        Point2D(x + w, y + d),
        Point2D(x, y + d),
    ]


def _l_shape_corners(furniture: Furniture) -> list[Point2D]:
    x, y = furniture.x, furniture.y
    w, d = furniture.width, furniture.depth
    w2 = w * L_SHAPE_RATIO
    d2 = d * L_SHAPE_RATIO
    return [
        Point2D(x, y),
        Point2D(x + w2, y),
        Point2D(x + w2, y + d - d2),
        Point2D(x + w, y + d - d2),
        Point2D(x + w, y + d),
        Point2D(x, y + d),
    ]
