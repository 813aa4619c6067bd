"""Door placement and swing path geometry.

A door is anchored at a fractional position along its wall. The leaf pivots
on the hinge point and sweeps an arc of radius equal to the door width. The
swing path is sampled as a polyline that the interference checks treat as a
closed region.

Wall angle convention (degrees, clockwise from +X in the Y-down room frame):
north 90 (pointing into the room), south 270, east 180, west 0.
"""

from __future__ import annotations

import math

from ..entities import Door
from ..value_objects import (
    HingePosition,
    Point2D,
    RoomDimensions,
    SwingDirection,
    Wall,
)
from .geometry import degrees_to_radians

__all__ = [
    "MIN_SWING_STEPS",
    "SWING_STEP_DEGREES",
    "WALL_ANGLES",
    "get_door_anchor",
    "get_door_swing_path",
    "get_door_swing_sector",
    "get_hinge_point",
    "get_swing_angles",
    "get_wall_angle",
    "get_wall_length",
    "position_from_center_offset",
    "position_from_distance",
]

WALL_ANGLES: dict[Wall, float] = {
    Wall.NORTH: 90.0,
    Wall.SOUTH: 270.0,
    Wall.EAST: 180.0,
    Wall.WEST: 0.0,
}

# Arc sampling: one step per 5 degrees, never fewer than 10 steps
SWING_STEP_DEGREES = 5
MIN_SWING_STEPS = 10


def get_wall_angle(wall: Wall) -> float:
    return WALL_ANGLES[wall]


def get_wall_length(wall: Wall, dimensions: RoomDimensions) -> float:
    """Length of a wall in meters.

    North and south walls span the room width, east and west walls span
    the room length.
    """
    if wall in (Wall.NORTH, Wall.SOUTH):
        return dimensions.width
    return dimensions.length


def get_door_anchor(door: Door, dimensions: RoomDimensions) -> Point2D:
    """Point on the wall where the door opening starts, in centimeters."""
    width_cm = dimensions.width_cm
    length_cm = dimensions.length_cm

    if door.wall == Wall.NORTH:
        return Point2D(door.position * width_cm, 0.0)
    if door.wall == Wall.SOUTH:
        return Point2D(door.position * width_cm, length_cm)
    if door.wall == Wall.EAST:
        return Point2D(width_cm, door.position * length_cm)
    return Point2D(0.0, door.position * length_cm)


def get_hinge_point(door: Door, dimensions: RoomDimensions) -> Point2D:
    """Pivot of the door leaf.

    A left hinge sits on the anchor; a right hinge is offset along the wall
    by the door width.
    """
    anchor = get_door_anchor(door, dimensions)
    offset = 0.0 if door.hinge_position == HingePosition.LEFT else door.width

    if door.wall in (Wall.NORTH, Wall.SOUTH):
        return Point2D(anchor.x + offset, anchor.y)
    return Point2D(anchor.x, anchor.y + offset)


def get_swing_angles(door: Door) -> tuple[float, float]:
    """Start and end angles of the swing arc in degrees."""
    start_angle = get_wall_angle(door.wall) + (
        0.0 if door.hinge_position == HingePosition.LEFT else 180.0
    )
    if door.swing_direction == SwingDirection.INWARD:
        end_angle = start_angle + door.swing_angle
    else:
        end_angle = start_angle - door.swing_angle
    return start_angle, end_angle


def get_door_swing_path(door: Door, dimensions: RoomDimensions) -> list[Point2D]:
    """Sample the arc swept by the door leaf.

    The arc runs from the start angle to the end angle in
    ``max(10, floor(swing_angle / 5))`` equal steps, including both ends.
    Only the arc is returned; the two radii back to the hinge are not part
    of the path (see ``get_door_swing_sector``).

    Args:
        door: The door.
        dimensions: Room dimensions in meters.

    Returns:
        Arc points in room centimeters, ordered from the closed position.
    """
    hinge = get_hinge_point(door, dimensions)
    start_angle, end_angle = get_swing_angles(door)
    radius = door.width
    steps = max(MIN_SWING_STEPS, math.floor(door.swing_angle / SWING_STEP_DEGREES))

    path = []
    for i in range(steps + 1):
        angle = degrees_to_radians(start_angle + (end_angle - start_angle) * (i / steps))
        path.append(
            Point2D(
                x=hinge.x + radius * math.cos(angle),
                y=hinge.y + radius * math.sin(angle),
            )
        )
    return path


def get_door_swing_sector(door: Door, dimensions: RoomDimensions) -> list[Point2D]:
    """Closed sector swept by the door: the hinge followed by the swing arc."""
    return [get_hinge_point(door, dimensions), *get_door_swing_path(door, dimensions)]


def position_from_distance(
    wall: Wall, distance: float, dimensions: RoomDimensions
) -> float:
    """Convert a distance from the wall start (meters) to a door position.

    Returns:
        Fractional position, clamped to [0, 1].
    """
    return _clamp_position(distance / get_wall_length(wall, dimensions))


def position_from_center_offset(
    wall: Wall, offset: float, dimensions: RoomDimensions
) -> float:
    """Convert a signed offset from the wall midpoint (meters) to a door position.

    Returns:
        Fractional position, clamped to [0, 1].
    """
    return _clamp_position(0.5 + offset / get_wall_length(wall, dimensions))


def _clamp_position(position: float) -> float:
    return max(0.0, min(1.0, position))
