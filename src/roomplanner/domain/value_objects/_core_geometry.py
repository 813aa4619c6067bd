"""Core geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """2D point in room coordinate space, in centimeters.

    The room frame is Y-down: the north wall lies on y = 0 and y grows
    towards the south wall. Negative values are valid (a door swinging
    outward sweeps outside the room).
    """

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox2D:
    """Axis-aligned bounding box of a point set."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.max_y - self.min_y

    def intersects(self, other: BoundingBox2D) -> bool:
        """Check if two boxes overlap. Touching edges count as overlap."""
        return not (
            self.max_x < other.min_x
            or other.max_x < self.min_x
            or self.max_y < other.min_y
            or other.max_y < self.min_y
        )


@dataclass(frozen=True)
class RoomDimensions:
    """Immutable room dimensions in meters.

    Attributes:
        length: North-south extent of the floor plan.
        width: East-west extent of the floor plan.
        height: Ceiling height.
    """

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.height <= 0:
            raise ValueError("All room dimensions must be positive")

    @property
    def floor_area(self) -> float:
        """Floor area in square meters."""
        return self.length * self.width

    @property
    def width_cm(self) -> float:
        """East-west extent in centimeters."""
        return self.width * 100

    @property
    def length_cm(self) -> float:
        """North-south extent in centimeters."""
        return self.length * 100
