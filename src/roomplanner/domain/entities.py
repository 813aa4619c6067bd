"""Domain entities for room layouts.

Entities are frozen dataclasses. The UI owns the mutable scene; edits are
expressed with ``dataclasses.replace`` so that every engine call receives a
complete, consistent snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import (
    FurnitureShape,
    HingePosition,
    Point2D,
    RoomDimensions,
    SwingDirection,
    Wall,
)


@dataclass(frozen=True)
class Door:
    """A hinged door mounted on one of the four room walls.

    Attributes:
        id: Unique identifier within the room.
        width: Door leaf width in centimeters. Also the swing radius.
        height: Door leaf height in centimeters.
        wall: Wall the door is mounted on.
        position: Fractional distance along the wall, 0 to 1. Measured from
            the west end for north/south walls and from the north end for
            east/west walls.
        swing_direction: Whether the leaf sweeps clockwise or counter-clockwise.
        swing_angle: Opening angle in degrees, in (0, 180].
        hinge_position: Side carrying the hinge.
    """

    id: str
    width: float = 80.0
    height: float = 200.0
    wall: Wall = Wall.NORTH
    position: float = 0.5
    swing_direction: SwingDirection = SwingDirection.INWARD
    swing_angle: float = 90.0
    hinge_position: HingePosition = HingePosition.LEFT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Door dimensions must be positive")
        if not 0 <= self.position <= 1:
            raise ValueError("Door position must be between 0 and 1")
        if not 0 < self.swing_angle <= 180:
            raise ValueError("Door swing angle must be in (0, 180] degrees")


@dataclass(frozen=True)
class Furniture:
    """A furniture item placed in the room.

    Position is the top-left corner of the unrotated bounding box in room
    centimeters. Rotation is applied about the box center.

    Attributes:
        id: Unique identifier within the room.
        name: Display name.
        type: Free-form archetype (sofa, bed, table, ...).
        shape: Footprint shape.
        width: Extent along x before rotation, in centimeters.
        depth: Extent along y before rotation, in centimeters.
        height: Vertical extent in centimeters.
        x: Left edge of the unrotated box.
        y: Top edge of the unrotated box.
        rotation: Clockwise rotation in degrees.
        custom_path: Outline in the local frame (origin at x, y), only used
            when shape is CUSTOM.
        color: Optional display color.
    """

    id: str
    name: str
    type: str
    shape: FurnitureShape
    width: float
    depth: float
    height: float
    x: float
    y: float
    rotation: float = 0.0
    custom_path: tuple[Point2D, ...] | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0:
            raise ValueError("Furniture width and depth must be positive")
        if self.height < 0:
            raise ValueError("Furniture height must be non-negative")

    @property
    def center(self) -> Point2D:
        """Center of the unrotated bounding box, the rotation pivot."""
        return Point2D(self.x + self.width / 2, self.y + self.depth / 2)

    @property
    def footprint_area(self) -> float:
        """Nominal footprint in square meters (width x depth)."""
        return (self.width * self.depth) / 10000


@dataclass(frozen=True)
class RoomLayout:
    """The complete scene: room dimensions, doors and furniture.

    Attributes:
        name: Display name of the room.
        dimensions: Room dimensions in meters.
        doors: Doors on the room walls.
        furniture: Furniture items on the floor plan.
        id: Storage identifier, if the layout has been saved.
    """

    name: str
    dimensions: RoomDimensions
    doors: tuple[Door, ...] = ()
    furniture: tuple[Furniture, ...] = ()
    id: int | None = None

    def find_door(self, door_id: str) -> Door | None:
        """Look up a door by id."""
        return next((d for d in self.doors if d.id == door_id), None)

    def find_furniture(self, furniture_id: str) -> Furniture | None:
        """Look up a furniture item by id."""
        return next((f for f in self.furniture if f.id == furniture_id), None)


@dataclass(frozen=True)
class FurnitureTemplate:
    """Catalog archetype used to seed new furniture items.

    Attributes:
        id: Catalog key.
        name: Default display name of created items.
        category: Room category the template is listed under.
        type: Archetype copied onto created items.
        shape: Footprint shape.
        default_width: Width in centimeters.
        default_depth: Depth in centimeters.
        default_height: Height in centimeters.
        icon: Icon identifier for the library panel.
        color: Display color.
    """

    id: str
    name: str
    category: str
    type: str
    shape: FurnitureShape
    default_width: float
    default_depth: float
    default_height: float
    icon: str
    color: str
