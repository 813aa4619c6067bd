"""Furniture template catalog.

The catalog is a constant, insertion-ordered mapping from template id to
template record. Templates seed new furniture items with default sizes,
shape and color; they are never modified at runtime.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Any

from roomplanner.domain.entities import Door, Furniture, FurnitureTemplate
from roomplanner.domain.value_objects import FurnitureShape, Point2D, RoomDimensions


class TemplateNotFoundError(Exception):
    """Raised when a requested furniture template does not exist."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Furniture template not found: {template_id}")


LIVING_ROOM = "Living Room"
BEDROOM = "Bedroom"
DINING_ROOM = "Dining Room"
STUDY = "Study"

_TEMPLATES: tuple[FurnitureTemplate, ...] = (
    # Living room
    FurnitureTemplate(
        id="sofa-standard",
        name="Sofa",
        category=LIVING_ROOM,
        type="sofa",
        shape=FurnitureShape.RECTANGLE,
        default_width=200,
        default_depth=90,
        default_height=85,
        icon="fas fa-couch",
        color="#FF5722",
    ),
    FurnitureTemplate(
        id="sofa-l-shape",
        name="L-Shaped Sofa",
        category=LIVING_ROOM,
        type="sofa",
        shape=FurnitureShape.L_SHAPE,
        default_width=250,
        default_depth=200,
        default_height=85,
        icon="fas fa-couch",
        color="#FF5722",
    ),
    FurnitureTemplate(
        id="coffee-table",
        name="Coffee Table",
        category=LIVING_ROOM,
        type="table",
        shape=FurnitureShape.RECTANGLE,
        default_width=120,
        default_depth=60,
        default_height=45,
        icon="fas fa-table",
        color="#388E3C",
    ),
    FurnitureTemplate(
        id="coffee-table-round",
        name="Round Coffee Table",
        category=LIVING_ROOM,
        type="table",
        shape=FurnitureShape.CIRCLE,
        default_width=80,
        default_depth=80,
        default_height=45,
        icon="fas fa-table",
        color="#388E3C",
    ),
    FurnitureTemplate(
        id="armchair",
        name="Armchair",
        category=LIVING_ROOM,
        type="chair",
        shape=FurnitureShape.RECTANGLE,
        default_width=80,
        default_depth=80,
        default_height=85,
        icon="fas fa-chair",
        color="#9C27B0",
    ),
    FurnitureTemplate(
        id="tv-stand",
        name="TV Stand",
        category=LIVING_ROOM,
        type="tv",
        shape=FurnitureShape.RECTANGLE,
        default_width=150,
        default_depth=40,
        default_height=60,
        icon="fas fa-tv",
        color="#607D8B",
    ),
    # Bedroom
    FurnitureTemplate(
        id="bed-single",
        name="Single Bed",
        category=BEDROOM,
        type="bed",
        shape=FurnitureShape.RECTANGLE,
        default_width=120,
        default_depth=200,
        default_height=50,
        icon="fas fa-bed",
        color="#2196F3",
    ),
    FurnitureTemplate(
        id="bed-double",
        name="Double Bed",
        category=BEDROOM,
        type="bed",
        shape=FurnitureShape.RECTANGLE,
        default_width=150,
        default_depth=200,
        default_height=50,
        icon="fas fa-bed",
        color="#2196F3",
    ),
    FurnitureTemplate(
        id="bed-queen",
        name="Queen Bed",
        category=BEDROOM,
        type="bed",
        shape=FurnitureShape.RECTANGLE,
        default_width=160,
        default_depth=200,
        default_height=50,
        icon="fas fa-bed",
        color="#2196F3",
    ),
    FurnitureTemplate(
        id="wardrobe",
        name="Wardrobe",
        category=BEDROOM,
        type="storage",
        shape=FurnitureShape.RECTANGLE,
        default_width=100,
        default_depth=60,
        default_height=200,
        icon="fas fa-archive",
        color="#795548",
    ),
    FurnitureTemplate(
        id="dresser",
        name="Dresser",
        category=BEDROOM,
        type="dresser",
        shape=FurnitureShape.RECTANGLE,
        default_width=120,
        default_depth=45,
        default_height=75,
        icon="fas fa-mirror",
        color="#E91E63",
    ),
    # Dining room
    FurnitureTemplate(
        id="dining-table-4",
        name="Dining Table (4 seats)",
        category=DINING_ROOM,
        type="table",
        shape=FurnitureShape.RECTANGLE,
        default_width=120,
        default_depth=80,
        default_height=75,
        icon="fas fa-table",
        color="#388E3C",
    ),
    FurnitureTemplate(
        id="dining-table-6",
        name="Dining Table (6 seats)",
        category=DINING_ROOM,
        type="table",
        shape=FurnitureShape.RECTANGLE,
        default_width=160,
        default_depth=90,
        default_height=75,
        icon="fas fa-table",
        color="#388E3C",
    ),
    FurnitureTemplate(
        id="dining-chair",
        name="Dining Chair",
        category=DINING_ROOM,
        type="chair",
        shape=FurnitureShape.RECTANGLE,
        default_width=45,
        default_depth=50,
        default_height=80,
        icon="fas fa-chair",
        color="#9C27B0",
    ),
    # Study
    FurnitureTemplate(
        id="bookshelf",
        name="Bookshelf",
        category=STUDY,
        type="storage",
        shape=FurnitureShape.RECTANGLE,
        default_width=80,
        default_depth=30,
        default_height=180,
        icon="fas fa-book",
        color="#FF9800",
    ),
    FurnitureTemplate(
        id="desk",
        name="Desk",
        category=STUDY,
        type="desk",
        shape=FurnitureShape.RECTANGLE,
        default_width=120,
        default_depth=60,
        default_height=75,
        icon="fas fa-desktop",
        color="#4CAF50",
    ),
)

FURNITURE_TEMPLATES: dict[str, FurnitureTemplate] = {t.id: t for t in _TEMPLATES}

# Defaults for a newly added door
DEFAULT_DOOR = Door(id="door")


def get_template(template_id: str) -> FurnitureTemplate:
    """Look up a template by id.

    Raises:
        TemplateNotFoundError: If no template has this id.
    """
    try:
        return FURNITURE_TEMPLATES[template_id]
    except KeyError:
        raise TemplateNotFoundError(template_id) from None


def list_templates(category: str | None = None) -> list[FurnitureTemplate]:
    """List templates in catalog order, optionally filtered by category."""
    if not category:
        return list(FURNITURE_TEMPLATES.values())
    return [t for t in FURNITURE_TEMPLATES.values() if t.category == category]


def list_categories() -> list[str]:
    """Categories in the order they first appear in the catalog."""
    return list(dict.fromkeys(t.category for t in FURNITURE_TEMPLATES.values()))


def room_center_position(
    template: FurnitureTemplate, dimensions: RoomDimensions
) -> Point2D:
    """Top-left position that centers a new item in the room.

    Items larger than the room are pinned to the north-west corner.
    """
    return Point2D(
        x=max(0.0, dimensions.width_cm / 2 - template.default_width / 2),
        y=max(0.0, dimensions.length_cm / 2 - template.default_depth / 2),
    )


def create_furniture_from_template(
    template: FurnitureTemplate,
    position: Point2D,
    furniture_id: str | None = None,
) -> Furniture:
    """Instantiate a furniture item from a template.

    Args:
        template: Catalog template.
        position: Top-left corner of the new item in room centimeters.
        furniture_id: Id for the new item. Generated from the template id
            when omitted.

    Returns:
        An unrotated furniture item with the template defaults.
    """
    return Furniture(
        id=furniture_id or f"{template.id}-{uuid.uuid4().hex[:8]}",
        name=template.name,
        type=template.type,
        shape=template.shape,
        width=template.default_width,
        depth=template.default_depth,
        height=template.default_height,
        x=position.x,
        y=position.y,
        rotation=0.0,
        color=template.color,
    )


def create_default_door(door_id: str | None = None, **overrides: Any) -> Door:
    """Create a door with the planner defaults.

    Defaults: 80 x 200 cm on the north wall at mid-span, opening inward
    90 degrees on a left hinge. Keyword overrides replace individual fields.
    """
    return replace(
        DEFAULT_DOOR, id=door_id or f"door-{uuid.uuid4().hex[:8]}", **overrides
    )
