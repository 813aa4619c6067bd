"""Unit tests for the furniture template catalog."""

import pytest

from roomplanner.application.templates import (
    FURNITURE_TEMPLATES,
    TemplateNotFoundError,
    create_default_door,
    create_furniture_from_template,
    get_template,
    list_categories,
    list_templates,
    room_center_position,
)
from roomplanner.domain.value_objects import (
    FurnitureShape,
    HingePosition,
    Point2D,
    RoomDimensions,
    SwingDirection,
    Wall,
)


class TestCatalog:
    """Tests for catalog lookups."""

    def test_catalog_size(self) -> None:
        assert len(FURNITURE_TEMPLATES) == 16

    def test_ids_match_keys(self) -> None:
        for key, template in FURNITURE_TEMPLATES.items():
            assert key == template.id

    def test_get_template(self) -> None:
        template = get_template("sofa-standard")
        assert template.name == "Sofa"
        assert template.default_width == 200
        assert template.default_depth == 90
        assert template.shape == FurnitureShape.RECTANGLE

    def test_special_shapes(self) -> None:
        assert get_template("sofa-l-shape").shape == FurnitureShape.L_SHAPE
        assert get_template("coffee-table-round").shape == FurnitureShape.CIRCLE

    def test_unknown_template(self) -> None:
        with pytest.raises(TemplateNotFoundError) as exc_info:
            get_template("hammock")
        assert exc_info.value.template_id == "hammock"
        assert "hammock" in str(exc_info.value)

    def test_categories_in_catalog_order(self) -> None:
        assert list_categories() == ["Living Room", "Bedroom", "Dining Room", "Study"]

    def test_list_all(self) -> None:
        templates = list_templates()
        assert len(templates) == 16
        assert templates[0].id == "sofa-standard"

    def test_list_by_category(self) -> None:
        ids = [t.id for t in list_templates("Study")]
        assert ids == ["bookshelf", "desk"]

    def test_list_unknown_category(self) -> None:
        assert list_templates("Garage") == []

    def test_sizes_within_planner_range(self) -> None:
        for template in FURNITURE_TEMPLATES.values():
            assert 20 <= template.default_width <= 400
            assert 20 <= template.default_depth <= 400


class TestCreateFromTemplate:
    """Tests for instantiating furniture from templates."""

    def test_uses_template_defaults(self) -> None:
        template = get_template("bed-double")
        item = create_furniture_from_template(template, Point2D(10, 20), "bed")

        assert item.id == "bed"
        assert item.name == template.name
        assert item.type == template.type
        assert item.shape == template.shape
        assert (item.width, item.depth, item.height) == (150, 200, 50)
        assert (item.x, item.y) == (10, 20)
        assert item.rotation == 0
        assert item.color == template.color

    def test_generated_ids_are_unique(self) -> None:
        template = get_template("dining-chair")
        first = create_furniture_from_template(template, Point2D(0, 0))
        second = create_furniture_from_template(template, Point2D(0, 0))

        assert first.id.startswith("dining-chair-")
        assert first.id != second.id

    def test_room_center_position(self) -> None:
        dims = RoomDimensions(length=4.5, width=3.5, height=2.4)
        position = room_center_position(get_template("bed-double"), dims)
        assert position == Point2D(100, 125)

    def test_room_center_position_clamped(self) -> None:
        dims = RoomDimensions(length=1, width=1, height=2.4)
        position = room_center_position(get_template("sofa-l-shape"), dims)
        assert position == Point2D(0, 0)


class TestDefaultDoor:
    """Tests for create_default_door."""

    def test_defaults(self) -> None:
        door = create_default_door("front")
        assert door.id == "front"
        assert (door.width, door.height) == (80, 200)
        assert door.wall == Wall.NORTH
        assert door.position == 0.5
        assert door.swing_direction == SwingDirection.INWARD
        assert door.swing_angle == 90
        assert door.hinge_position == HingePosition.LEFT

    def test_overrides(self) -> None:
        door = create_default_door("side", wall=Wall.EAST, position=0.2)
        assert door.wall == Wall.EAST
        assert door.position == 0.2
        assert door.width == 80

    def test_generated_id(self) -> None:
        assert create_default_door().id.startswith("door-")
