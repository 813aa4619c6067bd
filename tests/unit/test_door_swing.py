"""Unit tests for door placement and swing paths."""

import math

import pytest

from roomplanner.domain.entities import Door
from roomplanner.domain.services import (
    get_door_anchor,
    get_door_swing_path,
    get_door_swing_sector,
    get_hinge_point,
    get_swing_angles,
    get_wall_angle,
    get_wall_length,
    position_from_center_offset,
    position_from_distance,
)
from roomplanner.domain.value_objects import (
    HingePosition,
    Point2D,
    RoomDimensions,
    SwingDirection,
    Wall,
)


class TestWallGeometry:
    """Tests for wall angles and lengths."""

    @pytest.mark.parametrize(
        ("wall", "angle"),
        [(Wall.NORTH, 90), (Wall.SOUTH, 270), (Wall.EAST, 180), (Wall.WEST, 0)],
    )
    def test_wall_angle(self, wall: Wall, angle: float) -> None:
        assert get_wall_angle(wall) == angle

    def test_wall_length(self, bedroom_dimensions: RoomDimensions) -> None:
        assert get_wall_length(Wall.NORTH, bedroom_dimensions) == 3.5
        assert get_wall_length(Wall.SOUTH, bedroom_dimensions) == 3.5
        assert get_wall_length(Wall.EAST, bedroom_dimensions) == 4.5
        assert get_wall_length(Wall.WEST, bedroom_dimensions) == 4.5


class TestDoorAnchor:
    """Tests for door anchors and hinge points."""

    @pytest.mark.parametrize(
        ("wall", "expected"),
        [
            (Wall.NORTH, (175, 0)),
            (Wall.SOUTH, (175, 450)),
            (Wall.EAST, (350, 225)),
            (Wall.WEST, (0, 225)),
        ],
    )
    def test_anchor_per_wall(
        self, bedroom_dimensions: RoomDimensions, wall: Wall, expected
    ) -> None:
        anchor = get_door_anchor(Door(id="d", wall=wall), bedroom_dimensions)
        assert (anchor.x, anchor.y) == pytest.approx(expected)

    def test_left_hinge_on_anchor(
        self, bedroom_dimensions: RoomDimensions, north_door: Door
    ) -> None:
        assert get_hinge_point(north_door, bedroom_dimensions) == Point2D(175, 0)

    def test_right_hinge_offset_along_horizontal_wall(
        self, bedroom_dimensions: RoomDimensions
    ) -> None:
        door = Door(id="d", hinge_position=HingePosition.RIGHT)
        assert get_hinge_point(door, bedroom_dimensions) == Point2D(255, 0)

    def test_right_hinge_offset_along_vertical_wall(
        self, bedroom_dimensions: RoomDimensions
    ) -> None:
        door = Door(id="d", wall=Wall.WEST, hinge_position=HingePosition.RIGHT)
        assert get_hinge_point(door, bedroom_dimensions) == Point2D(0, 305)


class TestSwingAngles:
    """Tests for swing start and end angles."""

    def test_inward_left(self) -> None:
        assert get_swing_angles(Door(id="d")) == (90, 180)

    def test_outward_left(self) -> None:
        door = Door(id="d", swing_direction=SwingDirection.OUTWARD)
        assert get_swing_angles(door) == (90, 0)

    def test_right_hinge_adds_half_turn(self) -> None:
        door = Door(id="d", wall=Wall.EAST, hinge_position=HingePosition.RIGHT)
        assert get_swing_angles(door) == (360, 450)

    def test_custom_angle(self) -> None:
        door = Door(id="d", wall=Wall.WEST, swing_angle=120)
        assert get_swing_angles(door) == (0, 120)


class TestSwingPath:
    """Tests for the sampled swing arc."""

    def test_north_door_arc(
        self, bedroom_dimensions: RoomDimensions, north_door: Door
    ) -> None:
        path = get_door_swing_path(north_door, bedroom_dimensions)

        assert len(path) == 19
        assert path[0].x == pytest.approx(175)
        assert path[0].y == pytest.approx(80)
        assert path[-1].x == pytest.approx(95)
        assert path[-1].y == pytest.approx(0, abs=1e-9)
        for point in path:
            assert math.hypot(point.x - 175, point.y) == pytest.approx(80)

    @pytest.mark.parametrize(
        ("swing_angle", "count"), [(30, 11), (45, 11), (50, 11), (90, 19), (180, 37)]
    )
    def test_point_count(
        self, bedroom_dimensions: RoomDimensions, swing_angle: float, count: int
    ) -> None:
        door = Door(id="d", swing_angle=swing_angle)
        assert len(get_door_swing_path(door, bedroom_dimensions)) == count

    def test_radius_is_door_width(self, bedroom_dimensions: RoomDimensions) -> None:
        door = Door(id="d", wall=Wall.SOUTH, width=95, position=0.2)
        hinge = get_hinge_point(door, bedroom_dimensions)
        for point in get_door_swing_path(door, bedroom_dimensions):
            assert math.hypot(point.x - hinge.x, point.y - hinge.y) == pytest.approx(95)

    @pytest.mark.parametrize("wall", list(Wall))
    def test_inward_left_door_stays_in_room(
        self, bedroom_dimensions: RoomDimensions, wall: Wall
    ) -> None:
        door = Door(id="d", wall=wall, position=0.3)
        for point in get_door_swing_path(door, bedroom_dimensions):
            assert -1e-9 <= point.x <= 350 + 1e-9
            assert -1e-9 <= point.y <= 450 + 1e-9

    def test_sector_starts_at_hinge(
        self, bedroom_dimensions: RoomDimensions, north_door: Door
    ) -> None:
        sector = get_door_swing_sector(north_door, bedroom_dimensions)
        path = get_door_swing_path(north_door, bedroom_dimensions)

        assert sector[0] == Point2D(175, 0)
        assert sector[1:] == path


class TestPositionHelpers:
    """Tests for converting distances into fractional door positions."""

    def test_from_distance(self, bedroom_dimensions: RoomDimensions) -> None:
        assert position_from_distance(
            Wall.NORTH, 1.75, bedroom_dimensions
        ) == pytest.approx(0.5)
        assert position_from_distance(
            Wall.EAST, 0.9, bedroom_dimensions
        ) == pytest.approx(0.2)

    def test_from_distance_clamped(self, bedroom_dimensions: RoomDimensions) -> None:
        assert position_from_distance(Wall.NORTH, 10, bedroom_dimensions) == 1.0
        assert position_from_distance(Wall.NORTH, -1, bedroom_dimensions) == 0.0

    def test_from_center_offset(self, bedroom_dimensions: RoomDimensions) -> None:
        assert position_from_center_offset(
            Wall.SOUTH, 0, bedroom_dimensions
        ) == pytest.approx(0.5)
        assert position_from_center_offset(
            Wall.WEST, -0.45, bedroom_dimensions
        ) == pytest.approx(0.4)

    def test_from_center_offset_clamped(
        self, bedroom_dimensions: RoomDimensions
    ) -> None:
        assert position_from_center_offset(Wall.EAST, -3, bedroom_dimensions) == 0.0
        assert position_from_center_offset(Wall.EAST, 3, bedroom_dimensions) == 1.0
