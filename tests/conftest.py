"""Pytest configuration and shared fixtures for room layout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from roomplanner.domain.entities import Door, Furniture, RoomLayout
from roomplanner.domain.value_objects import FurnitureShape, RoomDimensions

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


def make_furniture(
    furniture_id: str = "item",
    x: float = 0.0,
    y: float = 0.0,
    width: float = 100.0,
    depth: float = 100.0,
    shape: FurnitureShape = FurnitureShape.RECTANGLE,
    rotation: float = 0.0,
    **kwargs,
) -> Furniture:
    """Build a furniture item with test defaults."""
    return Furniture(
        id=furniture_id,
        name=kwargs.pop("name", furniture_id.title()),
        type=kwargs.pop("type", "custom"),
        shape=shape,
        width=width,
        depth=depth,
        height=kwargs.pop("height", 75.0),
        x=x,
        y=y,
        rotation=rotation,
        **kwargs,
    )


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def bedroom_dimensions() -> RoomDimensions:
    """4.5m (north-south) x 3.5m (east-west) room."""
    return RoomDimensions(length=4.5, width=3.5, height=2.4)


@pytest.fixture
def north_door() -> Door:
    """Default door at the middle of the north wall, hinge at (175, 0)."""
    return Door(id="door-1")


@pytest.fixture
def empty_layout(bedroom_dimensions: RoomDimensions) -> RoomLayout:
    return RoomLayout(name="Empty", dimensions=bedroom_dimensions)


@pytest.fixture
def crowded_layout(bedroom_dimensions: RoomDimensions, north_door: Door) -> RoomLayout:
    """Layout with one blocked door and one overlapping furniture pair."""
    return RoomLayout(
        name="Crowded",
        dimensions=bedroom_dimensions,
        doors=(north_door,),
        furniture=(
            make_furniture("armchair", x=120, y=30, width=80, depth=80),
            make_furniture("table", x=150, y=100, width=100, depth=100),
            make_furniture("bed", x=20, y=230, width=150, depth=200),
        ),
    )


@pytest.fixture
def furniture_factory():
    """Factory for furniture items with test defaults."""
    return make_furniture
