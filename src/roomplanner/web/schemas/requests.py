"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from roomplanner.application.config import (
    DoorConfig,
    FurnitureConfig,
    RoomDimensionsConfig,
)
from roomplanner.domain.value_objects import DoorVolume, IntersectionMode


class AnalyzeRequest(BaseModel):
    """Request for analyzing a full room layout."""

    config: dict[str, Any] = Field(..., description="Room layout configuration JSON")
    intersection_mode: IntersectionMode | None = Field(
        default=None, description="Override the layout's collision test"
    )
    door_volume: DoorVolume | None = Field(
        default=None, description="Override the layout's door swing shape"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a layout configuration."""

    config: dict[str, Any] = Field(..., description="Room layout configuration JSON")


class OutlineRequest(BaseModel):
    """Request for a furniture outline."""

    furniture: FurnitureConfig = Field(..., description="Furniture item")


class SwingPathRequest(BaseModel):
    """Request for a door swing path."""

    door: DoorConfig = Field(..., description="Door to trace")
    dimensions: RoomDimensionsConfig = Field(..., description="Room dimensions")
    door_volume: DoorVolume = Field(
        default=DoorVolume.ARC,
        description="arc returns the swing arc; sector prepends the hinge point",
    )


class CollisionRequest(BaseModel):
    """Request for a furniture-furniture collision check."""

    first: FurnitureConfig = Field(..., description="First furniture item")
    second: FurnitureConfig = Field(..., description="Second furniture item")
    intersection_mode: IntersectionMode = Field(
        default=IntersectionMode.VERTEX, description="Polygon intersection test"
    )


class EfficiencyRequest(BaseModel):
    """Request for a space efficiency calculation."""

    dimensions: RoomDimensionsConfig = Field(..., description="Room dimensions")
    furniture: list[FurnitureConfig] = Field(
        default_factory=list, description="Furniture in the room"
    )
