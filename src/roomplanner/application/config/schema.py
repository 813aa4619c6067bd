"""Pydantic models for room layout configuration files.

Layouts are stored as JSON. Field names are snake_case; the camelCase
names used by the browser planner (``swingDirection``, ``customPath``, ...)
are accepted as aliases so its serialized layouts load unchanged.
"""

from typing import Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from roomplanner.domain.value_objects import (
    DoorVolume,
    FurnitureShape,
    HingePosition,
    IntersectionMode,
    SwingDirection,
    Wall,
)

# Supported schema versions for configuration files
# Version 1.0: Room dimensions, doors and furniture
# Version 1.1: Added analysis settings (intersection mode, door volume)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Furniture size range accepted by the planner, in centimeters
MIN_FURNITURE_SIZE = 20.0
MAX_FURNITURE_SIZE = 400.0


class _ConfigModel(BaseModel):
    """Base model: strict fields, finite numbers and camelCase aliases."""

    model_config = ConfigDict(
        extra="forbid",
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RoomDimensionsConfig(_ConfigModel):
    """Room dimensions in meters."""

    length: float = Field(..., ge=1, le=20, description="North-south extent in meters")
    width: float = Field(..., ge=1, le=20, description="East-west extent in meters")
    height: float = Field(default=2.4, ge=2, le=5, description="Ceiling height in meters")


class DoorConfig(_ConfigModel):
    """Door mounted on a room wall."""

    id: str = Field(..., min_length=1)
    width: float = Field(default=80.0, gt=0, description="Leaf width in centimeters")
    height: float = Field(default=200.0, gt=0, description="Leaf height in centimeters")
    wall: Wall = Wall.NORTH
    position: float = Field(
        default=0.5, ge=0, le=1, description="Fractional position along the wall"
    )
    swing_direction: SwingDirection = SwingDirection.INWARD
    swing_angle: float = Field(
        default=90.0, gt=0, le=180, description="Opening angle in degrees"
    )
    hinge_position: HingePosition = HingePosition.LEFT


class PointConfig(_ConfigModel):
    """Point in centimeters."""

    x: float
    y: float


class FurnitureConfig(_ConfigModel):
    """Furniture item placed in the room."""

    id: str = Field(..., min_length=1)
    name: str
    type: str = "custom"
    shape: FurnitureShape = FurnitureShape.RECTANGLE
    width: float = Field(..., ge=MIN_FURNITURE_SIZE, le=MAX_FURNITURE_SIZE)
    depth: float = Field(..., ge=MIN_FURNITURE_SIZE, le=MAX_FURNITURE_SIZE)
    height: float = Field(default=75.0, ge=10, le=300)
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    custom_path: list[PointConfig] | None = None
    color: str | None = None


class AnalysisConfig(_ConfigModel):
    """Algorithm selection for interference and collision checks."""

    intersection_mode: IntersectionMode = IntersectionMode.VERTEX
    door_volume: DoorVolume = DoorVolume.ARC


class RoomLayoutConfiguration(_ConfigModel):
    """Root configuration model for a room layout file.

    Example:
        {
            "schema_version": "1.0",
            "name": "Bedroom",
            "dimensions": {"length": 4.5, "width": 3.5, "height": 2.4},
            "doors": [{"id": "door-1", "wall": "north"}],
            "furniture": [
                {"id": "bed", "name": "Bed", "width": 150, "depth": 200,
                 "x": 20, "y": 200}
            ]
        }
    """

    schema_version: str = "1.0"
    id: int | None = None
    name: str = "New Room"
    dimensions: RoomDimensionsConfig
    doors: list[DoorConfig] = Field(default_factory=list)
    furniture: list[FurnitureConfig] = Field(default_factory=list)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported: {supported}"
            )
        return value

    @model_validator(mode="after")
    def validate_unique_ids(self) -> Self:
        for label, ids in (
            ("door", [d.id for d in self.doors]),
            ("furniture", [f.id for f in self.furniture]),
        ):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} ids: {', '.join(duplicates)}")
        return self

    @model_validator(mode="after")
    def validate_analysis_version(self) -> Self:
        if self.schema_version == "1.0" and "analysis" in self.model_fields_set:
            raise ValueError(
                "The analysis section requires schema_version '1.1' or later"
            )
        return self
