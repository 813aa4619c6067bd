"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from roomplanner.web.schemas.common import (
    AnalysisSettingsSchema,
    PointSchema,
    WarningSchema,
)


class SpaceAnalysisSchema(BaseModel):
    """Full-room analysis summary."""

    total_area: float = Field(..., description="Floor area in square meters")
    used_area: float = Field(..., description="Furniture footprint in square meters")
    efficiency: float = Field(..., description="Used area percentage, 0 to 100")
    accessibility_score: int = Field(..., description="Accessibility score, 0 to 100")
    accessibility_rating: str = Field(..., description="good, fair or poor")
    warnings: list[WarningSchema] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class AnalyzeResponseSchema(BaseModel):
    """Response for layout analysis."""

    name: str = Field(..., description="Layout name")
    settings: AnalysisSettingsSchema
    analysis: SpaceAnalysisSchema
    outlines: dict[str, list[PointSchema]] = Field(
        default_factory=dict, description="Furniture outline by furniture id"
    )
    swing_paths: dict[str, list[PointSchema]] = Field(
        default_factory=dict, description="Door swing arc by door id"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the layout is usable")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Placement advisories"
    )


class PointListSchema(BaseModel):
    """Response carrying an outline or swing path."""

    points: list[PointSchema] = Field(default_factory=list)


class CollisionResultSchema(BaseModel):
    """Response for a collision check."""

    collides: bool = Field(..., description="Whether the outlines intersect")
    intersection_mode: str = Field(..., description="Polygon test used")


class EfficiencyResultSchema(BaseModel):
    """Response for a space efficiency calculation."""

    total_area: float = Field(..., description="Floor area in square meters")
    used_area: float = Field(..., description="Furniture footprint in square meters")
    efficiency: float = Field(..., description="Used area percentage, 0 to 100")


class TemplateSchema(BaseModel):
    """Furniture template."""

    id: str
    name: str
    category: str
    type: str
    shape: str
    default_width: float = Field(..., description="Width in centimeters")
    default_depth: float = Field(..., description="Depth in centimeters")
    default_height: float = Field(..., description="Height in centimeters")
    icon: str
    color: str


class TemplateListSchema(BaseModel):
    """Response for listing templates."""

    templates: list[TemplateSchema] = Field(default_factory=list)


class CategoryListSchema(BaseModel):
    """Response for listing template categories."""

    categories: list[str] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
