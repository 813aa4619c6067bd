"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """Point in room centimeters."""

    x: float = Field(..., description="X coordinate in centimeters")
    y: float = Field(..., description="Y coordinate in centimeters (Y-down)")


class WarningSchema(BaseModel):
    """Interference or collision warning."""

    id: str = Field(..., description="Warning id, unique per analysis")
    type: str = Field(..., description="door-furniture or furniture-furniture")
    message: str = Field(..., description="Human-readable description")
    severity: str = Field(..., description="warning or error")
    furniture_ids: list[str] = Field(..., description="Furniture involved")
    door_id: str | None = Field(default=None, description="Door involved, if any")


class AnalysisSettingsSchema(BaseModel):
    """Algorithm selection used for an analysis."""

    intersection_mode: str = Field(..., description="vertex or exact")
    door_volume: str = Field(..., description="arc or sector")
