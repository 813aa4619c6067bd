"""Pydantic schemas for the REST API."""

from roomplanner.web.schemas.common import (
    AnalysisSettingsSchema,
    PointSchema,
    WarningSchema,
)
from roomplanner.web.schemas.requests import (
    AnalyzeRequest,
    CollisionRequest,
    ConfigValidateRequest,
    EfficiencyRequest,
    OutlineRequest,
    SwingPathRequest,
)
from roomplanner.web.schemas.responses import (
    AnalyzeResponseSchema,
    CategoryListSchema,
    CollisionResultSchema,
    EfficiencyResultSchema,
    ErrorResponseSchema,
    PointListSchema,
    SpaceAnalysisSchema,
    TemplateListSchema,
    TemplateSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "AnalysisSettingsSchema",
    "PointSchema",
    "WarningSchema",
    # Requests
    "AnalyzeRequest",
    "CollisionRequest",
    "ConfigValidateRequest",
    "EfficiencyRequest",
    "OutlineRequest",
    "SwingPathRequest",
    # Responses
    "AnalyzeResponseSchema",
    "CategoryListSchema",
    "CollisionResultSchema",
    "EfficiencyResultSchema",
    "ErrorResponseSchema",
    "PointListSchema",
    "SpaceAnalysisSchema",
    "TemplateListSchema",
    "TemplateSchema",
    "ValidationResultSchema",
]
