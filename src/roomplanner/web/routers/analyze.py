"""Layout analysis endpoints."""

from fastapi import APIRouter

from roomplanner.application.config import load_config_from_dict
from roomplanner.infrastructure import JsonExporter
from roomplanner.web.dependencies import AnalyzeCommandDep
from roomplanner.web.schemas.requests import AnalyzeRequest
from roomplanner.web.schemas.responses import (
    AnalyzeResponseSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post(
    "",
    response_model=AnalyzeResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def analyze_layout(
    request: AnalyzeRequest,
    command: AnalyzeCommandDep,
) -> AnalyzeResponseSchema:
    """Analyze a room layout.

    Args:
        request: Layout configuration and optional algorithm overrides.
        command: Injected AnalyzeLayoutCommand.

    Returns:
        Efficiency, accessibility, warnings and suggestions together with
        the furniture outlines and door swing paths.

    Raises:
        ConfigError: If the layout is invalid (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(
        config,
        intersection_mode=request.intersection_mode,
        door_volume=request.door_volume,
    )
    return AnalyzeResponseSchema.model_validate(JsonExporter().to_dict(output))
