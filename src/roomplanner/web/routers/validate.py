"""Configuration validation endpoints."""

from fastapi import APIRouter

from roomplanner.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from roomplanner.web.schemas.requests import ConfigValidateRequest
from roomplanner.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a room layout without analyzing it.

    Schema errors are reported in the result rather than as an HTTP error,
    so the planner can show them next to the offending fields.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            exit_code=1,
            errors=[
                {"message": d.get("message", ""), "path": d.get("path", "")}
                for d in e.details
            ]
            or [{"message": e.message, "path": ""}],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
