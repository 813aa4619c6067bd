"""Error handlers for the REST API."""

import math
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roomplanner.application.config import ConfigError
from roomplanner.application.templates import TemplateNotFoundError


def _encode_float(value: float) -> float | str:
    # JSON has no inf/nan; rejected inputs are echoed back as text
    return value if math.isfinite(value) else str(value)


def _encode(content: Any) -> Any:
    return jsonable_encoder(content, custom_encoder={float: _encode_float})


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_encode({"detail": exc.errors()}),
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_encode(
                {
                    "error": exc.message,
                    "error_type": exc.error_type,
                    "details": exc.details or None,
                }
            ),
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.template_id}",
                "error_type": "not_found",
                "details": None,
            },
        )
