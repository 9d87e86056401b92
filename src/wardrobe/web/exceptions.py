"""Exception handlers mapping layout and configuration failures to 4xx bodies."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobe.application.config import ConfigError
from wardrobe.domain import InvalidConfigError
from wardrobe.infrastructure.exporters import UnsupportedFormatError
from wardrobe.web.schemas.responses import ErrorResponseSchema

logger = logging.getLogger(__name__)


class LayoutComputationError(Exception):
    """Raised when a layout cannot be computed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout failed: {errors}")


def _error_response(status_code: int, error: str, error_type: str, details: Any) -> JSONResponse:
    body = ErrorResponseSchema(error=error, error_type=error_type, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidConfigError)
    async def invalid_config_handler(
        request: Request, exc: InvalidConfigError
    ) -> JSONResponse:
        logger.info(f"Rejected configuration at {exc.field}: {exc.message}")
        details = [{"message": exc.message, "field": exc.field, "value": exc.value}]
        return _error_response(422, exc.message, "invalid_config", details)

    @app.exception_handler(LayoutComputationError)
    async def layout_error_handler(
        request: Request, exc: LayoutComputationError
    ) -> JSONResponse:
        details = [{"message": e} for e in exc.errors]
        return _error_response(422, "Layout computation failed", "invalid_config", details)

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        details = [{"path": d.get("path"), "message": d.get("message")} for d in exc.details]
        return _error_response(422, exc.message, exc.error_type, details)

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        details = {"format": exc.format_name, "available": exc.available}
        return _error_response(400, str(exc), "unsupported_format", details)
