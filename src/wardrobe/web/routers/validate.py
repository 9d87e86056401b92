"""Configuration validation endpoints."""

from fastapi import APIRouter

from wardrobe.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from wardrobe.web.schemas.requests import ConfigValidateRequest
from wardrobe.web.schemas.responses import IssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a wardrobe configuration without returning the layout.

    Schema errors are reported in the result alongside geometric errors,
    so clients get a single shape for every kind of problem.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                IssueSchema(path=d.get("path"), message=d.get("message", e.message))
                for d in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[IssueSchema(path=e.path, message=e.message, value=e.value) for e in result.errors],
        warnings=[
            IssueSchema(path=w.path, message=w.message, suggestion=w.suggestion)
            for w in result.warnings
        ],
    )
