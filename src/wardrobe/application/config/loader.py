"""Loading of wardrobe configuration documents.

A document goes through three stages: reading the file, parsing JSON and
validating against the schema. A failure at any stage surfaces as a single
ConfigError whose ``error_type`` names the stage that failed and whose
``details`` carry per-field information for display.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wardrobe.application.config.schema import WardrobeConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A configuration document could not be loaded.

    Attributes:
        message: Summary suitable for a single error line.
        error_type: Stage that failed: file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Source file, when the document came from disk.
        details: Per-problem dictionaries (``line``/``column`` for JSON
            errors, ``path``/``message``/``value`` for schema errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_validation(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> "ConfigError":
        """Build a ConfigError from pydantic's validation error."""
        details = [
            {
                "path": _json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in error.errors()
        ]
        summary = ["Configuration validation failed:"]
        for detail in details:
            value = detail["value"]
            # Whole-object inputs are noise in a one-line summary
            shown = "" if value is None or isinstance(value, (dict, list)) else f" (got: {value!r})"
            summary.append(f"  - {detail['path']}: {detail['message']}{shown}")
        return cls("\n".join(summary), error_type="validation", path=path, details=details)


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as a dotted path with list indices.

    Examples:
        >>> _json_path(("space", "soffit", "width"))
        'space.soffit.width'
        >>> _json_path(("output", "formats", 1))
        'output.formats[1]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _read_document(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def _parse_document(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> WardrobeConfiguration:
    """Validate an already-parsed configuration document.

    Used directly for documents that do not come from a file, such as API
    request bodies.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return WardrobeConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation(e, path=path)


def load_config(path: Path) -> WardrobeConfiguration:
    """Load and validate a wardrobe configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("hallway.json"))
        ... except ConfigError as e:
        ...     print(e.error_type, e.message)
    """
    logger.debug(f"Loading configuration from {path}")
    data = _parse_document(_read_document(path), path)
    config = load_config_from_dict(data, path=path)
    logger.debug(
        f"Loaded {config.space.installation_type.value} space "
        f"{config.space.width:g}x{config.space.height:g}mm from {path}"
    )
    return config
