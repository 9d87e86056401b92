"""``wardrobe validate``: check a configuration without laying it out.

The configuration is loaded and its layout computed once. Load failures
and infeasible geometry are errors; auto-corrected slot counts and narrow
regions are warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobe.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _echo_section(title: str, lines: list[str], err: bool = False) -> None:
    typer.echo(f"{title}:", err=err)
    for line in lines:
        typer.echo(f"  {line}", err=err)
    typer.echo()


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', '')}"
            for d in error.details
        ]
    if error.error_type != "validation":
        return [error.message]

    lines: list[str] = []
    for detail in error.details:
        lines.append(f"{detail.get('path') or '(document)'}: {detail.get('message')}")
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  Value: {value!r}")
    return lines


def _report(result: ValidationResult) -> None:
    if result.errors:
        lines: list[str] = []
        for error in result.errors:
            lines.append(f"{error.path}: {error.message}")
            if error.value is not None:
                lines.append(f"  Value: {error.value!r}")
        _echo_section("Errors", lines, err=True)

    if result.warnings:
        lines = []
        for warning in result.warnings:
            lines.append(f"{warning.path}: {warning.message}")
            if warning.suggestion:
                lines.append(f"  Suggestion: {warning.suggestion}")
        _echo_section("Warnings", lines)

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if not result.is_valid:
        typer.echo(f"Validation failed: {counts}", err=True)
    elif result.has_warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a wardrobe configuration file.

    Exit codes: 0 when valid, 1 on errors, 2 when valid with warnings.

    Example:
        wardrobe validate hallway.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_section("Errors", _load_error_lines(e), err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)
