"""Typer CLI for wardrobe layout."""

from pathlib import Path
from typing import Annotated

import typer

from wardrobe.application import ComputeLayoutCommand, LayoutOutput
from wardrobe.application.config import (
    ConfigError,
    WardrobeConfiguration,
    config_to_space_config,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from wardrobe.cli.commands import validate_command
from wardrobe.domain import InvalidConfigError
from wardrobe.infrastructure import (
    DimensionFormatter,
    ElevationDiagramFormatter,
    JsonLayoutExporter,
    LayoutSummaryFormatter,
)
from wardrobe.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

CONSOLE_FORMATS = ("text", "json", "diagram", "all")


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _write_exports(
    manager: ExportManager, formats: list[str], result: LayoutOutput, project_name: str
) -> None:
    """Write one file per format and list them; unknown formats write nothing."""
    try:
        written = manager.export_all(formats, result, project_name)
    except UnsupportedFormatError as e:
        raise _fail(str(e))
    except OSError as e:
        raise _fail(f"Could not write export: {e}")

    typer.echo("\nExported files:")
    for format_name, target in written.items():
        typer.echo(f"  {format_name.upper()}: {target}")


def _base_config(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    depth: float | None,
) -> WardrobeConfiguration:
    """Configuration that CLI overrides are merged onto.

    Raises:
        ConfigError: If the file fails to load, or if no file is given and
            a dimension is missing.
    """
    if config_file is not None:
        return load_config(config_file)
    if width is None or height is None or depth is None:
        raise ConfigError(
            "--width, --height, and --depth are required when --config is not provided",
            error_type="missing_dimensions",
        )
    return load_config_from_dict(
        {"schema_version": "1.0", "space": {"width": width, "height": height, "depth": depth}}
    )


def _parse_formats(output_formats: str) -> list[str]:
    if output_formats.lower() == "all":
        return ExporterRegistry.available_formats()
    return [f.strip().lower() for f in output_formats.split(",") if f.strip()]


app = typer.Typer(
    name="wardrobe",
    help="Lay out wardrobe enclosures: frames, soffits and door slots.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Space width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Space height in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Space depth in mm"),
    ] = None,
    installation: Annotated[
        str | None,
        typer.Option(
            "--installation",
            "-i",
            help="Installation type: built-in, semi-standing, free-standing",
        ),
    ] = None,
    wall_side: Annotated[
        str | None,
        typer.Option("--wall-side", help="Wall side for semi-standing: left, right"),
    ] = None,
    slots: Annotated[
        int | None,
        typer.Option("--slots", "-s", help="Requested number of door slots"),
    ] = None,
    soffit_side: Annotated[
        str | None,
        typer.Option("--soffit-side", help="Soffit side: left, right"),
    ] = None,
    soffit_width: Annotated[
        float | None,
        typer.Option("--soffit-width", help="Soffit width in mm from the outer edge"),
    ] = None,
    soffit_height: Annotated[
        float | None,
        typer.Option("--soffit-height", help="Soffit drop from the ceiling in mm"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Console output: text, json, diagram, all"),
    ] = "text",
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,svg,dxf (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "wardrobe",
) -> None:
    """Compute a wardrobe layout.

    You can provide the space via CLI options or via a JSON configuration
    file. When using --config, CLI options override config file values.

    Examples:
        wardrobe layout --width 4800 --height 2400 --depth 600 --slots 8
        wardrobe layout --config hallway.json --format json
        wardrobe layout --config hallway.json --width 3600 --output-formats svg,dxf --output-dir ./out
    """
    if output_format not in CONSOLE_FORMATS:
        raise _fail(
            f"Unknown format '{output_format}'. Use one of: {', '.join(CONSOLE_FORMATS)}"
        )

    try:
        config = _base_config(config_file, width, height, depth)
    except ConfigError as e:
        raise _fail(str(e))

    try:
        config = merge_config_with_cli(
            config,
            width=width,
            height=height,
            depth=depth,
            installation_type=installation,
            wall_side=wall_side,
            slot_count=slots,
            soffit_side=soffit_side,
            soffit_width=soffit_width,
            soffit_height=soffit_height,
            output_formats=_parse_formats(output_formats) if output_formats else None,
        )
        space_config = config_to_space_config(config)
    except InvalidConfigError as e:
        raise _fail(e.message)
    except ValueError as e:
        raise _fail(f"Invalid option value: {e}")

    result = ComputeLayoutCommand().execute(space_config)
    if not result.is_valid:
        for error in result.errors[:-1]:
            typer.echo(f"Error: {error}", err=True)
        raise _fail(result.errors[-1])

    for note in result.notes:
        typer.echo(f"Note: {note}", err=True)

    units = config.output.units
    sections: list[str] = []
    if output_format in ("text", "all"):
        sections.append(LayoutSummaryFormatter().format(result.summary))
        sections.append(DimensionFormatter().format(result.summary))
    if output_format in ("diagram", "all"):
        sections.append(ElevationDiagramFormatter().format(result.summary))
    if output_format == "json":
        sections.append(JsonLayoutExporter(units=units).export_string(result))
    typer.echo("\n\n".join(sections))

    # "text" only ever goes to the console
    file_formats = [f for f in config.output.formats if f != "text"]
    if file_formats:
        manager = ExportManager(output_dir or Path("."), units=units)
        _write_exports(manager, file_formats, result, project_name)


@app.command()
def formats() -> None:
    """List the available export formats."""
    typer.echo("Available export formats:")
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"  {format_name:<6} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
