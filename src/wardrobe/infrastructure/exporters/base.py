"""Exporter plumbing: the Exporter protocol, the format registry and
the manager that writes one file per requested format."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from wardrobe.application.dtos import LayoutOutput
    from wardrobe.domain import LayoutSummary

    ExportSource = Union[LayoutOutput, LayoutSummary]


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """No exporter is registered under the requested format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        self.message = (
            f"No exporter registered for format '{format_name}'. "
            f"Available formats: {', '.join(available) or 'none'}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def summary_of(output: ExportSource) -> LayoutSummary:
    """Return the layout summary carried by an export source.

    Raises:
        ValueError: If a LayoutOutput carries no summary.
    """
    from wardrobe.application.dtos import LayoutOutput

    if not isinstance(output, LayoutOutput):
        return output
    if output.summary is None:
        raise ValueError("Cannot export a failed layout: " + "; ".join(output.errors))
    return output.summary


@runtime_checkable
class Exporter(Protocol):
    """Interface shared by every layout exporter.

    Exporters accept either a LayoutOutput or a bare LayoutSummary.
    Exporters that declare ``supports_units = True`` take a ``units``
    keyword ("mm" or "m") in their constructor.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: ExportSource, path: Path) -> None:
        """Write the layout to ``path``."""
        ...

    def export_string(self, output: ExportSource) -> str:
        """Render the layout in memory.

        Raises:
            NotImplementedError: For formats without a text form.
        """
        raise NotImplementedError(f"Format '{self.format_name}' has no string export")


class ExporterRegistry:
    """Format name to exporter class lookup.

    Exporter modules register on import:

        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Class decorator registering an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Format '{format_name}' re-registered: "
                    f"{previous.__name__} replaced by {exporter_class.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up the exporter class for a format.

        Raises:
            UnsupportedFormatError: If the format is not registered.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise UnsupportedFormatError(format_name, cls.available_formats()) from None

    @classmethod
    def create(cls, format_name: str, units: str = "mm") -> Exporter:
        """Instantiate the exporter for a format with the requested units."""
        return create_exporter(cls.get(format_name), units=units)

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


def create_exporter(exporter_class: type[Exporter], units: str = "mm") -> Exporter:
    """Instantiate an exporter, passing units to those that accept them."""
    if getattr(exporter_class, "supports_units", False):
        return exporter_class(units=units)  # type: ignore[call-arg]
    return exporter_class()


class ExportManager:
    """Writes a layout to one file per format in an output directory.

    Files are named ``{project_name}_{format}.{extension}``.
    """

    def __init__(self, output_dir: Path, units: str = "mm") -> None:
        self.output_dir = Path(output_dir)
        self.units = units

    def plan(
        self, formats: list[str], project_name: str = "wardrobe"
    ) -> list[tuple[str, Exporter, Path]]:
        """Resolve each format to its exporter and target path.

        Raises:
            UnsupportedFormatError: If any format is not registered.
        """
        planned = []
        for format_name in formats:
            exporter = ExporterRegistry.create(format_name, units=self.units)
            target = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            planned.append((format_name, exporter, target))
        return planned

    def export_all(
        self,
        formats: list[str],
        output: ExportSource,
        project_name: str = "wardrobe",
    ) -> dict[str, Path]:
        """Export a layout to every format in ``formats``.

        Nothing is written when any format is unknown.

        Returns:
            Mapping of format name to the written file.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        planned = self.plan(formats, project_name)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for format_name, exporter, target in planned:
            logger.info(f"Writing {format_name} export to {target}")
            exporter.export(output, target)
            written[format_name] = target
        return written

    def export_single(
        self,
        format_name: str,
        output: ExportSource,
        project_name: str = "wardrobe",
    ) -> Path:
        """Export a layout to one format and return the written file."""
        return self.export_all([format_name], output, project_name)[format_name]
