"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from drawers.application.dtos import LayoutSnapshot


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a LayoutSnapshot to a specific format. Each exporter
    must define its format name and file extension, and implement at least
    the export method.

    Attributes:
        format_name: Name of the export format (e.g., "stl", "json").
        file_extension: File extension without leading dot (e.g., "stl", "json").
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, snapshot: LayoutSnapshot, path: Path) -> None:
        """Export a layout snapshot to a file.

        Args:
            snapshot: The layout to export.
            path: Path where the file will be saved.
        """
        ...

    def export_bytes(self, snapshot: LayoutSnapshot) -> bytes:
        """Export a layout snapshot as raw bytes.

        Args:
            snapshot: The layout to export.

        Returns:
            File content.
        """
        ...

    def export_string(self, snapshot: LayoutSnapshot) -> str:
        """Export a layout snapshot as a string.

        This method is optional. Not all formats support string export
        (e.g., binary formats like STL).

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Provides a central registry for all available exporters. Exporters
    register themselves using the @ExporterRegistry.register decorator.

    Example:
        @ExporterRegistry.register("json")
        class SnapshotJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register (e.g., "stl", "json").

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Get sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters.

        This is primarily useful for testing.
        """
        cls._exporters.clear()


class ExportManager:
    """Manages export operations to multiple formats.

    Coordinates exporting a layout snapshot to one or more formats,
    handling file naming and directory management.

    Attributes:
        output_dir: Directory where exported files will be saved.
        exporter_options: Keyword arguments passed to every exporter that
            accepts them (e.g., ``cell_px``).
    """

    def __init__(self, output_dir: Path, **exporter_options: Any) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
            **exporter_options: Options forwarded to exporter constructors.
        """
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options

    def create_exporter(self, format_name: str) -> Exporter:
        """Instantiate the exporter for a format with the manager's options.

        Raises:
            KeyError: If the format is not registered.
        """
        return create_exporter(format_name, **self.exporter_options)

    def export_all(
        self,
        formats: list[str],
        snapshot: LayoutSnapshot,
        project_name: str = "gridfinity-layout",
    ) -> dict[str, Path]:
        """Export a snapshot to multiple formats.

        Args:
            formats: List of format names to export (e.g., ["stl", "json"]).
            snapshot: The layout to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter before touching the filesystem
        exporters = {name: self.create_exporter(name) for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter in exporters.items():
            # Generate filename: {project_name}_{format}.{ext}
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(snapshot, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        snapshot: LayoutSnapshot,
        project_name: str = "gridfinity-layout",
    ) -> Path:
        """Export a snapshot to a single format.

        Raises:
            KeyError: If the format is not registered.
            OSError: If file operations fail.
        """
        results = self.export_all([format_name], snapshot, project_name)
        return results[format_name]


def create_exporter(format_name: str, **options: Any) -> Exporter:
    """Instantiate a registered exporter, passing only the options it accepts.

    Raises:
        KeyError: If the format is not registered.
    """
    exporter_class = ExporterRegistry.get(format_name)
    accepted = getattr(exporter_class, "accepted_options", ())
    kwargs = {key: value for key, value in options.items() if key in accepted}
    return exporter_class(**kwargs)
