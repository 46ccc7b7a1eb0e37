"""Typer CLI for drawer bin layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer
import uvicorn

from drawers.application.config import ConfigError, build_layout, load_config
from drawers.cli.commands import display_issues, display_load_error, validate_command
from drawers.domain.value_objects import (
    DEFAULT_BASE_THICKNESS_MM,
    DEFAULT_CELL_SIZE_MM,
    DEFAULT_DRAWER_HEIGHT_MM,
    DEFAULT_DRAWER_WIDTH_MM,
    DEFAULT_WALL_HEIGHT_MM,
    GridSpec,
)
from drawers.infrastructure import BinListFormatter, LayoutDiagramFormatter
from drawers.infrastructure.exporters import ExporterRegistry, ExportManager

app = typer.Typer(
    name="drawers",
    help="Plan Gridfinity bin layouts for drawers.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Plan Gridfinity bin layouts for drawers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list or "all".

    Raises:
        typer.Exit: If any format is unknown.
    """
    if output_formats_str.lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


@app.command()
def info(
    width: Annotated[
        float, typer.Option("--width", "-w", help="Inner drawer width in mm")
    ] = DEFAULT_DRAWER_WIDTH_MM,
    height: Annotated[
        float, typer.Option("--height", "-h", help="Inner drawer depth in mm")
    ] = DEFAULT_DRAWER_HEIGHT_MM,
    grid: Annotated[
        float, typer.Option("--grid", "-g", help="Grid cell size in mm")
    ] = DEFAULT_CELL_SIZE_MM,
    wall: Annotated[
        float, typer.Option("--wall", help="Drawer wall height in mm")
    ] = DEFAULT_WALL_HEIGHT_MM,
    base: Annotated[
        float, typer.Option("--base", help="Baseplate thickness in mm")
    ] = DEFAULT_BASE_THICKNESS_MM,
) -> None:
    """Display the grid a drawer holds."""
    spec = GridSpec(
        cell_size_mm=grid,
        drawer_width_mm=width,
        drawer_height_mm=height,
        wall_height_mm=wall,
        base_thickness_mm=base,
    )
    typer.echo(spec.describe())
    typer.echo(f"Cells available: {spec.size.cell_total}")
    typer.echo(
        f"Unused margin: {width - spec.cols * grid:g} mm x "
        f"{height - spec.rows * grid:g} mm"
    )


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (json, svg, stl) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for exported files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = "gridfinity-layout",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Skip the diagram and bin list"),
    ] = False,
) -> None:
    """Lay out the bins of a configuration file and export the result."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    formats = _parse_formats(output_formats) if output_formats else []

    build = build_layout(config)
    snapshot = build.state.export_snapshot()

    if not quiet:
        typer.echo(LayoutDiagramFormatter().format(snapshot))
        typer.echo()
        typer.echo(BinListFormatter().format(snapshot))

    if build.issues:
        typer.echo()
        display_issues("Warnings:", build.issues, err=True)

    if not formats:
        return

    manager = ExportManager(output_dir or Path("."), cell_px=build.cell_px)
    try:
        files = manager.export_all(formats, snapshot, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 8000,
    reload: Annotated[
        bool, typer.Option("--reload", help="Restart on code changes")
    ] = False,
) -> None:
    """Run the REST API with uvicorn."""
    typer.echo(f"Serving drawer layout API on http://{host}:{port}")
    uvicorn.run("drawers.web.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
