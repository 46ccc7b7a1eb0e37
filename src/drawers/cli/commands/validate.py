"""Validate command for drawer layout configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Sequence

import typer

from drawers.application.config import (
    ConfigError,
    ReplayIssue,
    ValidationResult,
    config_to_grid_spec,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a drawer layout configuration file.

    Loads the file, then replays its bins through the layout engine without
    writing anything.

    Exit codes:
        0 - every bin lands where the file says
        1 - the file cannot be loaded, or a bin is larger than the grid
        2 - usable, but some bins are skipped, clamped or left in place

    Example:
        drawers validate my-drawer.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(config_to_grid_spec(config.grid).describe())
    typer.echo(f"Bin entries: {len(config.bins)}")
    typer.echo()

    result = validate_config(config)
    display_issues("Errors:", result.errors, err=True)
    display_issues("Warnings:", result.warnings)
    typer.echo(_verdict(result), err=not result.is_valid)
    raise typer.Exit(code=result.exit_code)


def display_issues(title: str, issues: Sequence[ReplayIssue], err: bool = False) -> None:
    """Print a titled block of issues, or nothing when there are none."""
    if not issues:
        return
    typer.echo(title, err=err)
    for issue in issues:
        typer.echo(f"  {issue.path}: {issue.message}", err=err)
        if issue.suggestion:
            typer.echo(f"    Suggestion: {issue.suggestion}", err=err)
    typer.echo(err=err)


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration file could not be loaded."""
    typer.echo("Cannot load configuration:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
                err=True,
            )
    elif error.error_type == "validation":
        # Grouped by section: [grid], [view], [bins]
        for section in error.sections:
            typer.echo(f"  [{section}]", err=True)
            for detail in error.details:
                if detail["section"] != section:
                    continue
                typer.echo(f"    {detail['path']}: {detail['message']}", err=True)
                if detail["value"] is not None:
                    typer.echo(f"      Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def _verdict(result: ValidationResult) -> str:
    if result.errors:
        return (
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)"
        )
    if result.warnings:
        return f"Validation passed with {len(result.warnings)} warning(s)"
    return "Validation passed. Configuration is valid."
