"""CLI command implementations for the drawers application.

This package contains subcommands for the drawers CLI, including:
- validate: Validate a configuration file
"""

from drawers.cli.commands.validate import (
    display_issues,
    display_load_error,
    validate_command,
)

__all__ = ["display_issues", "display_load_error", "validate_command"]
