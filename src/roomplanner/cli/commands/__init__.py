"""CLI command implementations for the roomplanner application.

This package contains subcommands for the roomplanner CLI, including:
- validate: Validate a room layout file
- templates: Browse the furniture template catalog
"""

from roomplanner.cli.commands.templates import templates_app
from roomplanner.cli.commands.validate import validate_command

__all__ = ["templates_app", "validate_command"]
