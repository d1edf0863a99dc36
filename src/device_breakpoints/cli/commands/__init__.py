"""CLI command implementations for the device-breakpoints application.

This package contains subcommands for the CLI, including:
- validate: Validate a configuration file
- presets: List the built-in presets
"""

from device_breakpoints.cli.commands.presets import presets_command
from device_breakpoints.cli.commands.validate import validate_command

__all__ = ["presets_command", "validate_command"]
