"""Configuration file loader.

Loads JSON breakpoint configuration files and turns file system errors,
JSON syntax errors and schema violations into a single ``ConfigError``
with an ``error_type`` the CLI can report on.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from device_breakpoints.application.config.adapter import config_to_breakpoints
from device_breakpoints.application.config.schema import BreakpointsConfigFile
from device_breakpoints.domain.breakpoints import BreakpointConfiguration
from device_breakpoints.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when a configuration cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation, invalid_breakpoints)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON,
            per-field messages for validation)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a dotted path.

    Examples:
        >>> _format_json_path(("tablet_tiers", "small_max"))
        'tablet_tiers.small_max'
        >>> _format_json_path(())
        '(root)'
    """
    parts = [str(segment) for segment in loc]
    return ".".join(parts) if parts else "(root)"


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Configuration validation failed:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config_from_dict(data: dict[str, Any]) -> BreakpointsConfigFile:
    """Validate configuration data that did not come from a file.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    try:
        return BreakpointsConfigFile.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e) from e


def load_config(path: Path) -> BreakpointsConfigFile:
    """Load and validate a breakpoint configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        The validated configuration file model.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON,
            or does not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Parsed config file {path}")
    try:
        return BreakpointsConfigFile.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_breakpoints(path: Path) -> BreakpointConfiguration:
    """Load a configuration file straight into a ``BreakpointConfiguration``.

    Raises:
        ConfigError: If loading fails, or the thresholds violate the
            breakpoint invariants (error_type ``invalid_breakpoints``).
    """
    config = load_config(path)
    try:
        return config_to_breakpoints(config)
    except ConfigurationError as e:
        raise ConfigError(
            message=f"Invalid breakpoints in {path}: {e}",
            error_type="invalid_breakpoints",
            path=path,
        ) from e
