"""Validate command for checking breakpoint configuration files.

Exit codes:
    0 - Breakpoints are valid with no advisories
    1 - Breakpoints cannot be used (load, schema or ordering errors)
    2 - Breakpoints are valid but some settings can never take effect
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from device_breakpoints.application.config import (
    ConfigError,
    ValidationResult,
    config_to_breakpoints,
    load_config,
    validate_config,
)
from device_breakpoints.domain import BreakpointConfiguration


def _field(path: str, value: Any) -> str:
    """Name a setting together with the value it was given."""
    if isinstance(value, float):
        return f"{path} = {value:g}"
    if value is None or isinstance(value, (dict, list)):
        return path
    return f"{path} = {value!r}"


def _summarize(breakpoints: BreakpointConfiguration) -> str:
    data = breakpoints.to_dict()
    tiers = data["tablet_tiers"]
    strategy = data["strategy"]
    line = (
        f"Effective breakpoints: watch <{data['watch_max']:g}, "
        f"mobile <{data['mobile_max']:g}, tablet <{data['tablet_max']:g} "
        f"(small <{tiers['small_max']:g}, medium <{tiers['medium_max']:g}), "
        f"strategy {strategy['type']}"
    )
    if "landscape_longest_side_threshold" in strategy:
        line += f" (landscape >= {strategy['landscape_longest_side_threshold']:g})"
    return line


def _display_load_error(error: ConfigError) -> None:
    typer.echo(f"Could not load breakpoints from {error.path}:", err=True)
    if error.error_type == "file_not_found":
        typer.echo("  File not found", err=True)
    elif error.error_type == "json_parse":
        for detail in error.details:
            typer.echo(
                f"  Invalid JSON at line {detail.get('line', '?')}, "
                f"column {detail.get('column', '?')}: {detail.get('message', 'unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(
                f"  {_field(detail['path'], detail.get('value'))}: {detail['message']}",
                err=True,
            )
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Breakpoints not usable.", err=True)


def _display_validation_result(
    result: ValidationResult, breakpoints: BreakpointConfiguration | None
) -> None:
    if result.errors:
        typer.echo("Threshold errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {_field(error.path, error.value)}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Advisories:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Try: {warning.suggestion}")
        typer.echo()

    if breakpoints is not None:
        typer.echo(_summarize(breakpoints))

    if result.errors:
        typer.echo(
            f"Breakpoints not usable: {len(result.errors)} error(s), "
            f"{len(result.warnings)} advisory warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Breakpoints valid with {len(result.warnings)} advisory warning(s)")
    else:
        typer.echo("Breakpoints valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a breakpoint configuration file.

    Checks the file for JSON syntax errors, schema errors, threshold
    ordering errors, and advisories such as unreachable tablet tiers.
    Valid files also print the effective thresholds after presets are
    applied.

    Example:
        device-breakpoints validate breakpoints.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    breakpoints = config_to_breakpoints(config) if result.is_valid else None
    _display_validation_result(result, breakpoints)
    raise typer.Exit(code=result.exit_code)
