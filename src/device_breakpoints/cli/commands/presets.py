"""Presets command listing the built-in breakpoint and tablet tier presets."""

import json
from typing import Annotated

import typer

from device_breakpoints.domain.breakpoints import BREAKPOINT_PRESETS
from device_breakpoints.domain.value_objects import TABLET_TIER_PRESETS


def presets_command(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the presets as JSON"),
    ] = False,
) -> None:
    """List the built-in breakpoint and tablet tier presets.

    Example:
        device-breakpoints presets --json
    """
    breakpoints = {name: build().to_dict() for name, build in BREAKPOINT_PRESETS.items()}
    tiers = {name: build().to_dict() for name, build in TABLET_TIER_PRESETS.items()}

    if as_json:
        typer.echo(json.dumps({"breakpoints": breakpoints, "tablet_tiers": tiers}, indent=2))
        return

    typer.echo("Breakpoint presets:")
    for name, data in breakpoints.items():
        typer.echo(
            f"  {name:<10} watch <{data['watch_max']:g}, mobile <{data['mobile_max']:g}, "
            f"tablet <{data['tablet_max']:g}, strategy {data['strategy']['type']}"
        )
    typer.echo()
    typer.echo("Tablet tier presets:")
    for name, data in tiers.items():
        typer.echo(
            f"  {name:<10} small <{data['small_max']:g}, medium <{data['medium_max']:g}"
        )
