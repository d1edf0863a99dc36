"""Typer CLI for device classification."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError

from device_breakpoints.application.config import (
    BreakpointPresetName,
    BreakpointsConfigFile,
    ConfigError,
    StrategyType,
    config_to_breakpoints,
    load_config,
    merge_config_with_cli,
)
from device_breakpoints.cli.commands import presets_command, validate_command
from device_breakpoints.domain import (
    BreakpointConfiguration,
    ConfigurationError,
    DeviceType,
    Measurement,
)


class OutputFormat(str, Enum):
    """Output format for classification results."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="device-breakpoints",
    help="Classify screen sizes into watch, mobile, tablet and large-screen devices.",
)

# Register standalone commands
app.command(name="validate")(validate_command)
app.command(name="presets")(presets_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON breakpoint configuration file"),
]
PresetOption = Annotated[
    BreakpointPresetName | None,
    typer.Option("--preset", "-p", help="Breakpoint preset"),
]
StrategyOption = Annotated[
    StrategyType | None,
    typer.Option("--strategy", "-s", help="Classification strategy"),
]
ThresholdOption = Annotated[
    float | None,
    typer.Option(
        "--threshold",
        help="Landscape longest-side threshold for the strict_tablet strategy",
    ),
]
WatchMaxOption = Annotated[
    float | None, typer.Option("--watch-max", help="Upper bound of the watch category")
]
MobileMaxOption = Annotated[
    float | None, typer.Option("--mobile-max", help="Upper bound of the mobile category")
]
TabletMaxOption = Annotated[
    float | None, typer.Option("--tablet-max", help="Upper bound of the tablet category")
]
FormatOption = Annotated[
    OutputFormat, typer.Option("--format", "-f", help="Output format")
]


def _build_breakpoints(
    config_file: Path | None,
    preset: BreakpointPresetName | None,
    strategy: StrategyType | None,
    threshold: float | None,
    watch_max: float | None,
    mobile_max: float | None,
    tablet_max: float | None,
) -> BreakpointConfiguration:
    """Combine a config file (if any) with CLI overrides.

    Exits with code 1 on any configuration problem.
    """
    try:
        config = load_config(config_file) if config_file else BreakpointsConfigFile()
        merged = merge_config_with_cli(
            config,
            preset=preset.value if preset else None,
            watch_max=watch_max,
            mobile_max=mobile_max,
            tablet_max=tablet_max,
            strategy=strategy.value if strategy else None,
            landscape_longest_side_threshold=threshold,
        )
        return config_to_breakpoints(merged)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except PydanticValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"]) or "(root)"
            typer.echo(f"Error: {location}: {err['msg']}", err=True)
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _describe(device_type: DeviceType) -> dict[str, Any]:
    return {
        **device_type.to_dict(),
        "is_compact": device_type.is_compact,
        "is_expanded": device_type.is_expanded,
        "supports_hover": device_type.supports_hover,
        "prefers_touch_input": device_type.prefers_touch_input,
    }


def _echo_result(
    label: str,
    device_type: DeviceType,
    output_format: OutputFormat,
    extra: dict[str, Any],
) -> None:
    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps({**extra, "device": _describe(device_type)}, indent=2))
        return

    line = f"{label} -> {device_type.name}"
    tier = device_type.to_dict()["tablet_size"]
    if tier is not None:
        line += f" ({tier})"
    typer.echo(line)


@app.command()
def classify(
    width: Annotated[float, typer.Argument(help="Viewport width")],
    height: Annotated[float, typer.Argument(help="Viewport height")],
    config_file: ConfigOption = None,
    preset: PresetOption = None,
    strategy: StrategyOption = None,
    threshold: ThresholdOption = None,
    watch_max: WatchMaxOption = None,
    mobile_max: MobileMaxOption = None,
    tablet_max: TabletMaxOption = None,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Classify a viewport of WIDTH x HEIGHT.

    Example:
        device-breakpoints classify 1400 800 --strategy strict_tablet
    """
    breakpoints = _build_breakpoints(
        config_file, preset, strategy, threshold, watch_max, mobile_max, tablet_max
    )
    measurement = Measurement(width=width, height=height)
    device_type = breakpoints.classify(measurement)
    _echo_result(
        f"{width:g} x {height:g}",
        device_type,
        output_format,
        {
            "width": width,
            "height": height,
            "shortest_side": measurement.shortest_side,
            "is_landscape": measurement.is_landscape,
        },
    )


@app.command(name="classify-width")
def classify_width(
    width: Annotated[float, typer.Argument(help="Known viewport width")],
    config_file: ConfigOption = None,
    preset: PresetOption = None,
    strategy: StrategyOption = None,
    threshold: ThresholdOption = None,
    watch_max: WatchMaxOption = None,
    mobile_max: MobileMaxOption = None,
    tablet_max: TabletMaxOption = None,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Classify when only the WIDTH is known.

    The width is treated as the shortest side.

    Example:
        device-breakpoints classify-width 399 --mobile-max 400
    """
    breakpoints = _build_breakpoints(
        config_file, preset, strategy, threshold, watch_max, mobile_max, tablet_max
    )
    device_type = breakpoints.classify_from_width(width)
    _echo_result(f"width {width:g}", device_type, output_format, {"width": width})


if __name__ == "__main__":
    app()
