"""Configuration merging for CLI override support.

Precedence is: CLI args > config file values > preset defaults. Only
arguments that are not None override the configuration.
"""

from __future__ import annotations

from device_breakpoints.application.config.schema import (
    BreakpointPresetName,
    BreakpointsConfigFile,
    StrategyConfig,
    StrategyType,
)


def merge_config_with_cli(
    config: BreakpointsConfigFile,
    *,
    preset: str | None = None,
    watch_max: float | None = None,
    mobile_max: float | None = None,
    tablet_max: float | None = None,
    strategy: str | None = None,
    landscape_longest_side_threshold: float | None = None,
) -> BreakpointsConfigFile:
    """Merge CLI arguments with configuration values.

    Changing the strategy type drops a threshold from the file unless a
    new one is passed, since only the strict tablet strategy accepts one.

    Returns:
        A new, re-validated configuration model.

    Example:
        >>> merged = merge_config_with_cli(BreakpointsConfigFile(), mobile_max=400)
        >>> merged.mobile_max
        400.0
    """
    data = config.model_dump(mode="json")

    if preset is not None:
        data["preset"] = BreakpointPresetName(preset).value
    for name, value in (
        ("watch_max", watch_max),
        ("mobile_max", mobile_max),
        ("tablet_max", tablet_max),
    ):
        if value is not None:
            data[name] = value

    strategy_data = dict(data.get("strategy") or StrategyConfig().model_dump(mode="json"))
    if strategy is not None:
        new_type = StrategyType(strategy).value
        if new_type != strategy_data.get("type"):
            strategy_data["landscape_longest_side_threshold"] = None
        strategy_data["type"] = new_type
    if landscape_longest_side_threshold is not None:
        strategy_data["landscape_longest_side_threshold"] = landscape_longest_side_threshold
    data["strategy"] = strategy_data

    return BreakpointsConfigFile.model_validate(data)
