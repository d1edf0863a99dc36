"""Conversion from configuration file models to domain objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from device_breakpoints.application.strategies import ClassificationStrategyFactory
from device_breakpoints.domain.breakpoints import (
    BREAKPOINT_PRESETS,
    BreakpointConfiguration,
)
from device_breakpoints.domain.value_objects import (
    TABLET_TIER_PRESETS,
    TabletSizeThresholds,
)

if TYPE_CHECKING:
    from device_breakpoints.application.config.schema import BreakpointsConfigFile
    from device_breakpoints.contracts.strategies import ClassificationStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedThresholds:
    """Effective numbers of a configuration once presets are applied.

    Nothing here is validated yet, so the validator can report every
    problem with its own path before any domain object is built.
    """

    watch_max: float
    mobile_max: float
    tablet_max: float
    small_max: float
    medium_max: float


def resolve_thresholds(config: "BreakpointsConfigFile") -> ResolvedThresholds:
    """Merge a configuration's explicit values over its presets."""
    base = BREAKPOINT_PRESETS[config.preset.value]()
    tiers = base.tablet_tiers
    small_max = tiers.small_max
    medium_max = tiers.medium_max

    if config.tablet_tiers is not None:
        if config.tablet_tiers.preset is not None:
            preset_tiers = TABLET_TIER_PRESETS[config.tablet_tiers.preset.value]()
            small_max = preset_tiers.small_max
            medium_max = preset_tiers.medium_max
        if config.tablet_tiers.small_max is not None:
            small_max = config.tablet_tiers.small_max
        if config.tablet_tiers.medium_max is not None:
            medium_max = config.tablet_tiers.medium_max

    return ResolvedThresholds(
        watch_max=config.watch_max if config.watch_max is not None else base.watch_max,
        mobile_max=config.mobile_max if config.mobile_max is not None else base.mobile_max,
        tablet_max=config.tablet_max if config.tablet_max is not None else base.tablet_max,
        small_max=small_max,
        medium_max=medium_max,
    )


def config_to_strategy(config: "BreakpointsConfigFile") -> "ClassificationStrategy":
    """Build the strategy named by the configuration."""
    return ClassificationStrategyFactory.create_strategy(
        config.strategy.type.value,
        landscape_longest_side_threshold=config.strategy.landscape_longest_side_threshold,
    )


def config_to_breakpoints(config: "BreakpointsConfigFile") -> BreakpointConfiguration:
    """Convert a configuration file model to a ``BreakpointConfiguration``.

    Raises:
        ConfigurationError: If the effective thresholds violate the
            breakpoint invariants.
    """
    resolved = resolve_thresholds(config)
    breakpoints = BreakpointConfiguration(
        watch_max=resolved.watch_max,
        mobile_max=resolved.mobile_max,
        tablet_max=resolved.tablet_max,
        tablet_tiers=TabletSizeThresholds(
            small_max=resolved.small_max, medium_max=resolved.medium_max
        ),
        strategy=config_to_strategy(config),
    )
    logger.debug(f"Built breakpoints from config: {breakpoints.to_dict()}")
    return breakpoints
