"""Validation structures and breakpoint advisory checks.

The schema only checks field shapes. This module checks the ordering
invariants between thresholds (errors) and flags settings that are valid
but almost certainly unintended (warnings), such as tablet tiers that no
viewport can ever reach.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from device_breakpoints.application.config.adapter import (
    ResolvedThresholds,
    config_to_breakpoints,
    resolve_thresholds,
)
from device_breakpoints.application.config.schema import (
    BreakpointsConfigFile,
    StrategyType,
)
from device_breakpoints.domain.exceptions import ConfigurationError
from device_breakpoints.domain.strategies import (
    DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the invalid field (e.g., "tablet_tiers.small_max")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_threshold_order(resolved: ResolvedThresholds) -> ValidationResult:
    """Report violations of the ascending threshold invariants."""
    result = ValidationResult()
    if resolved.watch_max >= resolved.mobile_max:
        result.add_error(
            "watch_max",
            f"watch_max must be less than mobile_max ({resolved.mobile_max})",
            resolved.watch_max,
        )
    if resolved.mobile_max >= resolved.tablet_max:
        result.add_error(
            "mobile_max",
            f"mobile_max must be less than tablet_max ({resolved.tablet_max})",
            resolved.mobile_max,
        )
    if resolved.small_max >= resolved.medium_max:
        result.add_error(
            "tablet_tiers.small_max",
            f"small_max must be less than medium_max ({resolved.medium_max})",
            resolved.small_max,
        )
    return result


def check_tablet_tier_reach(resolved: ResolvedThresholds) -> ValidationResult:
    """Warn about tablet tiers outside the tablet range.

    Tablets span ``[mobile_max, tablet_max)``; a tier whose interval does
    not overlap that range is dead configuration. A ``medium_max`` equal to
    ``tablet_max`` is accepted: it caps tablets at the medium tier, which
    is how the material preset pairs with the compact tiers.
    """
    result = ValidationResult()
    if resolved.small_max <= resolved.mobile_max:
        result.add_warning(
            "tablet_tiers.small_max",
            f"Small tablets can never occur: small_max ({resolved.small_max}) "
            f"is not above mobile_max ({resolved.mobile_max})",
            suggestion="Raise small_max above mobile_max",
        )
    if (
        resolved.medium_max <= resolved.mobile_max
        or resolved.small_max >= resolved.tablet_max
    ):
        result.add_warning(
            "tablet_tiers.medium_max",
            "Medium tablets can never occur: the medium tier lies outside "
            f"[{resolved.mobile_max}, {resolved.tablet_max})",
        )
    if resolved.medium_max > resolved.tablet_max:
        result.add_warning(
            "tablet_tiers.medium_max",
            f"Large tablets can never occur: medium_max ({resolved.medium_max}) "
            f"is above tablet_max ({resolved.tablet_max})",
            suggestion="Lower medium_max to tablet_max or below",
        )
    return result


def check_strict_tablet_threshold(
    config: BreakpointsConfigFile, resolved: ResolvedThresholds
) -> ValidationResult:
    """Warn when the strict tablet override swallows every landscape tablet.

    The longest side is never shorter than the shortest side, so a
    threshold at or below ``mobile_max`` turns every landscape tablet into
    a large screen.
    """
    result = ValidationResult()
    if config.strategy.type != StrategyType.STRICT_TABLET:
        return result
    threshold = (
        config.strategy.landscape_longest_side_threshold
        or DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD
    )
    if threshold <= resolved.mobile_max:
        result.add_warning(
            "strategy.landscape_longest_side_threshold",
            f"Every landscape tablet will be classified as a large screen: "
            f"threshold ({threshold}) is not above mobile_max ({resolved.mobile_max})",
            suggestion="Use the standard strategy or raise the threshold",
        )
    return result


def validate_config(config: BreakpointsConfigFile) -> ValidationResult:
    """Perform full validation of a configuration file model.

    Args:
        config: A schema-valid configuration.

    Returns:
        ValidationResult with ordering errors and advisory warnings.
    """
    resolved = resolve_thresholds(config)
    result = check_threshold_order(resolved)
    if not result.is_valid:
        logger.debug(f"Threshold order check failed with {len(result.errors)} error(s)")
        return result

    result.merge(check_tablet_tier_reach(resolved))
    result.merge(check_strict_tablet_threshold(config, resolved))

    try:
        config_to_breakpoints(config)
    except ConfigurationError as e:
        result.add_error("(root)", str(e))

    logger.debug(
        f"Validated config: {len(result.errors)} error(s), "
        f"{len(result.warnings)} warning(s)"
    )
    return result
