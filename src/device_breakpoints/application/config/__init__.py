"""Configuration loading and validation for breakpoint files.

This package provides JSON-based configuration loading for breakpoint
configurations. It includes Pydantic models for schema validation, a
loader with error reporting, an adapter to domain objects and advisory
checks.

Public API:
    - BreakpointsConfigFile: Root configuration model
    - TabletTiersConfig: Tablet tier overrides
    - StrategyConfig: Strategy selection
    - load_config: Load a configuration model from a JSON file
    - load_config_from_dict: Validate a configuration dictionary
    - load_breakpoints: Load a file straight into a BreakpointConfiguration
    - ConfigError: Exception for configuration loading errors
    - config_to_breakpoints: Convert a configuration model to domain objects
    - merge_config_with_cli: Apply CLI overrides to a configuration model
    - validate_config: Ordering errors and advisory warnings

Example:
    >>> from pathlib import Path
    >>> from device_breakpoints.application.config import load_breakpoints, ConfigError
    >>>
    >>> try:
    ...     breakpoints = load_breakpoints(Path("breakpoints.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from device_breakpoints.application.config.adapter import (
    ResolvedThresholds,
    config_to_breakpoints,
    config_to_strategy,
    resolve_thresholds,
)
from device_breakpoints.application.config.loader import (
    ConfigError,
    load_breakpoints,
    load_config,
    load_config_from_dict,
)
from device_breakpoints.application.config.merger import merge_config_with_cli
from device_breakpoints.application.config.schema import (
    SUPPORTED_VERSIONS,
    BreakpointPresetName,
    BreakpointsConfigFile,
    StrategyConfig,
    StrategyType,
    TabletTierPresetName,
    TabletTiersConfig,
)
from device_breakpoints.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "BreakpointPresetName",
    "BreakpointsConfigFile",
    "StrategyConfig",
    "StrategyType",
    "TabletTierPresetName",
    "TabletTiersConfig",
    # Loading
    "ConfigError",
    "load_breakpoints",
    "load_config",
    "load_config_from_dict",
    # Conversion
    "ResolvedThresholds",
    "config_to_breakpoints",
    "config_to_strategy",
    "resolve_thresholds",
    "merge_config_with_cli",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
