"""Pydantic models for breakpoint configuration files.

Every field is optional. A file starts from a named preset and then
overrides individual thresholds, so the smallest valid file is ``{}``.

Example:
    ```json
    {
      "schema_version": "1.0",
      "preset": "material",
      "mobile_max": 640,
      "tablet_tiers": {"preset": "wide"},
      "strategy": {"type": "strict_tablet", "landscape_longest_side_threshold": 1280}
    }
    ```

The schema only checks shapes and signs. Ordering between thresholds is
a domain invariant and is reported by ``validate_config``.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with presets, thresholds, tiers and strategy
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BreakpointPresetName(str, Enum):
    """Named starting points for a configuration.

    Attributes:
        DEFAULT: 300 / 600 / 1024 with the default tablet tiers.
        MATERIAL: 300 / 600 / 840 with the compact tablet tiers.
    """

    DEFAULT = "default"
    MATERIAL = "material"


class TabletTierPresetName(str, Enum):
    """Named tablet tier thresholds (small / medium upper bounds)."""

    DEFAULTS = "defaults"
    COMPACT = "compact"
    WIDE = "wide"


class StrategyType(str, Enum):
    """Classification strategy selector.

    Attributes:
        STANDARD: Orientation-independent shortest-side classification.
        STRICT_TABLET: Wide landscape windows become large screens.
    """

    STANDARD = "standard"
    STRICT_TABLET = "strict_tablet"


class TabletTiersConfig(BaseModel):
    """Tablet tier thresholds.

    Attributes:
        preset: Tier preset to start from (defaults to the preset of the
            enclosing configuration).
        small_max: Upper bound of the small tier.
        medium_max: Upper bound of the medium tier.
    """

    model_config = ConfigDict(extra="forbid")

    preset: TabletTierPresetName | None = None
    small_max: float | None = Field(default=None, gt=0)
    medium_max: float | None = Field(default=None, gt=0)


class StrategyConfig(BaseModel):
    """Strategy selection.

    Attributes:
        type: Strategy name.
        landscape_longest_side_threshold: Only for ``strict_tablet``.
    """

    model_config = ConfigDict(extra="forbid")

    type: StrategyType = StrategyType.STANDARD
    landscape_longest_side_threshold: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_threshold_usage(self) -> "StrategyConfig":
        if (
            self.landscape_longest_side_threshold is not None
            and self.type != StrategyType.STRICT_TABLET
        ):
            raise ValueError(
                "landscape_longest_side_threshold requires strategy type 'strict_tablet'"
            )
        return self


class BreakpointsConfigFile(BaseModel):
    """Root model of a breakpoint configuration file.

    Attributes:
        schema_version: Configuration schema version.
        preset: Preset providing every value that is not set explicitly.
        watch_max: Upper bound of the watch category.
        mobile_max: Upper bound of the mobile category.
        tablet_max: Upper bound of the tablet category.
        tablet_tiers: Tablet tier overrides.
        strategy: Classification strategy.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    preset: BreakpointPresetName = BreakpointPresetName.DEFAULT
    watch_max: float | None = Field(default=None, gt=0)
    mobile_max: float | None = Field(default=None, gt=0)
    tablet_max: float | None = Field(default=None, gt=0)
    tablet_tiers: TabletTiersConfig | None = None
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
