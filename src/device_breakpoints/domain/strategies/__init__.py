"""Classification strategies.

Available Strategies:
    - StandardStrategy: Shortest-side thresholds, orientation independent
    - StrictTabletStrategy: Landscape windows with a long side become large screens

Protocol:
    - ClassificationStrategy: Protocol defining the strategy interface (from contracts)
"""

from .base import ClassificationStrategy, classify_dimension
from .standard import StandardStrategy
from .strict_tablet import (
    DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD,
    StrictTabletStrategy,
)

__all__ = [
    # Protocol and helpers
    "ClassificationStrategy",
    "classify_dimension",
    # Strategies
    "DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD",
    "StandardStrategy",
    "StrictTabletStrategy",
]
