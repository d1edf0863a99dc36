"""Strategy selection for device classification.

Factory:
    - ClassificationStrategyFactory: Creates a strategy from its name

Example:
    ```python
    from device_breakpoints.application.strategies import (
        ClassificationStrategyFactory,
    )

    strategy = ClassificationStrategyFactory.create_strategy("strict_tablet")
    ```
"""

from .factory import ClassificationStrategyFactory

__all__ = [
    "ClassificationStrategyFactory",
]
