"""Domain exceptions."""


class ConfigurationError(ValueError):
    """Raised when breakpoint thresholds violate their invariants.

    Raised only while constructing a value object. Once an instance
    exists it is guaranteed to be internally consistent.
    """

    pass
