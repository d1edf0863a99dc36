"""Protocols shared across the device classification layers."""

from device_breakpoints.contracts.strategies import ClassificationStrategy, SizeLike

__all__ = [
    "ClassificationStrategy",
    "SizeLike",
]
