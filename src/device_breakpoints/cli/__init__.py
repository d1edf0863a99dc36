"""Command line interface for device classification."""
