"""Deprecation notice handling for the dependency update pipeline."""

__version__ = "0.1.0"
