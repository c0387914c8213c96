"""Test helper utilities for updater tests."""

from .package_managers import EqualityOnlyVersion, StaticPackageManager

__all__ = ["EqualityOnlyVersion", "StaticPackageManager"]
