"""Package manager descriptors consumed by the notice factory."""

from .base import PackageManager, PackageManagerBase, VersionLike, parse_version

__all__ = [
    "PackageManagerBase",
    "PackageManager",
    "VersionLike",
    "parse_version",
]
