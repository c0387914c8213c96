"""Package manager descriptors.

A descriptor reports which version of a package manager an update job
detected, along with the versions the ecosystem integration has deprecated
and the versions it still supports. Notices are derived from it.
"""

from abc import ABC, abstractmethod
from typing import Collection, FrozenSet, Iterable, Tuple, Union

from packaging.version import InvalidVersion, Version

VersionLike = Union[Version, str, int]


def parse_version(value: VersionLike) -> Version:
    """Coerce a version-like value to a packaging Version.

    Raises:
        ValueError: If the value is not a valid version
    """
    if isinstance(value, Version):
        return value

    try:
        return Version(str(value))
    except InvalidVersion as e:
        raise ValueError(f"Invalid package manager version: {value!r}") from e


class PackageManagerBase(ABC):
    """Interface every package manager descriptor implements.

    Versions only need to support equality and hashing. Upgrade targets
    are listed in the order supported_versions yields them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Ecosystem name, e.g. "bundler"."""

    @property
    @abstractmethod
    def version(self):
        """The version detected for this job."""

    @property
    @abstractmethod
    def deprecated_versions(self) -> Collection:
        """Versions that are still handled but will stop being supported."""

    @property
    @abstractmethod
    def supported_versions(self) -> Collection:
        """Versions users are recommended to upgrade to."""

    def is_deprecated(self) -> bool:
        """Whether the detected version is one of the deprecated versions."""
        return self.version in self.deprecated_versions


class PackageManager(PackageManagerBase):
    """Descriptor built from static values.

    Example:
        >>> bundler = PackageManager("bundler", "1", deprecated_versions=["1"],
        ...                          supported_versions=["2", "3"])
        >>> bundler.is_deprecated()
        True
    """

    def __init__(
        self,
        name: str,
        version: VersionLike,
        deprecated_versions: Iterable[VersionLike] = (),
        supported_versions: Iterable[VersionLike] = (),
    ) -> None:
        if not name or not name.strip():
            raise ValueError("Package manager name cannot be empty")

        self._name = name.strip()
        self._version = parse_version(version)
        self._deprecated_versions = frozenset(parse_version(v) for v in deprecated_versions)
        self._supported_versions = tuple(
            dict.fromkeys(parse_version(v) for v in supported_versions)
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> Version:
        return self._version

    @property
    def deprecated_versions(self) -> FrozenSet[Version]:
        return self._deprecated_versions

    @property
    def supported_versions(self) -> Tuple[Version, ...]:
        return self._supported_versions

    def __repr__(self) -> str:
        return f"PackageManager(name={self._name!r}, version='{self._version}')"
