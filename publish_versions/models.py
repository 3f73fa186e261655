"""
Core data models for publish version resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from .semver import Semver


SCOPE = "types"


def full_npm_name(name: str) -> str:
    return f"@{SCOPE}/{name}"


def full_escaped_npm_name(name: str) -> str:
    """Registry path form of a scoped name, e.g. ``@types%2fjquery``."""
    return f"@{SCOPE}%2f{name}"


@dataclass(frozen=True)
class PackageId:
    """A typings package major line."""

    name: str
    major_version: int

    @classmethod
    def from_json(cls, data: Mapping) -> "PackageId":
        return cls(name=data["name"], major_version=int(data["majorVersion"]))


@dataclass(frozen=True)
class TypingsData:
    """A typings package version available for publishing."""

    name: str
    library_name: str
    major: int
    minor: int

    @property
    def id(self) -> PackageId:
        return PackageId(self.name, self.major)

    @property
    def full_npm_name(self) -> str:
        return full_npm_name(self.name)


@dataclass(frozen=True)
class NotNeededPackage:
    """A typings package deprecated because the library ships its own types."""

    name: str
    library_name: str
    source_repo_url: str
    as_of_version: str

    def __post_init__(self) -> None:
        # Fail at construction rather than on first use of ``version``.
        Semver.parse(self.as_of_version)

    @classmethod
    def from_json(cls, data: Mapping) -> "NotNeededPackage":
        return cls(
            name=data["typingsPackageName"],
            library_name=data["libraryName"],
            source_repo_url=data["sourceRepoURL"],
            as_of_version=data["asOfVersion"],
        )

    @property
    def version(self) -> Semver:
        return Semver.parse(self.as_of_version)

    @property
    def full_npm_name(self) -> str:
        return full_npm_name(self.name)

    @property
    def full_escaped_npm_name(self) -> str:
        return full_escaped_npm_name(self.name)

    def deprecated_message(self) -> str:
        return (
            f"This is a stub types definition. {self.library_name} "
            f"({self.source_repo_url}) provides its own type definitions, "
            "so you do not need this installed."
        )


@dataclass(frozen=True)
class ChangedTyping:
    """A typings package with a version pending publish."""

    pkg: TypingsData
    # The version to be published, i.e. one that does not exist yet.
    version: str
    # Set when publishing a non-latest version, which moves the 'latest' tag.
    latest_version: Optional[str] = None


@dataclass(frozen=True)
class ChangedPackages:
    """Packages with a pending publish, as listed by the versions diff file."""

    changed_typings: Tuple[ChangedTyping, ...] = ()
    changed_not_needed_packages: Tuple[NotNeededPackage, ...] = ()


@dataclass(frozen=True)
class RegistryVersionInfo:
    """Per-version metadata from a registry document."""

    deprecated: bool = False

    @classmethod
    def from_json(cls, data: Mapping) -> "RegistryVersionInfo":
        # npm stores the deprecation message; an empty string undeprecates.
        return cls(deprecated=bool(data.get("deprecated")))


@dataclass(frozen=True)
class RegistryInfo:
    """The parts of an npm registry document used for publish decisions."""

    time: Mapping[str, str] = field(default_factory=dict)
    versions: Mapping[str, RegistryVersionInfo] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping) -> "RegistryInfo":
        versions: Dict[str, RegistryVersionInfo] = {
            ver: RegistryVersionInfo.from_json(ver_data or {})
            for ver, ver_data in data.get("versions", {}).items()
        }
        return cls(
            time=dict(data.get("time", {})),
            versions=versions,
        )


@dataclass(frozen=True)
class PublishResolution:
    """Outcome of resolving the version to deprecate a package at."""

    name: str
    intended_version: str
    resolved_version: str
    # A retry can land on the intended version when the actual latest is one patch below it.
    retried: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "intended_version": self.intended_version,
            "resolved_version": self.resolved_version,
            "retried": self.retried,
        }
