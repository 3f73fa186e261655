"""
Three-part version numbers as published to npm.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional


_SEMVER_PATTERN = re.compile(r"(\d+)(\.(\d+))?(\.(\d+))?", re.ASCII)


class SemverParseError(ValueError):
    """Raised when a version string is not a valid semver."""


@dataclass(frozen=True)
class Semver:
    """Version of a package published to npm."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for component in (self.major, self.minor, self.patch):
            if isinstance(component, bool) or not isinstance(component, int) or component < 0:
                raise ValueError(f"Semver components must be non-negative integers, got {component!r}")

    @classmethod
    def parse(cls, semver: str, coerce: bool = False) -> "Semver":
        result = cls.try_parse(semver, coerce)
        if result is None:
            raise SemverParseError(f"Unexpected semver: {semver}")
        return result

    @classmethod
    def try_parse(cls, semver: str, coerce: bool = False) -> Optional["Semver"]:
        """Parse a version string, returning None when it is not valid.

        A normal version number takes the form X.Y.Z where X, Y and Z are
        non-negative integers. With ``coerce`` the components after the major
        version may be omitted, so ``1`` equals ``1.0`` and ``1.0.0``.

        This must accept the output of ``version_string``.
        """
        match = _SEMVER_PATTERN.fullmatch(semver)
        if not match:
            return None
        major, minor, patch = match.group(1), match.group(3), match.group(5)
        if (minor is not None and patch is not None) or coerce:
            return cls(int(major), int(minor or "0"), int(patch or "0"))
        return None

    @classmethod
    def from_raw(cls, raw: Any) -> "Semver":
        if isinstance(raw, Mapping):
            return cls(raw["major"], raw["minor"], raw["patch"])
        return cls(raw.major, raw.minor, raw.patch)

    @property
    def version_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def equals(self, other: "Semver") -> bool:
        return compare(self, other) == 0

    def greater_than(self, other: "Semver") -> bool:
        return compare(self, other) == 1

    def __lt__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return compare(self, other) == -1

    def __le__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return compare(self, other) == 1

    def __ge__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        return self.version_string


def compare(x: Semver, y: Semver) -> int:
    """Return 0 if equal, 1 if x > y, -1 if x < y."""
    for component_x, component_y in ((x.major, y.major), (x.minor, y.minor), (x.patch, y.patch)):
        if component_x > component_y:
            return 1
        if component_x < component_y:
            return -1
    return 0
