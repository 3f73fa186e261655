"""
In-memory registry of known typings and not-needed packages.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .interfaces import PackageLookup
from .models import NotNeededPackage, PackageId, TypingsData


logger = logging.getLogger(__name__)

TYPES_DATA_FILENAME = "typesData.json"
NOT_NEEDED_PACKAGES_FILENAME = "notNeededPackages.json"


class PackageNotFoundError(LookupError):
    """Raised when an expected package id is not known."""


class AllPackages(PackageLookup):
    """Read-only lookup over all known packages."""

    def __init__(
        self,
        typings: Iterable[TypingsData],
        not_needed: Iterable[NotNeededPackage],
    ) -> None:
        self._typings: Dict[Tuple[str, int], TypingsData] = {}
        for data in typings:
            key = (data.name, data.major)
            current = self._typings.get(key)
            # Each major line resolves to its highest minor.
            if current is None or data.minor > current.minor:
                self._typings[key] = data
        self._not_needed: Dict[str, NotNeededPackage] = {pkg.name: pkg for pkg in not_needed}

    @classmethod
    def read(cls, data_dir: Path) -> "AllPackages":
        """Load packages from the data files in ``data_dir``.

        Args:
            data_dir: Directory containing typesData.json and notNeededPackages.json

        Returns:
            Populated AllPackages
        """
        data_dir = Path(data_dir)
        with open(data_dir / TYPES_DATA_FILENAME, encoding="utf-8") as f:
            types_data = json.load(f)
        with open(data_dir / NOT_NEEDED_PACKAGES_FILENAME, encoding="utf-8") as f:
            not_needed_data = json.load(f)

        typings = []
        for name, versions in types_data.items():
            for version_key, version_data in versions.items():
                major, _, minor = version_key.partition(".")
                typings.append(TypingsData(
                    name=name,
                    library_name=version_data.get("libraryName", name),
                    major=int(version_data.get("libraryMajorVersion", major)),
                    minor=int(version_data.get("libraryMinorVersion", minor or 0)),
                ))
        not_needed = [NotNeededPackage.from_json(raw) for raw in not_needed_data.get("packages", [])]

        logger.info(
            "Loaded %d typings and %d not-needed packages from %s",
            len(typings), len(not_needed), data_dir,
        )
        return cls(typings, not_needed)

    def get_typings_data(self, package_id: PackageId) -> TypingsData:
        try:
            return self._typings[(package_id.name, package_id.major_version)]
        except KeyError:
            raise PackageNotFoundError(
                f"No typings found for {package_id.name} v{package_id.major_version}"
            ) from None

    def get_not_needed_package(self, name: str) -> Optional[NotNeededPackage]:
        return self._not_needed.get(name)

    def all_not_needed(self) -> Iterator[NotNeededPackage]:
        return iter(self._not_needed.values())
