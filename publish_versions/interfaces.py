"""
Interfaces for package lookups and registry caches.
"""

from __future__ import annotations

from typing import Optional, Protocol

from .models import NotNeededPackage, PackageId, RegistryInfo, TypingsData


class PackageLookup(Protocol):
    """Read-only lookup of known packages by id."""

    def get_typings_data(self, package_id: PackageId) -> TypingsData:
        ...

    def get_not_needed_package(self, name: str) -> Optional[NotNeededPackage]:
        ...


class RegistryInfoCache(Protocol):
    """Registry documents already fetched, keyed by escaped package name."""

    def get_info_from_cache(self, escaped_name: str) -> Optional[RegistryInfo]:
        ...
