"""
Load the packages with a pending publish from the versions diff file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .interfaces import PackageLookup
from .models import ChangedPackages, ChangedTyping, PackageId
from .packages import PackageNotFoundError


logger = logging.getLogger(__name__)

VERSIONS_FILENAME = "versions.json"


def read_changed_packages(all_packages: PackageLookup, data_dir: Path) -> ChangedPackages:
    """Build ChangedPackages from ``versions.json``.

    Every id in the file must resolve through ``all_packages``; an unknown id
    raises PackageNotFoundError instead of being skipped.
    """
    versions_file = Path(data_dir) / VERSIONS_FILENAME
    with open(versions_file, encoding="utf-8") as f:
        data = json.load(f)

    changed_typings = tuple(
        ChangedTyping(
            pkg=all_packages.get_typings_data(PackageId.from_json(entry["id"])),
            version=entry["version"],
            latest_version=entry.get("latestVersion"),
        )
        for entry in data.get("changedTypings", [])
    )

    changed_not_needed = []
    for name in data.get("changedNotNeededPackages", []):
        pkg = all_packages.get_not_needed_package(name)
        if pkg is None:
            raise PackageNotFoundError(f"No not-needed package named {name}")
        changed_not_needed.append(pkg)

    logger.info(
        "Read %d changed typings and %d changed not-needed packages from %s",
        len(changed_typings), len(changed_not_needed), versions_file,
    )
    return ChangedPackages(
        changed_typings=changed_typings,
        changed_not_needed_packages=tuple(changed_not_needed),
    )
