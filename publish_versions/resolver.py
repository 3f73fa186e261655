"""
Resolve the version to deprecate a not-needed package at after failed publishes.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Iterable, List, Mapping, Optional, Tuple, TypeVar

from .interfaces import RegistryInfoCache
from .models import ChangedPackages, NotNeededPackage, PublishResolution
from .semver import Semver
from .time_utils import is_later


logger = logging.getLogger(__name__)

SENTINEL_TIME_KEYS = frozenset({"modified", "created"})

T = TypeVar("T")


class ActualLatestNotFoundError(RuntimeError):
    """Raised when registry time data has no eligible version entry."""


class RegistryInfoNotCachedError(LookupError):
    """Raised when registry info was expected in the cache but is missing."""


def best(items: Iterable[T], is_better_than: Callable[[T, T], bool]) -> Optional[T]:
    """Fold ``items`` down to one, replacing the running best when a candidate is better."""
    result: Optional[T] = None
    first = True
    for item in items:
        if first:
            result = item
            first = False
        elif is_better_than(item, result):
            result = item
    return result


def _is_later_entry(candidate: Tuple[str, str], current: Tuple[str, str]) -> bool:
    key, timestamp = candidate
    best_key, best_timestamp = current
    if best_key in SENTINEL_TIME_KEYS:
        return True
    if key in SENTINEL_TIME_KEYS:
        return False
    return is_later(timestamp, best_timestamp)


def find_actual_latest(times: Mapping[str, str]) -> str:
    """Return the version key in ``times`` with the most recent timestamp.

    A failed deprecation publish still leaves an entry in the registry's
    'time' property, so its keys give the actual 'latest'. The
    'modified' and 'created' entries are never chosen.
    """
    actual = best(times.items(), _is_later_entry)
    if actual is None or actual[0] in SENTINEL_TIME_KEYS:
        raise ActualLatestNotFoundError("failed to find actual latest")
    return actual[0]


def resolve_publish_conflict(
    pkg: NotNeededPackage,
    client: RegistryInfoCache,
    log: Callable[[str], None] = logger.info,
) -> NotNeededPackage:
    """Return the package to deprecate, bumped past any failed publish.

    If the actual latest in the registry is not below the expected deprecated
    version, or that version was published without being deprecated, try again
    one patch above the actual latest.

    The registry info must already be cached; nothing is fetched here.
    """
    info = client.get_info_from_cache(pkg.full_escaped_npm_name)
    if info is None:
        raise RegistryInfoNotCachedError(f"Registry info for {pkg.full_escaped_npm_name} is not cached")

    not_needed = pkg.version
    latest = Semver.parse(find_actual_latest(info.time))
    published = info.versions.get(not_needed.version_string)
    if (
        latest.equals(not_needed)
        or latest.greater_than(not_needed)
        or (published is not None and not published.deprecated)
    ):
        plus_one = Semver(latest.major, latest.minor, latest.patch + 1)
        log(f"Deprecation of {not_needed.version_string} failed, instead using {plus_one.version_string}.")
        return dataclasses.replace(pkg, as_of_version=plus_one.version_string)
    return pkg


def resolve_not_needed_packages(
    changed: ChangedPackages,
    client: RegistryInfoCache,
    log: Callable[[str], None] = logger.info,
) -> List[Tuple[NotNeededPackage, PublishResolution]]:
    """Resolve every changed not-needed package, in input order."""
    resolved = []
    for pkg in changed.changed_not_needed_packages:
        target = resolve_publish_conflict(pkg, client, log)
        resolved.append((target, PublishResolution(
            name=pkg.name,
            intended_version=pkg.as_of_version,
            resolved_version=target.as_of_version,
            retried=target is not pkg,
        )))
    return resolved
