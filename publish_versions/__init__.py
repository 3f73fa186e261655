"""
Publish Versions

Resolves the version to publish for deprecated typings packages when an
earlier publish attempt may have partially failed.
"""

__version__ = "0.1.0"

from .cli import main
from .resolver import find_actual_latest, resolve_publish_conflict
from .semver import Semver, SemverParseError, compare

__all__ = [
    "main",
    "Semver",
    "SemverParseError",
    "compare",
    "find_actual_latest",
    "resolve_publish_conflict",
]
