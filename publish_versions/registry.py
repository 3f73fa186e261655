"""
Cached client for npm registry documents.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from .interfaces import RegistryInfoCache
from .models import RegistryInfo


logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
REQUEST_TIMEOUT = 30


class CachedRegistryInfoClient(RegistryInfoCache):
    """Fetch registry documents and keep them in memory by escaped name."""

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.registry_url = registry_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self._cache: Dict[str, RegistryInfo] = {}

    def get_info_from_cache(self, escaped_name: str) -> Optional[RegistryInfo]:
        info = self._cache.get(escaped_name)
        if info is not None:
            logger.debug("Cache hit: registry info %s", escaped_name)
        return info

    def fetch_and_cache_info(self, escaped_name: str) -> Optional[RegistryInfo]:
        """Fetch the registry document for ``escaped_name`` and cache it.

        Args:
            escaped_name: Registry path form of the package name

        Returns:
            The parsed registry info, or None if the package does not exist
        """
        url = f"{self.registry_url}/{escaped_name}"
        logger.info("Fetching registry info for %s", escaped_name)
        with self.session.get(url, timeout=REQUEST_TIMEOUT) as response:
            if response.status_code == 404:
                logger.info("Package %s not found in registry", escaped_name)
                return None
            response.raise_for_status()
            data = response.json()
        info = RegistryInfo.from_json(data)
        self._cache[escaped_name] = info
        return info
