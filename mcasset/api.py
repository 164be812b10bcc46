"""
Launcher Meta API Client
Resolves version labels and fetches version info, client archives and asset indexes
"""

import logging
from typing import Optional, Tuple

import requests

from mcasset import constants, utils
from mcasset.models import AssetIndex, VersionInfo, VersionManifest


class MetaError(Exception):
    """Exception raised when launcher meta cannot be fetched or resolved."""
    pass


# Anything a malformed or unreachable document can raise
_FETCH_ERRORS = (requests.RequestException, ValueError, KeyError, TypeError, AttributeError)


class MetaAPI:
    """
    Client for the launcher meta service.

    Provides methods to:
    - Resolve a version label to its version info URL
    - Fetch version info documents
    - Download the client archive
    - Fetch asset indexes

    Every failure is fatal for the run and surfaces as MetaError.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 manifest_url: str = constants.VERSION_MANIFEST_URL,
                 timeout: Optional[float] = constants.DEFAULT_TIMEOUT):
        """
        Initialize the launcher meta client.

        Args:
            session: Requests session to use (one is created if not provided)
            manifest_url: URL of the global version manifest
            timeout: Request timeout in seconds (None blocks indefinitely)
        """
        self.session = session or utils.create_session()
        self.manifest_url = manifest_url
        self.timeout = timeout
        self.logger = logging.getLogger("mcasset.api")

    def get_version_manifest(self) -> VersionManifest:
        """Fetch and parse the global version manifest."""
        try:
            data = utils.get_json(self.session, self.manifest_url, self.timeout)
            return VersionManifest.from_json(data)
        except _FETCH_ERRORS as e:
            self.logger.debug(f"Version manifest fetch failed: {type(e).__name__}: {e}")
            raise MetaError("Failed to download version manifest") from e

    def resolve_version_url(self, label: str) -> Tuple[str, str]:
        """
        Resolve a version label to its version info URL.

        Args:
            label: Version id, "latest" or "latest-snapshot"

        Returns:
            Tuple of (resolved version id, version info URL)

        Raises:
            MetaError: If the manifest cannot be fetched or no version matches
        """
        manifest = self.get_version_manifest()
        version_id = manifest.resolve_label(label)

        self.logger.info(f"Downloading assets for version {version_id}")

        summary = manifest.find(version_id)
        if summary is None:
            raise MetaError(f"Failed to find version info url for version {version_id}")

        return version_id, summary.url

    def get_version_info(self, url: str) -> VersionInfo:
        """Fetch and parse a version info document."""
        try:
            data = utils.get_json(self.session, url, self.timeout)
            return VersionInfo.from_json(data)
        except _FETCH_ERRORS as e:
            self.logger.debug(f"Version info fetch failed: {type(e).__name__}: {e}")
            raise MetaError("Failed to download version info") from e

    def download_client(self, info: VersionInfo) -> bytes:
        """Download the client archive into memory."""
        self.logger.info(f"Downloading client JAR from {info.client_url}")
        try:
            data = utils.download_bytes(self.session, info.client_url, self.timeout)
        except requests.RequestException as e:
            self.logger.debug(f"Client download failed: {type(e).__name__}: {e}")
            raise MetaError("Failed to download client JAR") from e

        self.logger.debug(f"Downloaded client JAR ({len(data):,} bytes)")
        return data

    def get_asset_index(self, info: VersionInfo) -> AssetIndex:
        """Fetch and parse the asset index referenced by a version info."""
        try:
            data = utils.get_json(self.session, info.asset_index_url, self.timeout)
            return AssetIndex.from_json(data)
        except _FETCH_ERRORS as e:
            self.logger.debug(f"Asset index fetch failed: {type(e).__name__}: {e}")
            raise MetaError("Failed to download asset index") from e
