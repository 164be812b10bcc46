"""
Asset Downloader
Downloads content-addressed objects listed in an asset index
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests

from mcasset import constants, utils
from mcasset.models import AssetIndex, AssetObject


class DownloadError(Exception):
    """Exception raised when a downloaded object fails verification."""
    pass


@dataclass
class DownloadResult:
    """
    Counts from a bulk download.

    Attributes:
        downloaded: Objects written successfully
        failed: Objects whose download or write failed
        skipped: Objects skipped because their directory could not be created
    """
    downloaded: int = 0
    failed: int = 0
    skipped: int = 0


class AssetDownloader:
    """
    Sequential downloader for asset index objects.

    Each object is fetched from ``<resources_url>/<hash[:2]>/<hash>`` and
    written to ``<output_dir>/assets/<logical path>``. A failing object is
    logged and counted; it never stops the batch.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 resources_url: str = constants.RESOURCES_URL,
                 verify_hash: bool = False,
                 timeout: Optional[float] = constants.DEFAULT_TIMEOUT):
        """
        Initialize the asset downloader.

        Args:
            session: Requests session to use (one is created if not provided)
            resources_url: Base URL of the object store
            verify_hash: Check each written file against its declared hash
            timeout: Request timeout in seconds (None blocks indefinitely)
        """
        self.session = session or utils.create_session()
        self.resources_url = resources_url
        self.verify_hash = verify_hash
        self.timeout = timeout
        self.logger = logging.getLogger("mcasset.downloader")

    def download_all(self, index: AssetIndex, output_dir: str) -> DownloadResult:
        """
        Download every object in the index.

        Args:
            index: Parsed asset index
            output_dir: Base directory; objects land under its assets/ folder

        Returns:
            DownloadResult with downloaded, failed and skipped counts
        """
        self.logger.info(
            f"Downloading {len(index)} assets ({index.total_size:,} bytes) from launcher meta"
        )

        result = DownloadResult()
        assets_dir = os.path.join(output_dir, constants.ASSETS_DIR)

        for path, obj in index.items():
            self.logger.info(f"Downloading {path} from launcher meta")

            target_path = os.path.join(assets_dir, path)
            if os.path.exists(target_path):
                self.logger.info(f"Overwriting {target_path}")

            parent_dir = os.path.dirname(target_path)
            try:
                utils.ensure_directory(parent_dir)
            except OSError as e:
                self.logger.error(
                    f"Failed to create directory {parent_dir}: {type(e).__name__}: {e}"
                )
                result.skipped += 1
                continue

            url = self.resources_url
            try:
                url = utils.object_url(self.resources_url, obj.hash)
                self.download_object(obj, url, target_path)
            except Exception as e:
                self.logger.error(
                    f"Failed to download {path} from {url}: {type(e).__name__}: {e}"
                )
                result.failed += 1
                continue

            result.downloaded += 1

        return result

    def download_object(self, obj: AssetObject, url: str, target_path: str) -> int:
        """
        Stream a single object to target_path.

        Returns:
            Number of bytes written

        Raises:
            requests.RequestException: On connection failure or bad status
            OSError: If the target cannot be written
            DownloadError: If hash verification is enabled and fails
        """
        with utils.open_stream(self.session, url, self.timeout) as response:
            written = utils.copy_stream(response.raw, open(target_path, "wb"))

        self.logger.debug(f"Wrote {target_path} ({written:,} bytes)")

        if self.verify_hash:
            actual_hash = utils.calculate_hash(target_path)
            if actual_hash.lower() != obj.hash.lower():
                self.logger.error(f"Hash mismatch! Expected: {obj.hash}, Got: {actual_hash}")
                os.remove(target_path)
                raise DownloadError(f"Hash verification failed for {target_path}")

        return written
