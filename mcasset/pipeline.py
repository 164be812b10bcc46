"""
Asset extraction pipeline
Runs resolution, JAR extraction and asset index download in sequence
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from mcasset.api import MetaAPI
from mcasset.downloader import AssetDownloader, DownloadResult
from mcasset.extractor import ArchiveExtractor, ExtractionResult


@dataclass
class Summary:
    """Outcome of a full pipeline run."""
    version: str
    extraction: ExtractionResult = field(default_factory=ExtractionResult)
    download: DownloadResult = field(default_factory=DownloadResult)

    def lines(self) -> List[str]:
        return [
            "Summary:",
            f"Extracted {self.extraction.extracted} assets from JAR "
            f"({self.extraction.failed} failed)",
            f"Downloaded {self.download.downloaded} assets from launcher meta "
            f"({self.download.failed} failed, {self.download.skipped} skipped)",
        ]


class AssetPipeline:
    """
    Fetches a client version and materializes its assets.

    Steps run strictly in order; a MetaError or ExtractionError from any step
    ends the run and leaves whatever was already written in place.
    """

    def __init__(self, api: Optional[MetaAPI] = None,
                 extractor: Optional[ArchiveExtractor] = None,
                 downloader: Optional[AssetDownloader] = None):
        self.api = api or MetaAPI()
        self.extractor = extractor or ArchiveExtractor()
        self.downloader = downloader or AssetDownloader(session=self.api.session)
        self.logger = logging.getLogger("mcasset.pipeline")

    def run(self, version: str, output_dir: str) -> Summary:
        """
        Run the whole pipeline.

        Args:
            version: Version id, "latest" or "latest-snapshot"
            output_dir: Directory to populate

        Returns:
            Summary of both phases
        """
        version_id, info_url = self.api.resolve_version_url(version)
        info = self.api.get_version_info(info_url)

        client_data = self.api.download_client(info)
        extraction = self.extractor.extract(client_data, output_dir)
        self.logger.info(
            f"Extracted {extraction.extracted} entries from JAR ({extraction.failed} failed)"
        )

        index = self.api.get_asset_index(info)
        download = self.downloader.download_all(index, output_dir)

        return Summary(version=version_id, extraction=extraction, download=download)
