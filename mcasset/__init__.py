"""
mcasset - Download game assets from launcher meta

Resolves a version through the version manifest, extracts the assets/ tree
from the client JAR and downloads every object in the version's asset index
from the content-addressed resource store.
"""

__version__ = "0.1.0"
__author__ = "mcasset Contributors"
__license__ = "MIT"

from mcasset.api import MetaAPI, MetaError
from mcasset.downloader import AssetDownloader, DownloadError, DownloadResult
from mcasset.extractor import ArchiveExtractor, ExtractionError, ExtractionResult, FailurePolicy
from mcasset.models import AssetIndex, AssetObject, VersionInfo, VersionManifest, VersionSummary
from mcasset.pipeline import AssetPipeline, Summary

__all__ = [
    "MetaAPI",
    "MetaError",
    "AssetDownloader",
    "DownloadError",
    "DownloadResult",
    "ArchiveExtractor",
    "ExtractionError",
    "ExtractionResult",
    "FailurePolicy",
    "AssetIndex",
    "AssetObject",
    "VersionInfo",
    "VersionManifest",
    "VersionSummary",
    "AssetPipeline",
    "Summary",
]
