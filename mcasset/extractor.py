"""
Client archive extraction
Extracts entries under the asset prefix from the client JAR
"""

import enum
import io
import logging
import os
import zipfile
import zlib
from dataclasses import dataclass

from mcasset import constants, utils


class ExtractionError(Exception):
    """Exception raised when the archive cannot be extracted."""
    pass


class FailurePolicy(enum.Enum):
    """What to do when copying a single archive entry fails."""
    ABORT = "abort"
    CONTINUE = "continue"


@dataclass
class ExtractionResult:
    """Counts of extracted and failed file entries."""
    extracted: int = 0
    failed: int = 0


class ArchiveExtractor:
    """
    Extracts asset entries from a zip archive held in memory.

    Entries are visited in archive order. Entries outside the prefix are
    skipped, entries that would resolve outside the output directory abort
    the extraction. Per-file copy failures follow the configured policy.
    """

    def __init__(self, prefix: str = constants.ASSET_PREFIX,
                 policy: FailurePolicy = FailurePolicy.CONTINUE):
        """
        Initialize the extractor.

        Args:
            prefix: Literal path prefix of entries to extract
            policy: ABORT raises on the first failed file copy,
                CONTINUE logs and counts it
        """
        self.prefix = prefix
        self.policy = policy
        self.logger = logging.getLogger("mcasset.extractor")

    def extract(self, data: bytes, output_dir: str) -> ExtractionResult:
        """
        Extract matching entries from archive bytes into output_dir.

        Args:
            data: Raw zip archive bytes
            output_dir: Base directory for extracted entries

        Returns:
            ExtractionResult with counts of extracted and failed files

        Raises:
            ExtractionError: If the archive is corrupt, an entry escapes
                output_dir, a directory cannot be created, or a copy fails
                under the ABORT policy
        """
        self.logger.info("Extracting assets from client JAR")

        try:
            archive = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            raise ExtractionError("Failed to unzip client JAR") from e

        result = ExtractionResult()
        with archive:
            for entry in archive.infolist():
                if not entry.filename.startswith(self.prefix):
                    continue

                dest_path = self._check_destination(output_dir, entry.filename)

                if entry.is_dir():
                    self._make_directory(dest_path)
                    continue

                self._make_directory(os.path.dirname(dest_path))

                self.logger.info(f"Extracting from JAR: {entry.filename}")
                # open() raises NotImplementedError for unsupported compression
                # and RuntimeError for encrypted entries
                try:
                    with archive.open(entry) as source, open(dest_path, "wb") as sink:
                        utils.copy_stream(source, sink)
                except (OSError, zipfile.BadZipFile, zlib.error, EOFError,
                        NotImplementedError, RuntimeError) as e:
                    if self.policy is FailurePolicy.ABORT:
                        raise ExtractionError(f"Failed to extract {entry.filename}") from e
                    self.logger.error(
                        f"Failed to extract {entry.filename}: {type(e).__name__}: {e}"
                    )
                    result.failed += 1
                    continue

                result.extracted += 1

        return result

    def _check_destination(self, output_dir: str, name: str) -> str:
        """Join name onto output_dir, refusing paths that escape it."""
        dest_path = os.path.join(output_dir, name)
        if not utils.is_within_directory(output_dir, dest_path):
            raise ExtractionError(f"Entry outside target: {name}")
        return dest_path

    def _make_directory(self, path: str) -> None:
        try:
            utils.ensure_directory(path)
        except OSError as e:
            raise ExtractionError(f"Failed to create directory {path}") from e
