"""
Utility functions for fetching and copying streams
"""

import hashlib
import os
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional

import requests

from mcasset import constants


def object_path(object_hash: str) -> str:
    """
    Convert an object hash to its path in the object store.

    The store shards objects by the first two hex characters of the hash:
    ab/abcdef123...

    Args:
        object_hash: Hex digest of the object

    Returns:
        Sharded path (e.g., "ab/abcdef123...")
    """
    if len(object_hash) < 2:
        raise ValueError(f"Object hash too short: {object_hash!r}")

    return f"{object_hash[0:2]}/{object_hash}"


def object_url(base_url: str, object_hash: str) -> str:
    """Build the download URL for a content-addressed object."""
    return f"{base_url.rstrip('/')}/{object_path(object_hash)}"


def create_session() -> requests.Session:
    """Create a requests session with the package User-Agent."""
    from mcasset import __version__

    session = requests.Session()
    session.headers.update({
        "User-Agent": constants.USER_AGENT.format(version=__version__)
    })
    return session


def open_stream(session: requests.Session, url: str,
                timeout: Optional[float] = constants.DEFAULT_TIMEOUT) -> requests.Response:
    """
    Open a readable byte stream for a URL.

    The caller owns the returned response and must close it (it works as a
    context manager). Redirects are whatever requests does by default.

    Args:
        session: Requests session to use
        url: URL to fetch
        timeout: Request timeout in seconds (None blocks indefinitely)

    Returns:
        Streamed response; read the body from ``response.raw``

    Raises:
        requests.RequestException: On connection errors or non-2xx status
    """
    response = session.get(url, stream=True, timeout=timeout)
    try:
        response.raise_for_status()
    except requests.HTTPError:
        response.close()
        raise

    # Let urllib3 undo any Content-Encoding while we read raw
    response.raw.decode_content = True
    return response


def copy_stream(source: BinaryIO, sink: BinaryIO, close_source: bool = False,
                chunk_size: int = constants.CHUNK_READ_SIZE) -> int:
    """
    Drain a readable stream into a writable sink.

    The sink is always closed, the source only when ``close_source`` is set.

    Args:
        source: Object with a ``read(size)`` method
        sink: Object with a ``write(data)`` method
        close_source: Whether to close the source when done
        chunk_size: Size of reads

    Returns:
        Number of bytes copied
    """
    copied = 0
    try:
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                break
            sink.write(chunk)
            copied += len(chunk)
    finally:
        try:
            if close_source:
                source.close()
        finally:
            sink.close()

    return copied


def get_json(session: requests.Session, url: str,
             timeout: Optional[float] = constants.DEFAULT_TIMEOUT) -> Dict[str, Any]:
    """
    Fetch JSON data from a URL.

    Raises:
        requests.RequestException: On transport failure
        ValueError: If the body is not valid JSON
    """
    response = session.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    try:
        response.raise_for_status()
        return response.json()
    finally:
        response.close()


def download_bytes(session: requests.Session, url: str,
                   timeout: Optional[float] = constants.DEFAULT_TIMEOUT) -> bytes:
    """Download a whole response body into memory."""
    response = session.get(url, timeout=timeout)
    try:
        response.raise_for_status()
        return response.content
    finally:
        response.close()


def calculate_hash(file_path: str, algorithm: str = constants.ASSET_HASH_ALGORITHM,
                   chunk_size: int = constants.CHUNK_READ_SIZE) -> str:
    """
    Calculate hash of a file.

    Args:
        file_path: Path to the file
        algorithm: Any algorithm name hashlib knows ("sha1", "md5", ...)
        chunk_size: Size of chunks to read

    Returns:
        Hex digest of the hash
    """
    hasher = hashlib.new(algorithm)

    with open(file_path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)

    return hasher.hexdigest()


def ensure_directory(path: str) -> None:
    """
    Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to create
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def is_within_directory(directory: str, target: str) -> bool:
    """
    Check that target resolves to a path strictly inside directory.

    Both paths are canonicalized first, so ``..`` segments and symlinks
    cannot escape.
    """
    base = os.path.realpath(directory)
    resolved = os.path.realpath(target)
    return resolved.startswith(base + os.sep)
