"""
Binary download for funcsetup.

This module provides a single-shot fetch of the func binary:
- HTTP/HTTPS GET with redirects followed and TLS verification
- Streaming write to a temporary sibling, moved over the destination on success
- An existing binary at the destination is left untouched when the transfer fails
- Existence check and executable bit after the transfer

Each call makes exactly one attempt; there is no retry and no checksum
verification.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional

import requests

from .exceptions import DownloadError, MissingBinaryError, PermissionSetError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
DEFAULT_TIMEOUT = 60

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def download_file(
    url: str,
    destination: Path,
    timeout: int = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Path:
    """
    Download file from URL to destination.

    Args:
        url: URL to download from
        destination: Local path to save file
        timeout: Request timeout in seconds
        session: Optional requests session

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the request fails or returns a non-success status
        ValueError: If URL or destination is empty

    Example:
        >>> download_file(
        ...     "https://github.com/knative/func/releases/latest/download/func_linux_amd64",
        ...     Path("/tmp/out/func"),
        ... )
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    http = session or requests
    temp_path = None

    logger.info(f"Downloading from: {url}")

    try:
        response = http.get(url, stream=True, timeout=timeout, allow_redirects=True)
        response.raise_for_status()

        # The destination is only replaced once the whole body is on disk
        temp_path = destination.with_name(f".{destination.name}.tmp")
        with open(temp_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
        temp_path.replace(destination)
    except (requests.RequestException, OSError) as e:
        # Clean up partial download on error
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise DownloadError(f"Download failed from {url}", cause=e) from e

    logger.debug(f"Download complete: {destination}")
    return destination


def make_executable(path: Path) -> None:
    """
    Add execute permission for owner, group and others.

    Args:
        path: File to update

    Raises:
        PermissionSetError: If the mode cannot be changed
    """
    try:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | EXECUTE_BITS)
    except OSError as e:
        raise PermissionSetError(
            f"Failed to make {path} executable", cause=e
        ) from e


def fetch_binary(
    url: str,
    destination: Path,
    windows: bool = False,
    timeout: int = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Path:
    """
    Download the binary and prepare it to run.

    Args:
        url: Download URL
        destination: Install path
        windows: Skip the executable bit on Windows
        timeout: Request timeout in seconds
        session: Optional requests session

    Returns:
        Path to the installed binary

    Raises:
        DownloadError: If the transfer fails
        MissingBinaryError: If the binary is not on disk afterwards
        PermissionSetError: If the binary cannot be made executable
    """
    download_file(url, destination, timeout=timeout, session=session)

    if not Path(destination).exists():
        raise MissingBinaryError(
            "Download failed, couldn't find the binary on disk"
        )

    if not windows:
        make_executable(destination)

    return destination


__all__ = [
    "download_file",
    "make_executable",
    "fetch_binary",
    "DEFAULT_TIMEOUT",
]
