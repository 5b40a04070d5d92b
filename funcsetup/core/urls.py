"""
Download URL resolution for func release assets.
"""

import logging
from typing import Optional

from .version import Latest, ResolvedVersion

logger = logging.getLogger(__name__)

RELEASES_URL = "https://github.com/knative/func/releases"
RELEASE_BASE = f"{RELEASES_URL}/download"
LATEST_RELEASE_BASE = f"{RELEASES_URL}/latest/download"
LATEST_RELEASE_URL = f"{RELEASES_URL}/latest"


def resolve_download_url(
    asset_name: str,
    version: ResolvedVersion,
    binary_source: Optional[str] = None,
) -> str:
    """
    Build the URL the binary is downloaded from.

    Args:
        asset_name: Release asset filename (e.g., 'func_linux_amd64')
        version: Resolved version
        binary_source: Full URL override, used verbatim when non-empty

    Returns:
        Download URL

    Example:
        >>> resolve_download_url("func_linux_amd64", Pinned("knative-v1.16.0"))
        'https://github.com/knative/func/releases/download/knative-v1.16.0/func_linux_amd64'
    """
    if binary_source:
        logger.debug("Using custom binary source")
        return binary_source

    if isinstance(version, Latest):
        return f"{LATEST_RELEASE_BASE}/{asset_name}"
    return f"{RELEASE_BASE}/{version.tag}/{asset_name}"


__all__ = [
    "RELEASE_BASE",
    "LATEST_RELEASE_BASE",
    "LATEST_RELEASE_URL",
    "resolve_download_url",
]
