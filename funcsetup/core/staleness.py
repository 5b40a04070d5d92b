"""
Staleness advice for pinned func versions.

When a workflow pins an old release, a warning points out how far behind the
latest release it is. The check is best effort: any failure is logged at
DEBUG and ignored.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import requests

from .urls import LATEST_RELEASE_URL
from .version import release_number

logger = logging.getLogger(__name__)

STALE_MINOR_GAP = 3
DEFAULT_TIMEOUT = 10


@dataclass
class StalenessReport:
    """Comparison of a pinned release against the latest one."""

    requested: str
    latest: str
    gap: int
    major_behind: int = 0

    @property
    def is_stale(self) -> bool:
        return self.gap >= STALE_MINOR_GAP

    def message(self) -> str:
        if self.major_behind > 0:
            return (
                f"func {self.requested} is behind the latest release "
                f"{self.latest}, which is a newer major version. Consider "
                "updating the 'version' input."
            )
        return (
            f"func {self.requested} is {self.gap} minor versions behind the "
            f"latest release {self.latest}. Consider updating the 'version' input."
        )


def minor_gap(requested: Tuple[int, int], latest: Tuple[int, int]) -> int:
    """
    Number of minor releases between two (major, minor) pairs.

    A newer major release counts as at least STALE_MINOR_GAP regardless of
    the minor numbers; an older latest release gives a negative gap.

    Example:
        >>> minor_gap((1, 10), (1, 14))
        4
    """
    if latest[0] == requested[0]:
        return latest[1] - requested[1]
    if latest[0] > requested[0]:
        return max(STALE_MINOR_GAP, latest[1] - requested[1])
    return -1


def fetch_latest_tag(
    timeout: int = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None
) -> str:
    """
    Read the latest release tag from the releases redirect.

    Returns:
        Latest release tag (e.g., 'knative-v1.20.1')

    Raises:
        requests.RequestException: If the request fails
        ValueError: If the response is not a redirect to a tag
    """
    http = session or requests
    response = http.head(LATEST_RELEASE_URL, allow_redirects=False, timeout=timeout)
    location = response.headers.get("location")
    if not location:
        raise ValueError(
            f"No redirect from {LATEST_RELEASE_URL} (status {response.status_code})"
        )
    tag = location.rstrip("/").rsplit("/", 1)[-1]
    if not tag:
        raise ValueError(f"Cannot read release tag from {location}")
    return tag


def check_staleness(
    requested_tag: str,
    timeout: int = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Optional[StalenessReport]:
    """
    Compare a pinned tag against the latest release.

    Args:
        requested_tag: Pinned release tag
        timeout: Request timeout in seconds
        session: Optional requests session

    Returns:
        StalenessReport, or None if the check could not be completed
    """
    try:
        latest_tag = fetch_latest_tag(timeout=timeout, session=session)
        requested = release_number(requested_tag)
        latest = release_number(latest_tag)
    except Exception as e:
        logger.debug(f"Skipping staleness check: {e}")
        return None

    gap = minor_gap(requested, latest)
    report = StalenessReport(
        requested=requested_tag,
        latest=latest_tag,
        gap=gap,
        major_behind=max(0, latest[0] - requested[0]),
    )
    logger.debug(f"Latest release is {latest_tag}, gap {gap}")
    return report


__all__ = [
    "STALE_MINOR_GAP",
    "StalenessReport",
    "minor_gap",
    "fetch_latest_tag",
    "check_staleness",
]
