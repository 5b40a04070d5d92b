"""
Version normalization for func releases.

func is released under tags of the form 'knative-vMAJOR.MINOR.PATCH'. Users
may write any of '1.16', 'v1.16', 'knative-v1.16.2' or 'latest'; this module
turns those into a resolved version.

Example:
    >>> normalize_version("v1.16")
    Pinned(tag='knative-v1.16.0')
    >>> normalize_version(" LATEST ")
    Latest()
"""

import re
from dataclasses import dataclass
from typing import Tuple, Union

from .exceptions import InvalidVersionError

LATEST = "latest"
TAG_PREFIX = "knative-v"

VERSION_PATTERN = re.compile(
    r"^(?P<knprefix>knative-)?v?(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?$"
)


@dataclass(frozen=True)
class Latest:
    """Use the most recent published release."""

    def __str__(self) -> str:
        return LATEST


@dataclass(frozen=True)
class Pinned:
    """A specific release tag (e.g., 'knative-v1.16.0')."""

    tag: str

    def __str__(self) -> str:
        return self.tag


ResolvedVersion = Union[Latest, Pinned]


def normalize_version(version: str) -> ResolvedVersion:
    """
    Normalize a user supplied version.

    Args:
        version: Version string, case-insensitive, surrounding whitespace
            ignored. Empty means latest.

    Returns:
        Latest() or Pinned(tag) with tag in 'knative-vX.Y.Z' form

    Raises:
        InvalidVersionError: If the version does not match any accepted form
    """
    value = (version or "").strip().lower()
    if not value or value == LATEST:
        return Latest()

    match = VERSION_PATTERN.match(value)
    if not match:
        raise InvalidVersionError(version)

    patch = match.group("patch") or "0"
    return Pinned(f"{TAG_PREFIX}{match.group('major')}.{match.group('minor')}.{patch}")


def release_number(tag: str) -> Tuple[int, int]:
    """
    Extract (major, minor) from a release tag.

    Args:
        tag: Tag such as 'knative-v1.14.0' or 'v1.14'

    Returns:
        Tuple of (major, minor)

    Raises:
        InvalidVersionError: If the tag cannot be parsed
    """
    match = VERSION_PATTERN.match(tag.strip().lower())
    if not match:
        raise InvalidVersionError(tag)
    return int(match.group("major")), int(match.group("minor"))


__all__ = [
    "LATEST",
    "Latest",
    "Pinned",
    "ResolvedVersion",
    "normalize_version",
    "release_number",
]
