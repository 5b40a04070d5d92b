"""
Core functionality for funcsetup.

This package contains the building blocks of the install pipeline: platform
and version resolution, download, path publishing and the staleness check.
"""

from .context import (
    ExecutionContext,
    RunnerContext,
    runner_inputs,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    resolve_asset_name,
)

from .version import (
    Latest,
    Pinned,
    normalize_version,
    release_number,
)

from .urls import resolve_download_url

from .directory import resolve_destination

from .download import download_file, fetch_binary, make_executable

from .path import publish_path

from .staleness import StalenessReport, check_staleness

from .exceptions import (
    Stage,
    FuncSetupError,
    ConfigError,
    UnsupportedPlatformError,
    InvalidVersionError,
    DirectoryCreationError,
    FetchError,
    DownloadError,
    MissingBinaryError,
    PermissionSetError,
    PathPublishError,
    SmoketestError,
)

__all__ = [
    "ExecutionContext",
    "RunnerContext",
    "runner_inputs",
    "PlatformInfo",
    "detect_platform",
    "resolve_asset_name",
    "Latest",
    "Pinned",
    "normalize_version",
    "release_number",
    "resolve_download_url",
    "resolve_destination",
    "download_file",
    "fetch_binary",
    "make_executable",
    "publish_path",
    "StalenessReport",
    "check_staleness",
    "Stage",
    "FuncSetupError",
    "ConfigError",
    "UnsupportedPlatformError",
    "InvalidVersionError",
    "DirectoryCreationError",
    "FetchError",
    "DownloadError",
    "MissingBinaryError",
    "PermissionSetError",
    "PathPublishError",
    "SmoketestError",
]
