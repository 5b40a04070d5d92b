"""
Centralized exception hierarchy for funcsetup.

Every failure of the install pipeline is raised as a subclass of
FuncSetupError. Each error is tagged with the pipeline stage that produced it
and keeps the low-level cause (if any) so it can be reported verbatim.
"""

from enum import Enum
from typing import Optional


class Stage(str, Enum):
    """Pipeline stages, in execution order."""

    RESOLVE_PLATFORM = "resolve-platform"
    RESOLVE_URL = "resolve-url"
    RESOLVE_DESTINATION = "resolve-destination"
    FETCH = "fetch"
    PUBLISH_PATH = "publish-path"
    ADVISE_STALENESS = "advise-staleness"
    SMOKETEST = "smoketest"
    DONE = "done"


# ============================================================================
# Base Exceptions
# ============================================================================


class FuncSetupError(Exception):
    """Base exception for all funcsetup errors."""

    stage: Optional[Stage] = None

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        stage: Optional[Stage] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        if self.cause is not None and str(self.cause) not in self.message:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigError(FuncSetupError):
    """Raised when install options cannot be loaded."""

    pass


# ============================================================================
# Resolution Exceptions
# ============================================================================


class UnsupportedPlatformError(FuncSetupError):
    """Raised when no release asset matches the host OS and architecture."""

    stage = Stage.RESOLVE_PLATFORM

    def __init__(self, os_name: str, arch: str):
        self.os_name = os_name
        self.arch = arch
        super().__init__(
            f"Invalid os binary determination for {os_name or 'unknown'}/"
            f"{arch or 'unknown'}, try setting it specifically using 'binary'"
        )


class InvalidVersionError(FuncSetupError):
    """Invalid version format."""

    stage = Stage.RESOLVE_URL

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"Invalid version format ({version}). "
            'Expected format: "1.16[.X]" or "v1.16[.X]"'
        )


class DirectoryCreationError(FuncSetupError):
    """Raised when the destination directory cannot be created."""

    stage = Stage.RESOLVE_DESTINATION


# ============================================================================
# Fetch Exceptions
# ============================================================================


class FetchError(FuncSetupError):
    """Base exception for download and post-download failures."""

    stage = Stage.FETCH


class DownloadError(FetchError):
    """Raised when the HTTP transfer fails (network error or bad status)."""

    pass


class MissingBinaryError(FetchError):
    """Raised when the binary is not on disk after the transfer."""

    pass


class PermissionSetError(FetchError):
    """Raised when the binary cannot be marked executable."""

    pass


# ============================================================================
# Post-install Exceptions
# ============================================================================


class PathPublishError(FuncSetupError):
    """Raised when the install directory cannot be appended to the path file."""

    stage = Stage.PUBLISH_PATH


class SmoketestError(FuncSetupError):
    """Raised when the installed binary fails to run."""

    stage = Stage.SMOKETEST
