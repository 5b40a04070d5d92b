"""
Platform detection for funcsetup.

Maps the runner's OS family and CPU architecture to the name of the func
release asset built for it.

Features:
- Runner signal detection (RUNNER_OS / RUNNER_ARCH)
- Host fallback via the platform module for runs outside CI
- Explicit asset override that bypasses detection

Usage:
    from funcsetup.core.platform import detect_platform, resolve_asset_name

    info = detect_platform(context)
    print(info.asset_name())  # 'func_linux_amd64'
"""

import logging
import platform
from dataclasses import dataclass
from typing import Optional

from .context import ExecutionContext
from .exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)

OS_ENV = "RUNNER_OS"
ARCH_ENV = "RUNNER_ARCH"

LINUX = "Linux"
MACOS = "macOS"
WINDOWS = "Windows"

# (os, arch) -> release asset
ASSET_NAMES = {
    (LINUX, "X64"): "func_linux_amd64",
    (LINUX, "ARM64"): "func_linux_arm64",
    (LINUX, "PPC64LE"): "func_linux_ppc64le",
    (LINUX, "S390X"): "func_linux_s390x",
    (MACOS, "X64"): "func_darwin_amd64",
    (MACOS, "ARM64"): "func_darwin_arm64",
    (WINDOWS, "X64"): "func_windows_amd64.exe",
}

_OS_ALIASES = {
    "linux": LINUX,
    "macos": MACOS,
    "darwin": MACOS,
    "windows": WINDOWS,
}

_ARCH_ALIASES = {
    "x64": "X64",
    "x86_64": "X64",
    "amd64": "X64",
    "arm64": "ARM64",
    "aarch64": "ARM64",
    "ppc64le": "PPC64LE",
    "s390x": "S390X",
}


@dataclass(frozen=True)
class PlatformInfo:
    """
    OS family and architecture of the runner.

    Attributes:
        os: OS family in runner vocabulary ('Linux', 'macOS', 'Windows')
        arch: Architecture in runner vocabulary ('X64', 'ARM64', ...)
    """

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        return self.os == WINDOWS

    def asset_name(self) -> str:
        """
        Get the release asset built for this platform.

        Returns:
            Asset filename (e.g., 'func_linux_amd64')

        Raises:
            UnsupportedPlatformError: If no asset exists for the combination

        Example:
            >>> PlatformInfo('macOS', 'ARM64').asset_name()
            'func_darwin_arm64'
        """
        try:
            return ASSET_NAMES[(self.os, self.arch)]
        except KeyError:
            raise UnsupportedPlatformError(self.os, self.arch) from None

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


def normalize_os(value: str) -> str:
    """Normalize an OS name to runner vocabulary; unknown names pass through."""
    return _OS_ALIASES.get(value.strip().lower(), value.strip())


def normalize_arch(value: str) -> str:
    """Normalize an architecture name to runner vocabulary."""
    return _ARCH_ALIASES.get(value.strip().lower(), value.strip())


def detect_platform(context: ExecutionContext) -> PlatformInfo:
    """
    Detect the platform the binary will run on.

    Runner signals win; when they are missing the host is inspected.

    Args:
        context: Execution context to read RUNNER_OS / RUNNER_ARCH from

    Returns:
        PlatformInfo in runner vocabulary
    """
    os_name = context.getenv(OS_ENV) or platform.system()
    arch = context.getenv(ARCH_ENV) or platform.machine()
    info = PlatformInfo(os=normalize_os(os_name), arch=normalize_arch(arch))
    logger.debug(f"Detected platform: {info}")
    return info


def resolve_asset_name(
    context: ExecutionContext, override: Optional[str] = None
) -> str:
    """
    Get the release asset to download.

    Args:
        context: Execution context
        override: Explicit asset filename; returned verbatim when non-empty

    Returns:
        Asset filename

    Raises:
        UnsupportedPlatformError: If the platform has no known asset
    """
    if override:
        logger.debug(f"Using explicit binary: {override}")
        return override
    return detect_platform(context).asset_name()


def is_windows(context: ExecutionContext) -> bool:
    """Check whether the runner is in the Windows family."""
    return detect_platform(context).is_windows


__all__ = [
    "PlatformInfo",
    "ASSET_NAMES",
    "detect_platform",
    "resolve_asset_name",
    "is_windows",
    "normalize_os",
    "normalize_arch",
]
