"""
Destination resolution for the installed binary.

The binary lands in <destination>/<name>, where destination defaults to the
current working directory and name defaults to 'func'. Windows binaries always
carry an '.exe' suffix.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .exceptions import DirectoryCreationError

logger = logging.getLogger(__name__)

DEFAULT_BINARY_NAME = "func"
WINDOWS_SUFFIX = ".exe"


def binary_file_name(name: Optional[str] = None, windows: bool = False) -> str:
    """
    Get the installed file name.

    Args:
        name: Base name override (default: 'func')
        windows: Whether the runner is in the Windows family

    Returns:
        File name, with '.exe' appended on Windows when missing

    Example:
        >>> binary_file_name("kn-func", windows=True)
        'kn-func.exe'
    """
    file_name = name or DEFAULT_BINARY_NAME
    if windows and not file_name.endswith(WINDOWS_SUFFIX):
        file_name += WINDOWS_SUFFIX
    return file_name


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent).

    Args:
        path: Directory path

    Returns:
        Absolute directory path

    Raises:
        DirectoryCreationError: If the directory cannot be created
    """
    path = Path(path)
    if not path.is_dir():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Failed to create directory {path}", cause=e
            ) from e
        logger.debug(f"Created directory {path}")
    return path.absolute()


def resolve_destination(
    destination: Optional[str] = None,
    name: Optional[str] = None,
    windows: bool = False,
    cwd: Optional[Path] = None,
) -> Path:
    """
    Compute the install path and create its directory.

    Args:
        destination: Target directory (default: cwd)
        name: Installed file base name (default: 'func')
        windows: Whether the runner is in the Windows family
        cwd: Directory used when destination is not set (default: Path.cwd())

    Returns:
        Absolute path of the binary to install

    Raises:
        DirectoryCreationError: If the directory cannot be created
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    directory = base / destination if destination else base
    directory = ensure_directory(directory)
    return directory / binary_file_name(name, windows)


__all__ = [
    "DEFAULT_BINARY_NAME",
    "binary_file_name",
    "ensure_directory",
    "resolve_destination",
]
