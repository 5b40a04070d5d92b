"""
Execution context for funcsetup.

The install pipeline never touches os.environ or the runner's path file
directly. It talks to an ExecutionContext, which the CLI builds from the real
process (RunnerContext) and tests replace with an in-memory fake.

Runner conventions used here:
    RUNNER_OS    : OS family of the runner ('Linux', 'macOS', 'Windows')
    RUNNER_ARCH  : CPU architecture ('X64', 'ARM64', 'PPC64LE', 'S390X')
    GITHUB_PATH  : file whose lines are prepended to PATH for later steps
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Mapping, MutableMapping, Optional

logger = logging.getLogger(__name__)

PATH_FILE_ENV = "GITHUB_PATH"
SEARCH_PATH_ENV = "PATH"


class ExecutionContext(ABC):
    """
    Abstract interface over the environment the installer runs in.

    Implementations expose environment lookups, the shared cross-step path
    file and the current process search path.
    """

    @abstractmethod
    def getenv(self, name: str, default: str = "") -> str:
        """
        Look up an environment variable.

        Args:
            name: Variable name
            default: Value returned when the variable is unset

        Returns:
            Variable value or default
        """
        pass

    @abstractmethod
    def append_path_entry(self, directory: str) -> bool:
        """
        Append a directory as one line to the shared path file.

        Args:
            directory: Directory to append

        Returns:
            True if a path file was written, False if none is configured

        Raises:
            OSError: If the file cannot be written
        """
        pass

    @abstractmethod
    def current_search_path(self) -> List[str]:
        """Return the in-process search path as a list of directories."""
        pass

    @abstractmethod
    def append_search_path(self, directory: str) -> None:
        """
        Append a directory to the in-process search path.

        The existing value is kept as is, empty entries included.
        """
        pass

    @property
    def pathsep(self) -> str:
        """Path-list delimiter for the search path."""
        return os.pathsep

    def cwd(self) -> Path:
        """Directory used when no destination is configured."""
        return Path.cwd()

    def annotate(self, level: str, message: str) -> None:
        """
        Emit a workflow annotation ('warning', 'error', 'notice').

        The default implementation only logs.
        """
        logger.debug(f"[{level}] {message}")


class RunnerContext(ExecutionContext):
    """ExecutionContext backed by the real process environment."""

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        stream=None,
    ):
        """
        Initialize runner context.

        Args:
            environ: Environment mapping (default: os.environ)
            stream: Stream for workflow commands (default: sys.stdout)
        """
        self.environ = os.environ if environ is None else environ
        self.stream = stream

    def getenv(self, name: str, default: str = "") -> str:
        return self.environ.get(name, default)

    def append_path_entry(self, directory: str) -> bool:
        path_file = self.environ.get(PATH_FILE_ENV)
        if not path_file:
            logger.warning(
                f"{PATH_FILE_ENV} not set; {directory} will not be on PATH "
                "for later steps"
            )
            return False

        with open(path_file, "a", encoding="utf-8") as f:
            f.write(f"\n{directory}")
        logger.debug(f"Appended {directory} to {path_file}")
        return True

    def current_search_path(self) -> List[str]:
        value = self.environ.get(SEARCH_PATH_ENV, "")
        return [entry for entry in value.split(self.pathsep) if entry]

    def append_search_path(self, directory: str) -> None:
        value = self.environ.get(SEARCH_PATH_ENV, "")
        self.environ[SEARCH_PATH_ENV] = (
            f"{value}{self.pathsep}{directory}" if value else directory
        )

    def annotate(self, level: str, message: str) -> None:
        # Workflow commands are single-line; escape as the runner expects.
        escaped = (
            message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        )
        print(f"::{level}::{escaped}", file=self.stream or sys.stdout)


def runner_inputs(env: Mapping[str, str]) -> dict:
    """
    Collect action inputs from INPUT_* variables.

    Input names are upper-cased and spaces become underscores, so the
    'binarySource' input arrives as INPUT_BINARYSOURCE.

    Args:
        env: Environment mapping

    Returns:
        Dictionary of lower-cased input name to value, for non-empty inputs
    """
    inputs = {}
    for key, value in env.items():
        if key.startswith("INPUT_") and value.strip():
            inputs[key[len("INPUT_") :].lower()] = value.strip()
    return inputs


__all__ = [
    "ExecutionContext",
    "RunnerContext",
    "runner_inputs",
    "PATH_FILE_ENV",
    "SEARCH_PATH_ENV",
]
