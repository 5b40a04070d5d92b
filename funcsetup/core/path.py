"""
Search path publishing.

Makes the install directory visible to the current process and to later steps
of the same job.
"""

import logging
from pathlib import Path
from typing import Union

from .context import ExecutionContext
from .exceptions import PathPublishError

logger = logging.getLogger(__name__)


def publish_path(binary_path: Union[str, Path], context: ExecutionContext) -> str:
    """
    Add the directory containing binary_path to the search path.

    The shared path file always receives one line per call; later steps
    de-duplicate by membership. The in-process search path is only extended
    when the directory is not already on it.

    Args:
        binary_path: Installed binary
        context: Execution context

    Returns:
        The published directory

    Raises:
        PathPublishError: If the shared path file cannot be written
    """
    directory = str(Path(binary_path).parent)

    try:
        context.append_path_entry(directory)
    except OSError as e:
        raise PathPublishError(
            f"Failed to add {directory} to the path file", cause=e
        ) from e

    if directory not in context.current_search_path():
        context.append_search_path(directory)
        logger.info(f"{directory} added to PATH")
    else:
        logger.debug(f"{directory} already on PATH")

    return directory


__all__ = ["publish_path"]
