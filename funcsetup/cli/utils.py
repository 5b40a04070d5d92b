"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import os
import sys
from typing import Any, Dict, Optional

from funcsetup.config import InstallOptions, load_options

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def options_from_args(args, env=None) -> InstallOptions:
    """
    Build install options for a parsed command line.

    Args:
        args: Parsed arguments
        env: Environment with INPUT_* variables (default: os.environ)

    Returns:
        Merged InstallOptions (file < action inputs < flags)

    Raises:
        ConfigError: If the options file is missing or invalid
    """
    overrides = InstallOptions(
        binary=getattr(args, "binary", None),
        version=getattr(args, "func_version", None),
        destination=getattr(args, "destination", None),
        name=getattr(args, "name", None),
        binary_source=getattr(args, "binary_source", None),
    )
    return load_options(
        os.environ if env is None else env,
        config_file=getattr(args, "config", None),
        overrides=overrides,
    )


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_success_message(
    title: str,
    details: Dict[str, Any],
    width: int = 70,
) -> str:
    """
    Format a standardized success message.

    Args:
        title: Success message title
        details: Key-value pairs to display
        width: Width of message box

    Returns:
        Formatted message string
    """
    lines = []
    lines.append("=" * width)
    lines.append(title)
    lines.append("=" * width)

    for key, value in details.items():
        lines.append(f"{key}: {value}")

    lines.append("")
    return "\n".join(lines)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe characters if Unicode symbols can't be encoded.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.replace("✅", "[OK]").replace("❌", "[ERROR]")
        print(safe_message.encode("ascii", "replace").decode("ascii"), file=file)
