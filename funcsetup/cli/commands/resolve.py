"""
Resolve command implementation.

Prints the release asset and download URL the install command would use.
"""

import logging

from funcsetup.cli.utils import options_from_args, print_error
from funcsetup.core.context import RunnerContext
from funcsetup.core.exceptions import FuncSetupError
from funcsetup.installer import FuncInstaller

logger = logging.getLogger(__name__)


def run(args, context=None) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments
        context: Execution context (default: RunnerContext on the real process)

    Returns:
        Exit code (0 for success, 1 on failure)
    """
    context = context or RunnerContext()

    try:
        options = options_from_args(args, env=getattr(context, "environ", None))
        resolution = FuncInstaller(context).resolve(options)
    except FuncSetupError as e:
        print_error(str(e))
        return 1

    print(f"asset: {resolution.asset_name}")
    print(f"version: {resolution.version}")
    print(f"url: {resolution.url}")
    return 0
