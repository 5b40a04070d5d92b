"""
Install command implementation.

Downloads func, adds it to PATH and runs 'func version'.
"""

import logging

from funcsetup.cli.utils import (
    format_success_message,
    options_from_args,
    print_error,
    safe_print,
)
from funcsetup.core.context import RunnerContext
from funcsetup.core.exceptions import FuncSetupError
from funcsetup.installer import FuncInstaller

logger = logging.getLogger(__name__)


def run(args, context=None) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments
        context: Execution context (default: RunnerContext on the real process)

    Returns:
        Exit code (0 for success, 1 on failure)
    """
    context = context or RunnerContext()

    try:
        options = options_from_args(args, env=getattr(context, "environ", None))
        installer = FuncInstaller(
            context,
            check_staleness_enabled=not getattr(args, "no_staleness_check", False),
        )
        result = installer.install(options)
    except FuncSetupError as e:
        stage = e.stage.value if e.stage else "configuration"
        message = f"{stage} failed: {e}"
        print_error(message)
        context.annotate("error", message)
        logger.debug("Install failed", exc_info=True)
        return 1

    if not getattr(args, "quiet", False):
        safe_print(
            format_success_message(
                "✅ func installed",
                {
                    "Binary": result.binary_path,
                    "Version": result.version,
                    "Source": result.url,
                },
            )
        )
    return 0
