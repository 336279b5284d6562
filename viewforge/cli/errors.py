"""
Error handling for the viewforge CLI.

Compiler errors already carry a code and hint; this module turns any
exception reaching the top level into a single user-facing message and an
exit status.
"""

import os
import sys
import traceback

from viewforge.errors import ViewForgeError

from .output import print_error

# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_reraise_enabled() -> bool:
    """Re-raise instead of exiting when VIEWFORGE_RERAISE or VIEWFORGE_DEBUG is set."""
    return _env_flag("VIEWFORGE_RERAISE") or _env_flag("VIEWFORGE_DEBUG")


def format_traceback_excerpt() -> str:
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def format_cli_error(exc: BaseException, *, include_traceback: bool = False) -> str:
    """
    Format exception for CLI display.

    Examples:
        >>> format_cli_error(ConfigError("bad table"))
        'bad table (VF_CONFIG)'
    """
    if isinstance(exc, ViewForgeError):
        message = exc.format()
    else:
        message = f"{exc.__class__.__name__}: {exc}"

    if include_traceback:
        message = f"{message}\n\nTraceback:\n{format_traceback_excerpt()}"
    return message


def handle_cli_exception(exc: BaseException, *, verbose: bool = False, exit_code: int = 1) -> None:
    """
    Print ``exc`` and exit with ``exit_code``.

    With ``verbose`` (or the debug environment flags) the exception is
    re-raised so the full traceback reaches the terminal.

    Note:
        This function calls sys.exit() and does not return.
    """
    if verbose or cli_reraise_enabled():
        raise exc

    print_error(format_cli_error(exc))
    sys.exit(exit_code)
