"""Shared state and error handling for CLI commands."""

import functools
import io
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from chaptercutter.exceptions import ChaptercutterError

F = TypeVar("F", bound=Callable[..., Any])

QUIET = 1
SILENT = 2


@dataclass
class CliFlags:
    """Global flags set by the app callback.

    ``quiet_level`` is 0 (normal), 1 (``-q``: status output hidden, errors
    shown) or 2 (``--silent``: exit code only).
    """

    verbose: bool = False
    quiet_level: int = 0


_flags = CliFlags()


def set_flags(verbose: bool = False, quiet_level: int = 0) -> CliFlags:
    """Replace the global flags; returns the new flags."""
    global _flags
    _flags = CliFlags(verbose=verbose, quiet_level=quiet_level)
    return _flags


def is_quiet() -> bool:
    return _flags.quiet_level >= QUIET


def is_silent() -> bool:
    return _flags.quiet_level >= SILENT


def is_verbose() -> bool:
    return _flags.verbose


def get_console() -> Console:
    """Stderr console for status messages; discards output in quiet mode."""
    if is_quiet():
        return Console(file=io.StringIO(), stderr=True)
    return Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route chaptercutter log records to stderr through Rich.

    Verbose mode shows DEBUG stage tracing; otherwise only warnings.
    """
    logger = logging.getLogger("chaptercutter")
    logger.handlers.clear()
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# Most specific first: all three are OSError subclasses
_OS_ERROR_LABELS: tuple[tuple[type[OSError], str], ...] = (
    (FileNotFoundError, "File not found"),
    (IsADirectoryError, "Expected file, got directory"),
    (PermissionError, "Permission denied"),
)


def _report(console: Console, label: str, message: str, details=None, hint=None) -> None:
    if is_verbose():
        console.print_exception()
        return
    console.print(f"[red]{label}:[/red] {message}")
    if details:
        console.print(f"[dim]{details}[/dim]")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")


def handle_errors(func: F) -> F:
    """Decorator turning exceptions into a message on stderr and an exit code.

    Library errors exit with their own ``exit_code``; file system errors and
    anything unexpected exit with 1; Ctrl-C exits with 130. Nothing is
    printed with ``--silent``, and ``--verbose`` prints the traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        console = Console(stderr=True)
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.BadParameter):
            raise
        except ChaptercutterError as e:
            if not is_silent():
                _report(console, "Error", e.message, e.details, e.hint)
            raise typer.Exit(e.exit_code)
        except KeyboardInterrupt:
            if not is_silent():
                console.print("\n[yellow]Interrupted[/yellow]")
            raise typer.Exit(130)
        except Exception as e:
            if not is_silent():
                label = next(
                    (text for kind, text in _OS_ERROR_LABELS if isinstance(e, kind)),
                    None,
                )
                if label:
                    _report(console, label, getattr(e, "filename", None) or str(e))
                else:
                    _report(console, "Unexpected error", f"{type(e).__name__}: {e}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
