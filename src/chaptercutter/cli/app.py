"""Typer entry point for the ``chaptercutter`` command."""

import logging

import typer
from rich.console import Console

from chaptercutter import __version__
from chaptercutter.cli.utils import QUIET, SILENT, handle_errors, set_flags, setup_logging


class _DedupFilter(logging.Filter):
    """Let each distinct message through once.

    pdfminer repeats the same font warning for every page of a document.
    """

    def __init__(self):
        super().__init__()
        self._seen: set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if message in self._seen:
            return False
        self._seen.add(message)
        return True


logging.getLogger("pdfminer").addFilter(_DedupFilter())

app = typer.Typer(
    name="chaptercutter",
    help="""Split text extracted from PDFs into titled, readably paragraphed chapters.

    [bold]Commands:[/bold]
    chapters    Split a PDF or text file into chapters
    markers     List the chapter headings that were detected
    normalize   Print the text as the heading detector sees it
    config      Show effective settings
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _show_version(value: bool):
    if value:
        Console(stderr=True).print(f"chaptercutter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each pipeline stage and show full tracebacks.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Hide status messages; errors are still shown.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Print nothing; report through the exit code only.",
    ),
):
    """Split text extracted from PDFs into chapters."""
    level = SILENT if silent else QUIET if quiet else 0
    ctx.obj = set_flags(verbose=verbose, quiet_level=level)
    setup_logging(verbose=verbose)


def _register_commands() -> None:
    # Deferred so command modules can import from chaptercutter.cli freely
    from chaptercutter.cli import chapters_cmd, config_cmd

    for name, command in (
        ("chapters", chapters_cmd.chapters),
        ("markers", chapters_cmd.markers),
        ("normalize", chapters_cmd.normalize),
        ("config", config_cmd.config),
    ):
        app.command(name)(handle_errors(command))


_register_commands()


if __name__ == "__main__":
    app()
