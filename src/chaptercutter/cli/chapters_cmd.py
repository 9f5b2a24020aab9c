"""Commands for splitting documents into chapters and inspecting headings."""

import errno
import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.rule import Rule

from chaptercutter.cli.utils import get_console, is_silent
from chaptercutter.output import get_formatter


def _require_file(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, "No such file", str(path))


def _print_full(data: dict[str, Any], console: Console) -> None:
    """Print every chapter in full, one rule per title."""
    for ch in data.get("chapters", []):
        console.print(Rule(ch.get("title", "")))
        console.print(ch.get("content", ""), highlight=False)
        console.print()


def chapters(
    path: Path = typer.Argument(..., help="PDF or text file"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON result to a file",
    ),
    use_json: bool = typer.Option(
        False,
        "--json",
        help="Force JSON output",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Force pretty output",
    ),
    full: bool = typer.Option(
        False,
        "--full",
        help="Print the full text of each chapter instead of a summary table",
    ),
):
    """Split a document into titled, paragraphed chapters.

    Looks for "Chapter N" headings first, then page breaks, and finally
    returns the whole document as one chapter.

    Examples:

        chaptercutter chapters novel.pdf

        chaptercutter chapters novel.txt --full

        chaptercutter chapters novel.pdf -o chapters.json
    """
    from chaptercutter.api import chapterize_file

    _require_file(path)
    result = chapterize_file(path)

    if output:
        output.write_text(json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8")
        get_console().print(f"[green]Saved:[/green] {output}")
        return

    formatter = get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_silent())
    formatter.output(result, pretty_fn=_print_full if full else None)


def markers(
    path: Path = typer.Argument(..., help="PDF or text file"),
    use_json: bool = typer.Option(
        False,
        "--json",
        help="Force JSON output",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Force pretty output",
    ),
):
    """Show the chapter headings found in a document.

    Lists each heading's offset in the normalized text and the cleaned
    title, which explains how "chapters" splits the document.
    """
    from chaptercutter.api import load_document
    from chaptercutter.chapters.markers import find_markers
    from chaptercutter.chapters.normalize import normalize as normalize_text

    _require_file(path)
    text, _ = load_document(path)
    found = find_markers(normalize_text(text))

    formatter = get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_silent())
    formatter.output(
        {
            "success": True,
            "fileName": path.name,
            "count": len(found),
            "markers": [m.to_dict() for m in found],
        }
    )


def normalize(
    path: Path = typer.Argument(..., help="PDF or text file"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write normalized text to a file",
    ),
):
    """Print a document's text after blank-line collapsing and heading repair."""
    from chaptercutter.api import load_document
    from chaptercutter.chapters.normalize import normalize as normalize_text

    _require_file(path)
    text, _ = load_document(path)
    normalized = normalize_text(text)

    if output:
        output.write_text(normalized, encoding="utf-8")
        get_console().print(f"[green]Saved:[/green] {output}")
    elif not is_silent():
        typer.echo(normalized)
