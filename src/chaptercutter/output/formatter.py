"""Output formatter with JSON/pretty modes and TTY detection."""

import io
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table

# Type alias for pretty formatter functions
PrettyFn = Callable[["dict[str, Any]", Console], None]

_PREVIEW_CHARS = 70


def _preview(text: str, limit: int = _PREVIEW_CHARS) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[: limit - 3] + "..."


@dataclass
class OutputFormatter:
    """Handles output formatting with JSON/pretty modes.

    Auto-detects TTY for default mode:
    - TTY (terminal): Pretty formatted output with colors
    - Non-TTY (pipe/redirect): JSON output for machine consumption

    Supports quiet mode to suppress all output.
    """

    force_json: bool = False
    force_pretty: bool = False
    quiet: bool = False
    _console: Console | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._console is None:
            if self.quiet:
                # Null console - discards output
                self._console = Console(file=io.StringIO())
            else:
                self._console = Console()

    @property
    def console(self) -> Console:
        """Get the console instance (guaranteed non-None after init)."""
        assert self._console is not None
        return self._console

    @property
    def use_json(self) -> bool:
        """Determine if JSON output should be used."""
        if self.force_json:
            return True
        if self.force_pretty:
            return False
        # Auto-detect: JSON if stdout is not a TTY
        return not sys.stdout.isatty()

    def output(self, data: dict[str, Any], pretty_fn: PrettyFn | None = None) -> None:
        """Output data in appropriate format.

        Args:
            data: Dictionary to output.
            pretty_fn: Optional function to render pretty output.
                       If not provided, uses default pretty formatter.
        """
        if self.quiet:
            return

        if self.use_json:
            self._output_json(data)
        elif pretty_fn:
            pretty_fn(data, self.console)
        else:
            self._output_pretty_default(data)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON."""
        print(json.dumps(data, indent=2, ensure_ascii=False))

    def _output_pretty_default(self, data: dict[str, Any]) -> None:
        """Default pretty output using Rich."""
        if "success" in data and not data.get("success"):
            self._output_error(data)
        elif "markers" in data:
            self._output_markers(data)
        elif "chapters" in data:
            self._output_chapters(data)
        else:
            # Fallback to JSON for unknown structures
            self._output_json(data)

    def _output_error(self, data: dict[str, Any]) -> None:
        """Output error message."""
        self.console.print(f"[red]Error:[/red] {data.get('error', 'Unknown error')}")

    def _output_chapters(self, data: dict[str, Any]) -> None:
        """Output chapter list with size and a content preview."""
        self.console.print(f"\n[bold]{data.get('fileName', 'Document')}[/bold]")
        if data.get("totalPages"):
            self.console.print(f"[dim]Pages: {data['totalPages']}[/dim]")

        chapters = data.get("chapters", [])
        self.console.print(f"\n[bold]Chapters ({len(chapters)}):[/bold]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="cyan", width=4)
        table.add_column("Title")
        table.add_column("Paras", justify="right", width=6)
        table.add_column("Chars", justify="right", width=8)
        table.add_column("Opens with", style="dim")

        for i, ch in enumerate(chapters, 1):
            content = ch.get("content", "")
            paragraphs = [p for p in content.split("\n\n") if p.strip()]
            table.add_row(
                str(i),
                ch.get("title", ""),
                str(len(paragraphs)),
                f"{len(content):,}",
                _preview(content),
            )

        self.console.print(table)

    def _output_markers(self, data: dict[str, Any]) -> None:
        """Output detected heading markers."""
        markers = data.get("markers", [])
        self.console.print(f"\n[bold]Markers ({len(markers)}):[/bold]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Offset", style="cyan", justify="right", width=8)
        table.add_column("Heading")
        table.add_column("Title", style="green")
        table.add_column("Matched text", style="dim")

        for m in markers:
            table.add_row(
                str(m.get("start_offset", "")),
                m.get("raw_heading", ""),
                m.get("title", ""),
                _preview(m.get("matched_text", ""), 50),
            )

        self.console.print(table)


def get_formatter(
    json_flag: bool = False,
    pretty_flag: bool = False,
    quiet: bool = False,
) -> OutputFormatter:
    """Get an output formatter with the specified flags.

    Args:
        json_flag: Force JSON output.
        pretty_flag: Force pretty output.
        quiet: Suppress all output.

    Returns:
        Configured OutputFormatter instance.
    """
    return OutputFormatter(
        force_json=json_flag,
        force_pretty=pretty_flag,
        quiet=quiet,
    )
