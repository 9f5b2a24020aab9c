"""Show the effective configuration."""

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from chaptercutter.cli.utils import is_silent
from chaptercutter.output import get_formatter


def _print_settings(data: dict[str, Any], console: Console) -> None:
    console.print(f"[dim]Config file:[/dim] {data['config_file']}\n")
    for section, values in data["settings"].items():
        table = Table(title=section, show_header=True, header_style="bold", title_justify="left")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in values.items():
            table.add_row(key, str(value))
        console.print(table)


def config(
    use_json: bool = typer.Option(
        False,
        "--json",
        help="Force JSON output",
    ),
):
    """Show settings after environment variables and config.yaml are applied."""
    from chaptercutter.config.settings import get_config_path, get_settings

    settings = get_settings()
    formatter = get_formatter(json_flag=use_json, pretty_flag=not use_json, quiet=is_silent())
    formatter.output(
        {
            "config_file": str(get_config_path()),
            "settings": settings.model_dump(mode="json"),
        },
        pretty_fn=_print_settings,
    )
