"""Output formatting for CLI commands."""

from chaptercutter.output.formatter import OutputFormatter, get_formatter

__all__ = ["OutputFormatter", "get_formatter"]
