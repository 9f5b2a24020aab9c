"""Base protocol for PDF-to-text backends."""

from pathlib import Path
from typing import Protocol

# Pages are joined with a run long enough for the page-break fallback
PAGE_SEPARATOR = "\n\n\n\n"


class Extractor(Protocol):
    """Protocol defining the interface for PDF extraction backends."""

    def extract_text(self, path: Path) -> str:
        """Extract the text of every page, pages joined by ``PAGE_SEPARATOR``.

        Args:
            path: Path to the PDF file.

        Returns:
            Extracted text as a string.
        """
        ...

    def get_page_count(self, path: Path) -> int:
        """Get the number of pages in the PDF.

        Args:
            path: Path to the PDF file.

        Returns:
            Number of pages.
        """
        ...

    def extract_text_by_page(self, path: Path) -> list[tuple[int, str]]:
        """Extract text from PDF, returning per-page results.

        Args:
            path: Path to the PDF file.

        Returns:
            List of (page_number, text) tuples where page_number is 0-indexed.
        """
        ...
