"""PDF extraction backend using pdfplumber."""

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

import pdfplumber

from chaptercutter.exceptions import ExtractionError, InvalidPDFError
from chaptercutter.extractors.base import PAGE_SEPARATOR

logger = logging.getLogger(__name__)

# Minimum pages to benefit from parallel processing
_MIN_PAGES_FOR_PARALLEL = 10


def _extract_page_text(args: tuple[str, int, bool]) -> tuple[int, str]:
    """Extract text from a single page (for parallel processing).

    Args:
        args: Tuple of (pdf_path, page_index, layout).

    Returns:
        Tuple of (page_index, extracted_text).
    """
    pdf_path, page_idx, layout = args
    try:
        with pdfplumber.open(pdf_path) as pdf:
            return (page_idx, pdf.pages[page_idx].extract_text(layout=layout) or "")
    except Exception:
        return (page_idx, "")


def _wrap_error(path: Path, e: Exception) -> ExtractionError:
    if "Invalid" in str(e) or "corrupt" in str(e).lower():
        return InvalidPDFError(f"Cannot open PDF: {path.name}", details=str(e))
    return ExtractionError(f"Failed to extract text from {path.name}", details=str(e))


class PdfPlumberExtractor:
    """PDF extraction backend using pdfplumber library."""

    def __init__(self, max_workers: int | None = None, layout: bool = False):
        """Initialize the extractor.

        Args:
            max_workers: Maximum number of worker processes for parallel extraction.
                        Defaults to min(4, cpu_count) to avoid overwhelming the system.
            layout: Ask pdfplumber to mimic the page layout with spaces.
                    Off by default; padded columns confuse paragraph rebuilding.
        """
        self.max_workers = max_workers or min(4, os.cpu_count() or 1)
        self.layout = layout

    def extract_text(self, path: Path) -> str:
        """Extract text from every page, pages joined by ``PAGE_SEPARATOR``.

        Raises:
            InvalidPDFError: If the PDF cannot be opened.
            ExtractionError: If text extraction fails.
        """
        pages = self.extract_text_by_page(path)
        return PAGE_SEPARATOR.join(text for _, text in pages if text.strip())

    def get_page_count(self, path: Path) -> int:
        """Get the number of pages in the PDF.

        Raises:
            InvalidPDFError: If the PDF cannot be opened.
        """
        try:
            with pdfplumber.open(path) as pdf:
                return len(pdf.pages)
        except Exception as e:
            raise InvalidPDFError(
                f"Cannot open PDF: {path.name}",
                details=str(e),
            ) from e

    def extract_text_by_page(self, path: Path) -> list[tuple[int, str]]:
        """Extract text from PDF, returning per-page results.

        Documents with 10+ pages are extracted in a process pool.

        Returns:
            List of (page_number, text) tuples where page_number is 0-indexed.

        Raises:
            InvalidPDFError: If the PDF cannot be opened.
            ExtractionError: If text extraction fails.
        """
        try:
            with pdfplumber.open(path) as pdf:
                total_pages = len(pdf.pages)

                if total_pages >= _MIN_PAGES_FOR_PARALLEL:
                    try:
                        return self._extract_text_by_page_parallel(path, total_pages)
                    except (RuntimeError, OSError, BrokenPipeError) as e:
                        # Fall back to sequential on macOS multiprocessing issues
                        # (e.g., spawn errors when running from stdin/Jupyter)
                        error_str = str(e).lower()
                        if not any(kw in error_str for kw in ("spawn", "stdin", "fork", "pickle", "broken pipe")):
                            raise
                        logger.debug(f"Parallel extraction unavailable, going sequential: {e}")

                return [
                    (idx, pdf.pages[idx].extract_text(layout=self.layout) or "")
                    for idx in range(total_pages)
                ]

        except Exception as e:
            raise _wrap_error(path, e) from e

    def _extract_text_by_page_parallel(
        self, path: Path, total_pages: int
    ) -> list[tuple[int, str]]:
        """Extract every page in a process pool, returning results in page order."""
        path_str = str(path.absolute())
        args = [(path_str, idx, self.layout) for idx in range(total_pages)]

        results: dict[int, str] = {}
        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {executor.submit(_extract_page_text, arg): arg[1] for arg in args}
            for future in as_completed(futures):
                page_idx, text = future.result()
                results[page_idx] = text

        return [(idx, results[idx]) for idx in sorted(results.keys())]
