"""Convenience API for Chaptercutter.

This module provides simple, high-level functions for common tasks:

    >>> from chaptercutter import chapterize_pdf
    >>> result = chapterize_pdf("novel.pdf")
    >>> [ch["title"] for ch in result["chapters"]]

The dictionaries returned here use the upload response layout
(``success``, ``chapters``, ``totalPages``, ``fileName``) so they can be
sent to a client unchanged. For more control, use
:class:`chaptercutter.chapters.ChapterEngine` directly.
"""

import logging
from pathlib import Path
from typing import Any, Union

from chaptercutter.chapters import Chapter, ChapterEngine
from chaptercutter.config.settings import Settings, get_settings
from chaptercutter.exceptions import (
    ChaptercutterError,
    ExtractionError,
    NoContentError,
    UnsupportedFileError,
)
from chaptercutter.extractors.base import Extractor
from chaptercutter.extractors.pdfplumber import PdfPlumberExtractor

logger = logging.getLogger(__name__)

PathLike = Union[Path, str]

PDF_SUFFIXES = {".pdf"}
TEXT_SUFFIXES = {".txt", ".md"}


def chapterize_text(text: str, settings: Settings | None = None) -> list[Chapter]:
    """Split already-extracted text into chapters.

    Args:
        text: Raw document text.
        settings: Settings to use. Defaults to :func:`get_settings`.

    Returns:
        At least one chapter.
    """
    settings = settings or get_settings()
    return ChapterEngine(settings.chapters).extract(text)


def build_response(
    chapters: list[Chapter],
    total_pages: int,
    file_name: str,
) -> dict[str, Any]:
    """Build the success payload for a processed upload."""
    return {
        "success": True,
        "chapters": [ch.to_dict() for ch in chapters],
        "totalPages": total_pages,
        "fileName": file_name,
    }


def error_response(exc: Exception) -> dict[str, Any]:
    """Build the failure payload for a processed upload."""
    message = exc.message if isinstance(exc, ChaptercutterError) else str(exc)
    return {"success": False, "error": message}


def _default_extractor(settings: Settings) -> PdfPlumberExtractor:
    return PdfPlumberExtractor(
        max_workers=settings.extraction.max_workers,
        layout=settings.extraction.layout,
    )


def load_pdf(
    path: PathLike,
    settings: Settings | None = None,
    extractor: Extractor | None = None,
) -> tuple[str, int]:
    """Extract a PDF's raw text.

    Returns:
        Tuple of (text, page_count).

    Raises:
        InvalidPDFError: If the PDF cannot be opened.
        NoContentError: If the PDF has no text layer.
        ExtractionError: If text extraction fails.
    """
    path = Path(path)
    settings = settings or get_settings()
    extractor = extractor or _default_extractor(settings)

    text = extractor.extract_text(path)
    if not text.strip():
        raise NoContentError(f"No text found in {path.name}")
    total_pages = extractor.get_page_count(path)
    logger.info(f"Extracted {len(text):,} chars from {total_pages} pages of {path.name}")
    return text, total_pages


def load_document(
    path: PathLike,
    settings: Settings | None = None,
    extractor: Extractor | None = None,
) -> tuple[str, int]:
    """Read a PDF or plain-text file as raw text.

    Text files report a page count of 0.

    Returns:
        Tuple of (text, page_count).

    Raises:
        UnsupportedFileError: If the suffix is not a known PDF or text type.
        ExtractionError: If the file cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in PDF_SUFFIXES:
        return load_pdf(path, settings=settings, extractor=extractor)

    if suffix in TEXT_SUFFIXES:
        try:
            return path.read_text(encoding="utf-8"), 0
        except UnicodeDecodeError as e:
            raise ExtractionError(
                f"Cannot decode {path.name} as UTF-8",
                details=str(e),
            ) from e

    raise UnsupportedFileError(f"Unsupported file type: {path.suffix or path.name}")


def chapterize_pdf(
    path: PathLike,
    settings: Settings | None = None,
    extractor: Extractor | None = None,
) -> dict[str, Any]:
    """Extract a PDF's text and split it into chapters.

    Args:
        path: Path to the PDF file.
        settings: Settings to use. Defaults to :func:`get_settings`.
        extractor: Text backend. Defaults to :class:`PdfPlumberExtractor`.

    Returns:
        Upload response payload.
    """
    settings = settings or get_settings()
    text, total_pages = load_pdf(path, settings=settings, extractor=extractor)
    chapters = chapterize_text(text, settings=settings)
    return build_response(chapters, total_pages, Path(path).name)


def chapterize_file(
    path: PathLike,
    settings: Settings | None = None,
    extractor: Extractor | None = None,
) -> dict[str, Any]:
    """Split a PDF or plain-text file into chapters.

    Returns:
        Upload response payload.
    """
    settings = settings or get_settings()
    text, total_pages = load_document(path, settings=settings, extractor=extractor)
    chapters = chapterize_text(text, settings=settings)
    return build_response(chapters, total_pages, Path(path).name)
