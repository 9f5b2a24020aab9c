"""Chaptercutter: split text extracted from PDFs into readable chapters.

This module provides a Python API for:
- Repairing extraction damage in chapter headings
- Detecting "Chapter N" headings and cleaning their titles
- Falling back to page breaks, or to a single chapter, when there are none
- Re-flowing wrapped lines into paragraphs

Simple API (recommended for most users):
    >>> from chaptercutter import extract_chapters
    >>>
    >>> chapters = extract_chapters(raw_text)
    >>> chapters[0].title

From a file, in the upload response layout:
    >>> from chaptercutter import chapterize_pdf
    >>>
    >>> result = chapterize_pdf("novel.pdf")
    >>> result["totalPages"], len(result["chapters"])

Advanced usage (for more control):
    >>> from chaptercutter import ChapterEngine, ChapterSettings
    >>>
    >>> engine = ChapterEngine(ChapterSettings(min_chapter_chars=200, paragraph_sizing="fixed"))
    >>> markers = engine.find_markers(engine.normalize(raw_text))
"""

__version__ = "0.1.0"

# Convenience API
from chaptercutter.api import (
    build_response,
    chapterize_file,
    chapterize_pdf,
    chapterize_text,
    error_response,
    load_document,
)

# Engine
from chaptercutter.chapters import Chapter, ChapterEngine, Marker, extract_chapters

# Configuration
from chaptercutter.config.settings import ChapterSettings, Settings, get_settings

# Exceptions
from chaptercutter.exceptions import (
    ChaptercutterError,
    ConfigError,
    ExtractionError,
    InvalidPDFError,
    InvalidSettingsError,
    NoContentError,
    UnsupportedFileError,
)

# Extractors (backends)
from chaptercutter.extractors.base import Extractor
from chaptercutter.extractors.pdfplumber import PdfPlumberExtractor

__all__ = [
    # Version
    "__version__",
    # Engine
    "extract_chapters",
    "ChapterEngine",
    "Chapter",
    "Marker",
    # Convenience API
    "chapterize_text",
    "chapterize_pdf",
    "chapterize_file",
    "load_document",
    "build_response",
    "error_response",
    # Configuration
    "ChapterSettings",
    "Settings",
    "get_settings",
    # Exceptions
    "ChaptercutterError",
    "ExtractionError",
    "InvalidPDFError",
    "NoContentError",
    "UnsupportedFileError",
    "ConfigError",
    "InvalidSettingsError",
    # Extractors
    "Extractor",
    "PdfPlumberExtractor",
]
