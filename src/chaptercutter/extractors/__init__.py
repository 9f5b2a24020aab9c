"""PDF-to-text backends."""

from chaptercutter.extractors.base import PAGE_SEPARATOR, Extractor
from chaptercutter.extractors.pdfplumber import PdfPlumberExtractor

__all__ = ["PAGE_SEPARATOR", "Extractor", "PdfPlumberExtractor"]
