"""Tests for the high-level API."""

from pathlib import Path

import pytest

from chaptercutter import api
from chaptercutter.api import (
    chapterize_file,
    chapterize_pdf,
    chapterize_text,
    error_response,
    load_document,
)
from chaptercutter.config.settings import ChapterSettings, Settings
from chaptercutter.exceptions import (
    ExtractionError,
    InvalidPDFError,
    NoContentError,
    UnsupportedFileError,
)


class StubExtractor:
    """Extractor returning canned text instead of reading a PDF."""

    def __init__(self, text: str, pages: int = 3):
        self.text = text
        self.pages = pages
        self.calls: list[Path] = []

    def extract_text(self, path: Path) -> str:
        self.calls.append(path)
        return self.text

    def get_page_count(self, path: Path) -> int:
        return self.pages

    def extract_text_by_page(self, path: Path) -> list[tuple[int, str]]:
        return [(0, self.text)]


@pytest.fixture
def pdf_path(tmp_path) -> Path:
    """An empty file with a .pdf suffix; content comes from the stub."""
    path = tmp_path / "novel.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


class TestChapterizePdf:
    """Tests for the upload response payload."""

    def test_success_payload(self, pdf_path, three_chapter_text):
        """The payload carries chapters, page count and file name."""
        result = chapterize_pdf(pdf_path, extractor=StubExtractor(three_chapter_text, pages=12))

        assert result["success"] is True
        assert result["totalPages"] == 12
        assert result["fileName"] == "novel.pdf"
        assert [ch["title"] for ch in result["chapters"]] == [
            "The Beginning",
            "The Middle",
            "The End",
        ]
        assert set(result["chapters"][0]) == {"title", "content"}

    def test_no_text_raises(self, pdf_path):
        """A PDF without a text layer is a NoContentError."""
        with pytest.raises(NoContentError):
            chapterize_pdf(pdf_path, extractor=StubExtractor("  \n\n  "))

    def test_settings_are_used(self, pdf_path, three_chapter_text):
        """Explicit settings override the loaded ones."""
        settings = Settings(chapters=ChapterSettings(min_chapter_chars=10_000))
        result = chapterize_pdf(
            pdf_path,
            settings=settings,
            extractor=StubExtractor(three_chapter_text),
        )

        assert [ch["title"] for ch in result["chapters"]] == ["Chapter 1"]

    def test_default_extractor_from_settings(self, monkeypatch, pdf_path, three_chapter_text):
        """Without an extractor the configured backend is built."""
        stub = StubExtractor(three_chapter_text)
        monkeypatch.setattr(api, "_default_extractor", lambda settings: stub)

        chapterize_pdf(pdf_path)

        assert stub.calls == [pdf_path]


class TestChapterizeFile:
    """Tests for file-type dispatch."""

    def test_text_file(self, text_file):
        """Text files are read directly and report zero pages."""
        result = chapterize_file(text_file)

        assert result["totalPages"] == 0
        assert result["fileName"] == "novel.txt"
        assert len(result["chapters"]) == 3

    def test_markdown_file(self, tmp_path, three_chapter_text):
        """Markdown is treated as plain text."""
        path = tmp_path / "novel.md"
        path.write_text(three_chapter_text, encoding="utf-8")

        assert len(chapterize_file(path)["chapters"]) == 3

    def test_pdf_goes_through_extractor(self, pdf_path, three_chapter_text):
        """PDF files use the extractor."""
        stub = StubExtractor(three_chapter_text)
        chapterize_file(pdf_path, extractor=stub)

        assert stub.calls == [pdf_path]

    def test_unsupported_suffix(self, tmp_path):
        """Unknown file types are rejected before reading."""
        path = tmp_path / "novel.docx"
        path.write_bytes(b"PK")

        with pytest.raises(UnsupportedFileError) as exc_info:
            chapterize_file(path)

        assert exc_info.value.exit_code == 23

    def test_undecodable_text(self, tmp_path):
        """Text that is not UTF-8 is an extraction error."""
        path = tmp_path / "latin.txt"
        path.write_bytes(b"caf\xe9 au lait")

        with pytest.raises(ExtractionError):
            load_document(path)

    def test_empty_text_file(self, tmp_path):
        """An empty text file still yields one chapter."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        result = chapterize_file(path)

        assert result["chapters"] == [{"title": "Chapter 1", "content": ""}]


class TestChapterizeText:
    """Tests for text input."""

    def test_uses_loaded_settings(self, monkeypatch, prose):
        """Settings come from the environment when none are passed."""
        monkeypatch.setenv("CHAPTERCUTTER_CHAPTERS__PARAGRAPH_SIZING", "fixed")
        text = " ".join(prose(f"t{i}", 1) for i in range(8))

        chapters = chapterize_text(text)

        assert len(chapters[0].paragraphs) == 2


class TestErrorResponse:
    """Tests for the failure payload."""

    def test_library_error(self):
        """Library errors report their message."""
        exc = InvalidPDFError("Cannot open PDF: bad.pdf", details="trailer missing")

        assert error_response(exc) == {"success": False, "error": "Cannot open PDF: bad.pdf"}

    def test_other_error(self):
        """Other exceptions report their string form."""
        assert error_response(ValueError("boom")) == {"success": False, "error": "boom"}
