"""Tests for the command line interface."""

import json

import pytest

from chaptercutter import __version__, api
from chaptercutter.cli.app import app


class StubExtractor:
    def __init__(self, text: str, pages: int = 5):
        self.text = text
        self.pages = pages

    def extract_text(self, path):
        return self.text

    def get_page_count(self, path):
        return self.pages

    def extract_text_by_page(self, path):
        return [(0, self.text)]


@pytest.fixture
def pdf_file(tmp_path, monkeypatch, three_chapter_text):
    """A .pdf path whose text comes from a stub extractor."""
    path = tmp_path / "novel.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    monkeypatch.setattr(api, "_default_extractor", lambda settings: StubExtractor(three_chapter_text))
    return path


class TestAppCallback:
    """Tests for global options."""

    def test_version(self, cli_runner):
        """--version prints the version and exits cleanly."""
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self, cli_runner):
        """Running without a command prints usage."""
        result = cli_runner.invoke(app, [])

        assert "chapters" in result.output


class TestChaptersCommand:
    """Tests for the chapters command."""

    def test_json_output(self, cli_runner, text_file):
        """--json prints the upload payload."""
        result = cli_runner.invoke(app, ["chapters", str(text_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["success"] is True
        assert data["fileName"] == "novel.txt"
        assert [ch["title"] for ch in data["chapters"]] == [
            "The Beginning",
            "The Middle",
            "The End",
        ]

    def test_pdf_input(self, cli_runner, pdf_file):
        """PDFs report their page count."""
        result = cli_runner.invoke(app, ["chapters", str(pdf_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["totalPages"] == 5

    def test_pretty_output(self, cli_runner, text_file):
        """--pretty renders a summary table."""
        result = cli_runner.invoke(app, ["chapters", str(text_file), "--pretty"])

        assert result.exit_code == 0
        assert "The Beginning" in result.stdout
        assert "Chapters (3)" in result.stdout

    def test_full_output(self, cli_runner, text_file):
        """--full prints every chapter's text."""
        result = cli_runner.invoke(app, ["chapters", str(text_file), "--pretty", "--full"])

        assert result.exit_code == 0
        assert "The Middle" in result.stdout
        assert "noon" in result.stdout

    def test_output_file(self, cli_runner, text_file, tmp_path):
        """-o writes the payload as JSON."""
        out = tmp_path / "chapters.json"
        result = cli_runner.invoke(app, ["chapters", str(text_file), "-o", str(out)])

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert len(data["chapters"]) == 3

    def test_missing_file(self, cli_runner, tmp_path):
        """A path that does not exist exits with 1."""
        result = cli_runner.invoke(app, ["chapters", str(tmp_path / "nope.pdf")])

        assert result.exit_code == 1

    def test_unsupported_file(self, cli_runner, tmp_path):
        """Unsupported inputs exit with the error's code."""
        path = tmp_path / "novel.docx"
        path.write_bytes(b"PK")

        result = cli_runner.invoke(app, ["chapters", str(path)])

        assert result.exit_code == 23

    def test_silent_suppresses_output(self, cli_runner, text_file):
        """--silent prints nothing on success."""
        result = cli_runner.invoke(app, ["--silent", "chapters", str(text_file), "--json"])

        assert result.exit_code == 0
        assert result.stdout == ""


class TestMarkersCommand:
    """Tests for the markers command."""

    def test_json_output(self, cli_runner, text_file):
        """Markers are listed with offsets and titles."""
        result = cli_runner.invoke(app, ["markers", str(text_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["count"] == 3
        assert data["markers"][0]["start_offset"] == 0
        assert data["markers"][1]["title"] == "The Middle"

    def test_pretty_output(self, cli_runner, text_file):
        """The pretty view shows a marker table."""
        result = cli_runner.invoke(app, ["markers", str(text_file), "--pretty"])

        assert result.exit_code == 0
        assert "Markers (3)" in result.stdout


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_prints_normalized_text(self, cli_runner, tmp_path):
        """Heading repair and newline collapsing are applied."""
        path = tmp_path / "raw.txt"
        path.write_text("Intro.\n\n\n\nC hapter 1\n\nBody.", encoding="utf-8")

        result = cli_runner.invoke(app, ["normalize", str(path)])

        assert result.exit_code == 0
        assert result.stdout == "Intro.\n\nChapter 1\n\nBody.\n"

    def test_output_file(self, cli_runner, tmp_path):
        """-o writes the normalized text."""
        path = tmp_path / "raw.txt"
        path.write_text("CHAPT ER 2\n\n\n\nBody.", encoding="utf-8")
        out = tmp_path / "clean.txt"

        result = cli_runner.invoke(app, ["normalize", str(path), "-o", str(out)])

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "CHAPTER 2\n\nBody."


class TestConfigCommand:
    """Tests for the config command."""

    def test_json_output(self, cli_runner, monkeypatch):
        """Effective settings include environment overrides."""
        monkeypatch.setenv("CHAPTERCUTTER_CHAPTERS__MIN_CHAPTER_CHARS", "75")

        result = cli_runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["settings"]["chapters"]["min_chapter_chars"] == 75
        assert data["config_file"].endswith("config.yaml")

    def test_invalid_settings_exit_code(self, cli_runner, monkeypatch):
        """Invalid settings exit with the settings error code."""
        monkeypatch.setenv("CHAPTERCUTTER_CHAPTERS__PARAGRAPH_SIZING", "golden")

        result = cli_runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 31
