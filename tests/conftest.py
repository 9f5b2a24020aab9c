"""Pytest fixtures for Chaptercutter tests."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chaptercutter.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.chaptercutter and CHAPTERCUTTER_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in list(os.environ):
        if key.startswith("CHAPTERCUTTER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def prose() -> Callable[[str, int], str]:
    """Build ``count`` distinct sentences about ``topic``."""

    def build(topic: str, count: int) -> str:
        return " ".join(
            f"The {topic} story moves forward in step {i} of the tale." for i in range(1, count + 1)
        )

    return build


@pytest.fixture
def three_chapter_text(prose) -> str:
    """Three headed chapters separated by blank lines."""
    return (
        "Chapter 1: The Beginning\n\n"
        f"{prose('dawn', 4)}\n\n"
        "Chapter 2: The Middle\n\n"
        f"{prose('noon', 4)}\n\n"
        "Chapter 3: The End\n\n"
        f"{prose('dusk', 4)}\n"
    )


@pytest.fixture
def text_file(tmp_path, three_chapter_text) -> Path:
    """Write the three-chapter text to a .txt file."""
    path = tmp_path / "novel.txt"
    path.write_text(three_chapter_text, encoding="utf-8")
    return path
