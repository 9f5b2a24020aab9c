"""Data types shared by the chapterization pipeline."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Marker:
    """A candidate chapter heading found in normalized text."""

    raw_heading: str  # keyword + designator, e.g. "Chapter 3"
    start_offset: int  # offset of raw_heading in the normalized text
    matched_text: str  # full match, including any subtitle fragment
    designator: str
    title: str
    clean_heading: str  # heading text up to the end of the title

    @property
    def end_offset(self) -> int:
        """Offset just past the full raw match."""
        return self.start_offset + len(self.matched_text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "raw_heading": self.raw_heading,
            "start_offset": self.start_offset,
            "matched_text": self.matched_text,
            "designator": self.designator,
            "title": self.title,
            "clean_heading": self.clean_heading,
        }


@dataclass
class Chapter:
    """A chapter: a title plus paragraphs separated by blank lines."""

    title: str
    content: str

    @property
    def paragraphs(self) -> list[str]:
        """Content split back into its paragraphs."""
        return [p for p in self.content.split("\n\n") if p.strip()]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"title": self.title, "content": self.content}
