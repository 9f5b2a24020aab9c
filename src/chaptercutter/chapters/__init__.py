"""Chapter detection and prose reconstruction."""

from chaptercutter.chapters.engine import ChapterEngine, extract_chapters
from chaptercutter.chapters.models import Chapter, Marker

__all__ = ["ChapterEngine", "Chapter", "Marker", "extract_chapters"]
