"""The chapterization pipeline: headings first, then fallbacks."""

import logging

from chaptercutter.chapters.boundaries import split_chapters
from chaptercutter.chapters.fallback import single_chapter, split_on_page_breaks
from chaptercutter.chapters.markers import find_markers
from chaptercutter.chapters.models import Chapter, Marker
from chaptercutter.chapters.normalize import collapse_blank_lines, normalize, repair_headings
from chaptercutter.chapters.prose import reconstruct
from chaptercutter.config.settings import ChapterSettings

logger = logging.getLogger(__name__)


class ChapterEngine:
    """Split extracted document text into titled, paragraphed chapters.

    Strategies run as a strict cascade:

    1. Chapter headings (``Chapter 3: Title``), cut at marker offsets.
    2. Page breaks (long newline runs), if step 1 gave at most one chapter.
    3. The whole document as ``Chapter 1``, if step 2 also gave at most one.

    The engine holds no state besides its settings and may be shared freely.
    """

    def __init__(self, settings: ChapterSettings | None = None):
        """Initialize the engine.

        Args:
            settings: Thresholds and paragraph options. Defaults to
                ``ChapterSettings()``; the engine never reads config files.
        """
        self.settings = settings or ChapterSettings()

    def normalize(self, raw_text: str) -> str:
        return normalize(raw_text)

    def find_markers(self, normalized: str) -> list[Marker]:
        return find_markers(normalized)

    def split(self, normalized: str, markers: list[Marker]) -> list[Chapter]:
        return split_chapters(normalized, markers, self.settings.min_chapter_chars)

    def reconstruct(self, raw_content: str) -> str:
        return reconstruct(raw_content, self.settings)

    def from_markers(self, normalized: str) -> list[Chapter]:
        """Heading-based chapters with reconstructed content."""
        raw_chapters = self.split(normalized, self.find_markers(normalized))
        return [
            Chapter(title=ch.title, content=self.reconstruct(ch.content))
            for ch in raw_chapters
        ]

    def extract(self, raw_text: str) -> list[Chapter]:
        """Run the full cascade.

        Args:
            raw_text: Text from a PDF-to-text extractor.

        Returns:
            At least one chapter, in document order. Empty input gives a
            single ``Chapter 1`` with empty content.

        Raises:
            TypeError: If ``raw_text`` is not a string.
        """
        if not isinstance(raw_text, str):
            raise TypeError(f"raw_text must be str, not {type(raw_text).__name__}")

        page_view = repair_headings(raw_text)
        normalized = collapse_blank_lines(page_view)

        chapters = self.from_markers(normalized)
        if len(chapters) > 1:
            logger.debug(f"Heading strategy produced {len(chapters)} chapters")
            return chapters

        logger.info(
            f"Heading strategy produced {len(chapters)} chapter(s), trying page breaks"
        )
        chapters = split_on_page_breaks(page_view, self.settings)
        if len(chapters) > 1:
            logger.debug(f"Page-break strategy produced {len(chapters)} chapters")
            return chapters

        logger.info("No usable page breaks, treating document as a single chapter")
        return single_chapter(normalized, self.settings)


def extract_chapters(
    raw_text: str,
    settings: ChapterSettings | None = None,
) -> list[Chapter]:
    """Split raw document text into chapters.

    Example:
        >>> chapters = extract_chapters(text)
        >>> [ch.title for ch in chapters]
        ['The Storm Begins', 'Aftermath']
    """
    return ChapterEngine(settings).extract(raw_text)
