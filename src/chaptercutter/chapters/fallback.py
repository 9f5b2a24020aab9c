"""Lower-confidence segmentation used when headings are not found."""

import logging
import re

from chaptercutter.chapters.models import Chapter
from chaptercutter.chapters.prose import reconstruct
from chaptercutter.config.settings import ChapterSettings

logger = logging.getLogger(__name__)

_PAGE_TITLE = re.compile(r"^(?:Chapter|CHAPTER)")


def page_break_pattern(newline_run: int) -> re.Pattern:
    """Pattern for ``newline_run`` or more newlines; whitespace-only lines count."""
    return re.compile(rf"(?:\n[ \t]*){{{newline_run},}}")


def split_on_page_breaks(
    text: str,
    settings: ChapterSettings | None = None,
) -> list[Chapter]:
    """Split on long newline runs, which is how page breaks survive extraction.

    Args:
        text: Document with heading repair applied but newline runs intact.
        settings: Thresholds. Defaults to ``ChapterSettings()``.

    Returns:
        One chapter per segment longer than the minimum segment size.
    """
    settings = settings or ChapterSettings()
    pattern = page_break_pattern(settings.page_break_newline_run)
    segments = [
        s.strip()
        for s in pattern.split(text)
        if len(s.strip()) > settings.min_page_break_segment_chars
    ]
    logger.debug(f"Page-break split kept {len(segments)} segments")

    chapters = []
    for index, segment in enumerate(segments, 1):
        first_line, _, rest = segment.partition("\n")
        first_line = first_line.strip()
        if _PAGE_TITLE.match(first_line) and len(first_line) < settings.max_page_break_title_chars:
            title, content = first_line, rest
        else:
            title, content = f"Chapter {index}", segment
        chapters.append(Chapter(title=title, content=reconstruct(content, settings)))

    return chapters


def single_chapter(
    normalized: str,
    settings: ChapterSettings | None = None,
) -> list[Chapter]:
    """Treat the whole document as one chapter. Never fails."""
    return [Chapter(title="Chapter 1", content=reconstruct(normalized, settings))]
