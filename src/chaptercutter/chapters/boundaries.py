"""Compute the content span owned by each chapter marker."""

import logging

from chaptercutter.chapters.models import Chapter, Marker

logger = logging.getLogger(__name__)


def content_start(normalized: str, marker: Marker) -> int:
    """Offset where a marker's chapter content begins.

    The clean heading is searched for only inside the marker's own match, so
    the lookup stays local. A repeated short heading within that window
    could still anchor early; this is accepted.
    """
    pos = normalized.find(marker.clean_heading, marker.start_offset, marker.end_offset)
    if pos == -1:
        start = marker.end_offset
    else:
        start = pos + len(marker.clean_heading)

    while start < len(normalized) and normalized[start].isspace():
        start += 1
    return start


def split_chapters(
    normalized: str,
    markers: list[Marker],
    min_chapter_chars: int = 50,
) -> list[Chapter]:
    """Cut the normalized text into raw chapters at marker positions.

    Args:
        normalized: Normalized document text.
        markers: Markers in ascending offset order.
        min_chapter_chars: Chapters whose trimmed content is not longer than
            this are dropped (table-of-contents lines, stray headings).

    Returns:
        Chapters with raw, not yet reconstructed, content.
    """
    chapters = []
    for i, marker in enumerate(markers):
        start = content_start(normalized, marker)
        end = markers[i + 1].start_offset if i + 1 < len(markers) else len(normalized)
        content = normalized[start:end].strip() if start < end else ""

        if len(content) <= min_chapter_chars:
            logger.debug(
                f"Dropping {marker.raw_heading!r} at {marker.start_offset}: "
                f"{len(content)} chars of content"
            )
            continue

        chapters.append(Chapter(title=marker.title, content=content))

    return chapters
