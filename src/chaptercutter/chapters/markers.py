"""Chapter heading detection.

Headings look like ``Chapter 3``, ``CHAPTER TWELVE: Title`` or
``Ch. IV - Title``. They must open the document or follow a blank line, so
a "chapter 3" mentioned mid-sentence is never a marker.
"""

import logging
import re

from chaptercutter.chapters.models import Marker

logger = logging.getLogger(__name__)

# Longest words first so "Seventeen" is not read as "Seven"
CARDINAL_WORDS = (
    "Seventeen", "Thirteen", "Fourteen", "Eighteen", "Nineteen",
    "Fifteen", "Sixteen", "Eleven", "Twelve", "Twenty",
    "Three", "Seven", "Eight", "Four", "Five", "Nine",
    "One", "Two", "Six", "Ten",
)

_WORDS = "|".join(CARDINAL_WORDS)
_DESIGNATOR = rf"\d+|(?:{_WORDS}|{_WORDS.upper()})|[IVXLCDM]+"

MARKER_PATTERN = re.compile(
    r"(?:\A|(?<=\n\n))[ \t]*"
    r"(?P<heading>"
    r"(?P<prefix>(?P<keyword>Chapter|CHAPTER|Ch\.)[ \t]+(?P<designator>" + _DESIGNATOR + r"))\b"
    r"(?:[ \t]*(?P<separator>[:\-–—])[ \t]*(?P<subtitle>[^\n]*))?"
    r")"
)

# A short Title Case phrase followed by what looks like the start of a
# sentence ("The Storm Begins" | "When the rain...").
TITLE_BEFORE_SENTENCE = re.compile(
    r"(?P<title>(?:[A-Z][\w'’]*[ \t]+){0,4}[A-Z][\w'’]*)"
    r"[ \t]+(?=[A-Z][a-z'’]*[ \t]+[a-z])"
)


def clean_title(subtitle: str) -> str | None:
    """Return the short title at the head of a run-on subtitle, if any."""
    match = TITLE_BEFORE_SENTENCE.match(subtitle)
    if match:
        return match.group("title")
    return None


def _build_marker(match: re.Match) -> Marker:
    prefix = match.group("prefix")
    designator = match.group("designator")
    heading = match.group("heading").rstrip()
    subtitle = (match.group("subtitle") or "").strip()

    if subtitle:
        title = clean_title(subtitle) or subtitle
        # Take the clean heading verbatim from the source so it can be found again
        title_start = match.start("subtitle") - match.start("heading")
        clean_heading = heading[: title_start + len(title)]
    else:
        title = f"Chapter {designator}"
        clean_heading = heading  # may carry a dangling separator, e.g. "Chapter 3:"

    return Marker(
        raw_heading=prefix,
        start_offset=match.start("heading"),
        matched_text=heading,
        designator=designator,
        title=title,
        clean_heading=clean_heading,
    )


def find_markers(normalized: str) -> list[Marker]:
    """Find chapter headings in normalized text.

    Args:
        normalized: Output of :func:`chaptercutter.chapters.normalize.normalize`.

    Returns:
        Markers in ascending offset order. Empty if none were found, which
        tells the caller to use a fallback strategy.
    """
    markers = [_build_marker(m) for m in MARKER_PATTERN.finditer(normalized)]
    logger.debug(f"Found {len(markers)} chapter markers")
    for marker in markers:
        logger.debug(f"Marker at {marker.start_offset}: {marker.title!r}")
    return markers
