"""Text normalization applied before chapter detection."""

import re

# "C hapter", "Ch apter", "CHAPT ER", "Chap\nter": a keyword split by one stray
# space or line break. The letters keep their original case.
_SPLIT_KEYWORD = re.compile(
    r"\b(c)[ \t\n](hapter)\b"
    r"|\b(ch)[ \t\n](apter)\b"
    r"|\b(cha)[ \t\n](pter)\b"
    r"|\b(chap)[ \t\n](ter)\b"
    r"|\b(chapt)[ \t\n](er)\b"
    r"|\b(chapte)[ \t\n](r)\b",
    re.IGNORECASE,
)

_WHITESPACE_LINE = re.compile(r"^[ \t\f\v]+$", re.MULTILINE)
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def _join_keyword(match: re.Match) -> str:
    return "".join(part for part in match.groups() if part)


def repair_headings(raw: str) -> str:
    """Unify line endings and rejoin heading keywords split by extraction.

    Newline runs are left untouched, so page breaks survive. This is the
    view of the document the page-break fallback works on.
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    return _SPLIT_KEYWORD.sub(_join_keyword, text)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of three or more newlines to exactly two.

    Whitespace-only lines are emptied first so they count toward a run.
    Single and double newlines are kept as they are.
    """
    text = _WHITESPACE_LINE.sub("", text)
    return _EXCESS_NEWLINES.sub("\n\n", text)


def normalize(raw: str) -> str:
    """Prepare extracted text for marker detection."""
    return collapse_blank_lines(repair_headings(raw))
