"""Re-flow extracted chapter text into readable paragraphs.

PDF extraction wraps lines at the page margin and loses most paragraph
structure. Line wraps are joined back into running text, the text is split
into sentences, and sentences are grouped into paragraphs of a few
sentences each.
"""

import itertools
import random
import re
from collections.abc import Iterator

from chaptercutter.config.settings import ChapterSettings

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n\s*")

# Terminator (kept by the capturing group), whitespace, then a capital letter
# that is looked at but not consumed. Abbreviations like "Mr. Smith" and
# initials misfire; that is a known limitation.
_SENTENCE_BOUNDARY = re.compile(r"""([.!?]["'”’]?)\s+(?=["'“‘]?[A-Z])""")
_ENDS_SENTENCE = re.compile(r"""[.!?]["'”’)]?\s*$""")


def paragraph_blocks(text: str, respect_blank_lines: bool = True) -> list[str]:
    """Split text into the blocks that paragraphs are built from.

    With ``respect_blank_lines`` a blank line ends a block, unless the text
    before it stops mid-sentence (a page or column break), in which case the
    block continues. Without it the whole text is a single block.
    """
    text = text.strip()
    if not text:
        return []
    if not respect_blank_lines:
        return [text]

    blocks = []
    pending: list[str] = []
    for block in _PARAGRAPH_BREAK.split(text):
        pending.append(block)
        # Only the newest piece decides whether the sentence has ended
        if _ENDS_SENTENCE.search(block):
            blocks.append("\n".join(pending))
            pending = []
    if pending:
        blocks.append("\n".join(pending))
    return blocks


def join_lines(block: str) -> str:
    """Join wrapped lines with a space and squeeze repeated spaces."""
    return " ".join(block.split())


def split_sentences(text: str) -> list[str]:
    """Split running text into sentences.

    ``re.split`` with one capturing group alternates content and terminator
    tokens and always ends with a content token.
    """
    parts = _SENTENCE_BOUNDARY.split(text)
    sentences = [parts[i] + parts[i + 1] for i in range(0, len(parts) - 1, 2)]
    sentences.append(parts[-1])
    return [s.strip() for s in sentences if s.strip()]


def paragraph_sizes(settings: ChapterSettings) -> Iterator[int]:
    """Endless stream of sentence counts for successive paragraphs."""
    low, high = settings.sentences_per_paragraph
    if settings.paragraph_sizing == "fixed":
        return itertools.repeat((low + high) // 2)
    if settings.paragraph_sizing == "random":
        rng = random.Random(settings.random_seed)
        return (rng.randint(low, high) for _ in itertools.count())
    return itertools.cycle(range(low, high + 1))


def group_sentences(
    sentences: list[str],
    sizes: Iterator[int],
    max_sentences: int,
) -> list[str]:
    """Group one block's sentences into paragraphs.

    A block that is already short enough stays a single paragraph; longer
    blocks are cut using the next size from ``sizes``. Leftover sentences
    form the last paragraph whatever their count.
    """
    if not sentences:
        return []
    if len(sentences) <= max_sentences:
        return [" ".join(sentences)]

    paragraphs = []
    i = 0
    while i < len(sentences):
        n = next(sizes)
        paragraphs.append(" ".join(sentences[i : i + n]))
        i += n
    return paragraphs


def reconstruct(raw_content: str, settings: ChapterSettings | None = None) -> str:
    """Turn a raw content span into paragraphs separated by blank lines.

    Args:
        raw_content: Chapter text as cut from the document.
        settings: Paragraph sizing options. Defaults to ``ChapterSettings()``.

    Returns:
        Reconstructed content. Empty if the input holds only whitespace.
    """
    settings = settings or ChapterSettings()
    text = raw_content.replace("\r\n", "\n").replace("\r", "\n")
    sizes = paragraph_sizes(settings)

    paragraphs: list[str] = []
    for block in paragraph_blocks(text, settings.respect_blank_lines):
        sentences = split_sentences(join_lines(block))
        paragraphs.extend(
            group_sentences(sentences, sizes, settings.max_sentences_per_paragraph)
        )

    return "\n\n".join(p for p in paragraphs if p.strip())
