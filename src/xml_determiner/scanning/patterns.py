"""Lexical matchers used by the document scanner.

Every matcher works on the caller's buffer through ``start``/``end`` bounds
instead of slicing it, so the scanner never copies the text it walks over.
All patterns use ``[\\s\\S]*?`` so a match is the shortest one and may span
line breaks.
"""

import re
from typing import Optional, Tuple

# Unicode White_Space. Narrower than str.isspace(), which also covers U+001C..U+001F.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Canonical escapes accepted in text content
CANONICAL_ESCAPES = frozenset({"&lt;", "&gt;", "&amp;", "&apos;", "&quot;"})

TAG_PATTERN = re.compile(r"<[\s\S]*?>")
PROLOG_PATTERN = re.compile(r"<\?[\s\S]*?\?>")
COMMENT_OPEN_PATTERN = re.compile(r"<!--")
COMMENT_FULL_PATTERN = re.compile(r"<!--[\s\S]*?-->")
COMMENT_CLOSE_PATTERN = re.compile(r"[\s\S]*?-->")
REFERENCE_PATTERN = re.compile("&[^;" + WHITESPACE + "]*;?")

CLOSING_TAG_PREFIX = "</"


def find_tag(text: str, start: int, end: int) -> Optional[re.Match]:
    """Find the next ``<...>`` span in ``text[start:end]``.

    The closing ``>`` is the nearest one after the ``<``; an empty interior is
    allowed. Offsets of the returned match refer to ``text`` itself.
    """
    return TAG_PATTERN.search(text, start, end)


def is_prolog(text: str, start: int, end: int) -> bool:
    """Check whether the tag span contains a ``<?...?>`` declaration."""
    return PROLOG_PATTERN.search(text, start, end) is not None


def is_comment_start(text: str, start: int, end: int) -> bool:
    """Check whether the tag span opens a comment."""
    return COMMENT_OPEN_PATTERN.match(text, start, end) is not None


def is_full_comment(text: str, start: int, end: int) -> bool:
    """Check whether the tag span is a whole ``<!--...-->`` comment by itself."""
    return COMMENT_FULL_PATTERN.match(text, start, end) is not None


def find_comment_end(text: str, start: int, end: int) -> Optional[int]:
    """Return the offset just past the first ``-->`` in ``text[start:end]``."""
    match = COMMENT_CLOSE_PATTERN.match(text, start, end)
    if match is None:
        return None
    return match.end()


def has_only_canonical_escapes(text: str, start: int, end: int) -> bool:
    """Check the references in a text segment.

    Each ``&`` starts a reference running up to the first ``;`` or whitespace
    (the ``;`` is optional). The segment passes when every reference found is
    one of the five canonical escapes; a segment without references passes.

    Args:
        text: Buffer holding the segment
        start: Offset of the first character of the segment
        end: Offset just past the last character of the segment

    Returns:
        True if no unknown, numeric, bare or unterminated reference is present
    """
    for match in REFERENCE_PATTERN.finditer(text, start, end):
        if match.group() not in CANONICAL_ESCAPES:
            return False
    return True


def strip_bounds(text: str, start: int, end: int) -> Tuple[int, int]:
    """Narrow ``(start, end)`` so the range has no surrounding whitespace."""
    while start < end and text[start] in WHITESPACE:
        start += 1
    while end > start and text[end - 1] in WHITESPACE:
        end -= 1
    return start, end
