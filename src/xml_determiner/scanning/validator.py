"""Single-pass well-formedness scanner for the restricted XML dialect.

The dialect knows element tags, one optional leading prolog, comments and the
five canonical character escapes. Attributes, self-closing tags, DTDs,
namespaces and CDATA sections are not part of it, so documents using them are
reported invalid.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .patterns import (
    CLOSING_TAG_PREFIX,
    find_comment_end,
    find_tag,
    has_only_canonical_escapes,
    is_comment_start,
    is_full_comment,
    is_prolog,
    strip_bounds,
)

logger = logging.getLogger(__name__)


class NestingStack:
    """LIFO record of the names of currently open elements."""

    def __init__(self) -> None:
        self._names: List[str] = []

    def push(self, name: str) -> None:
        self._names.append(name)

    def pop(self) -> Optional[str]:
        """Remove and return the innermost open name, or None when empty."""
        if not self._names:
            return None
        return self._names.pop()

    def peek(self) -> Optional[str]:
        return self._names[-1] if self._names else None

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)


@dataclass
class ScanState:
    """Mutable state of one scan over a buffer.

    ``position`` and ``end`` delimit the unconsumed part of ``text``.
    """

    text: str
    position: int = 0
    end: int = 0
    after_prolog: bool = False
    after_head: bool = False
    stack: NestingStack = field(default_factory=NestingStack)

    @classmethod
    def for_text(cls, text: str) -> "ScanState":
        return cls(text=text, end=len(text))

    @property
    def exhausted(self) -> bool:
        """Check whether the whole input has been consumed."""
        return self.position >= self.end


def _reject(reason: str, offset: int) -> bool:
    logger.debug("Document rejected: %s", reason, extra={"offset": offset})
    return False


def determine_xml(text: str) -> bool:
    """Determine whether ``text`` is a well-formed document.

    The scan walks from tag to tag. The text before each tag must only hold
    canonical escapes; the first tag may be a ``<?...?>`` prolog; the first
    real tag must start right at the unconsumed text; comments are skipped;
    closing tags must match the innermost open tag. The document is valid when
    everything was consumed and no element is left open.

    Args:
        text: Document candidate, read as-is

    Returns:
        True for a valid document, False otherwise

    Examples:
        >>> determine_xml("<Design><Code>hello world</Code></Design>")
        True
        >>> determine_xml("<Design><Code>hello world</Code></Design><People>")
        False
    """
    if not text:
        return _reject("empty input", 0)

    state = ScanState.for_text(text)

    while not state.exhausted:
        match = find_tag(text, state.position, state.end)
        if match is None:
            break

        segment_start = state.position
        tag_start, tag_end = match.span()

        if tag_start > segment_start and not has_only_canonical_escapes(
            text, segment_start, tag_start
        ):
            return _reject("unknown character reference in text", segment_start)

        state.position = tag_end

        # Only the very first tag may be a prolog
        if not state.after_prolog:
            state.after_prolog = True
            if is_prolog(text, tag_start, tag_end):
                state.position, state.end = strip_bounds(
                    text, state.position, state.end
                )
                if state.exhausted:
                    return _reject("prolog without a document", tag_start)
                continue

        if not state.after_head:
            if tag_start != segment_start:
                return _reject("content before the first tag", segment_start)
            state.after_head = True

        if is_comment_start(text, tag_start, tag_end):
            if is_full_comment(text, tag_start, tag_end):
                continue
            # The first '>' was inside the comment; the span itself is still
            # checked as a tag below.
            comment_end = find_comment_end(text, state.position, state.end)
            if comment_end is None:
                return _reject("unterminated comment", tag_start)
            state.position = comment_end

        if text.find("<", tag_start + 1, tag_end - 1) != -1:
            return _reject("'<' inside a tag", tag_start)

        if text.startswith(CLOSING_TAG_PREFIX, tag_start, tag_end):
            name = text[tag_start + 2:tag_end - 1]
            if state.stack.pop() != name:
                return _reject("closing tag does not match an open tag", tag_start)
            continue

        state.stack.push(text[tag_start + 1:tag_end - 1])

    if not state.exhausted:
        return _reject("trailing content", state.position)
    if state.stack:
        return _reject("unclosed elements", state.position)
    return True
