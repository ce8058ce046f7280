"""Scanning layer for restricted-XML well-formedness checks.

Key Components:
    determine_xml: Single-pass validity predicate over a text buffer
    NestingStack: LIFO record of open element names
    ScanState: Per-call cursor, flags and stack of a scan
"""

from .patterns import (
    CANONICAL_ESCAPES,
    WHITESPACE,
    find_comment_end,
    find_tag,
    has_only_canonical_escapes,
    is_comment_start,
    is_full_comment,
    is_prolog,
    strip_bounds,
)
from .validator import NestingStack, ScanState, determine_xml

__all__ = [
    "CANONICAL_ESCAPES",
    "WHITESPACE",
    "NestingStack",
    "ScanState",
    "determine_xml",
    "find_comment_end",
    "find_tag",
    "has_only_canonical_escapes",
    "is_comment_start",
    "is_full_comment",
    "is_prolog",
    "strip_bounds",
]
