"""FASTA-style line classifier."""

from __future__ import annotations

import re

from ..models import LineCategory


HEADER_PATTERN = re.compile(r'^>')
SEQUENCE_PATTERN = re.compile(r'^[AUTGCautgc]+$')
COMMENT_PATTERN = re.compile(r'^;')


def classify(line: str) -> LineCategory:
    """
    Classify a single raw line.

    Rules are tried in order and the first match wins: header (leading ``>``),
    sequence (only A/U/T/G/C in any case), comment (leading ``;``), blank
    (empty string). Anything else, whitespace-only lines included, is unknown.

    Args:
        line: Raw line without its newline

    Returns:
        The line's category
    """
    if HEADER_PATTERN.match(line):
        return LineCategory.HEADER
    # fullmatch: "$" alone would accept a trailing newline
    if SEQUENCE_PATTERN.fullmatch(line):
        return LineCategory.SEQUENCE
    if COMMENT_PATTERN.match(line):
        return LineCategory.COMMENT
    if line == "":
        return LineCategory.BLANK
    return LineCategory.UNKNOWN
