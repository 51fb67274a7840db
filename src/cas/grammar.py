# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment grammar contract shared by all language families."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MarkerMatch:
    """Represent the position of one comment delimiter in a line.

    Attributes:
        start: Index of the first delimiter character.
        end: Index just past the delimiter.
    """

    start: int
    end: int


class CommentGrammar(Protocol):
    """Language-family comment delimiter contract.

    Every method searches ``line`` at or after ``pos`` and returns the first
    matching delimiter, or ``None`` when the line holds no further match.
    """

    def match_single_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        """Find the next single-line comment marker."""

    def match_multi_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        """Find the next multi-line comment opening delimiter."""

    def match_multi_line_end(self, line: str, pos: int) -> MarkerMatch | None:
        """Find the next multi-line comment closing delimiter."""


def find_marker(line: str, pos: int, marker: str) -> MarkerMatch | None:
    """Locate ``marker`` in ``line`` starting from ``pos``."""
    index = line.find(marker, pos)
    if index < 0:
        return None
    return MarkerMatch(start=index, end=index + len(marker))


def find_first_marker(
    line: str, pos: int, markers: tuple[str, ...]
) -> MarkerMatch | None:
    """Locate the leftmost occurrence of any of ``markers`` from ``pos``."""
    matches = [
        match
        for match in (find_marker(line, pos, marker) for marker in markers)
        if match is not None
    ]
    if not matches:
        return None
    return min(matches, key=lambda match: match.start)
