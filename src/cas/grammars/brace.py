# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment grammar for C, C++, Java and JavaScript."""

from cas.grammar import MarkerMatch, find_marker

SINGLE_LINE_MARKER = "//"
MULTI_LINE_OPEN = "/*"
MULTI_LINE_CLOSE = "*/"


class BraceGrammar:
    """Match ``//`` line comments and ``/* ... */`` block comments."""

    def match_single_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        return find_marker(line, pos, SINGLE_LINE_MARKER)

    def match_multi_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        return find_marker(line, pos, MULTI_LINE_OPEN)

    def match_multi_line_end(self, line: str, pos: int) -> MarkerMatch | None:
        # Search starts past the opener, so "/*/" stays open.
        return find_marker(line, pos, MULTI_LINE_CLOSE)
