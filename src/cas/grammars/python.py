# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment grammar for Python sources."""

from cas.grammar import MarkerMatch, find_first_marker, find_marker

SINGLE_LINE_MARKER = "#"
TRIPLE_QUOTES: tuple[str, ...] = ("'''", '"""')


class PythonGrammar:
    """Match ``#`` comments and docstring-style triple-quoted blocks.

    A triple-quoted block opens only on a line that starts with a triple
    quote. It closes on the first line, the opening line included, that still
    has text at the cursor and contains a triple quote of either style
    anywhere. The close swallows the rest of that line.
    """

    def __init__(self, allow_indented_docstrings: bool = False) -> None:
        """Initialize grammar.

        Args:
            allow_indented_docstrings: Accept leading whitespace before the
                opening triple quote.
        """
        self._allow_indented_docstrings = allow_indented_docstrings

    def match_single_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        return find_marker(line, pos, SINGLE_LINE_MARKER)

    def match_multi_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        column = self._opener_column(line)
        if pos > column:
            return None
        for quote in TRIPLE_QUOTES:
            if line.startswith(quote, column):
                return MarkerMatch(start=column, end=column + len(quote))
        return None

    def match_multi_line_end(self, line: str, pos: int) -> MarkerMatch | None:
        if pos >= len(line):
            return None
        quote = find_first_marker(line, 0, TRIPLE_QUOTES)
        if quote is None:
            return None
        return MarkerMatch(start=quote.start, end=len(line))

    def _opener_column(self, line: str) -> int:
        if not self._allow_indented_docstrings:
            return 0
        return len(line) - len(line.lstrip())
