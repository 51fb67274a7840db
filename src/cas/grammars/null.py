# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Grammar used for languages without comment support."""

from cas.grammar import MarkerMatch


class NullGrammar:
    """Never match any comment delimiter."""

    def match_single_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        return None

    def match_multi_line_start(self, line: str, pos: int) -> MarkerMatch | None:
        return None

    def match_multi_line_end(self, line: str, pos: int) -> MarkerMatch | None:
        return None
