# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for comment analysis artifacts."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from cas.language import Language


class CommentKind(str, Enum):
    """Comment category."""

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"


class UnterminatedPolicy(str, Enum):
    """Handling of a multi-line comment still open at end of document."""

    DROP = "drop"
    FLUSH = "flush"


@dataclass(frozen=True)
class ScanPolicy:
    """Tunable counting and recovery behavior of the scanner.

    Attributes:
        unterminated: Whether an unclosed multi-line comment is dropped or
            flushed as a record ending on the last line.
        count_swallowed_lines_as_normal: Count lines that lie entirely inside
            an open multi-line comment as normal lines.
        allow_indented_docstrings: Let whitespace precede a Python
            triple-quote opener.

    Lines swallowed by an open multi-line comment always count as non-blank,
    so blank and non-blank lines partition the document. Only their
    normal-line counting is configurable.
    """

    unterminated: UnterminatedPolicy = UnterminatedPolicy.DROP
    count_swallowed_lines_as_normal: bool = False
    allow_indented_docstrings: bool = False


@dataclass(frozen=True)
class SourceDocument:
    """Represent one document handed to the scanner.

    Attributes:
        lines: Ordered source lines without line terminators.
        language: Document language.
        path: Originating file path, if any.
    """

    lines: tuple[str, ...]
    language: Language
    path: Path | None = None


@dataclass(frozen=True)
class CommentRecord:
    """Represent the comments that begin on one source line.

    Attributes:
        start_line: Line the first comment begins on (0-based).
        end_line: Furthest line reached by any comment in ``texts`` (0-based).
        kind: Kind of the first comment that began on ``start_line``.
        texts: Verbatim comment texts in source order.
    """

    start_line: int
    end_line: int
    kind: CommentKind
    texts: tuple[str, ...]

    @property
    def span(self) -> int:
        """Number of lines covered by the record."""
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class ScanCounters:
    """Aggregate line and comment counters for one scan pass.

    Attributes:
        total_lines: Number of input lines.
        total_non_blank_lines: Lines with text after trimming.
        total_comment_lines: Sum of every record span.
        total_comments: Comment occurrences, not records.
        total_single_line: Single-line comment occurrences.
        total_multi_line: Multi-line comment occurrences.
        total_normal_lines: Non-blank lines outside any comment.
    """

    total_lines: int = 0
    total_non_blank_lines: int = 0
    total_comment_lines: int = 0
    total_comments: int = 0
    total_single_line: int = 0
    total_multi_line: int = 0
    total_normal_lines: int = 0

    @property
    def blank_lines(self) -> int:
        """Lines that are empty after trimming."""
        return self.total_lines - self.total_non_blank_lines


@dataclass(frozen=True)
class ScanResult:
    """Represent the scanner output.

    Attributes:
        records: Comment records keyed by start line; sparse.
        counters: Aggregate counters.
        unterminated_start: Start line of a multi-line comment left open at
            end of document, or ``None``.
    """

    records: Mapping[int, CommentRecord] = field(default_factory=dict)
    counters: ScanCounters = field(default_factory=ScanCounters)
    unterminated_start: int | None = None

    def iter_texts(self) -> list[str]:
        """Return every comment text in line order."""
        return [
            text
            for line in sorted(self.records)
            for text in self.records[line].texts
        ]
