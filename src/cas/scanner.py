# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-oriented comment scanner.

The scanner is a small state machine over ``CODE``, ``IN_SINGLE_LINE`` and
``IN_MULTI_LINE``. Each transition consumes a slice of the current line and
may emit one comment. Comments are grouped into records keyed by the line
where they begin.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from cas.grammar import CommentGrammar
from cas.grammars import grammar_for
from cas.language import Language
from cas.model import (
    CommentKind,
    CommentRecord,
    ScanCounters,
    ScanPolicy,
    ScanResult,
    UnterminatedPolicy,
)


class ScanState(str, Enum):
    """Scanner position relative to comment regions."""

    CODE = "code"
    IN_SINGLE_LINE = "in_single_line"
    IN_MULTI_LINE = "in_multi_line"


@dataclass(frozen=True)
class ScanCursor:
    """Represent scanner state carried between transitions.

    Attributes:
        state: Active state.
        start_line: Line the active comment began on.
        parts: Text pieces accumulated for the active multi-line comment;
            appended in place and joined once when the comment completes.
    """

    state: ScanState = ScanState.CODE
    start_line: int = 0
    parts: list[str] = field(default_factory=list)

    @property
    def buffer(self) -> str:
        """Accumulated multi-line comment text."""
        return "".join(self.parts)


@dataclass(frozen=True)
class EmittedComment:
    """Represent one complete comment produced by a transition."""

    start_line: int
    end_line: int
    kind: CommentKind
    text: str


def step(
    grammar: CommentGrammar, cursor: ScanCursor, line: str, line_index: int, pos: int
) -> tuple[ScanCursor, int, EmittedComment | None]:
    """Advance the scanner by one transition within a line.

    Args:
        grammar: Comment grammar of the document language.
        cursor: Current scanner state.
        line: Text of the current line.
        line_index: 0-based index of the current line.
        pos: Index in ``line`` to resume from.

    Returns:
        The next state, the index to resume from, and the comment completed
        by this transition, if any.
    """
    if cursor.state is ScanState.IN_SINGLE_LINE:
        comment = EmittedComment(
            start_line=line_index,
            end_line=line_index,
            kind=CommentKind.SINGLE_LINE,
            text=line[pos:],
        )
        return ScanCursor(), len(line), comment

    if cursor.state is ScanState.IN_MULTI_LINE:
        close = grammar.match_multi_line_end(line, pos)
        if close is None:
            cursor.parts.append(line[pos:])
            return cursor, len(line), None
        comment = EmittedComment(
            start_line=cursor.start_line,
            end_line=line_index,
            kind=CommentKind.MULTI_LINE,
            text=cursor.buffer + line[pos : close.end],
        )
        return ScanCursor(), close.end, comment

    single = grammar.match_single_line_start(line, pos)
    multi = grammar.match_multi_line_start(line, pos)
    if single is not None and (multi is None or single.start < multi.start):
        return (
            ScanCursor(state=ScanState.IN_SINGLE_LINE, start_line=line_index),
            single.start,
            None,
        )
    if multi is not None:
        opened = ScanCursor(
            state=ScanState.IN_MULTI_LINE,
            start_line=line_index,
            parts=[line[multi.start : multi.end]],
        )
        return opened, multi.end, None
    return cursor, len(line), None


@dataclass
class _PendingRecord:
    start_line: int
    end_line: int
    kind: CommentKind
    texts: list[str] = field(default_factory=list)

    def freeze(self) -> CommentRecord:
        return CommentRecord(
            start_line=self.start_line,
            end_line=self.end_line,
            kind=self.kind,
            texts=tuple(self.texts),
        )


class CommentScanner:
    """Extract comments and line counters from one document."""

    def __init__(self, policy: ScanPolicy | None = None) -> None:
        """Initialize scanner.

        Args:
            policy: Counting and recovery policy. Defaults to ``ScanPolicy()``.
        """
        self._policy = policy or ScanPolicy()

    def scan(
        self, lines: Sequence[str], language: Language | str | None
    ) -> ScanResult:
        """Scan source lines for comments.

        Args:
            lines: Ordered source lines.
            language: Document language or raw language identifier.

        Returns:
            Comment records keyed by start line and aggregate counters.
        """
        grammar = grammar_for(Language.from_id(language), self._policy)
        pending: dict[int, _PendingRecord] = {}
        cursor = ScanCursor()
        non_blank = 0
        normal = 0
        single_count = 0
        multi_count = 0

        for line_index, line in enumerate(lines):
            if not line.strip():
                if cursor.state is ScanState.IN_MULTI_LINE:
                    cursor.parts.append("\n")
                continue

            non_blank += 1
            began_inside = cursor.state is ScanState.IN_MULTI_LINE
            emitted_on_line = False
            pos = 0
            while pos < len(line):
                cursor, pos, comment = step(grammar, cursor, line, line_index, pos)
                if comment is None:
                    continue
                emitted_on_line = True
                _add_comment(pending, comment)
                if comment.kind is CommentKind.SINGLE_LINE:
                    single_count += 1
                else:
                    multi_count += 1

            if cursor.state is ScanState.IN_MULTI_LINE:
                cursor.parts.append("\n")
                swallowed = began_inside and not emitted_on_line
                if swallowed and self._policy.count_swallowed_lines_as_normal:
                    normal += 1
            elif not emitted_on_line:
                normal += 1

        unterminated_start: int | None = None
        if cursor.state is ScanState.IN_MULTI_LINE:
            unterminated_start = cursor.start_line
            if self._policy.unterminated is UnterminatedPolicy.FLUSH:
                text = cursor.buffer
                if text.endswith("\n"):
                    text = text[:-1]
                _add_comment(
                    pending,
                    EmittedComment(
                        start_line=cursor.start_line,
                        end_line=len(lines) - 1,
                        kind=CommentKind.MULTI_LINE,
                        text=text,
                    ),
                )
                multi_count += 1

        records = {line: pending[line].freeze() for line in sorted(pending)}
        counters = ScanCounters(
            total_lines=len(lines),
            total_non_blank_lines=non_blank,
            total_comment_lines=sum(record.span for record in records.values()),
            total_comments=single_count + multi_count,
            total_single_line=single_count,
            total_multi_line=multi_count,
            total_normal_lines=normal,
        )
        return ScanResult(
            records=records, counters=counters, unterminated_start=unterminated_start
        )


def scan(
    lines: Sequence[str],
    language: Language | str | None,
    policy: ScanPolicy | None = None,
) -> ScanResult:
    """Scan source lines with a one-off scanner."""
    return CommentScanner(policy=policy).scan(lines, language)


def _add_comment(pending: dict[int, _PendingRecord], comment: EmittedComment) -> None:
    record = pending.get(comment.start_line)
    if record is None:
        record = _PendingRecord(
            start_line=comment.start_line,
            end_line=comment.end_line,
            kind=comment.kind,
        )
        pending[comment.start_line] = record
    record.end_line = max(record.end_line, comment.end_line)
    record.texts.append(comment.text)
