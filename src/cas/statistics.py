# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Derived comment metrics."""

from dataclasses import dataclass

from cas.model import CommentKind, ScanResult


@dataclass(frozen=True)
class CommentStatistics:
    """Represent report metrics derived from one scan.

    Attributes:
        comment_coverage: Comment span lines as a percentage of non-blank lines.
        average_comment_length: Mean character count per comment.
        single_line_records: Records whose first comment is single-line.
        multi_line_records: Records whose first comment is multi-line.
        blank_lines: Lines that are empty after trimming.
    """

    comment_coverage: float
    average_comment_length: float
    single_line_records: int
    multi_line_records: int
    blank_lines: int


def aggregate(result: ScanResult) -> CommentStatistics:
    """Compute coverage, average length and record counts.

    Args:
        result: Scanner output.

    Returns:
        Derived metrics. Ratios with a zero denominator are ``0.0``.
    """
    counters = result.counters
    coverage = 0.0
    if counters.total_non_blank_lines:
        coverage = 100.0 * counters.total_comment_lines / counters.total_non_blank_lines

    average_length = 0.0
    if counters.total_comments:
        total_characters = sum(len(text) for text in result.iter_texts())
        average_length = total_characters / counters.total_comments

    kinds = [record.kind for record in result.records.values()]
    return CommentStatistics(
        comment_coverage=coverage,
        average_comment_length=average_length,
        single_line_records=kinds.count(CommentKind.SINGLE_LINE),
        multi_line_records=kinds.count(CommentKind.MULTI_LINE),
        blank_lines=counters.blank_lines,
    )
