# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Case-insensitive word histogram over comment text."""

from collections import Counter
from collections.abc import Iterable, Mapping

from cas.model import CommentRecord


def normalize_token(token: str) -> str:
    """Drop non-alphabetic characters and lowercase the rest."""
    return "".join(char for char in token if char.isalpha()).lower()


def count_words(records: Mapping[int, CommentRecord]) -> Counter[str]:
    """Count words across every comment text.

    Args:
        records: Comment records keyed by start line.

    Returns:
        Histogram of lowercase alphabetic tokens.
    """
    histogram: Counter[str] = Counter()
    for record in records.values():
        histogram.update(_tokens(record.texts))
    return histogram


def most_common_words(
    histogram: Mapping[str, int], limit: int | None = None
) -> list[tuple[str, int]]:
    """Order histogram entries by count descending, then alphabetically.

    Args:
        histogram: Word counts.
        limit: Maximum number of entries; ``None`` returns all.

    Returns:
        Ordered ``(word, count)`` pairs.
    """
    ordered = sorted(histogram.items(), key=lambda item: (-item[1], item[0]))
    if limit is None:
        return ordered
    return ordered[: max(limit, 0)]


def _tokens(texts: Iterable[str]) -> Iterable[str]:
    for text in texts:
        for raw in text.split():
            token = normalize_token(raw)
            if token:
                yield token
