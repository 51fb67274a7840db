# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analysis report building from source documents."""

import logging
from collections import Counter
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from cas.language import Language
from cas.model import ScanPolicy, ScanResult, SourceDocument
from cas.scanner import CommentScanner
from cas.statistics import CommentStatistics, aggregate
from cas.word_frequency import count_words, most_common_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    """Represent everything a report renderer consumes for one document.

    Attributes:
        path: Source file path, if the document came from disk.
        language: Document language.
        scan: Scanner records and counters.
        statistics: Derived metrics.
        word_histogram: Comment word counts.
    """

    path: str | None
    language: Language
    scan: ScanResult
    statistics: CommentStatistics
    word_histogram: Counter[str]

    def to_dict(self, top_words: int | None = None) -> dict[str, Any]:
        """Serialize the report to JSON-compatible values.

        Args:
            top_words: Limit the word list to the most frequent entries.

        Returns:
            Plain dictionary payload.
        """
        return {
            "path": self.path,
            "language": self.language.value,
            "counters": asdict(self.scan.counters),
            "statistics": asdict(self.statistics),
            "unterminated_start": self.scan.unterminated_start,
            "comments": [
                {
                    "start_line": record.start_line,
                    "end_line": record.end_line,
                    "kind": record.kind.value,
                    "texts": list(record.texts),
                }
                for record in self.scan.records.values()
            ],
            "words": [
                {"word": word, "count": count}
                for word, count in most_common_words(self.word_histogram, top_words)
            ],
        }


class ReportBuilder:
    """Build analysis reports by scanning documents."""

    def __init__(self, policy: ScanPolicy | None = None) -> None:
        """Initialize builder.

        Args:
            policy: Scan policy forwarded to the comment scanner.
        """
        self._scanner = CommentScanner(policy=policy)

    def build(self, document: SourceDocument) -> AnalysisReport:
        """Scan one document and derive its metrics.

        Args:
            document: Document to analyze.

        Returns:
            Complete analysis report.
        """
        path = str(document.path) if document.path is not None else None
        if document.language is Language.UNKNOWN:
            logger.info(f"Unsupported language; counting lines only (path={path})")

        result = self._scanner.scan(document.lines, document.language)
        if result.unterminated_start is not None:
            logger.warning(
                f"Multi-line comment is not terminated (path={path} start_line={result.unterminated_start + 1})"
            )
        statistics = aggregate(result)
        histogram = count_words(result.records)
        logger.debug(
            f"Document analyzed (path={path} language={document.language.value} "
            f"lines={result.counters.total_lines} comments={result.counters.total_comments})"
        )
        return AnalysisReport(
            path=path,
            language=document.language,
            scan=result,
            statistics=statistics,
            word_histogram=histogram,
        )


def load_document(path: Path, language_id: str | None = None) -> SourceDocument:
    """Read a UTF-8 source file into a document.

    Args:
        path: Source file path.
        language_id: Explicit language identifier; the file suffix is used
            when omitted.

    Returns:
        Document with the file's lines and resolved language.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    source = path.read_text(encoding="utf-8")
    language = (
        Language.from_id(language_id) if language_id else Language.from_path(path)
    )
    return SourceDocument(lines=tuple(source.splitlines()), language=language, path=path)
