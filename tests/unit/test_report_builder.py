# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for report building and document loading."""

import logging
from pathlib import Path

import pytest

from cas.language import Language
from cas.model import ScanPolicy, SourceDocument, UnterminatedPolicy
from cas.report_builder import ReportBuilder, load_document


def test_report_001_build_combines_scan_statistics_and_words() -> None:
    document = SourceDocument(
        lines=("// Parse input", "int x;", "/* parse", "output */"),
        language=Language.C,
    )

    report = ReportBuilder().build(document)

    assert report.path is None
    assert report.language is Language.C
    assert report.scan.counters.total_comments == 2
    assert report.statistics.comment_coverage == pytest.approx(75.0)
    assert report.word_histogram["parse"] == 2
    assert report.word_histogram["output"] == 1


def test_report_002_to_dict_is_json_ready() -> None:
    document = SourceDocument(
        lines=("x = 1  # one one two",), language=Language.PYTHON, path=Path("a.py")
    )

    payload = ReportBuilder().build(document).to_dict(top_words=1)

    assert payload["path"] == "a.py"
    assert payload["language"] == "python"
    assert payload["counters"]["total_comments"] == 1
    assert payload["statistics"]["comment_coverage"] == pytest.approx(100.0)
    assert payload["unterminated_start"] is None
    assert payload["comments"] == [
        {
            "start_line": 0,
            "end_line": 0,
            "kind": "single_line",
            "texts": ["# one one two"],
        }
    ]
    assert payload["words"] == [{"word": "one", "count": 2}]


def test_report_003_unterminated_comment_is_logged(caplog) -> None:
    caplog.set_level(logging.WARNING)
    document = SourceDocument(lines=("int x;", "/* open"), language=Language.CPP)

    report = ReportBuilder().build(document)

    assert report.scan.records == {}
    assert any(
        "Multi-line comment is not terminated" in rec.message
        and "start_line=2" in rec.message
        for rec in caplog.records
    )


def test_report_004_policy_is_forwarded_to_scanner() -> None:
    document = SourceDocument(lines=("/* open", "tail"), language=Language.JAVA)

    report = ReportBuilder(
        policy=ScanPolicy(unterminated=UnterminatedPolicy.FLUSH)
    ).build(document)

    assert report.scan.records[0].texts == ("/* open\ntail",)


def test_report_005_load_document_resolves_language_from_suffix(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "pkg" / "sample.py"
    write_source(source_file, "'''\nModule docs\n'''\nx = 1  # note\n")

    document = load_document(source_file)

    assert document.language is Language.PYTHON
    assert document.path == source_file
    assert document.lines == ("'''", "Module docs", "'''", "x = 1  # note")


def test_report_006_load_document_prefers_explicit_language(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "script.txt"
    write_source(source_file, "// hello\n")

    document = load_document(source_file, language_id="javascript")

    assert document.language is Language.JAVASCRIPT
    assert load_document(source_file).language is Language.UNKNOWN


def test_report_007_load_document_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_document(tmp_path / "missing.c")
