# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the comment report CLI harness."""

import io
import json
import re
from pathlib import Path

from cli.comment_report import IgnoreRules, discover_sources, run


def _strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def test_cli_001_requires_command_and_path() -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()

    assert run([], stdout=stdout, stderr=stderr) == 2
    assert run(["analyze"], stdout=stdout, stderr=stderr) == 2


def test_cli_002_fails_when_path_is_missing(tmp_path: Path) -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["analyze", "--path", str(tmp_path / "missing")],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 2
    assert "Path does not exist" in stderr.getvalue()


def test_cli_003_rejects_negative_word_limit(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "main.c"
    write_source(source_file, "int x;\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["analyze", "--path", str(source_file), "--top", "-1"],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 2
    assert "top must be >= 0" in stderr.getvalue()


def test_cli_004_json_output_for_single_file(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "main.c"
    write_source(
        source_file,
        "\n".join(["int x; // counter value", "/* block", "comment */", ""]),
    )
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["analyze", "--path", str(source_file), "--format", "json"],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    payload = json.loads(_strip_ansi(stdout.getvalue()))
    assert len(payload) == 1
    report = payload[0]
    assert report["language"] == "c"
    assert report["counters"]["total_lines"] == 3
    assert report["counters"]["total_comments"] == 2
    assert [comment["start_line"] for comment in report["comments"]] == [0, 1]
    assert report["comments"][1]["texts"] == ["/* block\ncomment */"]


def test_cli_005_json_output_file(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "app.js"
    write_source(source_file, "// hello world\n")
    output_path = tmp_path / "out" / "report.json"
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        [
            "analyze",
            "--path",
            str(source_file),
            "--format",
            "json",
            "--output",
            str(output_path),
        ],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    assert stdout.getvalue() == ""
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload[0]["words"] == [
        {"word": "hello", "count": 1},
        {"word": "world", "count": 1},
    ]


def test_cli_006_language_override_and_policy_flags(
    tmp_path: Path, write_source
) -> None:
    source_file = tmp_path / "notes.txt"
    write_source(source_file, "int x;\n/* open\nstill\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        [
            "analyze",
            "--path",
            str(source_file),
            "--language",
            "cpp",
            "--flush-unterminated",
            "--count-swallowed-as-normal",
            "--format",
            "json",
        ],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    report = json.loads(_strip_ansi(stdout.getvalue()))[0]
    assert report["language"] == "cpp"
    assert report["unterminated_start"] == 1
    assert report["comments"][0]["texts"] == ["/* open\nstill"]
    assert report["counters"]["total_normal_lines"] == 2


def test_cli_007_directory_walk_honors_gitignore(
    tmp_path: Path, write_source
) -> None:
    project_root = tmp_path / "project"
    write_source(project_root / ".gitignore", "build/\n")
    write_source(project_root / "src" / "main.py", "# entry\n")
    write_source(project_root / "src" / "lib" / ".gitignore", "generated.js\n")
    write_source(project_root / "src" / "lib" / "util.js", "// util\n")
    write_source(project_root / "src" / "lib" / "generated.js", "// skip\n")
    write_source(project_root / "build" / "out.c", "// skip\n")
    write_source(project_root / "README.md", "# skip\n")

    sources = discover_sources(project_root)

    assert [path.relative_to(project_root).as_posix() for path in sources] == [
        "src/lib/util.js",
        "src/main.py",
    ]


def test_cli_008_ignore_rules_apply_below_their_directory(
    tmp_path: Path, write_source
) -> None:
    write_source(tmp_path / ".gitignore", "vendor/\n*.min.js\n")
    write_source(tmp_path / "sub" / ".gitignore", "local.c\n")

    rules = IgnoreRules()
    rules.enter(tmp_path)
    rules.enter(tmp_path / "sub")

    assert rules.ignores(tmp_path / "vendor", is_dir=True)
    assert rules.ignores(tmp_path / "web" / "app.min.js", is_dir=False)
    assert not rules.ignores(tmp_path / "web" / "app.js", is_dir=False)
    assert rules.ignores(tmp_path / "sub" / "local.c", is_dir=False)
    assert not rules.ignores(tmp_path / "local.c", is_dir=False)


def test_cli_009_table_output_lists_metrics_and_comments(
    tmp_path: Path, write_source
) -> None:
    project_root = tmp_path / "project"
    write_source(project_root / "Main.java", "class Main {} // [entry] point\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["analyze", "--path", str(project_root)],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    output = _strip_ansi(stdout.getvalue())
    assert "comment_coverage" in output
    assert "100.00%" in output
    assert "[entry]" in output
    assert "entry=1" in output


def test_cli_010_unreadable_file_is_reported_and_skipped(
    tmp_path: Path, write_source
) -> None:
    project_root = tmp_path / "project"
    write_source(project_root / "ok.c", "// fine\n")
    (project_root / "bad.c").write_bytes(b"\xff\xfe// broken\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    exit_code = run(
        ["analyze", "--path", str(project_root), "--format", "json"],
        stdout=stdout,
        stderr=stderr,
    )

    assert exit_code == 0
    assert "analyzer_error:" in stderr.getvalue()
    assert "bad.c" in stderr.getvalue()
    payload = json.loads(_strip_ansi(stdout.getvalue()))
    assert [Path(report["path"]).name for report in payload] == ["ok.c"]
