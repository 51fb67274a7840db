# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI harness for comment extraction and metrics reporting."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import pathspec
from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from cas.language import SUPPORTED_SUFFIXES
from cas.model import ScanPolicy, UnterminatedPolicy
from cas.report_builder import AnalysisReport, ReportBuilder, load_document
from cas.word_frequency import most_common_words

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "line": 1,
    "kind": 1,
    "comment": 8,
}


@dataclass(frozen=True)
class ReadError:
    """Represent a source file that could not be loaded."""

    file_path: str
    message: str


class IgnoreRules:
    """Collect .gitignore rules per directory during a top-down walk.

    Each directory's patterns are matched relative to that directory and
    apply to everything beneath it.
    """

    def __init__(self) -> None:
        self._specs: list[tuple[Path, pathspec.GitIgnoreSpec]] = []

    def enter(self, directory: Path) -> None:
        """Load the .gitignore file of a directory, if present.

        Args:
            directory: Directory about to be listed.

        Raises:
            OSError: If the .gitignore file cannot be read.
            UnicodeDecodeError: If the .gitignore file is not valid UTF-8.
        """
        ignore_path = directory / ".gitignore"
        if not ignore_path.is_file():
            return
        lines = ignore_path.read_text(encoding="utf-8").splitlines()
        self._specs.append((directory, pathspec.GitIgnoreSpec.from_lines(lines)))

    def ignores(self, path: Path, is_dir: bool) -> bool:
        """Check whether any loaded rule set ignores a path.

        Args:
            path: Path below a directory passed to ``enter``.
            is_dir: Whether the path is a directory.

        Returns:
            True when the path should be skipped.
        """
        for base, spec in self._specs:
            if base not in path.parents:
                continue
            relative = path.relative_to(base).as_posix()
            if spec.match_file(f"{relative}/" if is_dir else relative):
                return True
        return False


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="cas")
    subparsers = parser.add_subparsers(dest="command", required=True)
    analyze_parser = subparsers.add_parser("analyze")
    analyze_parser.add_argument(
        "--path", required=True, help="Source file or directory to analyze."
    )
    analyze_parser.add_argument(
        "--language",
        required=False,
        help="Language id (c, cpp, python, py, java, javascript). "
        "Defaults to detection from the file suffix.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    analyze_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of most frequent comment words to report.",
    )
    analyze_parser.add_argument(
        "--flush-unterminated",
        action="store_true",
        help="Report a multi-line comment left open at end of file.",
    )
    analyze_parser.add_argument(
        "--count-swallowed-as-normal",
        action="store_true",
        help="Count lines inside an open multi-line comment as normal lines.",
    )
    analyze_parser.add_argument(
        "--indented-docstrings",
        action="store_true",
        help="Accept indented Python triple-quote openers.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.command == "analyze":
        return _run_analyze(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def build_policy(args: argparse.Namespace) -> ScanPolicy:
    """Map CLI flags onto a scan policy.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Scan policy for the run.
    """
    return ScanPolicy(
        unterminated=(
            UnterminatedPolicy.FLUSH
            if args.flush_unterminated
            else UnterminatedPolicy.DROP
        ),
        count_swallowed_lines_as_normal=args.count_swallowed_as_normal,
        allow_indented_docstrings=args.indented_docstrings,
    )


def _run_analyze(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run analyze command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    root_path = Path(args.path)
    if not root_path.exists():
        logger.warning(f"Path does not exist (path={root_path})")
        stderr.write(f"Path does not exist: {root_path}\n")
        return 2
    if args.top < 0:
        logger.warning(f"Invalid word limit (top={args.top})")
        stderr.write("top must be >= 0\n")
        return 2

    try:
        source_files = discover_sources(root_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read .gitignore files (error={exc})")
        stderr.write(f"Failed to read .gitignore files: {exc}\n")
        return 2

    builder = ReportBuilder(policy=build_policy(args))
    reports: list[AnalysisReport] = []
    errors: list[ReadError] = []
    for file_path in source_files:
        try:
            document = load_document(file_path, language_id=args.language)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                f"Skipping file due to read failure (file_path={file_path} error={exc})"
            )
            errors.append(ReadError(file_path=str(file_path), message=str(exc)))
            continue
        reports.append(builder.build(document))

    logger.info(
        f"Comment analysis completed (path={root_path} files={len(reports)} errors={len(errors)})"
    )
    _write_errors(errors=errors, stderr=stderr)
    if args.format == "json":
        payload = [report.to_dict(top_words=args.top) for report in reports]
        if args.output:
            try:
                _write_json_file(payload=payload, output_path=Path(args.output))
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(payload=payload, stdout=stdout)
    else:
        _write_table(reports=reports, stdout=stdout, top_words=args.top)
    return 0


def discover_sources(root_path: Path) -> list[Path]:
    """List source files to analyze.

    A file path is returned as-is regardless of suffix. Directories are walked
    recursively for supported suffixes, skipping ``.git`` and paths ignored by
    ``.gitignore`` files.

    Args:
        root_path: File or directory path.

    Returns:
        Sorted source file paths.

    Raises:
        OSError: If .gitignore files cannot be read.
        UnicodeDecodeError: If .gitignore files contain invalid UTF-8.
    """
    if root_path.is_file():
        return [root_path]

    rules = IgnoreRules()
    sources: list[Path] = []
    queue: list[Path] = [root_path]
    while queue:
        current = queue.pop(0)
        rules.enter(current)
        for child in sorted(current.iterdir(), key=lambda item: item.name):
            if child.name == ".git" and child.is_dir():
                continue
            is_dir = child.is_dir()
            if rules.ignores(child, is_dir=is_dir):
                continue
            if is_dir:
                queue.append(child)
            elif child.suffix.lower() in SUPPORTED_SUFFIXES:
                sources.append(child)
    return sorted(sources)


def _write_errors(errors: list[ReadError], stderr: TextIO) -> None:
    """Write read errors to stderr.

    Args:
        errors: Files that could not be loaded.
        stderr: Standard error stream.
    """
    for error in errors:
        stderr.write(f"analyzer_error: {error}\n")


def _write_json(payload: list[dict], stdout: TextIO) -> None:
    """Write report payloads in JSON format.

    Args:
        payload: Serialized reports.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(payload, indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(payload: list[dict], output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Args:
        payload: Serialized reports.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8"
    )


def _write_table(reports: list[AnalysisReport], stdout: TextIO, top_words: int) -> None:
    """Write metrics and comments per file as Rich tables.

    Args:
        reports: Built analysis reports.
        stdout: Standard output stream.
        top_words: Number of most frequent words to show.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for report in reports:
        console.rule(Text(str(report.path)), style=Style(color="cyan"), characters="-")
        counters = report.scan.counters
        statistics = report.statistics
        metrics = Table(show_header=True, expand=False)
        metrics.add_column("metric", overflow="fold")
        metrics.add_column("value", justify="right", overflow="fold")
        for name, value in (
            ("language", report.language.value),
            ("total_lines", str(counters.total_lines)),
            ("non_blank_lines", str(counters.total_non_blank_lines)),
            ("blank_lines", str(statistics.blank_lines)),
            ("normal_lines", str(counters.total_normal_lines)),
            ("comment_lines", str(counters.total_comment_lines)),
            ("total_comments", str(counters.total_comments)),
            ("single_line_comments", str(counters.total_single_line)),
            ("multi_line_comments", str(counters.total_multi_line)),
            ("comment_coverage", f"{statistics.comment_coverage:.2f}%"),
            ("average_comment_length", f"{statistics.average_comment_length:.2f}"),
        ):
            metrics.add_row(name, value)
        console.print(metrics)

        comments = Table(show_header=True, show_lines=True, expand=True)
        comments.add_column(
            "line", ratio=TABLE_COLUMN_RATIOS["line"], justify="right", overflow="fold"
        )
        comments.add_column("kind", ratio=TABLE_COLUMN_RATIOS["kind"], overflow="fold")
        comments.add_column(
            "comment", ratio=TABLE_COLUMN_RATIOS["comment"], overflow="fold"
        )
        for record in report.scan.records.values():
            for text in record.texts:
                comments.add_row(str(record.start_line + 1), record.kind.value, Text(text))
        console.print(comments)

        words = most_common_words(report.word_histogram, top_words)
        if words:
            console.print(
                " ".join(f"{word}={count}" for word, count in words),
                markup=False,
                highlight=False,
            )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
