# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Supported source languages and identifier normalization."""

from enum import Enum
from pathlib import Path


class Language(str, Enum):
    """Closed set of languages the comment scanner understands."""

    C = "c"
    CPP = "cpp"
    PYTHON = "python"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    UNKNOWN = "unknown"

    @classmethod
    def from_id(cls, language_id: "str | Language | None") -> "Language":
        """Normalize an editor language identifier.

        Args:
            language_id: Raw identifier such as ``"cpp"`` or ``"py"``.

        Returns:
            Matching language, or ``UNKNOWN`` for unrecognized identifiers.
        """
        if isinstance(language_id, Language):
            return language_id
        if not language_id:
            return cls.UNKNOWN
        return _LANGUAGE_IDS.get(language_id.strip().lower(), cls.UNKNOWN)

    @classmethod
    def from_path(cls, path: Path) -> "Language":
        """Resolve a language from a file suffix.

        Args:
            path: Source file path.

        Returns:
            Matching language, or ``UNKNOWN`` for unsupported suffixes.
        """
        return _SUFFIXES.get(path.suffix.lower(), cls.UNKNOWN)


_LANGUAGE_IDS: dict[str, Language] = {
    "c": Language.C,
    "cpp": Language.CPP,
    "c++": Language.CPP,
    "python": Language.PYTHON,
    "py": Language.PYTHON,
    "java": Language.JAVA,
    "javascript": Language.JAVASCRIPT,
    "js": Language.JAVASCRIPT,
}

_SUFFIXES: dict[str, Language] = {
    ".c": Language.C,
    ".h": Language.C,
    ".cc": Language.CPP,
    ".cpp": Language.CPP,
    ".cxx": Language.CPP,
    ".hh": Language.CPP,
    ".hpp": Language.CPP,
    ".hxx": Language.CPP,
    ".py": Language.PYTHON,
    ".java": Language.JAVA,
    ".js": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".cjs": Language.JAVASCRIPT,
}

SUPPORTED_SUFFIXES: frozenset[str] = frozenset(_SUFFIXES)
