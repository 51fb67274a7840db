# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment grammars keyed by supported language."""

from cas.grammar import CommentGrammar
from cas.grammars.brace import BraceGrammar
from cas.grammars.null import NullGrammar
from cas.grammars.python import PythonGrammar
from cas.language import Language
from cas.model import ScanPolicy

_BRACE_LANGUAGES: frozenset[Language] = frozenset(
    {Language.C, Language.CPP, Language.JAVA, Language.JAVASCRIPT}
)


def grammar_for(language: Language, policy: ScanPolicy | None = None) -> CommentGrammar:
    """Return the comment grammar for a language.

    Args:
        language: Normalized document language.
        policy: Scan policy; only ``allow_indented_docstrings`` is relevant.

    Returns:
        Grammar strategy. ``UNKNOWN`` yields a grammar that never matches.
    """
    policy = policy or ScanPolicy()
    if language in _BRACE_LANGUAGES:
        return BraceGrammar()
    if language is Language.PYTHON:
        return PythonGrammar(
            allow_indented_docstrings=policy.allow_indented_docstrings
        )
    return NullGrammar()


__all__ = ["BraceGrammar", "NullGrammar", "PythonGrammar", "grammar_for"]
