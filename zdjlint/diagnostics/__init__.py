"""Diagnostics."""

from zdjlint.diagnostics.codes import (
    BRACKET_MISMATCH,
    CASE_ERROR,
    CATEGORIES,
    DOUBLE_SEMICOLON,
    DUPLICATE_DECLARATION,
    EMPTY_BLOCK,
    EXTRA_CLOSING_BRACKET,
    FIXABLE_CATEGORIES,
    MISSING_ARGUMENTS,
    ONCE_USED_VARIABLE,
    SEVERITIES,
    TOO_MANY_ARGUMENTS,
    TRAILING_COMMA,
    UNCLOSED_BRACKET,
    UNDEFINED_VARIABLE,
    UNKNOWN_FUNCTION,
    UNTERMINATED_COMMENT,
    UNTERMINATED_STRING,
    UNUSED_VARIABLE,
    Category,
    DiagnosticSpec,
    Severity,
)
from zdjlint.diagnostics.diagnostic import Diagnostic
from zdjlint.diagnostics.report import (
    CATEGORY_LABELS,
    DiagnosticSummary,
    collect_diagnostics,
    count_by_severity,
    group_by_category,
    has_errors,
    summarize,
)

__all__ = [
    "BRACKET_MISMATCH",
    "CASE_ERROR",
    "CATEGORIES",
    "CATEGORY_LABELS",
    "DOUBLE_SEMICOLON",
    "DUPLICATE_DECLARATION",
    "EMPTY_BLOCK",
    "EXTRA_CLOSING_BRACKET",
    "FIXABLE_CATEGORIES",
    "MISSING_ARGUMENTS",
    "ONCE_USED_VARIABLE",
    "SEVERITIES",
    "TOO_MANY_ARGUMENTS",
    "TRAILING_COMMA",
    "UNCLOSED_BRACKET",
    "UNDEFINED_VARIABLE",
    "UNKNOWN_FUNCTION",
    "UNTERMINATED_COMMENT",
    "UNTERMINATED_STRING",
    "UNUSED_VARIABLE",
    "Category",
    "Diagnostic",
    "DiagnosticSpec",
    "DiagnosticSummary",
    "Severity",
    "collect_diagnostics",
    "count_by_severity",
    "group_by_category",
    "has_errors",
    "summarize",
]
