"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

Severity: TypeAlias = Literal["error", "warning", "info"]
Category: TypeAlias = Literal[
    "function-spell",
    "bracket-mismatch",
    "case-error",
    "variable-unused",
    "variable-undefined",
    "variable-once-used",
    "syntax-error",
    "parameter-error",
]

SEVERITIES: Final[tuple[Severity, ...]] = ("error", "warning", "info")

CATEGORIES: Final[tuple[Category, ...]] = (
    "function-spell",
    "bracket-mismatch",
    "case-error",
    "variable-unused",
    "variable-undefined",
    "variable-once-used",
    "syntax-error",
    "parameter-error",
)

FIXABLE_CATEGORIES: Final[frozenset[Category]] = frozenset({"function-spell", "case-error"})
"""Categories whose diagnostics may carry a suggested replacement."""


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    category: Category
    hint: str | None = None
    severity: Severity = "error"


UNKNOWN_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNKNOWN_FUNCTION",
    message="Unknown API name.",
    hint="Check the spelling against the API reference.",
    severity="error",
    category="function-spell",
)

CASE_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CASE_ERROR",
    message="API name has the wrong letter case.",
    hint="API names are case-sensitive.",
    severity="warning",
    category="case-error",
)

EXTRA_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXTRA_CLOSING_BRACKET",
    message="Closing bracket has no matching opening bracket.",
    hint="Remove the bracket or add the missing opening bracket.",
    severity="error",
    category="bracket-mismatch",
)

BRACKET_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BRACKET_MISMATCH",
    message="Closing bracket does not match the most recently opened bracket.",
    severity="error",
    category="bracket-mismatch",
)

UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNCLOSED_BRACKET",
    message="Bracket is never closed.",
    severity="error",
    category="bracket-mismatch",
)

DUPLICATE_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DUPLICATE_DECLARATION",
    message="Variable is declared more than once.",
    hint="Assign to the existing variable instead of declaring it again.",
    severity="warning",
    category="variable-undefined",
)

UNDEFINED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNDEFINED_VARIABLE",
    message="Variable is not defined.",
    hint="Declare it with `var`, `let` or `const` before reading it.",
    severity="warning",
    category="variable-undefined",
)

UNUSED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNUSED_VARIABLE",
    message="Variable is declared but never used.",
    severity="warning",
    category="variable-unused",
)

ONCE_USED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ONCE_USED_VARIABLE",
    message="Stored variable is only used once.",
    hint="Stored variables are normally both set and read; check for a missing counterpart.",
    severity="info",
    category="variable-once-used",
)

TRAILING_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TRAILING_COMMA",
    message="Possible trailing comma.",
    severity="warning",
    category="syntax-error",
)

DOUBLE_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOUBLE_SEMICOLON",
    message="Redundant semicolon.",
    severity="info",
    category="syntax-error",
)

EMPTY_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EMPTY_BLOCK",
    message="Empty block.",
    severity="info",
    category="syntax-error",
)

UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote it was opened with.",
    severity="error",
    category="syntax-error",
)

UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="syntax-error",
)

MISSING_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MISSING_ARGUMENTS",
    message="Call is missing required arguments.",
    severity="warning",
    category="parameter-error",
)

TOO_MANY_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TOO_MANY_ARGUMENTS",
    message="Call passes more arguments than the API accepts.",
    severity="warning",
    category="parameter-error",
)
