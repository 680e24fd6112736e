"""Diagnostics core types."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from zdjlint.diagnostics.codes import (
    CATEGORIES,
    FIXABLE_CATEGORIES,
    SEVERITIES,
    Category,
    DiagnosticSpec,
    Severity,
)
from zdjlint.text import LineSpan


def new_diagnostic_id() -> str:
    return uuid4().hex[:9]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding produced by a single `check` run.

    `id` is unique per emitted diagnostic and does not take part in equality,
    so two runs over the same text compare equal element by element.
    Only `function-spell` and `case-error` diagnostics may carry a
    `suggested_fix`; the fix replaces exactly the text covered by `span`.
    """

    code: str
    message: str
    span: LineSpan
    severity: Severity = "error"
    category: Category = "syntax-error"
    suggested_fix: str | None = None
    hint: str | None = None
    id: str = field(default_factory=new_diagnostic_id, compare=False)

    def __post_init__(self):
        if self.severity not in SEVERITIES:
            raise ValueError(f"Unknown diagnostic severity `{self.severity}`")
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown diagnostic category `{self.category}`")
        if self.suggested_fix is not None and self.category not in FIXABLE_CATEGORIES:
            raise ValueError(f"Diagnostics in category `{self.category}` cannot carry a suggested fix")

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        span: LineSpan,
        detail: str | None = None,
        *,
        suggested_fix: str | None = None,
    ) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return cls(
            code=spec.code,
            message=message,
            span=span,
            severity=spec.severity,
            category=spec.category,
            suggested_fix=suggested_fix,
            hint=spec.hint,
        )

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    @property
    def end_column(self) -> int:
        return self.span.end_column

    def to_payload(self) -> dict[str, Any]:
        """Editor-facing record with camelCase keys."""
        payload: dict[str, Any] = {
            "id": f"{self.line}-{self.column}-{self.code}-{self.id}",
            "severity": self.severity,
            "category": self.category,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "endColumn": self.end_column,
            "ruleCode": self.code,
        }
        if self.suggested_fix is not None:
            payload["suggestedFix"] = self.suggested_fix
        return payload
