"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from zdjlint.diagnostics.codes import Category, Severity
from zdjlint.diagnostics.diagnostic import Diagnostic

CATEGORY_LABELS: Final[dict[Category, str]] = {
    "function-spell": "Misspelled API names",
    "bracket-mismatch": "Bracket mismatches",
    "case-error": "Letter-case errors",
    "variable-unused": "Unused variables",
    "variable-undefined": "Undefined variables",
    "variable-once-used": "Variables used only once",
    "syntax-error": "Syntax problems",
    "parameter-error": "Argument problems",
}


@dataclass(frozen=True, slots=True)
class DiagnosticSummary:
    """Counts shown above the grouped diagnostics list."""

    errors: int
    warnings: int
    infos: int
    by_category: dict[Category, int]

    @property
    def total(self) -> int:
        return self.errors + self.warnings + self.infos


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts: dict[Severity, int] = {"error": 0, "warning": 0, "info": 0}
    for diagnostic in diagnostics:
        counts[diagnostic.severity] += 1
    return counts


def group_by_category(diagnostics: Iterable[Diagnostic]) -> dict[Category, list[Diagnostic]]:
    """Group in first-appearance order, keeping discovery order inside groups."""
    groups: dict[Category, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        groups.setdefault(diagnostic.category, []).append(diagnostic)
    return groups


def summarize(diagnostics: Iterable[Diagnostic]) -> DiagnosticSummary:
    materialized = list(diagnostics)
    counts = count_by_severity(materialized)
    return DiagnosticSummary(
        errors=counts["error"],
        warnings=counts["warning"],
        infos=counts["info"],
        by_category={category: len(group) for category, group in group_by_category(materialized).items()},
    )
