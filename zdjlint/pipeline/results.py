"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from zdjlint.diagnostics import Diagnostic, DiagnosticSummary


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of checking one buffer."""

    source_text: str
    diagnostics: list[Diagnostic]
    has_errors: bool
    summary: DiagnosticSummary
