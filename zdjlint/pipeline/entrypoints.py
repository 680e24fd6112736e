"""Entrypoints used by editors and tools."""

from __future__ import annotations

import logging

from zdjlint.diagnostics import Diagnostic, has_errors, summarize
from zdjlint.lint import DiagnosticEngine, default_engine
from zdjlint.pipeline.results import CheckRunResult
from zdjlint.text import replace_line_span

logger = logging.getLogger(__name__)


def run_check(text: str, *, engine: DiagnosticEngine | None = None) -> CheckRunResult:
    """Check a buffer and bundle the diagnostics with their summary."""
    resolved_engine = engine if engine is not None else default_engine()
    diagnostics = resolved_engine.check(text)
    return CheckRunResult(
        source_text=text,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
        summary=summarize(diagnostics),
    )


def apply_fix(text: str, diagnostic: Diagnostic) -> str:
    """Replace the text covered by the diagnostic with its suggested fix."""
    if diagnostic.suggested_fix is None:
        raise ValueError(f"Diagnostic `{diagnostic.code}` has no suggested fix")
    logger.debug(
        "Applying fix %r for %s at %s",
        diagnostic.suggested_fix,
        diagnostic.code,
        diagnostic.span.as_tuple(),
    )
    return replace_line_span(text, diagnostic.span, diagnostic.suggested_fix)


def fix_and_recheck(
    text: str,
    diagnostic: Diagnostic,
    *,
    engine: DiagnosticEngine | None = None,
) -> CheckRunResult:
    """Apply one fix, then check the edited buffer from scratch."""
    return run_check(apply_fix(text, diagnostic), engine=engine)
