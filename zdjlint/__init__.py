"""Static diagnostics for `zdjl` automation scripts."""

from zdjlint.diagnostics import Diagnostic
from zdjlint.lint import DiagnosticEngine, check
from zdjlint.options import CheckerOptions
from zdjlint.pipeline import CheckRunResult, apply_fix, fix_and_recheck, run_check

__all__ = [
    "CheckRunResult",
    "CheckerOptions",
    "Diagnostic",
    "DiagnosticEngine",
    "apply_fix",
    "check",
    "fix_and_recheck",
    "run_check",
]
