"""Result carriers and tool entrypoints."""

from zdjlint.pipeline.entrypoints import apply_fix, fix_and_recheck, run_check
from zdjlint.pipeline.results import CheckRunResult

__all__ = [
    "CheckRunResult",
    "apply_fix",
    "fix_and_recheck",
    "run_check",
]
