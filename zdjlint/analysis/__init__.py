"""Line facts, bracket matching and variable tracking."""

from zdjlint.analysis.brackets import (
    BRACKET_PAIRS,
    CLOSING_BRACKETS,
    BracketFrame,
    BracketMatcher,
    check_buffer_brackets,
    check_line_brackets,
    reconcile_bracket_diagnostics,
)
from zdjlint.analysis.facts import LineFacts, NamespaceCall, build_line_facts, find_namespace_calls
from zdjlint.analysis.variables import (
    ScopeTag,
    VariableRecord,
    VariableUsageTracker,
    capture_declarations,
    capture_usages,
)

__all__ = [
    "BRACKET_PAIRS",
    "CLOSING_BRACKETS",
    "BracketFrame",
    "BracketMatcher",
    "LineFacts",
    "NamespaceCall",
    "ScopeTag",
    "VariableRecord",
    "VariableUsageTracker",
    "build_line_facts",
    "capture_declarations",
    "capture_usages",
    "check_buffer_brackets",
    "check_line_brackets",
    "find_namespace_calls",
    "reconcile_bracket_diagnostics",
]
