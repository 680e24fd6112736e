"""Line rules and the diagnostic engine."""

from zdjlint.lint.rules import (
    ApiNameRule,
    DoubleSemicolonRule,
    EmptyBlockRule,
    LineRule,
    ParameterCountRule,
    RuleDomain,
    TrailingCommaRule,
    UnterminatedStringRule,
    default_api_rules,
    default_syntax_rules,
    validate_line_rules,
)
from zdjlint.lint.runner import DiagnosticEngine, check, default_engine

__all__ = [
    "ApiNameRule",
    "DiagnosticEngine",
    "DoubleSemicolonRule",
    "EmptyBlockRule",
    "LineRule",
    "ParameterCountRule",
    "RuleDomain",
    "TrailingCommaRule",
    "UnterminatedStringRule",
    "check",
    "default_api_rules",
    "default_engine",
    "default_syntax_rules",
    "validate_line_rules",
]
