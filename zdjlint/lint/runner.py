"""Diagnostic engine running every check over one buffer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cache

from zdjlint.analysis import (
    VariableUsageTracker,
    build_line_facts,
    capture_declarations,
    capture_usages,
    check_buffer_brackets,
    check_line_brackets,
    reconcile_bracket_diagnostics,
)
from zdjlint.api import APISymbolTable, default_symbol_table
from zdjlint.diagnostics import Diagnostic, collect_diagnostics
from zdjlint.lexer import CharacterScanner, LineScan, check_open_constructs
from zdjlint.lint.rules import (
    LineRule,
    default_api_rules,
    default_syntax_rules,
    validate_line_rules,
)
from zdjlint.options import CheckerOptions, validate_checker_options
from zdjlint.text import split_lines

logger = logging.getLogger(__name__)


class DiagnosticEngine:
    """Runs the scanner, bracket matcher, API rules and variable tracker.

    The engine only holds read-only configuration. Every `check` call builds
    its own scanner, tracker and diagnostic list, so one engine can serve
    concurrent callers.
    """

    def __init__(
        self,
        symbols: APISymbolTable | None = None,
        options: CheckerOptions | None = None,
        *,
        api_rules: Sequence[LineRule] | None = None,
        syntax_rules: Sequence[LineRule] | None = None,
    ) -> None:
        self._symbols = symbols if symbols is not None else default_symbol_table()
        self._options = options if options is not None else CheckerOptions()
        validate_checker_options(self._options)
        self._api_rules = (
            tuple(api_rules) if api_rules is not None else default_api_rules(self._symbols, self._options)
        )
        self._syntax_rules = (
            tuple(syntax_rules) if syntax_rules is not None else default_syntax_rules(self._options)
        )
        validate_line_rules(self._api_rules + self._syntax_rules)

    @property
    def symbols(self) -> APISymbolTable:
        return self._symbols

    @property
    def options(self) -> CheckerOptions:
        return self._options

    def check(self, text: str) -> list[Diagnostic]:
        """Return every diagnostic for `text` in discovery order."""
        namespace = self._symbols.namespace
        known_names = self._symbols.names
        scanner = CharacterScanner()
        tracker = VariableUsageTracker()
        scans: list[LineScan] = []
        diagnostics: list[Diagnostic] = []

        for line_number, line in enumerate(split_lines(text), start=1):
            scan = scanner.scan(line)
            scans.append(scan)
            diagnostics.extend(check_line_brackets(line_number, scan))

            facts = build_line_facts(line_number, scan, namespace)
            for rule in self._api_rules:
                diagnostics.extend(rule.run(facts))

            declared, skip = capture_declarations(tracker, facts, self._options)
            diagnostics.extend(declared)
            diagnostics.extend(
                capture_usages(
                    tracker,
                    facts,
                    skip=skip,
                    known_names=known_names,
                    namespace=namespace,
                    options=self._options,
                )
            )

            for rule in self._syntax_rules:
                diagnostics.extend(rule.run(facts))

        diagnostics = collect_diagnostics(
            reconcile_bracket_diagnostics(diagnostics, check_buffer_brackets(scans)),
            check_open_constructs(scans),
            tracker.sweep(),
        )

        logger.debug("Checked %d lines, %d diagnostics", len(scans), len(diagnostics))
        return diagnostics


@cache
def default_engine() -> DiagnosticEngine:
    return DiagnosticEngine()


def check(text: str) -> list[Diagnostic]:
    """Check `text` with the built-in `zdjl` catalogue and default options."""
    return default_engine().check(text)
