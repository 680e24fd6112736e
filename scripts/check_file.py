#!/usr/bin/env python3
"""Check a script file and print its diagnostics grouped by category."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from zdjlint.api import APISymbolTable, load_catalogue_file
from zdjlint.diagnostics import CATEGORY_LABELS, Diagnostic, group_by_category
from zdjlint.lint import DiagnosticEngine
from zdjlint.options import CheckerOptions
from zdjlint.pipeline import run_check


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    line = f"{path}:{diagnostic.line}:{diagnostic.column}: {diagnostic.severity} [{diagnostic.code}] {diagnostic.message}"
    if diagnostic.suggested_fix is not None:
        line += f" (fix: {diagnostic.suggested_fix})"
    return line


def main() -> int:
    parser = argparse.ArgumentParser(description="Check zdjl automation scripts")
    parser.add_argument("paths", nargs="+", type=Path, help="Script files to check")
    parser.add_argument(
        "--catalogue",
        type=Path,
        default=None,
        help="JSON API catalogue to use instead of the built-in zdjl catalogue",
    )
    parser.add_argument(
        "--flag-empty-objects",
        action="store_true",
        help="Also report `{}` object literals as empty blocks",
    )
    parser.add_argument("--no-parameters", action="store_true", help="Skip argument count checks")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    symbols = APISymbolTable(load_catalogue_file(args.catalogue)) if args.catalogue is not None else None
    options = CheckerOptions(
        check_parameters=not args.no_parameters,
        flag_empty_object_literals=args.flag_empty_objects,
    )
    engine = DiagnosticEngine(symbols, options)

    exit_code = 0
    for path in args.paths:
        result = run_check(path.read_text(encoding="utf-8"), engine=engine)
        summary = result.summary
        print(f"{path}: {summary.errors} errors, {summary.warnings} warnings, {summary.infos} infos")
        for category, diagnostics in group_by_category(result.diagnostics).items():
            print(f"  {CATEGORY_LABELS[category]} ({len(diagnostics)})")
            for diagnostic in diagnostics:
                print(f"    {format_diagnostic(path, diagnostic)}")
        if result.has_errors:
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
