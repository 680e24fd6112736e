"""Shared debug printers for scanner/lexer/engine tests."""

from __future__ import annotations

import os

from zdjlint.diagnostics import Diagnostic
from zdjlint.lexer import CharClass, LineScan, Token

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SCANS = os.getenv("PRINT_SCANS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}

_CLASS_MARKS = {
    CharClass.CODE: ".",
    CharClass.STRING: "s",
    CharClass.LINE_COMMENT: "/",
    CharClass.BLOCK_COMMENT: "*",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_scans(test_name: str, scans: list[LineScan]) -> None:
    if not PRINT_SCANS:
        return
    print(f"\n===== {test_name} SCANS =====")
    for line_number, scan in enumerate(scans, start=1):
        marks = "".join(_CLASS_MARKS[char_class] for char_class in scan.classes)
        print(f"{line_number:03d} {scan.text}")
        print(f"    {marks} end={scan.end_state} dangling={scan.dangling_offset}")


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(f"{index:03d} {tok.kind.name:<16} range=({tok.start}, {tok.end}) text={tok.text!r}")


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(f"{diagnostic.span.as_tuple()} {diagnostic.severity:<7} {diagnostic.code}: {diagnostic.message}")
