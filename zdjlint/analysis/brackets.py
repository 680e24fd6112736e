"""Delimiter balance checking."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from zdjlint.diagnostics import (
    BRACKET_MISMATCH,
    EXTRA_CLOSING_BRACKET,
    UNCLOSED_BRACKET,
    Diagnostic,
)
from zdjlint.lexer import LineScan
from zdjlint.text import LineSpan

BRACKET_PAIRS: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}
CLOSING_BRACKETS: Final[frozenset[str]] = frozenset(BRACKET_PAIRS.values())


@dataclass(frozen=True, slots=True)
class BracketFrame:
    char: str
    line: int
    column: int

    @property
    def expected_close(self) -> str:
        return BRACKET_PAIRS[self.char]

    @property
    def location(self) -> str:
        return f"line {self.line}, column {self.column}"


class BracketMatcher:
    """LIFO delimiter matcher; strings and comments are skipped via the line scan."""

    def __init__(self) -> None:
        self._stack: list[BracketFrame] = []

    @property
    def stack(self) -> tuple[BracketFrame, ...]:
        return tuple(self._stack)

    def feed(self, line_number: int, scan: LineScan) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for offset, ch in enumerate(scan.text):
            if ch not in BRACKET_PAIRS and ch not in CLOSING_BRACKETS:
                continue
            if not scan.is_code(offset):
                continue
            column = offset + 1
            if ch in BRACKET_PAIRS:
                self._stack.append(BracketFrame(ch, line_number, column))
                continue

            span = LineSpan(line_number, column, column + 1)
            if not self._stack:
                diagnostics.append(
                    Diagnostic.from_spec(EXTRA_CLOSING_BRACKET, span, f"Found `{ch}` with no open bracket.")
                )
                continue

            frame = self._stack.pop()
            if frame.expected_close != ch:
                diagnostics.append(
                    Diagnostic.from_spec(
                        BRACKET_MISMATCH,
                        span,
                        f"`{frame.char}` opened at {frame.location} expects `{frame.expected_close}` but found `{ch}`.",
                    )
                )
        return diagnostics

    def finish(self) -> list[Diagnostic]:
        """Report every frame still open, in opening order, and reset."""
        diagnostics = [
            Diagnostic.from_spec(
                UNCLOSED_BRACKET,
                LineSpan(frame.line, frame.column, frame.column + 1),
                f"`{frame.char}` opened at {frame.location} is never closed.",
            )
            for frame in self._stack
        ]
        self._stack.clear()
        return diagnostics


def check_line_brackets(line_number: int, scan: LineScan) -> list[Diagnostic]:
    """Local check: the stack starts empty and is flushed at the end of the line."""
    matcher = BracketMatcher()
    diagnostics = matcher.feed(line_number, scan)
    diagnostics.extend(matcher.finish())
    return diagnostics


def check_buffer_brackets(scans: Sequence[LineScan]) -> list[Diagnostic]:
    """Authoritative check: one stack across the whole buffer."""
    matcher = BracketMatcher()
    diagnostics: list[Diagnostic] = []
    for line_number, scan in enumerate(scans, start=1):
        diagnostics.extend(matcher.feed(line_number, scan))
    diagnostics.extend(matcher.finish())
    return diagnostics


def reconcile_bracket_diagnostics(
    diagnostics: list[Diagnostic],
    buffer_diagnostics: Sequence[Diagnostic],
) -> list[Diagnostic]:
    """Merge per-line bracket findings with the authoritative buffer pass.

    A per-line finding survives only when the buffer pass reports the same code
    at the same span; buffer findings not already reported are appended.
    """
    confirmed = {(d.code, d.span) for d in buffer_diagnostics}
    kept = [d for d in diagnostics if d.category != "bracket-mismatch" or (d.code, d.span) in confirmed]
    reported = {(d.code, d.span) for d in kept if d.category == "bracket-mismatch"}
    kept.extend(d for d in buffer_diagnostics if (d.code, d.span) not in reported)
    return kept
