"""Flat, per-run variable declaration and usage tracking.

The table is not block or function scoped: one name maps to one record for the
whole buffer.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from zdjlint.analysis.facts import LineFacts
from zdjlint.diagnostics import (
    DUPLICATE_DECLARATION,
    ONCE_USED_VARIABLE,
    UNDEFINED_VARIABLE,
    UNUSED_VARIABLE,
    Diagnostic,
)
from zdjlint.lexer import Token, TokenKind, matching_close, matching_open
from zdjlint.options import CheckerOptions
from zdjlint.text import LineSpan

ScopeTag: TypeAlias = Literal["local", "external-state"]


@dataclass(slots=True)
class VariableRecord:
    name: str
    declared_line: int
    declared_column: int
    is_declared: bool
    usage_count: int = 0
    scope_tag: ScopeTag = "local"

    @property
    def span(self) -> LineSpan:
        return LineSpan(self.declared_line, self.declared_column, self.declared_column + len(self.name))


class VariableUsageTracker:
    """Symbol table owned by a single `check` run."""

    def __init__(self) -> None:
        self._records: dict[str, VariableRecord] = {}

    @property
    def records(self) -> Mapping[str, VariableRecord]:
        return MappingProxyType(self._records)

    def get(self, name: str) -> VariableRecord | None:
        return self._records.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def declare_local(self, name: str, line: int, column: int) -> Diagnostic | None:
        existing = self._records.get(name)
        if existing is not None and existing.is_declared:
            return Diagnostic.from_spec(
                DUPLICATE_DECLARATION,
                LineSpan(line, column, column + len(name)),
                f"`{name}` was already declared at line {existing.declared_line}.",
            )
        if existing is not None:
            # Known only through a binding or a getter so far; keep its usages.
            existing.declared_line = line
            existing.declared_column = column
            existing.is_declared = True
            return None
        self._records[name] = VariableRecord(name, line, column, is_declared=True)
        return None

    def bind(self, name: str, line: int, column: int) -> None:
        """Register a parameter binding; it never counts as an unused declaration."""
        if name not in self._records:
            self._records[name] = VariableRecord(name, line, column, is_declared=False)

    def declare_external(self, name: str, line: int, column: int) -> None:
        if name not in self._records:
            self._records[name] = VariableRecord(
                name, line, column, is_declared=True, scope_tag="external-state"
            )

    def reference(self, name: str) -> bool:
        record = self._records.get(name)
        if record is None:
            return False
        record.usage_count += 1
        return True

    def reference_external(self, name: str, line: int, column: int) -> None:
        if self.reference(name):
            return
        self._records[name] = VariableRecord(
            name, line, column, is_declared=False, usage_count=1, scope_tag="external-state"
        )

    def sweep(self) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for record in self._records.values():
            if record.is_declared and record.usage_count == 0:
                diagnostics.append(
                    Diagnostic.from_spec(UNUSED_VARIABLE, record.span, f"`{record.name}` is never read.")
                )
            elif record.scope_tag == "external-state" and record.usage_count == 1:
                diagnostics.append(
                    Diagnostic.from_spec(
                        ONCE_USED_VARIABLE,
                        record.span,
                        f"`{record.name}` is referenced only once.",
                    )
                )
        return diagnostics


def capture_declarations(
    tracker: VariableUsageTracker,
    facts: LineFacts,
    options: CheckerOptions,
) -> tuple[list[Diagnostic], set[int]]:
    """Record declarations on one line.

    Returns the diagnostics and the indices of tokens that name a declaration
    or binding, which the usage pass must not count as reads.
    """
    diagnostics: list[Diagnostic] = []
    targets: set[int] = set()
    tokens = facts.tokens

    for index, token in enumerate(tokens):
        if token.kind != TokenKind.IDENTIFIER or token.text not in options.declaration_keywords:
            continue
        if index > 0 and tokens[index - 1].kind.is_member_access:
            continue
        for target in _declarator_targets(tokens, index + 1):
            targets.add(target)
            name_token = tokens[target]
            diagnostic = tracker.declare_local(name_token.text, facts.line_number, name_token.start + 1)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

    if options.bind_parameters:
        for target in _parameter_targets(tokens):
            if target in targets:
                continue
            targets.add(target)
            name_token = tokens[target]
            tracker.bind(name_token.text, facts.line_number, name_token.start + 1)

    for call in facts.calls:
        if call.name not in options.external_setters:
            continue
        argument = call.first_string_argument()
        if argument is None or not argument.string_value:
            continue
        tracker.declare_external(argument.string_value, facts.line_number, argument.start + 2)

    return diagnostics, targets


def capture_usages(
    tracker: VariableUsageTracker,
    facts: LineFacts,
    *,
    skip: set[int],
    known_names: frozenset[str],
    namespace: str,
    options: CheckerOptions,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    tokens = facts.tokens

    for index, token in enumerate(tokens):
        if token.kind != TokenKind.IDENTIFIER or index in skip:
            continue
        name = token.text
        if name in options.reserved_words or name == namespace or name in known_names:
            continue
        if index > 0 and tokens[index - 1].kind.is_member_access:
            continue
        if index + 1 < len(tokens) and tokens[index + 1].kind in (TokenKind.COLON, TokenKind.LPAREN):
            continue
        if tracker.reference(name):
            continue
        diagnostics.append(
            Diagnostic.from_spec(
                UNDEFINED_VARIABLE,
                facts.token_span(token),
                f"`{name}` is read before any declaration.",
            )
        )

    for call in facts.calls:
        if call.name not in options.external_getters:
            continue
        argument = call.first_string_argument()
        if argument is None or not argument.string_value:
            continue
        tracker.reference_external(argument.string_value, facts.line_number, argument.start + 2)

    return diagnostics


def _declarator_targets(tokens: Sequence[Token], start: int) -> list[int]:
    """Names declared by `<keyword> a = 1, {b, c: d} = o, [e] = p`."""
    targets: list[int] = []
    expecting_name = True
    depth = 0
    index = start

    while index < len(tokens):
        token = tokens[index]
        if expecting_name:
            if token.kind == TokenKind.IDENTIFIER:
                targets.append(index)
                expecting_name = False
                index += 1
                continue
            if token.kind in (TokenKind.LBRACE, TokenKind.LBRACKET):
                close = matching_close(tokens, index)
                end = close if close is not None else len(tokens)
                targets.extend(_pattern_targets(tokens, index + 1, end))
                expecting_name = False
                index = end + 1
                continue
            break

        if token.kind.is_opening:
            depth += 1
        elif token.kind.is_closing:
            if depth == 0:
                break
            depth -= 1
        elif depth == 0 and token.kind == TokenKind.SEMICOLON:
            break
        elif depth == 0 and token.kind == TokenKind.COMMA:
            expecting_name = True
        elif depth == 0 and token.kind == TokenKind.IDENTIFIER and token.text in ("of", "in"):
            break
        index += 1
    return targets


def _pattern_targets(tokens: Sequence[Token], start: int, end: int) -> list[int]:
    """Names bound inside a destructuring pattern spanning tokens[start:end]."""
    targets: list[int] = []
    for index in range(start, end):
        token = tokens[index]
        if token.kind != TokenKind.IDENTIFIER:
            continue
        previous = tokens[index - 1] if index > 0 else None
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if previous is not None and previous.kind == TokenKind.OPERATOR and previous.text == "=":
            continue  # default value
        if following is not None and following.kind == TokenKind.COLON:
            continue  # property key being renamed
        targets.append(index)
    return targets


def _parameter_targets(tokens: Sequence[Token]) -> list[int]:
    """Parameter names of `function (...)`, `catch (...)` and arrow functions."""
    targets: list[int] = []
    for index, token in enumerate(tokens):
        if token.kind == TokenKind.IDENTIFIER and token.text in ("function", "catch"):
            open_index = index + 1
            if open_index < len(tokens) and tokens[open_index].kind == TokenKind.IDENTIFIER:
                open_index += 1  # named function
            if open_index < len(tokens) and tokens[open_index].kind == TokenKind.LPAREN:
                targets.extend(_parameter_list_targets(tokens, open_index))
            continue

        if token.kind != TokenKind.ARROW or index == 0:
            continue
        previous = tokens[index - 1]
        if previous.kind == TokenKind.IDENTIFIER:
            targets.append(index - 1)
        elif previous.kind == TokenKind.RPAREN:
            open_index = matching_open(tokens, index - 1)
            if open_index is not None:
                targets.extend(_parameter_list_targets(tokens, open_index))
    return targets


def _parameter_list_targets(tokens: Sequence[Token], open_index: int) -> list[int]:
    close = matching_close(tokens, open_index)
    end = close if close is not None else len(tokens)
    targets: list[int] = []
    depth = 0
    expecting_name = True
    for index in range(open_index + 1, end):
        token = tokens[index]
        if expecting_name and depth == 0:
            if token.kind == TokenKind.SPREAD:
                continue
            if token.kind == TokenKind.IDENTIFIER:
                targets.append(index)
                expecting_name = False
                continue
            if token.kind in (TokenKind.LBRACE, TokenKind.LBRACKET):
                pattern_close = matching_close(tokens, index)
                targets.extend(_pattern_targets(tokens, index + 1, pattern_close or end))
            expecting_name = False
        if token.kind.is_opening:
            depth += 1
        elif token.kind.is_closing:
            depth -= 1
        elif token.kind == TokenKind.COMMA and depth == 0:
            expecting_name = True
    return targets
