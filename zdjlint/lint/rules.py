"""Per-line rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias

from zdjlint.analysis.facts import LineFacts
from zdjlint.api import APISymbolTable
from zdjlint.diagnostics import (
    CASE_ERROR,
    CATEGORIES,
    DOUBLE_SEMICOLON,
    EMPTY_BLOCK,
    MISSING_ARGUMENTS,
    TOO_MANY_ARGUMENTS,
    TRAILING_COMMA,
    UNKNOWN_FUNCTION,
    UNTERMINATED_STRING,
    Diagnostic,
)
from zdjlint.lexer import Token, TokenKind
from zdjlint.options import CheckerOptions
from zdjlint.text import LineSpan

RuleDomain: TypeAlias = Literal["api", "syntax"]

_OBJECT_LITERAL_PREFIXES: frozenset[TokenKind] = frozenset(
    {
        TokenKind.LPAREN,
        TokenKind.LBRACKET,
        TokenKind.COMMA,
        TokenKind.COLON,
        TokenKind.QUESTION,
        TokenKind.SPREAD,
    }
)


class LineRule(Protocol):
    """Contract for checks that look at one line at a time."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> RuleDomain: ...

    def run(self, facts: LineFacts) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class ApiNameRule:
    """Resolves every `<namespace>.<name>` reference against the symbol table."""

    symbols: APISymbolTable
    code: str = UNKNOWN_FUNCTION.code
    name: str = "apiName"
    category: str = "function-spell"
    domain: RuleDomain = "api"

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        namespace = self.symbols.namespace
        for call in facts.calls:
            resolution = self.symbols.resolve(call.name)
            if resolution.is_valid:
                continue
            if resolution.kind == "case-mismatch":
                diagnostics.append(
                    Diagnostic.from_spec(
                        CASE_ERROR,
                        call.span,
                        f"`{namespace}.{call.name}` should be written `{namespace}.{resolution.suggestion}`.",
                        suggested_fix=resolution.suggestion,
                    )
                )
                continue
            if resolution.suggestion is None:
                detail = f"`{namespace}.{call.name}` does not exist."
            else:
                detail = f"`{namespace}.{call.name}` does not exist. Did you mean `{namespace}.{resolution.suggestion}`?"
            diagnostics.append(
                Diagnostic.from_spec(
                    UNKNOWN_FUNCTION,
                    call.span,
                    detail,
                    suggested_fix=resolution.suggestion,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ParameterCountRule:
    """Checks argument counts of calls that close on the same line."""

    symbols: APISymbolTable
    code: str = MISSING_ARGUMENTS.code
    name: str = "parameterCount"
    category: str = "parameter-error"
    domain: RuleDomain = "api"

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        namespace = self.symbols.namespace
        for call in facts.calls:
            entry = self.symbols.get(call.name)
            if entry is None or entry.kind != "function" or call.arguments is None:
                continue
            if call.open_index is None or call.close_index is None:
                continue
            span = _argument_list_span(facts, call.open_index, call.close_index)
            count = len(call.arguments)
            if count < entry.required_count:
                diagnostics.append(
                    Diagnostic.from_spec(
                        MISSING_ARGUMENTS,
                        span,
                        f"`{namespace}.{entry.signature}` needs at least {entry.required_count}, got {count}.",
                    )
                )
            elif entry.max_count is not None and count > entry.max_count:
                diagnostics.append(
                    Diagnostic.from_spec(
                        TOO_MANY_ARGUMENTS,
                        span,
                        f"`{namespace}.{entry.signature}` accepts at most {entry.max_count}, got {count}.",
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class TrailingCommaRule:
    code: str = TRAILING_COMMA.code
    name: str = "trailingComma"
    category: str = "syntax-error"
    domain: RuleDomain = "syntax"

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        tokens = facts.tokens
        for index, token in enumerate(tokens[:-1]):
            if token.kind == TokenKind.COMMA and tokens[index + 1].kind.is_closing:
                diagnostics.append(Diagnostic.from_spec(TRAILING_COMMA, facts.token_span(token)))
        return diagnostics


@dataclass(frozen=True, slots=True)
class DoubleSemicolonRule:
    """Flags runs of adjacent semicolons; `for (;;)` headers are left alone."""

    code: str = DOUBLE_SEMICOLON.code
    name: str = "doubleSemicolon"
    category: str = "syntax-error"
    domain: RuleDomain = "syntax"

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        paren_depth = 0
        run: list[Token] = []

        for token in facts.tokens:
            if token.kind == TokenKind.SEMICOLON and paren_depth == 0:
                if run and run[-1].end != token.start:
                    _flush_semicolons(facts, run, diagnostics)
                run.append(token)
                continue
            _flush_semicolons(facts, run, diagnostics)
            if token.kind == TokenKind.LPAREN:
                paren_depth += 1
            elif token.kind == TokenKind.RPAREN and paren_depth > 0:
                paren_depth -= 1
        _flush_semicolons(facts, run, diagnostics)
        return diagnostics


@dataclass(frozen=True, slots=True)
class EmptyBlockRule:
    code: str = EMPTY_BLOCK.code
    name: str = "emptyBlock"
    category: str = "syntax-error"
    domain: RuleDomain = "syntax"
    flag_object_literals: bool = False

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        tokens = facts.tokens
        for index, token in enumerate(tokens[:-1]):
            closing = tokens[index + 1]
            if token.kind != TokenKind.LBRACE or closing.kind != TokenKind.RBRACE:
                continue
            if facts.text[token.end : closing.start].strip():
                continue  # only a comment separates the braces
            if not self.flag_object_literals and _opens_object_literal(tokens, index):
                continue
            span = LineSpan(facts.line_number, token.start + 1, closing.end + 1)
            diagnostics.append(Diagnostic.from_spec(EMPTY_BLOCK, span))
        return diagnostics


@dataclass(frozen=True, slots=True)
class UnterminatedStringRule:
    code: str = UNTERMINATED_STRING.code
    name: str = "unterminatedString"
    category: str = "syntax-error"
    domain: RuleDomain = "syntax"

    def run(self, facts: LineFacts) -> list[Diagnostic]:
        offset = facts.scan.dangling_offset
        quote = facts.scan.dangling_quote
        if offset is None or quote is None or quote == "`":
            return []
        return [
            Diagnostic.from_spec(
                UNTERMINATED_STRING,
                LineSpan.at(facts.line_number, offset, 1),
                f"The `{quote}` string is not closed before the end of the line.",
            )
        ]


def default_api_rules(symbols: APISymbolTable, options: CheckerOptions | None = None) -> tuple[LineRule, ...]:
    rules: list[LineRule] = [ApiNameRule(symbols)]
    if options is None or options.check_parameters:
        rules.append(ParameterCountRule(symbols))
    return tuple(rules)


def default_syntax_rules(options: CheckerOptions | None = None) -> tuple[LineRule, ...]:
    flag_object_literals = options is not None and options.flag_empty_object_literals
    return (
        TrailingCommaRule(),
        DoubleSemicolonRule(),
        EmptyBlockRule(flag_object_literals=flag_object_literals),
        UnterminatedStringRule(),
    )


def validate_line_rules(rules: Sequence[LineRule]) -> None:
    allowed_domains = {"api", "syntax"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(f"Line rule `{rule.name}` has invalid domain `{rule.domain}`; expected api/syntax.")
        if rule.category not in CATEGORIES:
            raise ValueError(f"Line rule `{rule.name}` has unknown category `{rule.category}`.")


def _argument_list_span(facts: LineFacts, open_index: int, close_index: int) -> LineSpan:
    opening = facts.tokens[open_index]
    closing = facts.tokens[close_index]
    return LineSpan(facts.line_number, opening.start + 1, closing.end + 1)


def _flush_semicolons(facts: LineFacts, run: list[Token], diagnostics: list[Diagnostic]) -> None:
    if len(run) > 1:
        span = LineSpan(facts.line_number, run[0].start + 1, run[-1].end + 1)
        diagnostics.append(Diagnostic.from_spec(DOUBLE_SEMICOLON, span))
    run.clear()


def _opens_object_literal(tokens: Sequence[Token], brace_index: int) -> bool:
    if brace_index == 0:
        return False
    previous = tokens[brace_index - 1]
    if previous.kind in _OBJECT_LITERAL_PREFIXES or previous.kind == TokenKind.OPERATOR:
        return True
    return previous.kind == TokenKind.IDENTIFIER and previous.text in ("return", "yield")
