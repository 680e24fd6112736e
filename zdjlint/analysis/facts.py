"""Per-line facts shared by the line rules and the variable tracker."""

from __future__ import annotations

from dataclasses import dataclass

from zdjlint.lexer import LineScan, Token, TokenKind, lex_line, matching_close, split_arguments
from zdjlint.text import LineSpan


@dataclass(frozen=True, slots=True)
class NamespaceCall:
    """One `<namespace>.<name>` reference, with its argument list when called.

    `arguments` is `None` when the reference is not called or when the
    argument list does not close on the same line.
    """

    name: str
    name_index: int
    span: LineSpan
    open_index: int | None = None
    close_index: int | None = None
    arguments: tuple[tuple[Token, ...], ...] | None = None

    @property
    def is_call(self) -> bool:
        return self.open_index is not None

    def first_string_argument(self) -> Token | None:
        if not self.arguments:
            return None
        first = self.arguments[0]
        if len(first) != 1 or first[0].string_value is None:
            return None
        return first[0]


@dataclass(frozen=True, slots=True)
class LineFacts:
    """Facts extracted once per line and reused by every line check."""

    line_number: int
    scan: LineScan
    tokens: tuple[Token, ...]
    calls: tuple[NamespaceCall, ...]

    @property
    def text(self) -> str:
        return self.scan.text

    def token_span(self, token: Token) -> LineSpan:
        return LineSpan.at(self.line_number, token.start, len(token))


def build_line_facts(line_number: int, scan: LineScan, namespace: str) -> LineFacts:
    tokens = tuple(lex_line(scan))
    return LineFacts(
        line_number=line_number,
        scan=scan,
        tokens=tokens,
        calls=tuple(find_namespace_calls(line_number, tokens, namespace)),
    )


def find_namespace_calls(line_number: int, tokens: tuple[Token, ...], namespace: str) -> list[NamespaceCall]:
    calls: list[NamespaceCall] = []
    for index in range(len(tokens) - 2):
        head, dot, name = tokens[index], tokens[index + 1], tokens[index + 2]
        if head.kind != TokenKind.IDENTIFIER or head.text != namespace:
            continue
        if index > 0 and tokens[index - 1].kind.is_member_access:
            continue
        if dot.kind != TokenKind.DOT or name.kind != TokenKind.IDENTIFIER:
            continue

        span = LineSpan.at(line_number, name.start, len(name))
        open_index = index + 3
        if open_index >= len(tokens) or tokens[open_index].kind != TokenKind.LPAREN:
            calls.append(NamespaceCall(name=name.text, name_index=index + 2, span=span))
            continue

        arguments = split_arguments(tokens, open_index)
        calls.append(
            NamespaceCall(
                name=name.text,
                name_index=index + 2,
                span=span,
                open_index=open_index,
                close_index=matching_close(tokens, open_index),
                arguments=tuple(arguments) if arguments is not None else None,
            )
        )
    return calls
