"""Lexer over one classified line."""

from collections.abc import Sequence

from zdjlint.lexer.scanner import QUOTES, TEMPLATE_QUOTE, CharClass, LineScan
from zdjlint.lexer.tokens import PUNCTUATION, Token, TokenKind


class LineLexer:
    """Emits code tokens for one line, skipping whitespace and comments.

    String boundaries come from the `LineScan`, so a literal that continues a
    template from the previous line starts at offset 0 without an opening quote.
    """

    def __init__(self, scan: LineScan) -> None:
        self._scan = scan
        self._source = scan.text
        self._position = 0

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self.is_eof:
            start = self._position
            kind = self._lex_token()
            if kind is None:
                continue
            tokens.append(Token(kind, start, self._position, self._source[start : self._position]))
        return tokens

    def _lex_token(self) -> TokenKind | None:
        char_class = self._scan.class_at(self._position)
        if char_class in (CharClass.LINE_COMMENT, CharClass.BLOCK_COMMENT):
            self._advance(1)
            return None
        if char_class == CharClass.STRING:
            return self._lex_string()

        ch = self._current_char()
        if ch.isspace():
            self._advance(1)
            return None

        if ch.isdigit() or (ch == "." and self._peek_char().isdigit()):
            return self._lex_number()

        if ch.isalpha() or ch == "_" or ch == "$":
            return self._lex_identifier()

        if ch == "=" and self._peek_char() == ">":
            self._advance(2)
            return TokenKind.ARROW
        if ch == "." and self._peek_char() == "." and self._peek_char(2) == ".":
            self._advance(3)
            return TokenKind.SPREAD
        if ch == "?" and self._peek_char() == "." and not self._peek_char(2).isdigit():
            self._advance(2)
            return TokenKind.OPTIONAL_CHAIN

        kind = PUNCTUATION.get(ch)
        self._advance(1)
        return kind if kind is not None else TokenKind.OPERATOR

    def _lex_string(self) -> TokenKind:
        continues_template = self._position == 0 and self._scan.start_state.in_template
        ch = self._current_char()
        if continues_template:
            quote = TEMPLATE_QUOTE
        elif ch not in QUOTES:
            # The `}` closing an interpolation; template text follows.
            quote = TEMPLATE_QUOTE
            self._advance(1)
        else:
            quote = ch
            self._advance(1)

        while not self.is_eof and self._scan.class_at(self._position) == CharClass.STRING:
            ch = self._current_char()
            if ch == "\\":
                self._advance(2)
                continue
            self._advance(1)
            if ch == quote:
                break
        return TokenKind.STRING

    def _lex_number(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            if ch == "." and self._peek_char().isdigit():
                self._advance(1)
                continue
            if ch in "+-" and self._source[self._position - 1] in "eE" and self._peek_char().isdigit():
                self._advance(1)
                continue
            break
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_" or ch == "$":
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))


def lex_line(scan: LineScan) -> list[Token]:
    return LineLexer(scan).lex()


def matching_close(tokens: Sequence[Token], open_index: int) -> int | None:
    """Index of the token closing the opener at `open_index`, if it is on this line."""
    depth = 0
    for index in range(open_index, len(tokens)):
        kind = tokens[index].kind
        if kind.is_opening:
            depth += 1
        elif kind.is_closing:
            depth -= 1
            if depth == 0:
                return index
    return None


def matching_open(tokens: Sequence[Token], close_index: int) -> int | None:
    """Index of the token opening the closer at `close_index`, if it is on this line."""
    depth = 0
    for index in range(close_index, -1, -1):
        kind = tokens[index].kind
        if kind.is_closing:
            depth += 1
        elif kind.is_opening:
            depth -= 1
            if depth == 0:
                return index
    return None


def split_arguments(tokens: Sequence[Token], open_index: int) -> list[tuple[Token, ...]] | None:
    """Split a call's argument tokens at top-level commas.

    Returns `None` when the argument list does not close on this line. A
    trailing empty argument (`f(a,)`) is dropped; `f()` has no arguments.
    """
    close_index = matching_close(tokens, open_index)
    if close_index is None:
        return None

    arguments: list[tuple[Token, ...]] = []
    current: list[Token] = []
    depth = 0
    for token in tokens[open_index + 1 : close_index]:
        if token.kind.is_opening:
            depth += 1
        elif token.kind.is_closing:
            depth -= 1
        elif token.kind == TokenKind.COMMA and depth == 0:
            arguments.append(tuple(current))
            current = []
            continue
        current.append(token)

    if current or arguments:
        arguments.append(tuple(current))
    if arguments and not arguments[-1]:
        arguments.pop()
    return arguments
