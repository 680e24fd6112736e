"""Line tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    NUMBER = 21
    STRING = 22  # quoted, including the quotes

    # -------------------------
    # Punctuation / separators
    # -------------------------
    DOT = 40  # .
    OPTIONAL_CHAIN = 41  # ?.
    COMMA = 42  # ,
    SEMICOLON = 43  # ;
    COLON = 44  # :
    QUESTION = 45  # ?
    ARROW = 46  # =>
    SPREAD = 47  # ...
    OPERATOR = 48  # any other single operator character

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_opening(self) -> bool:
        return self in (TokenKind.LPAREN, TokenKind.LBRACKET, TokenKind.LBRACE)

    @property
    def is_closing(self) -> bool:
        return self in (TokenKind.RPAREN, TokenKind.RBRACKET, TokenKind.RBRACE)

    @property
    def is_member_access(self) -> bool:
        return self in (TokenKind.DOT, TokenKind.OPTIONAL_CHAIN)


PUNCTUATION: Final[dict[str, TokenKind]] = {
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """Code token with a 0-based half-open [start, end) offset range in its line."""

    kind: TokenKind
    start: int
    end: int
    text: str

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def string_value(self) -> str | None:
        """Contents of a closed `"` or `'` string literal."""
        if self.kind != TokenKind.STRING or len(self.text) < 2:
            return None
        quote = self.text[0]
        if quote not in ("'", '"') or self.text[-1] != quote:
            return None
        return self.text[1:-1]
