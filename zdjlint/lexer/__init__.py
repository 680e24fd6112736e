"""Scanner and line lexer."""

from zdjlint.lexer.lexer import LineLexer, lex_line, matching_close, matching_open, split_arguments
from zdjlint.lexer.scanner import (
    INITIAL_STATE,
    CharacterScanner,
    CharClass,
    LineScan,
    ScanState,
    check_open_constructs,
    is_escaped,
    scan_line,
)
from zdjlint.lexer.tokens import Token, TokenKind

__all__ = [
    "INITIAL_STATE",
    "CharClass",
    "CharacterScanner",
    "LineLexer",
    "LineScan",
    "ScanState",
    "Token",
    "TokenKind",
    "check_open_constructs",
    "is_escaped",
    "lex_line",
    "matching_close",
    "matching_open",
    "scan_line",
    "split_arguments",
]
