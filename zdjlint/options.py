"""Checker configuration options."""

from dataclasses import dataclass
from typing import Final

DECLARATION_KEYWORDS: Final[frozenset[str]] = frozenset({"var", "let", "const"})

RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        # language keywords and literals
        "var", "let", "const", "function", "return", "if", "else", "for", "while",
        "do", "switch", "case", "break", "continue", "try", "catch", "finally",
        "throw", "new", "typeof", "instanceof", "in", "of", "true", "false", "null",
        "undefined", "this", "class", "extends", "super", "import", "export", "default",
        "async", "await", "yield", "static", "get", "set", "void", "delete", "debugger",
        "arguments", "NaN", "Infinity",
        # host globals
        "console", "Math", "JSON", "Array", "Object", "String", "Number", "Boolean",
        "Date", "RegExp", "Error", "Promise", "Map", "Set", "WeakMap", "WeakSet",
        "Symbol", "Proxy", "Reflect", "parseInt", "parseFloat", "isNaN", "isFinite",
        "encodeURI", "decodeURI", "encodeURIComponent", "decodeURIComponent", "eval",
        "setTimeout", "setInterval", "clearTimeout", "clearInterval",
        "requestAnimationFrame",
    }
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class CheckerOptions:
    """Feature flags controlling which constructs the checker recognises."""

    declaration_keywords: frozenset[str] = DECLARATION_KEYWORDS
    reserved_words: frozenset[str] = RESERVED_WORDS
    external_setters: frozenset[str] = frozenset({"setVar"})
    external_getters: frozenset[str] = frozenset({"getVar"})
    bind_parameters: bool = True
    check_parameters: bool = True
    flag_empty_object_literals: bool = False


def validate_checker_options(options: CheckerOptions) -> None:
    if not options.declaration_keywords:
        raise ValueError("Checker options need at least one declaration keyword")
    overlap = options.external_setters & options.external_getters
    if overlap:
        raise ValueError(f"Names cannot be both external setters and getters: {sorted(overlap)}")
    for keyword in options.declaration_keywords:
        if not keyword.isidentifier():
            raise ValueError(f"Declaration keyword `{keyword}` is not an identifier")
