#!/usr/bin/env python
import argparse
from pathlib import Path

from zdjlint.lexer import CharClass, CharacterScanner, LineScan, Token, lex_line
from zdjlint.text import split_lines

_CLASS_MARKS = {
    CharClass.CODE: ".",
    CharClass.STRING: "s",
    CharClass.LINE_COMMENT: "/",
    CharClass.BLOCK_COMMENT: "*",
}


def format_classes(scan: LineScan) -> str:
    return "".join(_CLASS_MARKS[char_class] for char_class in scan.classes)


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} text={token.text!r} span=({token.start},{token.end})"
    if token.string_value is not None:
        return base + f" str_value={token.string_value!r}"
    return base


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump scanner classes and line tokens of a script")
    parser.add_argument("path", type=Path)
    parser.add_argument("--output", type=Path, default=Path("out/tokens.txt"))
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    scanner = CharacterScanner()

    args.output.parent.mkdir(parents=True, exist_ok=True)

    total = 0
    with args.output.open("w", encoding="utf-8") as f:
        for line_number, line in enumerate(split_lines(text), start=1):
            scan = scanner.scan(line)
            tokens = lex_line(scan)
            total += len(tokens)
            f.write(f"{line_number:>4} | {line}\n")
            f.write(f"     | {format_classes(scan)}\n")
            for idx, token in enumerate(tokens):
                f.write("       " + format_token(idx, token) + "\n")

    print(f"Wrote {total} tokens to {args.output}")


if __name__ == "__main__":
    main()
