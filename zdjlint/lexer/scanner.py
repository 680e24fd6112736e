"""Character classification for script lines."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from zdjlint.diagnostics import UNTERMINATED_COMMENT, UNTERMINATED_STRING, Diagnostic
from zdjlint.text import LineSpan

QUOTES: Final[frozenset[str]] = frozenset({'"', "'", "`"})
TEMPLATE_QUOTE: Final[str] = "`"


class CharClass(IntEnum):
    CODE = 0
    STRING = 1
    LINE_COMMENT = 2
    BLOCK_COMMENT = 3


@dataclass(frozen=True, slots=True)
class ScanState:
    """State carried from the end of one line to the start of the next.

    `template_depths` holds one entry per open `${ ... }` interpolation,
    innermost last: the number of unmatched `{` inside it.
    """

    in_block_comment: bool = False
    in_template: bool = False
    template_depths: tuple[int, ...] = ()

    @property
    def in_open_template(self) -> bool:
        return self.in_template or bool(self.template_depths)


INITIAL_STATE: Final[ScanState] = ScanState()


@dataclass(frozen=True, slots=True)
class LineScan:
    """Per-offset classification of one line.

    `dangling_offset` is the offset of the opening delimiter of a string or
    block comment that starts on this line and is still open at line end.
    Inside a template literal only the text is STRING; `${ ... }` holds code.
    """

    text: str
    classes: tuple[CharClass, ...]
    start_state: ScanState
    end_state: ScanState
    dangling_offset: int | None = None

    def class_at(self, position: int) -> CharClass:
        # Anything outside the line is treated as code.
        if 0 <= position < len(self.classes):
            return self.classes[position]
        return CharClass.CODE

    def is_in_string(self, position: int) -> bool:
        return self.class_at(position) == CharClass.STRING

    def is_in_comment(self, position: int) -> bool:
        return self.class_at(position) in (CharClass.LINE_COMMENT, CharClass.BLOCK_COMMENT)

    def is_code(self, position: int) -> bool:
        return self.class_at(position) == CharClass.CODE

    @property
    def dangling_quote(self) -> str | None:
        """Quote character of a string left open at line end, if any."""
        if self.dangling_offset is None:
            return None
        ch = self.text[self.dangling_offset]
        return ch if ch in QUOTES else None


def scan_line(line: str, state: ScanState = INITIAL_STATE) -> LineScan:
    classes: list[CharClass] = []
    in_block = state.in_block_comment
    quote: str | None = TEMPLATE_QUOTE if state.in_template else None
    depths = list(state.template_depths)
    # Open templates, outermost first; None for those opened on an earlier line.
    templates: list[int | None] = [None] * (len(depths) + int(state.in_template))
    opened_at: int | None = None
    length = len(line)
    i = 0

    while i < length:
        ch = line[i]
        nxt = line[i + 1] if i + 1 < length else ""

        if in_block:
            if ch == "*" and nxt == "/":
                classes.extend((CharClass.BLOCK_COMMENT, CharClass.BLOCK_COMMENT))
                in_block = False
                opened_at = None
                i += 2
                continue
            classes.append(CharClass.BLOCK_COMMENT)
            i += 1
            continue

        if quote is not None:
            if quote == TEMPLATE_QUOTE and ch == "$" and nxt == "{" and not is_escaped(line, i):
                classes.extend((CharClass.STRING, CharClass.STRING))
                depths.append(0)
                quote = None
                i += 2
                continue
            classes.append(CharClass.STRING)
            if ch == quote and not is_escaped(line, i):
                if quote == TEMPLATE_QUOTE:
                    templates.pop()
                quote = None
                opened_at = None
            i += 1
            continue

        if ch == "/" and nxt == "/":
            classes.extend([CharClass.LINE_COMMENT] * (length - i))
            break

        if ch == "/" and nxt == "*":
            classes.extend((CharClass.BLOCK_COMMENT, CharClass.BLOCK_COMMENT))
            in_block = True
            opened_at = i
            i += 2
            continue

        if ch in QUOTES and not is_escaped(line, i):
            quote = ch
            if ch == TEMPLATE_QUOTE:
                templates.append(i)
            else:
                opened_at = i
            classes.append(CharClass.STRING)
            i += 1
            continue

        if depths and ch == "}" and depths[-1] == 0:
            # Closes the interpolation; the template text resumes.
            depths.pop()
            quote = TEMPLATE_QUOTE
            classes.append(CharClass.STRING)
            i += 1
            continue
        if depths and ch == "{":
            depths[-1] += 1
        elif depths and ch == "}":
            depths[-1] -= 1

        classes.append(CharClass.CODE)
        i += 1

    if in_block or (quote is not None and quote != TEMPLATE_QUOTE):
        dangling = opened_at
    else:
        dangling = next((offset for offset in templates if offset is not None), None)

    return LineScan(
        text=line,
        classes=tuple(classes),
        start_state=state,
        end_state=ScanState(
            in_block_comment=in_block,
            in_template=quote == TEMPLATE_QUOTE,
            template_depths=tuple(depths),
        ),
        dangling_offset=dangling,
    )


def is_escaped(line: str, position: int) -> bool:
    """True when the character is preceded by an odd run of backslashes."""
    backslashes = 0
    index = position - 1
    while index >= 0 and line[index] == "\\":
        backslashes += 1
        index -= 1
    return backslashes % 2 == 1


class CharacterScanner:
    """Scans successive lines, threading comment/template state between them."""

    def __init__(self, state: ScanState = INITIAL_STATE) -> None:
        self._state = state

    @property
    def state(self) -> ScanState:
        return self._state

    def scan(self, line: str) -> LineScan:
        result = scan_line(line, self._state)
        self._state = result.end_state
        return result

    def scan_lines(self, lines: Iterable[str]) -> list[LineScan]:
        return [self.scan(line) for line in lines]


def check_open_constructs(scans: Sequence[LineScan]) -> list[Diagnostic]:
    """Report a block comment or template literal still open at end of buffer."""
    if not scans:
        return []
    final_state = scans[-1].end_state
    if not (final_state.in_block_comment or final_state.in_open_template):
        return []

    for index in range(len(scans) - 1, -1, -1):
        scan = scans[index]
        if scan.dangling_offset is None:
            continue
        span = LineSpan.at(index + 1, scan.dangling_offset, 1)
        if final_state.in_block_comment:
            if scan.text.startswith("/*", scan.dangling_offset):
                return [Diagnostic.from_spec(UNTERMINATED_COMMENT, span, "Comment is still open at end of file.")]
        elif scan.dangling_quote == TEMPLATE_QUOTE:
            return [Diagnostic.from_spec(UNTERMINATED_STRING, span, "Template literal is still open at end of file.")]
    return []
