from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LineSpan:
    """
    Half-open column span [column, end_column) on a single line.

    Coordinates are editor coordinates, so both line and column are 1-based.

    Invariant:
    - line >= 1
    - 1 <= column <= end_column
    """

    line: int
    column: int
    end_column: int

    def __post_init__(self):
        if self.line < 1:
            raise ValueError("LineSpan line must be >= 1")
        if self.column < 1:
            raise ValueError("LineSpan column must be >= 1")
        if self.column > self.end_column:
            raise ValueError("LineSpan invariant violated: column > end_column")

    @staticmethod
    def at(line: int, offset: int, length: int = 1) -> "LineSpan":
        """Create a span from a 0-based string offset into the line."""
        return LineSpan(line, offset + 1, offset + 1 + length)

    @staticmethod
    def empty(line: int, offset: int) -> "LineSpan":
        """Create an empty span at the given 0-based offset."""
        return LineSpan(line, offset + 1, offset + 1)

    @property
    def start_offset(self) -> int:
        """0-based offset of the first highlighted character."""
        return self.column - 1

    @property
    def end_offset(self) -> int:
        """0-based offset one past the last highlighted character."""
        return self.end_column - 1

    def len(self) -> int:
        return self.end_column - self.column

    def is_empty(self) -> bool:
        return self.column == self.end_column

    def contains(self, line: int, column: int) -> bool:
        """Check if the span covers the given 1-based position."""
        return line == self.line and self.column <= column < self.end_column

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.line, self.column, self.end_column)

    def __repr__(self) -> str:
        return f"LineSpan({self.line}, {self.column}, {self.end_column})"


def split_lines(text: str) -> list[str]:
    """Split a buffer the way the editor numbers lines.

    Only `\\n` separates lines; a `\\r` before it stays in the line so columns
    keep matching the raw buffer.
    """
    return text.split("\n")


def slice_line_span(text: str, span: LineSpan) -> str:
    """Get the substring of the buffer highlighted by the span."""
    lines = split_lines(text)
    if span.line > len(lines):
        return ""
    return lines[span.line - 1][span.start_offset : span.end_offset]


def replace_line_span(text: str, span: LineSpan, replacement: str) -> str:
    """Replace exactly the characters covered by the span."""
    lines = split_lines(text)
    if span.line > len(lines):
        raise ValueError(f"Line {span.line} is outside a buffer of {len(lines)} lines")
    line = lines[span.line - 1]
    if span.end_offset > len(line):
        raise ValueError(f"Span {span.as_tuple()} runs past the end of line {span.line}")
    lines[span.line - 1] = line[: span.start_offset] + replacement + line[span.end_offset :]
    return "\n".join(lines)
