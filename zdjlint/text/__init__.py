"""Editor positions."""

from zdjlint.text.text import LineSpan, replace_line_span, slice_line_span, split_lines

__all__ = [
    "LineSpan",
    "replace_line_span",
    "slice_line_span",
    "split_lines",
]
