from zdjlint.analysis import (
    BracketMatcher,
    check_buffer_brackets,
    check_line_brackets,
    reconcile_bracket_diagnostics,
)
from zdjlint.lexer import CharacterScanner, scan_line


def scans_for(*lines: str):
    return CharacterScanner().scan_lines(lines)


def codes_and_spans(diagnostics):
    return [(d.code, d.span.as_tuple()) for d in diagnostics]


def test_balanced_line_has_no_findings() -> None:
    assert check_line_brackets(1, scan_line("f(a[0], {b: (c)})")) == []


def test_unclosed_bracket_reported_at_opening_position() -> None:
    diagnostics = check_line_brackets(3, scan_line("foo("))

    assert codes_and_spans(diagnostics) == [("UNCLOSED_BRACKET", (3, 4, 5))]


def test_extra_closing_bracket() -> None:
    diagnostics = check_line_brackets(1, scan_line("a)"))

    assert codes_and_spans(diagnostics) == [("EXTRA_CLOSING_BRACKET", (1, 2, 3))]


def test_mismatch_names_the_opener() -> None:
    diagnostics = check_line_brackets(1, scan_line("x = (1]"))

    assert codes_and_spans(diagnostics) == [("BRACKET_MISMATCH", (1, 7, 8))]
    assert "line 1, column 5" in diagnostics[0].message
    assert "`)`" in diagnostics[0].message


def test_brackets_inside_strings_and_comments_are_ignored() -> None:
    assert check_line_brackets(1, scan_line('zdjl.toast("(["); // }')) == []
    assert check_buffer_brackets(scans_for("/* {", "( */", "`[", "]`")) == []


def test_buffer_pass_matches_across_lines() -> None:
    scans = scans_for("if (a) {", "  b();", "}")

    assert check_buffer_brackets(scans) == []
    assert codes_and_spans(check_line_brackets(1, scans[0])) == [("UNCLOSED_BRACKET", (1, 8, 9))]


def test_buffer_pass_reports_unclosed_in_opening_order() -> None:
    diagnostics = check_buffer_brackets(scans_for("a({", "["))

    assert codes_and_spans(diagnostics) == [
        ("UNCLOSED_BRACKET", (1, 2, 3)),
        ("UNCLOSED_BRACKET", (1, 3, 4)),
        ("UNCLOSED_BRACKET", (2, 1, 2)),
    ]


def test_matcher_finish_resets_stack() -> None:
    matcher = BracketMatcher()
    matcher.feed(1, scan_line("(("))

    assert len(matcher.stack) == 2
    assert len(matcher.finish()) == 2
    assert matcher.stack == ()


def test_reconcile_drops_unconfirmed_local_findings() -> None:
    scans = scans_for("foo(", "]")
    local = [*check_line_brackets(1, scans[0]), *check_line_brackets(2, scans[1])]
    buffer = check_buffer_brackets(scans)

    merged = reconcile_bracket_diagnostics(local, buffer)

    assert codes_and_spans(merged) == [("BRACKET_MISMATCH", (2, 1, 2))]
    assert "line 1, column 4" in merged[0].message


def test_reconcile_keeps_confirmed_local_findings_once() -> None:
    scans = scans_for("ok();", "foo(")
    local = [*check_line_brackets(1, scans[0]), *check_line_brackets(2, scans[1])]
    buffer = check_buffer_brackets(scans)

    merged = reconcile_bracket_diagnostics(local, buffer)

    assert codes_and_spans(merged) == [("UNCLOSED_BRACKET", (2, 4, 5))]
    assert merged[0] is local[0]
