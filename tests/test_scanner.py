from zdjlint.lexer import (
    INITIAL_STATE,
    CharacterScanner,
    CharClass,
    ScanState,
    check_open_constructs,
    is_escaped,
    scan_line,
)
from tests._debug import debug_dump_scans


def test_scan_line_classifies_strings_and_line_comments() -> None:
    scan = scan_line('a = "(x)"; // )')

    assert scan.is_code(0)
    assert scan.is_in_string(4)
    assert scan.is_in_string(5)
    assert scan.is_in_string(8)
    assert scan.is_code(9)
    assert scan.is_in_comment(11)
    assert scan.is_in_comment(14)
    assert scan.end_state == INITIAL_STATE


def test_escaped_quote_does_not_close_string() -> None:
    line = r'"a\"b" + c'
    scan = scan_line(line)

    assert is_escaped(line, 3)
    assert scan.is_in_string(4)
    assert scan.is_in_string(5)
    assert scan.is_code(7)


def test_even_backslash_run_does_not_escape_quote() -> None:
    line = r'"a\\" + b'

    assert not is_escaped(line, 4)
    assert scan_line(line).is_code(6)


def test_quote_string_ends_at_line_end_and_reports_dangling_offset() -> None:
    scan = scan_line("let s = 'open")

    assert scan.dangling_offset == 8
    assert scan.dangling_quote == "'"
    assert scan.end_state == INITIAL_STATE


def test_block_comment_carries_state_across_lines() -> None:
    scanner = CharacterScanner()

    scans = scanner.scan_lines(["a /* one", "two ( ", "*/ b"])

    debug_dump_scans("block_comment", scans)
    assert scans[0].end_state == ScanState(in_block_comment=True)
    assert all(char_class == CharClass.BLOCK_COMMENT for char_class in scans[1].classes)
    assert scans[2].is_in_comment(1)
    assert scans[2].is_code(3)
    assert scanner.state == INITIAL_STATE


def test_template_literal_carries_state_across_lines() -> None:
    scanner = CharacterScanner()

    first = scanner.scan("x = `a(")
    second = scanner.scan("b)` + y")

    assert first.end_state == ScanState(in_template=True)
    assert first.dangling_quote == "`"
    assert second.is_in_string(0)
    assert second.is_in_string(2)
    assert second.is_code(6)
    assert second.dangling_offset is None


def test_class_at_outside_line_is_code() -> None:
    scan = scan_line('"abc"')

    assert scan.class_at(-1) == CharClass.CODE
    assert scan.class_at(99) == CharClass.CODE


def test_check_open_constructs_reports_unterminated_comment() -> None:
    scans = CharacterScanner().scan_lines(["zdjl.click(1, 2);", "  /* todo", "still open"])

    diagnostics = check_open_constructs(scans)

    assert [(d.code, d.span.as_tuple()) for d in diagnostics] == [("UNTERMINATED_COMMENT", (2, 3, 4))]


def test_check_open_constructs_reports_unterminated_template() -> None:
    scans = CharacterScanner().scan_lines(["let t = `a", "b"])

    diagnostics = check_open_constructs(scans)

    assert [(d.code, d.span.as_tuple()) for d in diagnostics] == [("UNTERMINATED_STRING", (1, 9, 10))]


def test_check_open_constructs_is_quiet_for_closed_buffer() -> None:
    assert check_open_constructs([]) == []
    assert check_open_constructs(CharacterScanner().scan_lines(["/* a */", "'b'"])) == []


def test_template_interpolation_is_code() -> None:
    line = "t = `a${b + '}'}c` + d"
    scan = scan_line(line)

    debug_dump_scans("interpolation", [scan])
    assert scan.is_in_string(4)
    assert scan.is_in_string(6)
    assert scan.is_in_string(7)
    assert scan.is_code(8)
    assert scan.is_in_string(12)
    assert scan.is_in_string(15)
    assert scan.is_in_string(17)
    assert scan.is_code(19)
    assert scan.end_state == INITIAL_STATE
    assert scan.dangling_offset is None


def test_interpolation_braces_nest_and_carry_across_lines() -> None:
    scanner = CharacterScanner()

    first = scanner.scan("x = `a ${ f({")
    second = scanner.scan("k: `in ${n}`}) } b`;")

    assert first.end_state == ScanState(template_depths=(1,))
    assert first.dangling_offset == 4
    assert second.is_code(0)
    assert second.is_in_string(3)
    assert second.is_code(9)
    assert second.is_in_string(10)
    assert second.is_code(12)
    assert second.is_in_string(15)
    assert second.is_in_string(18)
    assert second.is_code(19)
    assert scanner.state == INITIAL_STATE


def test_check_open_constructs_reports_template_left_inside_interpolation() -> None:
    scans = CharacterScanner().scan_lines(["let t = `a ${", "b + 'x"])

    diagnostics = check_open_constructs(scans)

    assert [(d.code, d.span.as_tuple()) for d in diagnostics] == [("UNTERMINATED_STRING", (1, 9, 10))]
