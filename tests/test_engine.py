import textwrap

from zdjlint import check
from zdjlint.api import APIEntry, APISymbolTable, build_catalogue
from zdjlint.lint import DiagnosticEngine, TrailingCommaRule
from zdjlint.options import CheckerOptions
from tests._debug import debug_dump_diagnostics


def codes(diagnostics) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


def test_balanced_multiline_script_has_no_diagnostics() -> None:
    src = textwrap.dedent(
        """
        const enabled = true;
        function run() {
          if (enabled) {
            zdjl.click(500, 800);
          }
        }
        """
    ).strip()

    diagnostics = check(src)

    debug_dump_diagnostics("balanced_multiline", diagnostics, src)
    assert diagnostics == []


def test_unclosed_call_reports_exactly_one_bracket_diagnostic() -> None:
    diagnostics = check("foo(")

    assert [(d.code, d.span.as_tuple()) for d in diagnostics] == [("UNCLOSED_BRACKET", (1, 4, 5))]


def test_case_error_replaces_unknown_function() -> None:
    diagnostics = check("zdjl.Click(1, 2);")

    assert codes(diagnostics) == ["CASE_ERROR"]
    assert diagnostics[0].suggested_fix == "click"


def test_misspelling_reports_unknown_function_with_fix() -> None:
    diagnostics = check("zdjl.cick(1, 2);")

    assert codes(diagnostics) == ["UNKNOWN_FUNCTION"]
    assert diagnostics[0].suggested_fix == "click"
    assert diagnostics[0].severity == "error"


def test_single_unused_declaration() -> None:
    diagnostics = check("let x = 1;")

    assert [(d.code, d.span.as_tuple()) for d in diagnostics] == [("UNUSED_VARIABLE", (1, 5, 6))]


def test_stored_variable_set_and_read_once() -> None:
    diagnostics = check('zdjl.setVar("score", 0);\nzdjl.getVar("score");')

    assert [(d.code, d.span.as_tuple(), d.severity) for d in diagnostics] == [
        ("ONCE_USED_VARIABLE", (1, 14, 19), "info")
    ]


def test_repeated_runs_are_equal_apart_from_ids() -> None:
    src = 'let a = 1;\nzdjl.cick(a, b);;\nif (x) {\n'

    first = check(src)
    second = check(src)

    assert first == second
    assert len(first) > 3
    assert {d.id for d in first}.isdisjoint({d.id for d in second})


def test_mismatched_closer_names_opener_line() -> None:
    diagnostics = check("let a = [1];\nzdjl.toast(a);\nzdjl.click(\n  1, 2\n};")

    assert codes(diagnostics) == ["BRACKET_MISMATCH"]
    assert diagnostics[0].span.as_tuple() == (5, 1, 2)
    assert "line 3, column 11" in diagnostics[0].message
    assert "line 5" not in diagnostics[0].message


def test_multiline_blocks_do_not_produce_local_false_positives() -> None:
    src = textwrap.dedent(
        """
        const points = [
          [1, 2],
          [3, 4],
        ];
        zdjl.gesture(
          500,
          ...points
        );
        """
    ).strip()

    assert check(src) == []


def test_discovery_order_line_pass_then_buffer_then_sweep() -> None:
    src = "let unused = 1;\nzdjl.clik(1, 2,);\nfoo(\n"

    diagnostics = check(src)

    assert codes(diagnostics) == [
        "UNKNOWN_FUNCTION",
        "TRAILING_COMMA",
        "UNCLOSED_BRACKET",
        "UNUSED_VARIABLE",
    ]


def test_unterminated_constructs() -> None:
    assert codes(check('zdjl.toast("hi);')) == ["UNCLOSED_BRACKET", "UNTERMINATED_STRING"]
    assert codes(check("/* never closed\nzdjl.click(1, 2);")) == ["UNTERMINATED_COMMENT"]
    assert codes(check("zdjl.toast(`a\nb`);")) == []
    assert codes(check("zdjl.toast(`a\nb);")) == ["UNCLOSED_BRACKET", "UNTERMINATED_STRING"]


def test_empty_text_and_comment_only_text() -> None:
    assert check("") == []
    assert check("// just a note\n/* and */") == []


def test_engine_options_and_custom_rules() -> None:
    engine = DiagnosticEngine(options=CheckerOptions(check_parameters=False, flag_empty_object_literals=True))

    assert codes(engine.check("zdjl.click(1);\nconst o = {};\nzdjl.toast(o);")) == ["EMPTY_BLOCK"]

    only_commas = DiagnosticEngine(api_rules=(), syntax_rules=(TrailingCommaRule(),))
    assert codes(only_commas.check("zdjl.nope(1,);;")) == ["TRAILING_COMMA"]


def test_engine_with_custom_namespace() -> None:
    symbols = APISymbolTable(build_catalogue("bot", [APIEntry("tap"), APIEntry("wait")]))
    engine = DiagnosticEngine(symbols)

    assert engine.symbols is symbols
    assert codes(engine.check("bot.tap();\nbot.Wait();\nbot.tapp();")) == ["CASE_ERROR", "UNKNOWN_FUNCTION"]


def test_invalid_options_raise() -> None:
    try:
        DiagnosticEngine(options=CheckerOptions(external_setters=frozenset({"getVar"})))
    except ValueError as exc:
        assert "both external setters and getters" in str(exc)
    else:
        raise AssertionError("Expected ValueError for overlapping setter/getter names")


def test_payload_shape() -> None:
    diagnostic = check("zdjl.Click(1, 2);")[0]

    payload = diagnostic.to_payload()

    assert payload["id"].startswith("1-6-CASE_ERROR-")
    assert payload["endColumn"] == 11
    assert payload["ruleCode"] == "CASE_ERROR"
    assert payload["suggestedFix"] == "click"
    assert payload["category"] == "case-error"


def test_template_interpolations_read_variables() -> None:
    assert check("let x = 1;\nzdjl.toast(`v=${x}`);") == []
    assert check("const total = 3;\nzdjl.toast(`sum: ${\n  total + 1\n}`);") == []
    assert codes(check("zdjl.toast(`v=${missing}`);")) == ["UNDEFINED_VARIABLE"]


def test_end_of_buffer_findings_follow_line_findings() -> None:
    src = "let unused = 1;\nzdjl.clik(1, 2,);\nfoo(\n/* open"

    assert codes(check(src)) == [
        "UNKNOWN_FUNCTION",
        "TRAILING_COMMA",
        "UNCLOSED_BRACKET",
        "UNTERMINATED_COMMENT",
        "UNUSED_VARIABLE",
    ]
