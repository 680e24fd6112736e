import pytest

from zdjlint.api import (
    APICatalogue,
    APIEntry,
    APIParameter,
    APISymbolTable,
    LengthBucketIndex,
    build_catalogue,
    default_catalogue,
    default_symbol_table,
    levenshtein_distance,
)


def small_table(**kwargs) -> APISymbolTable:
    catalogue = build_catalogue(
        "bot",
        [
            APIEntry("click", parameters=(APIParameter("x"), APIParameter("y"))),
            APIEntry("clack"),
            APIEntry("recognize"),
            APIEntry("version", kind="property"),
        ],
        {"tap": "click"},
    )
    return APISymbolTable(catalogue, **kwargs)


def test_levenshtein_distance() -> None:
    assert levenshtein_distance("click", "click") == 0
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("cick", "click") == 1
    assert levenshtein_distance("kitten", "sitting") == 3


def test_length_bucket_index_breaks_ties_by_order() -> None:
    index = LengthBucketIndex(["clack", "click", "swipe"])

    assert index.nearest("clock", 2) == "clack"
    assert index.nearest("CLICK", 0) == "click"
    assert index.nearest("zzzzzzzz", 2) is None
    assert [name for _, name in index.candidates(5, 0)] == ["clack", "click", "swipe"]


def test_resolve_exact_name_is_valid() -> None:
    resolution = small_table().resolve("click")

    assert resolution.is_valid
    assert resolution.suggestion is None


def test_resolve_case_mismatch_wins_over_misspelling() -> None:
    resolution = small_table().resolve("CLICK")

    assert resolution.kind == "case-mismatch"
    assert resolution.suggestion == "click"


def test_resolve_misspelling_map_exact_then_lowercase() -> None:
    table = small_table()

    assert table.resolve("tap").kind == "misspelling"
    assert table.resolve("Tap").suggestion == "click"


def test_resolve_edit_distance_then_prefix() -> None:
    table = small_table()

    near = table.resolve("clickk")
    assert (near.kind, near.suggestion) == ("edit-distance", "click")

    prefix = table.resolve("recogn")
    assert (prefix.kind, prefix.suggestion) == ("prefix", "recognize")

    assert table.resolve("zzz").kind == "unknown"
    assert table.resolve("zzz").suggestion is None


def test_fuzzy_bounds_are_configurable() -> None:
    table = small_table(max_edit_distance=0, max_prefix_extension=0)

    assert table.resolve("clickk").kind == "unknown"
    assert table.resolve("recogn").kind == "unknown"

    with pytest.raises(ValueError, match="non-negative"):
        small_table(max_edit_distance=-1)


def test_table_lookup_helpers() -> None:
    table = small_table()

    assert "click" in table
    assert "Click" not in table
    assert len(table) == 4
    assert table.namespace == "bot"
    assert table.get("version") is not None
    assert table.get("missing") is None


def test_entry_counts_and_signature() -> None:
    entry = APIEntry(
        "gesture",
        parameters=(APIParameter("duration"), APIParameter("points", optional=True, variadic=True)),
    )

    assert entry.required_count == 1
    assert entry.max_count is None
    assert entry.signature == "gesture(duration, ...points)"
    assert APIEntry("toast", parameters=(APIParameter("message"), APIParameter("duration", optional=True))).signature == (
        "toast(message, duration?)"
    )


def test_catalogue_validation() -> None:
    with pytest.raises(ValueError, match="more than once"):
        build_catalogue("bot", [APIEntry("a"), APIEntry("a")])
    with pytest.raises(ValueError, match="unknown API name"):
        build_catalogue("bot", [APIEntry("a")], {"b": "c"})
    with pytest.raises(ValueError, match="not an identifier"):
        APICatalogue(namespace="1bot", entries=())
    with pytest.raises(ValueError, match="invalid kind"):
        build_catalogue("bot", [APIEntry("a", kind="event")])  # type: ignore[arg-type]


def test_catalogue_misspellings_are_read_only() -> None:
    catalogue = build_catalogue("bot", [APIEntry("a")], {"b": "a"})

    with pytest.raises(TypeError):
        catalogue.misspellings["c"] = "a"  # type: ignore[index]


def test_default_catalogue_covers_the_zdjl_api() -> None:
    catalogue = default_catalogue()
    table = default_symbol_table()

    assert catalogue.namespace == "zdjl"
    assert table is default_symbol_table()
    for name in ("click", "clickAsync", "swipe", "gesture", "setVar", "getVar", "toast", "requestUrl"):
        assert name in table
    assert table.resolve("cick").suggestion == "click"
    assert table.resolve("Click").kind == "case-mismatch"
    assert table.get("setVar").required_count == 2  # type: ignore[union-attr]
