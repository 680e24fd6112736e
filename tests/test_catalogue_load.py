import json
from pathlib import Path

import pytest

from zdjlint.api import APISymbolTable, catalogue_from_mapping, load_catalogue_file
from zdjlint.lint import DiagnosticEngine


def write_catalogue(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "catalogue.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_catalogue_file_with_names_and_objects(tmp_path: Path) -> None:
    path = write_catalogue(
        tmp_path,
        {
            "namespace": "auto",
            "entries": [
                "sleep",
                {
                    "name": "tap",
                    "description": "Tap the screen.",
                    "parameters": [
                        {"name": "x", "type": "number"},
                        {"name": "y", "type": "number"},
                        {"name": "duration", "optional": True},
                    ],
                },
                {"name": "screenWidth", "kind": "property"},
            ],
            "misspellings": {"tpa": "tap"},
        },
    )

    catalogue = load_catalogue_file(path)

    assert catalogue.namespace == "auto"
    assert catalogue.names == ("sleep", "tap", "screenWidth")
    tap = catalogue.entries[1]
    assert tap.required_count == 2
    assert tap.max_count == 3
    assert catalogue.entries[2].kind == "property"
    assert dict(catalogue.misspellings) == {"tpa": "tap"}


def test_injected_catalogue_drives_the_engine(tmp_path: Path) -> None:
    path = write_catalogue(
        tmp_path,
        {"namespace": "auto", "entries": ["sleep", "tap"], "misspellings": {"tpa": "tap"}},
    )
    engine = DiagnosticEngine(APISymbolTable(load_catalogue_file(path)))

    diagnostics = engine.check("auto.tpa();\nzdjl.click(1, 2);\nauto.Sleep();")

    assert [(d.code, d.line, d.suggested_fix) for d in diagnostics] == [
        ("UNKNOWN_FUNCTION", 1, "tap"),
        ("UNDEFINED_VARIABLE", 2, None),
        ("CASE_ERROR", 3, "sleep"),
    ]


def test_load_catalogue_file_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        load_catalogue_file(path)


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ([], "JSON object"),
        ({"entries": []}, "namespace"),
        ({"namespace": "a", "entries": {}}, "entries"),
        ({"namespace": "a", "entries": [], "misspellings": {"x": 1}}, "misspellings"),
        ({"namespace": "a", "entries": [3]}, "must be a name"),
        ({"namespace": "a", "entries": [{"name": "f", "parameters": ["x"]}]}, "Parameter"),
        ({"namespace": "a", "entries": ["f", "f"]}, "more than once"),
    ],
)
def test_catalogue_from_mapping_validation(data: object, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        catalogue_from_mapping(data)
