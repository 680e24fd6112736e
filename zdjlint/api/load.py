"""Load injected API catalogues from JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from zdjlint.api.catalogue import APICatalogue, APIEntry, APIParameter, build_catalogue

logger = logging.getLogger(__name__)


def load_catalogue_file(path: str | Path) -> APICatalogue:
    """Read a catalogue shaped like `{namespace, entries, misspellings}`."""
    catalogue_path = Path(path)
    try:
        data = json.loads(catalogue_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Catalogue file `{catalogue_path}` is not valid JSON: {exc}") from exc
    catalogue = catalogue_from_mapping(data)
    logger.debug(
        "Loaded %d API entries for namespace %r from %s",
        len(catalogue.entries),
        catalogue.namespace,
        catalogue_path,
    )
    return catalogue


def catalogue_from_mapping(data: Any) -> APICatalogue:
    if not isinstance(data, Mapping):
        raise ValueError("Catalogue must be a JSON object")
    namespace = data.get("namespace")
    if not isinstance(namespace, str):
        raise ValueError("Catalogue `namespace` must be a string")
    raw_entries = data.get("entries", [])
    if not isinstance(raw_entries, list):
        raise ValueError("Catalogue `entries` must be a list")
    misspellings = data.get("misspellings", {})
    if not isinstance(misspellings, Mapping) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in misspellings.items()
    ):
        raise ValueError("Catalogue `misspellings` must map strings to strings")

    return build_catalogue(
        namespace,
        (_entry_from_mapping(raw) for raw in raw_entries),
        misspellings,
    )


def _entry_from_mapping(raw: Any) -> APIEntry:
    if isinstance(raw, str):
        return APIEntry(name=raw)
    if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
        raise ValueError(f"Catalogue entry {raw!r} must be a name or an object with a `name`")
    parameters = raw.get("parameters", [])
    if not isinstance(parameters, list):
        raise ValueError(f"Parameters of `{raw['name']}` must be a list")
    return APIEntry(
        name=raw["name"],
        kind=raw.get("kind", "function"),
        parameters=tuple(_parameter_from_mapping(raw["name"], parameter) for parameter in parameters),
        description=str(raw.get("description", "")),
        example=raw.get("example"),
    )


def _parameter_from_mapping(entry_name: str, raw: Any) -> APIParameter:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
        raise ValueError(f"Parameter {raw!r} of `{entry_name}` must be an object with a `name`")
    return APIParameter(
        name=raw["name"],
        type=str(raw.get("type", "any")),
        optional=bool(raw.get("optional", False)),
        description=str(raw.get("description", "")),
        variadic=bool(raw.get("variadic", False)),
    )
