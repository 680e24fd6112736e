"""Read-only API symbol table with spelling resolution."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from types import MappingProxyType
from typing import Literal, TypeAlias

from zdjlint.api.catalogue import APICatalogue, APIEntry
from zdjlint.api.fuzzy import LengthBucketIndex

ResolutionKind: TypeAlias = Literal[
    "valid",
    "case-mismatch",
    "misspelling",
    "edit-distance",
    "prefix",
    "unknown",
]


@dataclass(frozen=True, slots=True)
class NameResolution:
    """Outcome of resolving one `<namespace>.<name>` reference."""

    name: str
    kind: ResolutionKind
    suggestion: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.kind == "valid"


class APISymbolTable:
    """Known API names with exact, case-insensitive and fuzzy lookup.

    Built once from a catalogue and never mutated, so one table can be shared
    by any number of concurrent `check` calls.
    """

    def __init__(
        self,
        catalogue: APICatalogue,
        *,
        max_edit_distance: int = 2,
        max_prefix_extension: int = 3,
    ) -> None:
        if max_edit_distance < 0 or max_prefix_extension < 0:
            raise ValueError("Fuzzy matching bounds must be non-negative")
        self._catalogue = catalogue
        self._max_edit_distance = max_edit_distance
        self._max_prefix_extension = max_prefix_extension
        self._entries = MappingProxyType({entry.name: entry for entry in catalogue.entries})
        self._names = frozenset(self._entries)
        lowered: dict[str, str] = {}
        for entry in catalogue.entries:
            lowered.setdefault(entry.name.lower(), entry.name)
        self._lowered = MappingProxyType(lowered)
        self._index = LengthBucketIndex(catalogue.names)

    @property
    def namespace(self) -> str:
        return self._catalogue.namespace

    @property
    def catalogue(self) -> APICatalogue:
        return self._catalogue

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def get(self, name: str) -> APIEntry | None:
        return self._entries.get(name)

    def find_case_insensitive(self, name: str) -> str | None:
        """Known name equal to `name` ignoring case but spelled differently."""
        known = self._lowered.get(name.lower())
        if known is None or known == name:
            return None
        return known

    def find_misspelling(self, name: str) -> str | None:
        misspellings = self._catalogue.misspellings
        return misspellings.get(name) or misspellings.get(name.lower())

    def find_nearest(self, name: str) -> str | None:
        return self._index.nearest(name, self._max_edit_distance)

    def find_prefix_completion(self, name: str) -> str | None:
        lowered = name.lower()
        for known in self._catalogue.names:
            if not known.lower().startswith(lowered):
                continue
            if len(known) - len(name) <= self._max_prefix_extension:
                return known
        return None

    def resolve(self, name: str) -> NameResolution:
        """Classify a reference; the first matching rule wins."""
        if name in self._names:
            return NameResolution(name, "valid")

        case_match = self.find_case_insensitive(name)
        if case_match is not None:
            return NameResolution(name, "case-mismatch", case_match)

        misspelling = self.find_misspelling(name)
        if misspelling is not None:
            return NameResolution(name, "misspelling", misspelling)

        nearest = self.find_nearest(name)
        if nearest is not None:
            return NameResolution(name, "edit-distance", nearest)

        completion = self.find_prefix_completion(name)
        if completion is not None:
            return NameResolution(name, "prefix", completion)

        return NameResolution(name, "unknown")


@cache
def default_symbol_table() -> APISymbolTable:
    from zdjlint.api.zdjl import default_catalogue

    return APISymbolTable(default_catalogue())
