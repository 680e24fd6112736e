"""API catalogue model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, TypeAlias

APIKind: TypeAlias = Literal["function", "property"]


@dataclass(frozen=True, slots=True)
class APIParameter:
    name: str
    type: str = "any"
    optional: bool = False
    description: str = ""
    variadic: bool = False

    def render(self) -> str:
        prefix = "..." if self.variadic else ""
        suffix = "?" if self.optional and not self.variadic else ""
        return f"{prefix}{self.name}{suffix}"


@dataclass(frozen=True, slots=True)
class APIEntry:
    """One named function or property on the API namespace."""

    name: str
    kind: APIKind = "function"
    parameters: tuple[APIParameter, ...] = ()
    description: str = ""
    example: str | None = None

    @property
    def required_count(self) -> int:
        return sum(1 for parameter in self.parameters if not parameter.optional and not parameter.variadic)

    @property
    def max_count(self) -> int | None:
        """Upper bound on positional arguments; `None` when a parameter is variadic."""
        if any(parameter.variadic for parameter in self.parameters):
            return None
        return len(self.parameters)

    @property
    def signature(self) -> str:
        if self.kind == "property":
            return self.name
        return f"{self.name}({', '.join(parameter.render() for parameter in self.parameters)})"


@dataclass(frozen=True, slots=True)
class APICatalogue:
    """Static, read-only API surface for one namespace plus curated misspellings."""

    namespace: str
    entries: tuple[APIEntry, ...]
    misspellings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not _is_identifier(self.namespace):
            raise ValueError(f"API namespace `{self.namespace}` is not an identifier")
        seen: set[str] = set()
        for entry in self.entries:
            if not _is_identifier(entry.name):
                raise ValueError(f"API entry name `{entry.name}` is not an identifier")
            if entry.kind not in ("function", "property"):
                raise ValueError(f"API entry `{entry.name}` has invalid kind `{entry.kind}`")
            if entry.name in seen:
                raise ValueError(f"API entry `{entry.name}` is declared more than once")
            seen.add(entry.name)
        for typo, target in self.misspellings.items():
            if target not in seen:
                raise ValueError(f"Misspelling `{typo}` points at unknown API name `{target}`")
        if not isinstance(self.misspellings, MappingProxyType):
            object.__setattr__(self, "misspellings", MappingProxyType(dict(self.misspellings)))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)


def build_catalogue(
    namespace: str,
    entries: Iterable[APIEntry],
    misspellings: Mapping[str, str] | None = None,
) -> APICatalogue:
    return APICatalogue(
        namespace=namespace,
        entries=tuple(entries),
        misspellings=MappingProxyType(dict(misspellings or {})),
    )


def _is_identifier(name: str) -> bool:
    if not name:
        return False
    head, tail = name[0], name[1:]
    if not (head.isalpha() or head in "_$"):
        return False
    return all(ch.isalnum() or ch in "_$" for ch in tail)
