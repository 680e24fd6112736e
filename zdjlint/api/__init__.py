"""API catalogue and symbol table."""

from zdjlint.api.catalogue import APICatalogue, APIEntry, APIKind, APIParameter, build_catalogue
from zdjlint.api.fuzzy import LengthBucketIndex, levenshtein_distance
from zdjlint.api.load import catalogue_from_mapping, load_catalogue_file
from zdjlint.api.symbols import APISymbolTable, NameResolution, ResolutionKind, default_symbol_table
from zdjlint.api.zdjl import default_catalogue

__all__ = [
    "APICatalogue",
    "APIEntry",
    "APIKind",
    "APIParameter",
    "APISymbolTable",
    "LengthBucketIndex",
    "NameResolution",
    "ResolutionKind",
    "build_catalogue",
    "catalogue_from_mapping",
    "default_catalogue",
    "default_symbol_table",
    "levenshtein_distance",
    "load_catalogue_file",
]
