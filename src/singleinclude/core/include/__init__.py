from __future__ import annotations

from .expander import ExpansionOptions, expand, flatten
from .ledger import InclusionLedger
from .matcher import is_directive, parse_directive
from .resolver import build_search_list, resolve_include

__all__ = [
    "ExpansionOptions",
    "InclusionLedger",
    "build_search_list",
    "expand",
    "flatten",
    "is_directive",
    "parse_directive",
    "resolve_include",
]
