"""Value objects: versions, comparators, ranges and their options."""

from __future__ import annotations

from .comparator import Comparator
from .options import DEFAULT_OPTIONS, Options
from .range import Range, is_satisfiable, satisfies_set, to_comparators
from .version import SemVer, compare_identifiers, parse, rcompare_identifiers, valid

__all__ = [
    "Comparator",
    "DEFAULT_OPTIONS",
    "Options",
    "Range",
    "SemVer",
    "compare_identifiers",
    "is_satisfiable",
    "parse",
    "rcompare_identifiers",
    "satisfies_set",
    "to_comparators",
    "valid",
]
