"""npm-semver package.

Semantic version parsing, precedence and npm-style range evaluation. The
public surface is re-exported here; see :mod:`npm_semver.core` for the
query functions and :mod:`npm_semver.models` for the value objects.
"""

from .core import (
    cmp,
    compare,
    compare_build,
    diff,
    eq,
    gt,
    gte,
    gtr,
    inc,
    intersects,
    lt,
    lte,
    ltr,
    major,
    max_satisfying,
    min_satisfying,
    min_version,
    minor,
    neq,
    outside,
    patch,
    prerelease,
    rcompare,
    rsort,
    satisfies,
    sort,
    valid_range,
)
from .errors import (
    InvalidComparatorError,
    InvalidHiloError,
    InvalidOperatorError,
    InvalidRangeError,
    InvalidReleaseTypeError,
    InvalidVersionError,
    OptionsError,
    SemverError,
)
from .models import (
    Comparator,
    Options,
    Range,
    SemVer,
    compare_identifiers,
    parse,
    rcompare_identifiers,
    to_comparators,
    valid,
)
from .parsers.grammar import MAX_LENGTH, SEMVER_SPEC_VERSION

__all__ = [
    # Value objects
    "Comparator",
    "Options",
    "Range",
    "SemVer",
    # Parsing
    "MAX_LENGTH",
    "SEMVER_SPEC_VERSION",
    "parse",
    "valid",
    "valid_range",
    "to_comparators",
    # Accessors
    "major",
    "minor",
    "patch",
    "prerelease",
    # Ordering
    "cmp",
    "compare",
    "compare_build",
    "compare_identifiers",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "neq",
    "rcompare",
    "rcompare_identifiers",
    "rsort",
    "sort",
    # Increment & diff
    "diff",
    "inc",
    # Ranges
    "gtr",
    "intersects",
    "ltr",
    "max_satisfying",
    "min_satisfying",
    "min_version",
    "outside",
    "satisfies",
    # Errors
    "InvalidComparatorError",
    "InvalidHiloError",
    "InvalidOperatorError",
    "InvalidRangeError",
    "InvalidReleaseTypeError",
    "InvalidVersionError",
    "OptionsError",
    "SemverError",
]
