"""Comparison and range query entrypoints.

Every function accepts version strings or SemVer objects and range strings
or Range objects, plus an optional ``options`` value (an Options instance or
a mapping such as ``{"include_prerelease": True}``).

Functions that answer "is this valid / does this match" return None or
False for malformed input. Functions that need an assumed-valid operand
(``compare``, ``cmp``, ``outside``, ``min_version``) raise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from typing import Any, TypeVar, Union

from .errors import InvalidHiloError, InvalidOperatorError, SemverError
from .models.comparator import Comparator
from .models.options import Options
from .models.range import Range
from .models.version import Identifier, SemVer, parse

logger = logging.getLogger(__name__)

OptionsLike = Union[Options, Mapping[str, Any], None]
VersionLike = Union[SemVer, str]
RangeLike = Union[Range, Comparator, str]

V = TypeVar("V", SemVer, str)


def _semver(version: VersionLike, options: OptionsLike = None) -> SemVer:
    return SemVer(version, options)


# ---- Accessors -------------------------------------------------------------------------


def major(version: VersionLike, options: OptionsLike = None) -> int:
    return _semver(version, options).major


def minor(version: VersionLike, options: OptionsLike = None) -> int:
    return _semver(version, options).minor


def patch(version: VersionLike, options: OptionsLike = None) -> int:
    return _semver(version, options).patch


def prerelease(version: VersionLike, options: OptionsLike = None) -> list[Identifier] | None:
    """Return the prerelease identifiers, or None for releases and invalid input."""
    parsed = parse(version, options)
    return parsed.prerelease if parsed and parsed.prerelease else None


# ---- Ordering --------------------------------------------------------------------------


def compare(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> int:
    return _semver(v1, options).compare(_semver(v2, options))


def compare_build(a: VersionLike, b: VersionLike, options: OptionsLike = None) -> int:
    """Like compare, but falls back to build metadata to break ties."""
    version_a = _semver(a, options)
    version_b = _semver(b, options)
    return version_a.compare(version_b) or version_a.compare_build(version_b)


def rcompare(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> int:
    return compare(v2, v1, options)


def gt(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) > 0


def gte(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) >= 0


def lt(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) < 0


def lte(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) <= 0


def eq(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) == 0


def neq(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> bool:
    return compare(v1, v2, options) != 0


def _canonical(version: VersionLike) -> str:
    return version.version if isinstance(version, SemVer) else version


def cmp(v1: VersionLike, operator: str, v2: VersionLike, options: OptionsLike = None) -> bool:
    """Compare two versions with an operator string.

    ``===`` and ``!==`` compare canonical strings; the others compare by
    precedence. Unknown operators raise InvalidOperatorError.
    """
    if operator == "===":
        return _canonical(v1) == _canonical(v2)
    if operator == "!==":
        return _canonical(v1) != _canonical(v2)
    if operator in ("", "=", "=="):
        return eq(v1, v2, options)
    if operator == "!=":
        return neq(v1, v2, options)
    if operator == ">":
        return gt(v1, v2, options)
    if operator == ">=":
        return gte(v1, v2, options)
    if operator == "<":
        return lt(v1, v2, options)
    if operator == "<=":
        return lte(v1, v2, options)
    raise InvalidOperatorError(f"Invalid operator: {operator}")


def sort(versions: list[V], options: OptionsLike = None) -> list[V]:
    """Sort ``versions`` in place, ascending, and return the same list."""
    versions.sort(key=cmp_to_key(lambda a, b: compare_build(a, b, options)))
    return versions


def rsort(versions: list[V], options: OptionsLike = None) -> list[V]:
    """Sort ``versions`` in place, descending, and return the same list."""
    versions.sort(key=cmp_to_key(lambda a, b: compare_build(b, a, options)))
    return versions


# ---- Increment & diff ------------------------------------------------------------------


def inc(
    version: VersionLike,
    release: str,
    options: OptionsLike | str = None,
    identifier: str | None = None,
) -> str | None:
    """Return ``version`` bumped by ``release``, or None if either is invalid.

    ``options`` may be given the prerelease identifier directly, e.g.
    ``inc("1.2.3", "prerelease", "beta")``. The input object is not mutated.
    """
    if isinstance(options, str):
        identifier = options
        options = None
    options = Options.from_value(options)
    try:
        return SemVer(version, options).inc(release, identifier).version
    except SemverError as exc:
        logger.debug("inc %s %s failed: %s", version, release, exc)
        return None


def diff(v1: VersionLike, v2: VersionLike, options: OptionsLike = None) -> str | None:
    """Name the most significant difference between two versions.

    Returns None when they are equal, ``pre``-prefixed field names when
    either side is a prerelease, and ``prerelease`` when only the prerelease
    part differs.
    """
    if eq(v1, v2, options):
        return None

    left = parse(v1, options)
    right = parse(v2, options)
    if left is None or right is None:
        return None

    prefix = ""
    default = None
    if left.prerelease or right.prerelease:
        prefix = "pre"
        default = "prerelease"
    for field in ("major", "minor", "patch"):
        if getattr(left, field) != getattr(right, field):
            return prefix + field
    return default


# ---- Ranges ----------------------------------------------------------------------------


def satisfies(version: VersionLike, range_: RangeLike, options: OptionsLike = None) -> bool:
    options = Options.from_value(options)
    try:
        range_obj = Range.coerce(range_, options)
    except SemverError:
        return False
    return range_obj.test(version)


def _best_satisfying(
    versions: Iterable[V],
    range_: RangeLike,
    options: OptionsLike,
    better: int,
) -> V | None:
    options = Options.from_value(options)
    try:
        range_obj = Range.coerce(range_, options)
    except SemverError:
        return None

    best: V | None = None
    best_semver: SemVer | None = None
    for version in versions:
        if not range_obj.test(version):
            continue
        if best_semver is None or best_semver.compare(version) == better:
            best = version
            best_semver = _semver(version, options)
    return best


def max_satisfying(
    versions: Iterable[V], range_: RangeLike, options: OptionsLike = None
) -> V | None:
    """Return the highest entry of ``versions`` that satisfies ``range_``."""
    return _best_satisfying(versions, range_, options, better=-1)


def min_satisfying(
    versions: Iterable[V], range_: RangeLike, options: OptionsLike = None
) -> V | None:
    """Return the lowest entry of ``versions`` that satisfies ``range_``."""
    return _best_satisfying(versions, range_, options, better=1)


def min_version(range_: RangeLike, options: OptionsLike = None) -> SemVer | None:
    """Return the lowest version that can satisfy ``range_``.

    Tries 0.0.0 and 0.0.0-0 first, then every lower bound in the range
    (``>X`` becomes the smallest version above X), keeping the lowest one
    the whole range accepts.
    """
    range_obj = Range.coerce(range_, options)

    for candidate in ("0.0.0", "0.0.0-0"):
        version = SemVer(candidate)
        if range_obj.test(version):
            return version

    best: SemVer | None = None
    for comparators in range_obj.set:
        for comparator in comparators:
            if comparator.semver is None:
                continue
            # clone so the comparator's own version is left untouched
            version = SemVer(comparator.semver.version)
            if comparator.operator == ">":
                if not version.prerelease:
                    version.patch += 1
                else:
                    version.prerelease.append(0)
                version.raw = version.format()
            elif comparator.operator not in ("", ">="):
                continue
            if best is not None and not gt(best, version):
                continue
            if range_obj.test(version):
                best = version
    return best


def valid_range(range_: RangeLike | None, options: OptionsLike = None) -> str | None:
    """Return the normalised range string, ``*`` for an empty range, or None."""
    options = Options.from_value(options)
    if range_ is None:
        return None
    try:
        return Range(range_, options).range or "*"
    except SemverError:
        return None


def intersects(range1: RangeLike, range2: RangeLike, options: OptionsLike = None) -> bool:
    return Range.coerce(range1, options).intersects(Range.coerce(range2, options), options)


def _direction(
    hilo: str,
) -> tuple[Callable[..., bool], Callable[..., bool], Callable[..., bool], str, str]:
    if hilo == ">":
        return gt, lte, lt, ">", ">="
    if hilo == "<":
        return lt, gte, gt, "<", "<="
    raise InvalidHiloError('Must provide a hilo val of "<" or ">"')


def outside(
    version: VersionLike, range_: RangeLike, hilo: str, options: OptionsLike = None
) -> bool:
    """Return True if ``version`` lies beyond every version ``range_`` admits.

    ``hilo`` picks the side: ``>`` means above the range, ``<`` below it.
    Terms below read as if in ``>`` mode; everything flips for ``<``.
    """
    version = _semver(version, options)
    range_obj = Range.coerce(range_, options)
    gtfn, ltefn, ltfn, comp, ecomp = _direction(hilo)

    if range_obj.test(version):
        return False

    for comparators in range_obj.set:
        high: Comparator | None = None
        low: Comparator | None = None
        for comparator in comparators:
            if comparator.semver is None:
                comparator = Comparator(">=0.0.0")
            high = high or comparator
            low = low or comparator
            if gtfn(comparator.semver, high.semver, options):
                high = comparator
            elif ltfn(comparator.semver, low.semver, options):
                low = comparator

        if high is None or low is None:
            return True

        # an edge comparator pointing our way means the range is unbounded here
        if high.operator in (comp, ecomp):
            return False

        # the lowest bound is above the version, so it is not past the range
        if (not low.operator or low.operator == comp) and ltefn(version, low.semver):
            return False
        if low.operator == ecomp and ltfn(version, low.semver):
            return False

    return True


def gtr(version: VersionLike, range_: RangeLike, options: OptionsLike = None) -> bool:
    """Return True if ``version`` is greater than every version in ``range_``."""
    return outside(version, range_, ">", options)


def ltr(version: VersionLike, range_: RangeLike, options: OptionsLike = None) -> bool:
    """Return True if ``version`` is less than every version in ``range_``."""
    return outside(version, range_, "<", options)
