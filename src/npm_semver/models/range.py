"""OR-of-AND comparator sets built from range expressions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Union

from ..errors import InvalidRangeError, InvalidVersionError, SemverError
from ..parsers.grammar import OR_SEPARATOR, WHITESPACE
from ..parsers.range_rewrite import parse_comparator, replace_hyphen_range
from .comparator import Comparator
from .options import Options
from .version import SemVer

logger = logging.getLogger(__name__)

OptionsLike = Union[Options, Mapping[str, Any], None]


class Range:
    """A set of comparator groups joined by ``||``.

    A version satisfies the range when every comparator of at least one
    group accepts it, subject to the prerelease visibility rule in
    :func:`satisfies_set`.
    """

    def __init__(self, range_: Range | Comparator | str, options: OptionsLike = None) -> None:
        self.options = Options.from_value(options)
        self.include_prerelease = self.options.include_prerelease

        if isinstance(range_, Range):
            range_ = range_.raw
        elif isinstance(range_, Comparator):
            range_ = range_.value
        elif not isinstance(range_, str):
            raise InvalidRangeError(f"Invalid SemVer Range: {range_!r}")

        self.raw = range_
        try:
            groups = [self._parse_range(part.strip()) for part in OR_SEPARATOR.split(range_)]
        except SemverError as exc:
            raise InvalidRangeError(f"Invalid SemVer Range: {range_}") from exc

        # throw out any that are not relevant for whatever reason
        self.set: list[list[Comparator]] = [group for group in groups if group]
        if not self.set:
            raise InvalidRangeError(f"Invalid SemVer Range: {range_}")

        self.range = ""
        self.format()

    @classmethod
    def coerce(cls, range_: Range | Comparator | str, options: OptionsLike = None) -> Range:
        """Return ``range_`` itself when it already matches ``options``."""
        options = Options.from_value(options)
        if isinstance(range_, Range) and range_.include_prerelease == options.include_prerelease:
            return range_
        return cls(range_, options)

    def format(self) -> str:
        self.range = "||".join(
            " ".join(str(comp) for comp in comps).strip() for comps in self.set
        ).strip()
        return self.range

    def _parse_range(self, range_: str) -> list[Comparator]:
        logger.debug("range %s %s", range_, self.options)
        # `1.2.3 - 1.2.4` => `>=1.2.3 <=1.2.4`
        range_ = replace_hyphen_range(range_.strip())
        # normalize spaces
        range_ = " ".join(WHITESPACE.split(range_))

        rewritten = " ".join(parse_comparator(comp) for comp in range_.split(" "))
        return [Comparator(comp, self.options) for comp in WHITESPACE.split(rewritten)]

    def test(self, version: SemVer | str) -> bool:
        if not isinstance(version, SemVer):
            try:
                version = SemVer(version, self.options)
            except InvalidVersionError:
                return False
        return any(satisfies_set(comps, version, self.options) for comps in self.set)

    def intersects(self, range_: Range, options: OptionsLike = None) -> bool:
        if not isinstance(range_, Range):
            raise TypeError("a Range is required")
        options = Options.from_value(options)
        return any(
            is_satisfiable(these, options)
            and any(
                is_satisfiable(those, options)
                and all(
                    this.intersects(that, options) for this in these for that in those
                )
                for those in range_.set
            )
            for these in self.set
        )

    def __str__(self) -> str:
        return self.range

    def __repr__(self) -> str:
        return f'<Range "{self.range}">'


def satisfies_set(comparators: Sequence[Comparator], version: SemVer, options: Options) -> bool:
    if not all(comp.test(version) for comp in comparators):
        return False

    if version.prerelease and not options.include_prerelease:
        # Only comparators that carry a prerelease on the same X.Y.Z let one
        # through: ^1.2.3-pr.1 admits 1.2.3-pr.2 but not 1.2.4-alpha.
        for comp in comparators:
            allowed = comp.semver
            if allowed is None or not allowed.prerelease:
                continue
            if (allowed.major, allowed.minor, allowed.patch) == (
                version.major,
                version.minor,
                version.patch,
            ):
                return True
        return False

    return True


def is_satisfiable(comparators: Sequence[Comparator], options: OptionsLike = None) -> bool:
    """Return True if some version can satisfy every comparator in the group."""
    remaining = list(comparators)
    if not remaining:
        return True
    test_comparator = remaining.pop()
    while remaining:
        if not all(test_comparator.intersects(other, options) for other in remaining):
            return False
        test_comparator = remaining.pop()
    return True


def to_comparators(range_: Range | str, options: OptionsLike = None) -> list[list[str]]:
    return [
        " ".join(comp.value for comp in comps).strip().split(" ")
        for comps in Range(range_, options).set
    ]
