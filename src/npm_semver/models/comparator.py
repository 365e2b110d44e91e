"""Single ``operator + version`` constraint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Union

from ..errors import InvalidComparatorError
from ..parsers.grammar import COMPARATOR
from .options import Options
from .version import SemVer

logger = logging.getLogger(__name__)

OptionsLike = Union[Options, Mapping[str, Any], None]

_GREATER = (">=", ">")
_LESSER = ("<=", "<")
_INCLUSIVE = (">=", "<=")


class Comparator:
    """One constraint such as ``>=1.2.3``.

    A comparator is either ANY (no version, empty operator, matches every
    version) or an operator paired with a SemVer. ``semver is None`` marks
    the ANY variant.
    """

    def __init__(self, comp: Comparator | str, options: OptionsLike = None) -> None:
        self.options = Options.from_value(options)
        if isinstance(comp, Comparator):
            comp = comp.value
        logger.debug("comparator %s %s", comp, self.options)

        self.operator = ""
        self.semver: SemVer | None = None
        self._parse(comp)

        self.value = "" if self.semver is None else self.operator + self.semver.version

    def _parse(self, comp: str) -> None:
        match = COMPARATOR.fullmatch(comp) if isinstance(comp, str) else None
        if not match:
            raise InvalidComparatorError(f"Invalid comparator: {comp}")

        operator = match.group(1) or ""
        self.operator = "" if operator == "=" else operator

        # a bare "" allows anything
        version = match.group(2)
        if version:
            self.semver = SemVer(version, self.options)

    @classmethod
    def any(cls, options: OptionsLike = None) -> Comparator:
        return cls("", options)

    @property
    def is_any(self) -> bool:
        return self.semver is None

    def test(self, version: SemVer | str) -> bool:
        if self.semver is None:
            return True
        if not isinstance(version, SemVer):
            version = SemVer(version, self.options)
        # deferred: core builds on the models package
        from ..core import cmp

        return cmp(version, self.operator, self.semver, self.options)

    def intersects(self, comp: Comparator, options: OptionsLike = None) -> bool:
        """Return True if some version can satisfy both comparators."""
        if not isinstance(comp, Comparator):
            raise TypeError("a Comparator is required")
        options = Options.from_value(options)

        from ..core import cmp
        from .range import Range

        if self.operator == "":
            if self.semver is None:
                return True
            return Range(comp.value, options).test(self.semver)
        if comp.operator == "":
            if comp.semver is None:
                return True
            return Range(self.value, options).test(comp.semver)

        same_direction_increasing = self.operator in _GREATER and comp.operator in _GREATER
        same_direction_decreasing = self.operator in _LESSER and comp.operator in _LESSER
        same_semver = self.semver.version == comp.semver.version
        different_directions_inclusive = (
            self.operator in _INCLUSIVE and comp.operator in _INCLUSIVE
        )
        opposite_directions_less_than = (
            cmp(self.semver, "<", comp.semver, options)
            and self.operator in _GREATER
            and comp.operator in _LESSER
        )
        opposite_directions_greater_than = (
            cmp(self.semver, ">", comp.semver, options)
            and self.operator in _LESSER
            and comp.operator in _GREATER
        )

        return (
            same_direction_increasing
            or same_direction_decreasing
            or (same_semver and different_directions_inclusive)
            or opposite_directions_less_than
            or opposite_directions_greater_than
        )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f'<Comparator "{self.value}">'
