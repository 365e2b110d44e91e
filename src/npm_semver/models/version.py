"""Semantic version value object."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import total_ordering
from typing import Any, Union

from ..errors import InvalidReleaseTypeError, InvalidVersionError, SemverError
from ..parsers.grammar import FULL, MAX_LENGTH, MAX_SAFE_INTEGER, NUMERIC, is_valid_length
from .options import Options

logger = logging.getLogger(__name__)

Identifier = Union[int, str]
OptionsLike = Union[Options, Mapping[str, Any], None]


def compare_identifiers(a: Identifier | None, b: Identifier | None) -> int:
    """Compare two prerelease or build identifiers.

    Numeric identifiers compare numerically and always sort before
    alphanumeric ones; everything else compares as ASCII text.
    """
    if a is None or b is None:
        raise TypeError("Comparison against null invalid")
    a_num = NUMERIC.fullmatch(str(a)) is not None
    b_num = NUMERIC.fullmatch(str(b)) is not None
    if a_num and b_num:
        a, b = int(a), int(b)
        return 0 if a == b else (-1 if a < b else 1)
    if a_num:
        return -1
    if b_num:
        return 1
    a, b = str(a), str(b)
    return 0 if a == b else (-1 if a < b else 1)


def rcompare_identifiers(a: Identifier | None, b: Identifier | None) -> int:
    return compare_identifiers(b, a)


def _compare_lists(left: list[Identifier], right: list[Identifier]) -> int:
    i = 0
    while True:
        a = left[i] if i < len(left) else None
        b = right[i] if i < len(right) else None
        if a is None and b is None:
            return 0
        if b is None:
            return 1
        if a is None:
            return -1
        if a != b:
            return compare_identifiers(a, b)
        i += 1


def _numberify(identifier: str) -> Identifier:
    if NUMERIC.fullmatch(identifier):
        number = int(identifier)
        if 0 <= number < MAX_SAFE_INTEGER:
            return number
    return identifier


def _is_number(value: Identifier | None) -> bool:
    if isinstance(value, int):
        return True
    return isinstance(value, str) and NUMERIC.fullmatch(value) is not None


@total_ordering
class SemVer:
    """A parsed ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` version.

    Build metadata is carried for display but never affects ordering or
    equality. Instances are mutable through :meth:`inc` only, and are
    therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, version: SemVer | str, options: OptionsLike = None) -> None:
        self.options = Options.from_value(options)

        if isinstance(version, SemVer):
            build = version.build
            version = version.version + ("+" + ".".join(build) if build else "")
        elif not isinstance(version, str):
            raise InvalidVersionError(f"Invalid Version: {version!r}")

        if not is_valid_length(version):
            raise InvalidVersionError(f"version is longer than {MAX_LENGTH} characters")

        logger.debug("SemVer %s %s", version, self.options)
        match = FULL.fullmatch(version.strip())
        if not match:
            raise InvalidVersionError(f"Invalid Version: {version}")

        self.raw = version
        self.major = int(match.group(1))
        self.minor = int(match.group(2))
        self.patch = int(match.group(3))

        for field in ("major", "minor", "patch"):
            if getattr(self, field) > MAX_SAFE_INTEGER:
                raise InvalidVersionError(f"Invalid {field} version: {version}")

        prerelease = match.group(4)
        self.prerelease: list[Identifier] = (
            [_numberify(part) for part in prerelease.split(".")] if prerelease else []
        )
        build = match.group(5)
        self.build: list[str] = build.split(".") if build else []
        self.version = ""
        self.format()

    def format(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(str(part) for part in self.prerelease)
        self.version = version
        return self.version

    def _coerce(self, other: SemVer | str) -> SemVer:
        if isinstance(other, SemVer):
            return other
        return SemVer(other, self.options)

    def compare(self, other: SemVer | str) -> int:
        other = self._coerce(other)
        return self.compare_main(other) or self.compare_pre(other)

    def compare_main(self, other: SemVer | str) -> int:
        other = self._coerce(other)
        return (
            compare_identifiers(self.major, other.major)
            or compare_identifiers(self.minor, other.minor)
            or compare_identifiers(self.patch, other.patch)
        )

    def compare_pre(self, other: SemVer | str) -> int:
        other = self._coerce(other)
        # NOT having a prerelease is greater than having one
        if self.prerelease and not other.prerelease:
            return -1
        if not self.prerelease and other.prerelease:
            return 1
        if not self.prerelease and not other.prerelease:
            return 0
        return _compare_lists(self.prerelease, other.prerelease)

    def compare_build(self, other: SemVer | str) -> int:
        other = self._coerce(other)
        return _compare_lists(list(self.build), list(other.build))

    def inc(self, release: str, identifier: str | None = None) -> SemVer:
        """Bump this version in place and return it.

        1.2.0-5 bumps to 1.2.0 on ``patch``/``minor``; 1.0.0-5 bumps to
        1.0.0 on ``major``. ``pre`` on a release gives X.Y.Z-0, which sorts
        lower than the original, so it is mostly useful via the pre* types.
        """
        logger.debug("inc %s %s %s", self.version, release, identifier)
        if release == "premajor":
            self.prerelease = []
            self.patch = 0
            self.minor = 0
            self.major += 1
            self.inc("pre", identifier)
        elif release == "preminor":
            self.prerelease = []
            self.patch = 0
            self.minor += 1
            self.inc("pre", identifier)
        elif release == "prepatch":
            # drop any existing prerelease so this always moves to the next patch
            self.prerelease = []
            self.inc("patch", identifier)
            self.inc("pre", identifier)
        elif release == "prerelease":
            # on a release this acts like prepatch
            if not self.prerelease:
                self.inc("patch", identifier)
            self.inc("pre", identifier)
        elif release == "major":
            if self.minor != 0 or self.patch != 0 or not self.prerelease:
                self.major += 1
            self.minor = 0
            self.patch = 0
            self.prerelease = []
        elif release == "minor":
            if self.patch != 0 or not self.prerelease:
                self.minor += 1
            self.patch = 0
            self.prerelease = []
        elif release == "patch":
            if not self.prerelease:
                self.patch += 1
            self.prerelease = []
        elif release == "pre":
            self._inc_pre(identifier)
        else:
            raise InvalidReleaseTypeError(f"invalid increment argument: {release}")

        self.format()
        self.raw = self.version
        return self

    def _inc_pre(self, identifier: str | None) -> None:
        if not self.prerelease:
            self.prerelease = [0]
        else:
            for index in range(len(self.prerelease) - 1, -1, -1):
                if isinstance(self.prerelease[index], int):
                    self.prerelease[index] += 1  # type: ignore[operator]
                    break
            else:
                self.prerelease.append(0)

        if identifier:
            # 1.2.0-beta.1 bumps to 1.2.0-beta.2,
            # 1.2.0-beta.fooblz or 1.2.0-beta bumps to 1.2.0-beta.0
            if self.prerelease[0] == identifier:
                second = self.prerelease[1] if len(self.prerelease) > 1 else None
                if not _is_number(second):
                    self.prerelease = [identifier, 0]
            else:
                self.prerelease = [identifier, 0]

    def copy(self) -> SemVer:
        return SemVer(self, self.options)

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f'<SemVer "{self.version}">'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare(other) < 0


def parse(version: SemVer | str | None, options: OptionsLike = None) -> SemVer | None:
    """Return a SemVer for ``version``, or None if it is not a valid version.

    Never raises for bad input: non-strings, strings over the length limit
    strings that do not match the full grammar and malformed options all
    yield None.
    """
    if isinstance(version, SemVer):
        return version
    if not isinstance(version, str):
        return None
    if not is_valid_length(version):
        return None
    if not FULL.fullmatch(version):
        return None
    try:
        return SemVer(version, options)
    except SemverError:
        return None


def valid(version: SemVer | str | None, options: OptionsLike = None) -> str | None:
    parsed = parse(version, options)
    return parsed.version if parsed else None
