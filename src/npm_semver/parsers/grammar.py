"""Regular expression grammar for versions and range tokens.

Fragments are composed once at import time, in dependency order, and then
compiled. Capture group positions are relied on by the range rewriters:

- ``FULL``: major, minor, patch, prerelease, build
- ``COMPARATOR``: operator, version
- ``TILDE`` / ``CARET``: major, minor, patch, prerelease, build
- ``XRANGE``: operator, major, minor, patch, prerelease, build
- ``HYPHEN_RANGE``: from, fM, fm, fp, fpr, fb, to, tM, tm, tp, tpr, tb
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# semver.org revision implemented here, not the package version
SEMVER_SPEC_VERSION = "2.0.0"

MAX_LENGTH = 256
MAX_SAFE_INTEGER = 2**53 - 1

# Digit classes are spelled [0-9]: \d would also accept non-ASCII digits.

# A single `0`, or a non-zero digit followed by zero or more digits.
_NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"

# Zero or more digits, then a letter or hyphen, then letters, digits or hyphens.
_NON_NUMERIC_IDENTIFIER = r"[0-9]*[a-zA-Z-][a-zA-Z0-9-]*"

_MAIN_VERSION = (
    f"({_NUMERIC_IDENTIFIER})\\.({_NUMERIC_IDENTIFIER})\\.({_NUMERIC_IDENTIFIER})"
)

_PRERELEASE_IDENTIFIER = f"(?:{_NUMERIC_IDENTIFIER}|{_NON_NUMERIC_IDENTIFIER})"

_PRERELEASE = f"(?:-({_PRERELEASE_IDENTIFIER}(?:\\.{_PRERELEASE_IDENTIFIER})*))"

_BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"

_BUILD = f"(?:\\+({_BUILD_IDENTIFIER}(?:\\.{_BUILD_IDENTIFIER})*))"

_FULL_PLAIN = f"v?{_MAIN_VERSION}{_PRERELEASE}?{_BUILD}?"

_GTLT = r"((?:<|>)?=?)"

# "x.x" is a valid x-range meaning any version; only the first part is required.
_XRANGE_IDENTIFIER = f"{_NUMERIC_IDENTIFIER}|x|X|\\*"

_XRANGE_PLAIN = (
    f"[v=\\s]*({_XRANGE_IDENTIFIER})"
    f"(?:\\.({_XRANGE_IDENTIFIER})"
    f"(?:\\.({_XRANGE_IDENTIFIER})"
    f"(?:{_PRERELEASE})?{_BUILD}?"
    ")?)?"
)

_LONE_TILDE = r"(?:~>?)"
_LONE_CARET = r"(?:\^)"

SOURCES: dict[str, str] = {
    "NUMERIC_IDENTIFIER": _NUMERIC_IDENTIFIER,
    "NON_NUMERIC_IDENTIFIER": _NON_NUMERIC_IDENTIFIER,
    "MAIN_VERSION": _MAIN_VERSION,
    "PRERELEASE_IDENTIFIER": _PRERELEASE_IDENTIFIER,
    "PRERELEASE": _PRERELEASE,
    "BUILD_IDENTIFIER": _BUILD_IDENTIFIER,
    "BUILD": _BUILD,
    "FULL": f"^{_FULL_PLAIN}$",
    "GTLT": _GTLT,
    "XRANGE_IDENTIFIER": _XRANGE_IDENTIFIER,
    "XRANGE_PLAIN": _XRANGE_PLAIN,
    "XRANGE": f"^{_GTLT}\\s*{_XRANGE_PLAIN}$",
    "LONE_TILDE": _LONE_TILDE,
    "TILDE": f"^{_LONE_TILDE}{_XRANGE_PLAIN}$",
    "LONE_CARET": _LONE_CARET,
    "CARET": f"^{_LONE_CARET}{_XRANGE_PLAIN}$",
    # A simple gt/lt/eq comparator, or "" meaning any version.
    "COMPARATOR": f"^{_GTLT}\\s*({_FULL_PLAIN})$|^$",
    "HYPHEN_RANGE": f"^\\s*({_XRANGE_PLAIN})\\s+-\\s+({_XRANGE_PLAIN})\\s*$",
    # Star ranges allow anything at all.
    "STAR": r"(<|>)?=?\s*\*",
}


def _compile(sources: dict[str, str]) -> dict[str, re.Pattern[str]]:
    compiled: dict[str, re.Pattern[str]] = {}
    for name, source in sources.items():
        logger.debug("compile %s %s", name, source)
        compiled[name] = re.compile(source)
    return compiled


PATTERNS = _compile(SOURCES)

NUMERIC_IDENTIFIER = PATTERNS["NUMERIC_IDENTIFIER"]
NON_NUMERIC_IDENTIFIER = PATTERNS["NON_NUMERIC_IDENTIFIER"]
MAIN_VERSION = PATTERNS["MAIN_VERSION"]
PRERELEASE_IDENTIFIER = PATTERNS["PRERELEASE_IDENTIFIER"]
PRERELEASE = PATTERNS["PRERELEASE"]
BUILD_IDENTIFIER = PATTERNS["BUILD_IDENTIFIER"]
BUILD = PATTERNS["BUILD"]
FULL = PATTERNS["FULL"]
GTLT = PATTERNS["GTLT"]
XRANGE_IDENTIFIER = PATTERNS["XRANGE_IDENTIFIER"]
XRANGE_PLAIN = PATTERNS["XRANGE_PLAIN"]
XRANGE = PATTERNS["XRANGE"]
LONE_TILDE = PATTERNS["LONE_TILDE"]
TILDE = PATTERNS["TILDE"]
LONE_CARET = PATTERNS["LONE_CARET"]
CARET = PATTERNS["CARET"]
COMPARATOR = PATTERNS["COMPARATOR"]
HYPHEN_RANGE = PATTERNS["HYPHEN_RANGE"]
STAR = PATTERNS["STAR"]

# Only digits: used to spot numeric identifiers, including oversized ones.
NUMERIC = re.compile(r"[0-9]+")

# Separators used while splitting a range expression.
OR_SEPARATOR = re.compile(r"\s*\|\|\s*")
WHITESPACE = re.compile(r"\s+")


def is_valid_length(value: str) -> bool:
    return len(value) <= MAX_LENGTH
