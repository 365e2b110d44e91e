"""Exception hierarchy for version, comparator and range handling."""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for anything that cannot be parsed or evaluated."""


class InvalidVersionError(SemverError):
    """Raised when a version string does not match the full version grammar."""


class InvalidComparatorError(SemverError):
    """Raised when a comparator token cannot be parsed."""


class InvalidRangeError(SemverError):
    """Raised when a range expression yields no usable comparator set."""


class InvalidOperatorError(SemverError):
    """Raised when ``cmp`` receives an operator it does not know."""


class InvalidReleaseTypeError(SemverError):
    """Raised when ``inc`` receives an unknown release type."""


class InvalidHiloError(SemverError):
    """Raised when ``outside`` receives a direction other than ``<`` or ``>``."""


class OptionsError(SemverError):
    """Raised when an options value cannot be normalised."""
