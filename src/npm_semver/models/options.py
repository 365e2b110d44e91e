"""Options shared by every parser and query entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import OptionsError

_KEYS = {
    "include_prerelease": "include_prerelease",
    "includePrerelease": "include_prerelease",
}


@dataclass(slots=True, frozen=True)
class Options:
    """Evaluation options.

    ``include_prerelease`` lifts the rule that a prerelease version only
    satisfies a range that names a prerelease on the same major.minor.patch.
    """

    include_prerelease: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Options:
        """Create Options from a mapping, validating keys and value types."""
        values: dict[str, Any] = {}
        for key, value in data.items():
            field = _KEYS.get(key)
            if field is None:
                known = ", ".join(sorted(_KEYS))
                raise OptionsError(f"Unknown option '{key}'. Known options: {known}")
            if not isinstance(value, bool):
                raise OptionsError(f"Option '{key}' must be a boolean, got {value!r}")
            values[field] = value
        return cls(**values)

    @classmethod
    def from_value(cls, value: Options | Mapping[str, Any] | None) -> Options:
        """Normalise whatever a caller passed as ``options``.

        Priority mirrors the usual config resolution: an explicit Options
        instance wins, a mapping is validated into one, and ``None`` falls
        back to the defaults.
        """
        if value is None:
            return DEFAULT_OPTIONS
        if isinstance(value, Options):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise OptionsError(f"Options must be an Options instance or a mapping, got {value!r}")


DEFAULT_OPTIONS = Options()
