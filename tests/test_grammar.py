from __future__ import annotations

import pytest

from npm_semver.parsers import grammar


@pytest.mark.parametrize(
    "value",
    [
        "0.0.0",
        "1.2.3",
        "v1.2.3",
        "1.2.3-alpha",
        "1.2.3-0a",
        "1.2.3-alpha.1.-x",
        "1.2.3+build.01",
        "1.2.3-rc.1+exp.sha.5114f85",
        "10.20.30",
    ],
)
def test_full_accepts_valid_versions(value: str) -> None:
    assert grammar.FULL.fullmatch(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "1",
        "1.2",
        "1.2.3.4",
        "01.2.3",
        "1.02.3",
        "1.2.3-",
        "1.2.3-01",
        "1.2.3+",
        "1.2.3-alpha..1",
        "=1.2.3",
        "1.2.3\n",
        "1.2.٣",
    ],
)
def test_full_rejects_invalid_versions(value: str) -> None:
    assert grammar.FULL.fullmatch(value) is None


def test_full_capture_groups() -> None:
    match = grammar.FULL.fullmatch("v1.2.3-alpha.1+build.5")
    assert match is not None
    assert match.groups() == ("1", "2", "3", "alpha.1", "build.5")


def test_comparator_groups() -> None:
    match = grammar.COMPARATOR.fullmatch(">= 1.2.3-beta")
    assert match is not None
    assert match.group(1) == ">="
    assert match.group(2) == "1.2.3-beta"


def test_comparator_allows_empty_but_not_bare_operator() -> None:
    empty = grammar.COMPARATOR.fullmatch("")
    assert empty is not None
    assert empty.group(1) is None
    assert grammar.COMPARATOR.fullmatch(">") is None


def test_xrange_groups() -> None:
    match = grammar.XRANGE.fullmatch(">=1.2.x")
    assert match is not None
    assert match.group(1, 2, 3, 4) == (">=", "1", "2", "x")


def test_hyphen_range_groups() -> None:
    match = grammar.HYPHEN_RANGE.fullmatch("1.2 - 3.4.5-beta")
    assert match is not None
    groups = match.groups()
    assert len(groups) == 12
    assert groups[1:4] == ("1", "2", None)
    assert groups[7:11] == ("3", "4", "5", "beta")


def test_tilde_and_caret_accept_shorthand() -> None:
    assert grammar.TILDE.fullmatch("~>1.2")
    assert grammar.TILDE.fullmatch("~1")
    assert grammar.CARET.fullmatch("^0.0.x")
    assert grammar.CARET.fullmatch("~1") is None


def test_length_limit() -> None:
    assert grammar.MAX_LENGTH == 256
    assert grammar.is_valid_length("1" * 256)
    assert not grammar.is_valid_length("1" * 257)


def test_every_source_is_compiled() -> None:
    assert set(grammar.PATTERNS) == set(grammar.SOURCES)
    assert grammar.SEMVER_SPEC_VERSION == "2.0.0"
