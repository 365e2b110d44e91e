from __future__ import annotations

import pytest

from npm_semver.parsers.range_rewrite import (
    is_x,
    parse_comparator,
    replace_caret,
    replace_hyphen_range,
    replace_stars,
    replace_tilde,
    replace_x_range,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.2.3 - 2.3.4", ">=1.2.3 <=2.3.4"),
        ("1.2 - 2.3", ">=1.2.0 <2.4.0"),
        ("1.2.3 - 2.3", ">=1.2.3 <2.4.0"),
        ("1.2.3 - 2", ">=1.2.3 <3.0.0"),
        ("1 - 2.3.4-beta", ">=1.0.0 <=2.3.4-beta"),
        ("* - 2.0.0", "<=2.0.0"),
        ("1.2.3 - *", ">=1.2.3"),
        (">=1.2.3", ">=1.2.3"),
    ],
)
def test_replace_hyphen_range(value: str, expected: str) -> None:
    assert replace_hyphen_range(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("~1.2.3", ">=1.2.3 <1.3.0"),
        ("~>1.2.3", ">=1.2.3 <1.3.0"),
        ("~1.2", ">=1.2.0 <1.3.0"),
        ("~1.2.x", ">=1.2.0 <1.3.0"),
        ("~1", ">=1.0.0 <2.0.0"),
        ("~1.x", ">=1.0.0 <2.0.0"),
        ("~1.2.3-beta.2", ">=1.2.3-beta.2 <1.3.0"),
        ("~*", ""),
        ("~", "~"),
        ("1.2.3", "1.2.3"),
    ],
)
def test_replace_tilde(value: str, expected: str) -> None:
    assert replace_tilde(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("^1.2.3", ">=1.2.3 <2.0.0"),
        ("^0.2.3", ">=0.2.3 <0.3.0"),
        ("^0.0.3", ">=0.0.3 <0.0.4"),
        ("^1.2.3-beta.2", ">=1.2.3-beta.2 <2.0.0"),
        ("^0.2.3-beta", ">=0.2.3-beta <0.3.0"),
        ("^0.0.3-beta", ">=0.0.3-beta <0.0.4"),
        ("^1.2.x", ">=1.2.0 <2.0.0"),
        ("^1.2", ">=1.2.0 <2.0.0"),
        ("^0.1.x", ">=0.1.0 <0.2.0"),
        ("^0.0.x", ">=0.0.0 <0.1.0"),
        ("^1.x", ">=1.0.0 <2.0.0"),
        ("^0.x", ">=0.0.0 <1.0.0"),
        ("^x", ""),
        ("^", "^"),
    ],
)
def test_replace_caret(value: str, expected: str) -> None:
    assert replace_caret(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.x", ">=1.0.0 <2.0.0"),
        ("1.2.x", ">=1.2.0 <1.3.0"),
        ("1.2.*", ">=1.2.0 <1.3.0"),
        ("1", ">=1.0.0 <2.0.0"),
        ("=1.x", ">=1.0.0 <2.0.0"),
        (">1", ">=2.0.0"),
        (">1.2", ">=1.3.0"),
        (">=1.x", ">=1.0.0"),
        ("<1.2", "<1.2.0"),
        ("<=1.2", "<1.3.0"),
        ("<=1", "<2.0.0"),
        ("*", "*"),
        ("x", "*"),
        (">*", "<0.0.0"),
        ("<x", "<0.0.0"),
        ("1.2.3", "1.2.3"),
        (">=1.2.3", ">=1.2.3"),
    ],
)
def test_replace_x_range(value: str, expected: str) -> None:
    assert replace_x_range(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("*", ""), (">=*", ""), ("<*", ""), (">=1.2.3", ">=1.2.3")],
)
def test_replace_stars(value: str, expected: str) -> None:
    assert replace_stars(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("^1.2", ">=1.2.0 <2.0.0"),
        ("~1.2", ">=1.2.0 <1.3.0"),
        ("1.x", ">=1.0.0 <2.0.0"),
        ("*", ""),
        (">=*", ""),
        (">1.2.3", ">1.2.3"),
    ],
)
def test_parse_comparator_runs_every_pass(value: str, expected: str) -> None:
    assert parse_comparator(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("", True), ("x", True), ("X", True), ("*", True), ("0", False), ("12", False)],
)
def test_is_x(value, expected: bool) -> None:
    assert is_x(value) is expected
