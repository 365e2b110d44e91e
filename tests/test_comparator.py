from __future__ import annotations

import pytest

from npm_semver import Comparator, InvalidComparatorError, InvalidVersionError, SemVer


def test_parses_operator_and_version() -> None:
    comp = Comparator(">=1.2.3-beta")
    assert comp.operator == ">="
    assert comp.semver is not None
    assert comp.semver.version == "1.2.3-beta"
    assert comp.value == ">=1.2.3-beta"
    assert str(comp) == ">=1.2.3-beta"
    assert not comp.is_any


def test_bare_equals_is_normalised() -> None:
    comp = Comparator("=1.2.3")
    assert comp.operator == ""
    assert comp.value == "1.2.3"


def test_empty_comparator_is_any() -> None:
    comp = Comparator("")
    assert comp.is_any
    assert comp.semver is None
    assert comp.value == ""
    assert comp.test("0.0.0")
    assert comp.test("1.2.3-alpha")
    assert Comparator.any().is_any


def test_copy_from_comparator() -> None:
    original = Comparator("<2.0.0")
    copy = Comparator(original)
    assert copy is not original
    assert copy.value == original.value


@pytest.mark.parametrize("value", [">", "foo", "~1.2.3", ">=1.2", None])
def test_invalid_comparator(value) -> None:
    with pytest.raises(InvalidComparatorError, match="Invalid comparator"):
        Comparator(value)


@pytest.mark.parametrize(
    "comp, version, expected",
    [
        (">=1.2.3", "1.2.3", True),
        (">=1.2.3", "1.2.2", False),
        (">1.2.3", "1.2.3", False),
        ("<1.2.3", "1.2.3-beta", True),
        ("<=1.2.3", "1.2.3", True),
        ("1.2.3", "1.2.3+build", True),
        ("1.2.3", "1.2.4", False),
    ],
)
def test_test(comp: str, version: str, expected: bool) -> None:
    assert Comparator(comp).test(version) is expected
    assert Comparator(comp).test(SemVer(version)) is expected


def test_test_rejects_bad_version() -> None:
    with pytest.raises(InvalidVersionError):
        Comparator(">=1.0.0").test("nope")


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (">=1.0.0", ">=2.0.0", True),
        (">1.0.0", ">=0.1.0", True),
        ("<1.0.0", "<=0.5.0", True),
        (">=1.0.0", "<=1.0.0", True),
        (">=1.0.0", "<2.0.0", True),
        ("<2.0.0", ">1.0.0", True),
        (">1.0.0", "<1.0.0", False),
        (">=1.0.0", "<1.0.0", False),
        (">1.0.0", "<=1.0.0", False),
        ("<1.0.0", ">2.0.0", False),
        (">2.0.0", "<1.0.0", False),
        ("1.0.0", ">=0.5.0", True),
        ("1.0.0", "<1.0.0", False),
        (">=2.0.0", "1.0.0", False),
        ("<=1.0.0", "1.0.0", True),
        ("", "<1.0.0", True),
        (">=1.0.0", "", True),
    ],
)
def test_intersects(left: str, right: str, expected: bool) -> None:
    assert Comparator(left).intersects(Comparator(right)) is expected


def test_intersects_requires_comparator() -> None:
    with pytest.raises(TypeError, match="Comparator is required"):
        Comparator(">=1.0.0").intersects(">=2.0.0")  # type: ignore[arg-type]
