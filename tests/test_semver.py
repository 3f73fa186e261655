"""Tests for semver parsing and ordering."""

import itertools
from types import SimpleNamespace

import pytest

from publish_versions.semver import Semver, SemverParseError, compare


def test_version_string_round_trips() -> None:
    for major, minor, patch in itertools.product([0, 1, 9, 10, 123], repeat=3):
        version = Semver(major, minor, patch)
        assert Semver.parse(version.version_string) == version
        assert Semver.parse(version.version_string).equals(version)


def test_try_parse_table() -> None:
    assert Semver.try_parse("1") is None
    assert Semver.try_parse("1", coerce=True) == Semver(1, 0, 0)
    assert Semver.try_parse("1.2") is None
    assert Semver.try_parse("1.2", coerce=True) == Semver(1, 2, 0)
    assert Semver.try_parse("1.2.3") == Semver(1, 2, 3)
    assert Semver.try_parse("1.2.3", coerce=True) == Semver(1, 2, 3)
    assert Semver.try_parse("a.b.c") is None
    assert Semver.try_parse("a.b.c", coerce=True) is None


@pytest.mark.parametrize(
    "text",
    ["", "v1.2.3", "1.2.3-beta", "1.2.3.4", "-1.2.3", "1..3", "1.2.3\n", " 1.2.3", "١.٢.٣"],
)
def test_parse_rejects_malformed(text: str) -> None:
    assert Semver.try_parse(text, coerce=True) is None
    with pytest.raises(SemverParseError):
        Semver.parse(text, coerce=True)


def test_parse_without_coerce_requires_all_components() -> None:
    with pytest.raises(SemverParseError, match="Unexpected semver: 1.2"):
        Semver.parse("1.2")


def test_leading_zeros_are_dropped_from_canonical_form() -> None:
    version = Semver.parse("01.002.0003")
    assert version == Semver(1, 2, 3)
    assert version.version_string == "1.2.3"
    assert str(version) == "1.2.3"


def test_negative_components_rejected() -> None:
    with pytest.raises(ValueError):
        Semver(1, -1, 0)


def test_from_raw_reads_only_components() -> None:
    raw = SimpleNamespace(patch=3, minor=2, major=1, extra="ignored")
    assert Semver.from_raw(raw) == Semver(1, 2, 3)
    assert Semver.from_raw({"major": 4, "minor": 5, "patch": 6}) == Semver(4, 5, 6)
    assert Semver.from_raw(Semver(7, 8, 9)) == Semver(7, 8, 9)


def test_compare_examples() -> None:
    assert compare(Semver(1, 2, 3), Semver(1, 2, 4)) == -1
    assert compare(Semver(2, 0, 0), Semver(1, 9, 9)) == 1
    assert compare(Semver(1, 0, 0), Semver(1, 0, 0)) == 0
    # Numeric, not string, comparison.
    assert compare(Semver(1, 10, 0), Semver(1, 9, 0)) == 1


def test_compare_is_a_total_order() -> None:
    versions = [Semver(*parts) for parts in itertools.product([0, 1, 2], repeat=3)]
    for x in versions:
        assert compare(x, x) == 0
        for y in versions:
            assert compare(x, y) == -compare(y, x)
            assert (compare(x, y) == 0) == x.equals(y) == (x == y)
            assert (compare(x, y) == 1) == x.greater_than(y)
            for z in versions:
                if compare(x, y) <= 0 and compare(y, z) <= 0:
                    assert compare(x, z) <= 0


def test_sorting_uses_compare() -> None:
    versions = [Semver.parse(v) for v in ["1.10.0", "1.2.0", "0.9.9", "1.2.10", "1.2.9"]]
    assert [v.version_string for v in sorted(versions)] == [
        "0.9.9", "1.2.0", "1.2.9", "1.2.10", "1.10.0",
    ]
    assert max(versions) == Semver(1, 10, 0)


def test_ordering_against_other_types_raises_type_error() -> None:
    version = Semver(1, 2, 3)
    with pytest.raises(TypeError):
        version < "1.2.4"
    with pytest.raises(TypeError):
        version >= (1, 2, 3)
    assert version != "1.2.3"
