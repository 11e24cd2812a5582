"""Tests for comparators module."""

import itertools

import pytest

from tap_harness.comparators import ALIASES, Comparator, compare, identical, resolve

SAMPLES = [
    (1, 1),
    (1, 2),
    (2, 1),
    (1, 1.0),
    (0, False),
    ("a", "b"),
    ([1, 2], [1, 2]),
    (None, None),
    (1, "1"),
]


def test_every_comparator_has_aliases() -> None:
    """Maps every comparator's own token to itself."""
    for comparator in Comparator:
        assert ALIASES[comparator.value] is comparator


@pytest.mark.parametrize(
    ("alias1", "alias2"),
    [
        (a, b)
        for a, b in itertools.combinations(ALIASES, 2)
        if ALIASES[a] is ALIASES[b]
    ],
)
def test_aliases_are_interchangeable(alias1: str, alias2: str) -> None:
    """Gives the same result for aliases of the same comparator."""
    for got, want in SAMPLES:
        assert compare(got, want, alias1) == compare(got, want, alias2)


def test_resolve_accepts_members_and_aliases() -> None:
    """Resolves members, tokens and aliases; None for unknown tokens."""
    assert resolve(Comparator.GE) is Comparator.GE
    assert resolve("gte") is Comparator.GE
    assert resolve("<=") is Comparator.LE
    assert resolve("similar") is None


def test_compare_with_member() -> None:
    """Accepts enum members directly."""
    assert compare(1, 2, Comparator.LT) is True
    assert compare(1, 2, Comparator.GT) is False


def test_unknown_token_is_false() -> None:
    """Evaluates unknown tokens as false for any values."""
    assert compare(1, 1, "=~") is False


def test_raising_comparison_is_false() -> None:
    """Evaluates comparisons that raise as false."""
    assert compare(None, 1, "<") is False


@pytest.mark.parametrize(
    ("got", "want", "expected"),
    [
        (1, 1, True),
        (1, 1.0, False),
        (True, 1, False),
        ((1, [2]), (1, [2]), True),
        ((1, [2]), (1, [2.0]), False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, False),
        ({"a": 1}, {"a": True}, False),
        ([1, 2], [1, 2, 3], False),
    ],
)
def test_identical(got: object, want: object, expected: bool) -> None:
    """Compares type and value recursively."""
    assert identical(got, want) is expected
