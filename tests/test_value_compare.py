"""Test ordering of runtime values."""

import math

import pytest

import sb3value
from sb3value import Value


@pytest.mark.parametrize("lhs,rhs,expected", [
    (2.0, "10", -1),
    ("10", 2.0, 1),
    ("10", "9", 1),
    (" 5 ", 5, 0),
    (1.0, 1, 0),
    (-0.0, 0.0, 0),
    (True, 1.0, 0),
    (False, "0", 0),
    (math.inf, "Infinity", 0),
    (-math.inf, -1e308, -1),
    ("1e3", 999, 1),
])
def test_numeric_compare(lhs, rhs, expected):
    """Number-like values compare as numbers."""
    assert Value(lhs).compare(Value(rhs)) == expected


@pytest.mark.parametrize("lhs,rhs,expected", [
    ("b", "A", 1),
    ("a", "B", -1),
    ("abc", "ABC", 0),
    ("apple", "Apple pie", -1),
    ("10", "9a", -1),
    ("", 0, -1),
    (True, "true", 0),
    (True, "TRUE", 0),
    (False, "true", -1),
    ("inf", math.inf, -1),
    ("Z", 5, 1),
])
def test_text_compare(lhs, rhs, expected):
    """Anything else compares as text, ignoring case."""
    assert Value(lhs).compare(Value(rhs)) == expected


@pytest.mark.parametrize("data", [
    "", "abc", "ABC", "10", " 10 ", "last", 0.0, -0.0, 1.5, -1e21,
    math.inf, -math.inf, True, False,
])
def test_compare_self(data):
    value = Value(data)
    assert value.compare(value) == 0
    assert value.compare(Value(data)) == 0


def test_compare_is_antisymmetric():
    values = [Value(d) for d in ["b", "A", 2.0, "10", True, "", "x1"]]
    for lhs in values:
        for rhs in values:
            assert lhs.compare(rhs) == -rhs.compare(lhs)


def test_sort_key():
    values = [Value("10"), Value(2), Value(-1.5), Value(" 3 ")]
    ordered = sorted(values, key=sb3value.sort_key)
    assert [v.to_num() for v in ordered] == [-1.5, 2.0, 3.0, 10.0]


def test_sort_key_text():
    values = [Value("banana"), Value("Cherry"), Value("apple")]
    ordered = sorted(values, key=sb3value.sort_key)
    assert [v.data for v in ordered] == ["apple", "banana", "Cherry"]
