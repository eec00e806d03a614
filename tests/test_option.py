"""Tests for the Option type returned by partial consumers."""

from __future__ import annotations

import pytest

import lazychain as lc
from lazychain import NONE, Option, Some


def _describe(option: Option[int]) -> str:
    match option:
        case Some(value):
            return f"found {value}"
        case _:
            return "missing"


def test_option_pattern_matching() -> None:
    """Test Option pattern matching on consumer results."""
    assert _describe(lc.range(5).find(lambda n, _: n > 2)) == "found 3"
    assert _describe(lc.range(5).find(lambda n, _: n > 9)) == "missing"


def test_from_none() -> None:
    """Test None converts to NONE."""
    assert Option.from_(None) is NONE
    assert Option.from_(0) == Some(0)


def test_unwrap_none() -> None:
    """Test unwrapping NONE raises."""
    with pytest.raises(lc.OptionUnwrapError):
        NONE.unwrap()
    with pytest.raises(lc.OptionUnwrapError, match="no even number"):
        lc.iter([1, 3]).find(lambda n, _: n % 2 == 0).expect("no even number")


def test_combinators() -> None:
    """Test chaining Option combinators."""
    assert Some(3).map(lambda n: n * 2).unwrap_or(0) == 6
    assert NONE.map(lambda n: n * 2).unwrap_or(0) == 0
    assert NONE.unwrap_or_else(lambda: 7) == 7
    assert NONE.or_else(lambda: Some(1)) == Some(1)
    assert Some(2).or_else(lambda: Some(1)) == Some(2)
    assert Some(4).and_then(lambda n: Some(n + 1) if n > 3 else NONE) == Some(5)


def test_is_some_is_none() -> None:
    """Test the Option predicates."""
    assert lc.iter([1]).first().is_some()
    assert lc.Iter.new().first().is_none()
