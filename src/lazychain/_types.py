from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NamedTuple

from ._core import get_config

type Producer[T] = Callable[[], Iterator[T]]
"""A zero-argument factory returning a fresh iterator each time it is called."""


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `Iter.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"


class Partitioned[T](NamedTuple):
    """The two materialized halves of a sequence split by a predicate.

    See `Iter.partition()` for details.
    """

    matches: list[T]
    """Elements for which the predicate was true, in their original order."""
    rest: list[T]
    """Elements for which the predicate was false, in their original order."""

    def __repr__(self) -> str:
        cfg = get_config()
        return f"Partitioned(matches={cfg.seq_repr(self.matches)}, rest={cfg.seq_repr(self.rest)})"
