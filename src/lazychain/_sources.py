"""Free functions creating an `Iter` from a source.

They mirror the static constructors of `Iter` and are the usual entry points of a chain.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, overload

from ._iter import Iter


@overload
def iter[T](data: Iterable[T], /) -> Iter[T]: ...
@overload
def iter[T](data: T, /, *more_data: T) -> Iter[T]: ...
def iter[T](data: Iterable[T] | T, /, *more_data: T) -> Iter[T]:
    """Wrap an iterable, or unpacked values, into an `Iter`.

    See `Iter.from_` for details.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.iter([3, 4]).collect()
    [3, 4]
    >>> lc.iter(3, 4).collect()
    [3, 4]

    ```
    """
    return Iter.from_(data, *more_data)


def once[T](value: T) -> Iter[T]:
    """Create an `Iter` yielding **value** exactly once.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.once((0, 0)).chain([(1, 1)]).collect()
    [(0, 0), (1, 1)]

    ```
    """
    return Iter.once(value)


@overload
def range() -> Iter[int]: ...
@overload
def range(end: int | None, /) -> Iter[int]: ...
@overload
def range(start: int, end: int | None, /) -> Iter[int]: ...
@overload
def range(start: int, end: int | None, step: int, /) -> Iter[int]: ...
def range(*bounds: int | None) -> Iter[int]:
    """Create an `Iter` over a run of integers, end excluded.

    See `Iter.from_range` for the accepted forms.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.range(0, 5).collect()
    [0, 1, 2, 3, 4]
    >>> lc.range(5, 0).collect()
    [5, 4, 3, 2, 1]
    >>> lc.range().take(2).collect()
    [0, 1]

    ```
    """
    return Iter.from_range(*bounds)


def chain[T](*sources: Iterable[T]) -> Iter[T]:
    """Concatenate **sources** lazily.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.chain([0, 1], [2], []).collect()
    [0, 1, 2]

    ```
    """
    return Iter.from_chain(*sources)


def zip(*sources: Iterable[Any]) -> Iter[tuple[Any, ...]]:
    """Merge **sources** into tuples, in lock-step, until the shortest is exhausted.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.zip([0, 1], [6, 7, 8, 9], ["hola", "bonjour", "hello"]).collect()
    [(0, 6, 'hola'), (1, 7, 'bonjour')]

    ```
    """
    return Iter.from_zip(*sources)
