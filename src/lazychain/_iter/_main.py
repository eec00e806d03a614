from __future__ import annotations

import itertools
from collections.abc import Iterable
from functools import partial
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from .._ranges import IntRange
from ._aggregations import BaseAgg
from ._filters import BaseFilter
from ._joins import BaseJoins
from ._maps import BaseMap
from ._rolling import BaseRolling

if TYPE_CHECKING:
    from .._types import Producer


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class Iter[T](
    BaseFilter[T],
    BaseMap[T],
    BaseRolling[T],
    BaseJoins[T],
    BaseAgg[T],
):
    """A lazy, chainable sequence built on top of Python's `Iterable`/`Iterator` protocols.

    An `Iter` does not hold an iterator but a *producer*: a function returning a fresh iterator each time the `Iter` is traversed.

    - Adapters (`map`, `filter`, `take`, ...) wrap the producer into a new one and return a new `Iter`. The receiver is never modified.
    - Consumers (`collect`, `reduce`, `find`, ...) call the producer and pull as many elements as they need.
    - Nothing is computed before a consumer pulls, so infinite sources are fine as long as something bounds the pull.

    Wrapping a restartable `Iterable` (a list, a range, another `Iter`) gives an `Iter` which can be traversed any number of times.

    Wrapping a one-shot `Iterator` or `Generator` gives an `Iter` whose second traversal yields nothing.

    To instantiate from unpacked values, or from a single value, use `Iter.from_` or the `lazychain.iter` function.

    Args:
        data (Iterable[T]): The iterable to wrap.

    Example:
    ```python
    >>> import lazychain as lc
    >>> numbers = lc.Iter([1, 2, 3])
    >>> doubled = numbers.map(lambda n, _: n * 2)
    >>> doubled.collect()
    [2, 4, 6]
    >>> doubled.collect(tuple)
    (2, 4, 6)
    >>> numbers
    Iter(<iter>)

    ```
    """

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        super().__init__(partial(iter, data))

    @classmethod
    def from_producer(cls, producer: Producer[T]) -> Iter[T]:
        """Wrap a function returning a fresh iterator at each call.

        Args:
            producer (Producer[T]): The zero-argument factory of iterators.

        Returns:
            Iter[T]: An `Iter` calling **producer** at each traversal.

        Example:
        ```python
        >>> import lazychain as lc
        >>> it = lc.Iter.from_producer(lambda: iter("ab"))
        >>> it.collect(), it.collect()
        (['a', 'b'], ['a', 'b'])

        ```
        """
        instance = cls.__new__(cls)
        instance._inner = producer
        return instance

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from any Iterable, or from unpacked values.

        A single value which is not iterable gives a sequence of one element.

        Strings are iterables, and are wrapped as sequences of characters.

        Args:
            data (Iterable[U] | U): Iterable to wrap, or a first value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            Iter[U]: A new `Iter` over the provided data.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.from_([1, 2, 3]).collect()
        [1, 2, 3]
        >>> lc.Iter.from_(1, 2, 3).collect()
        [1, 2, 3]
        >>> lc.Iter.from_(42).collect()
        [42]
        >>> lc.Iter.from_("hey").collect()
        ['h', 'e', 'y']

        ```
        """
        return Iter(_convert_data(data, *more_data))

    @staticmethod
    def once[U](value: U) -> Iter[U]:
        """Create an `Iter` yielding **value** exactly once.

        Unlike `Iter.from_`, an iterable **value** is not unpacked.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.once([1, 2]).collect()
        [[1, 2]]

        ```
        """
        return Iter((value,))

    @staticmethod
    def new() -> Iter[Any]:
        """Create an empty `Iter`.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.new().collect()
        []

        ```
        """
        return Iter(())

    @staticmethod
    def from_range(*bounds: int | None) -> Iter[int]:
        """Create an `Iter` over a run of integers.

        Accepted forms are `()`, `(end)`, `(start, end)` and `(start, end, step)`.

        - **start** defaults to 0.
        - An **end** of `None` means an unbounded range.
        - Without **step**, the range counts up if **start** is lower than **end**, or if the range is unbounded, and down otherwise.
        - With a **step** pointing away from **end**, the range is empty.

        **Warning** ⚠️
            An unbounded range is infinite.
            Be sure to use `Iter.take()`, `Iter.take_while()` or `Iter.slice()` to limit the number of items pulled.

        Args:
            *bounds (int | None): The range bounds.

        Returns:
            Iter[int]: An iterator over the integers, end excluded.

        Raises:
            InvalidArgumentError: If **step** is 0, or the bounds match none of the accepted forms.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.from_range(3).collect()
        [0, 1, 2]
        >>> lc.Iter.from_range(3, 0).collect()
        [3, 2, 1]
        >>> lc.Iter.from_range(0, 10, 4).collect()
        [0, 4, 8]
        >>> lc.Iter.from_range(0, 10, -1).collect()
        []
        >>> lc.Iter.from_range(5, None).take(3).collect()
        [5, 6, 7]

        ```
        """
        return Iter(IntRange.from_bounds(*bounds))

    @staticmethod
    def from_chain[U](*sources: Iterable[U]) -> Iter[U]:
        """Create an `Iter` over the elements of every source, in argument order.

        A source is only pulled once the previous ones are exhausted.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.from_chain([0, 1], "ab", lc.range(2)).collect()
        [0, 1, 'a', 'b', 0, 1]

        ```
        """
        return Iter.from_producer(partial(itertools.chain, *sources))

    @staticmethod
    def from_zip(*sources: Iterable[Any]) -> Iter[tuple[Any, ...]]:
        """Create an `Iter` of tuples pulling one element from each source in lock-step.

        Stops as soon as the shortest source is exhausted. Without sources, the `Iter` is empty.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.Iter.from_zip([0, 1], [6, 7, 8, 9], ["hola", "bonjour", "hello"]).collect()
        [(0, 6, 'hola'), (1, 7, 'bonjour')]
        >>> lc.Iter.from_zip().collect()
        []

        ```
        """
        return Iter.from_producer(partial(zip, *sources))
