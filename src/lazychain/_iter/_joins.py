from __future__ import annotations

import itertools
import logging
from collections.abc import Collection, Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from .._errors import check_int
from .._ranges import IntRange
from .._results import Option
from ._common import IterWrapper

if TYPE_CHECKING:
    from ._main import Iter

logger = logging.getLogger(__name__)


class BaseJoins[T](IterWrapper[T]):
    __slots__ = ()

    @overload
    def zip[T1](self, iter1: Iterable[T1], /) -> Iter[tuple[T, T1]]: ...
    @overload
    def zip[T1, T2](
        self, iter1: Iterable[T1], iter2: Iterable[T2], /
    ) -> Iter[tuple[T, T1, T2]]: ...
    @overload
    def zip[T1, T2, T3](
        self, iter1: Iterable[T1], iter2: Iterable[T2], iter3: Iterable[T3], /
    ) -> Iter[tuple[T, T1, T2, T3]]: ...
    @overload
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]: ...
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]:
        """Pull one element from this `Iter` and from each of **others** in lock-step, yielding tuples.

        Stops as soon as any of them is exhausted.

        Args:
            *others (Iterable[Any]): Iterables merged after this one.

        Returns:
            Iter[tuple[Any, ...]]: An iterator over the tuples, elements of this `Iter` first.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0, 1]).zip([6, 7], ["foo", "bar"]).collect()
        [(0, 6, 'foo'), (1, 7, 'bar')]
        >>> lc.range().zip("ab").collect()
        [(0, 'a'), (1, 'b')]

        ```
        """

        def _zip(data: Iterator[T]) -> Iterator[tuple[Any, ...]]:
            return zip(data, *others)

        return self._iter(_zip)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Yield the elements of **others** in order once this `Iter` is exhausted.

        Args:
            *others (Iterable[T]): Iterables appended after this one.

        Returns:
            Iter[T]: An iterator over every element, in argument order.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0]).chain(["foo"], ["bar"]).collect()
        [0, 'foo', 'bar']

        ```
        """

        def _chain(data: Iterator[T]) -> Iterator[T]:
            return itertools.chain(data, *others)

        return self._iter(_chain)

    def cycle(self, count: int | None = None) -> Iter[T]:
        """Repeat the whole `Iter` **count** times, or forever if **count** is `None`.

        **Warning** ⚠️
            The first pass stores every element in a buffer, replayed by the following passes.
            On an infinite source the buffer grows without bound.

        Args:
            count (int | None): Number of passes, or `None` for an infinite iterator.

        Returns:
            Iter[T]: An iterator over the repeated elements.

        Raises:
            InvalidArgumentError: If **count** is not an `int`, or is negative.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(1, 4).cycle(2).collect()
        [1, 2, 3, 1, 2, 3]
        >>> lc.range(1, 4).cycle().take(8).collect()
        [1, 2, 3, 1, 2, 3, 1, 2]
        >>> lc.range(1, 4).cycle(0).collect()
        []

        ```
        """
        passes: Option[int] = Option.from_(count)
        if passes.is_some():
            check_int(passes.unwrap(), "Invalid count parameter", 0)

        def _cycle(data: Iterator[T]) -> Iterator[T]:
            if passes.map(lambda n: n == 0).unwrap_or(False):
                return
            buffer: list[T] = []
            for item in data:
                buffer.append(item)
                yield item
            logger.debug("cycle buffered %d elements", len(buffer))
            if not buffer:
                return
            replays = passes.map(
                lambda n: itertools.repeat(buffer, n - 1)
            ).unwrap_or_else(lambda: itertools.repeat(buffer))
            for replay in replays:
                yield from replay

        return self._iter(_cycle)

    @overload
    def nest[U](self, other: Iterable[U], /) -> Iter[tuple[T, U]]: ...
    @overload
    def nest(self, end: int | None, /) -> Iter[tuple[T, int]]: ...
    @overload
    def nest(self, start: int, end: int | None, /) -> Iter[tuple[T, int]]: ...
    def nest(self, *args: Any) -> Iter[tuple[T, Any]]:
        """Pair every element with every element of another iterable, in row-major order.

        The other iterable can be given directly, or as the bounds of a `range` (`end`, or `start, end`).

        The range form iterates a fresh range for each element instead of buffering it.
        An iterable which is not a `Collection` is materialized once per traversal.

        Args:
            *args (Any): An iterable, or the bounds of an integer range.

        Returns:
            Iter[tuple[T, Any]]: An iterator over the pairs.

        Raises:
            InvalidArgumentError: If the range bounds are invalid.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(2).nest(["a", "b"]).collect()
        [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]
        >>> lc.range(2).nest(3).collect()
        [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        >>> lc.range(2).nest(0, -2).collect()
        [(0, 0), (0, -1), (1, 0), (1, -1)]

        ```
        """
        inner: Iterable[Any]
        match args:
            case (Iterable() as other,):
                inner = other
            case _:
                inner = IntRange.from_bounds(*args)

        def _nest(data: Iterator[T]) -> Iterator[tuple[T, Any]]:
            nested = inner if isinstance(inner, Collection | IntRange) else tuple(inner)
            if nested is not inner:
                logger.debug("nest materialized %d elements", len(nested))
            for item in data:
                for other_item in nested:
                    yield (item, other_item)

        return self._iter(_nest)

