from __future__ import annotations

import functools
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, overload

import cytoolz as cz
import more_itertools as mit

from .._errors import EmptyReductionError, TypeMismatchError
from .._results import NONE, Option, Some
from .._types import Partitioned
from ._common import MISSING, IterWrapper, to_option

type Collector[T] = Callable[[Iterable[T]], Any]
"""Represent a function that collects an Iterable into a specific collection type."""


class BaseAgg[T](IterWrapper[T]):
    __slots__ = ()

    @overload
    def collect(self) -> list[T]: ...
    @overload
    def collect[C](self, collector: Callable[[Iterable[T]], C]) -> C: ...
    def collect(self, collector: Collector[T] = list) -> Any:
        """Consume the `Iter` into a collection.

        Args:
            collector (Collector[T]): Function|type building the collection. Defaults to `list`.

        Returns:
            Any: The materialized collection.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 3).collect()
        [0, 1, 2]
        >>> lc.iter([2, 1, 2]).collect(frozenset) == frozenset({1, 2})
        True

        ```
        """
        return collector(self)

    def consume(self) -> None:
        """Consume the `Iter` without keeping its elements, to trigger the side effects of its adapters.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 3).inspect(print).consume()
        0
        1
        2

        ```
        """
        mit.consume(iter(self))

    def for_each(self, func: Callable[[T, int], object]) -> None:
        """Consume the `Iter`, calling a function with each element and its index.

        Args:
            func (Callable[[T, int], object]): Function called for its side effects.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter("ab").for_each(lambda ch, idx: print(idx, ch))
        0 a
        1 b

        ```
        """
        for idx, item in enumerate(self):
            func(item, idx)

    @overload
    def reduce(self, func: Callable[[T, T], T]) -> T: ...
    @overload
    def reduce[U](self, func: Callable[[U, T], U], initial: U) -> U: ...
    def reduce(self, func: Callable[[Any, T], Any], initial: Any = MISSING) -> Any:
        """Fold the elements from left to right into a single value.

        Args:
            func (Callable[[Any, T], Any]): Function combining the accumulator and the next element.
            initial (Any): Optional seed of the accumulator, returned as is for an empty `Iter`.

        Returns:
            Any: The final accumulator.

        Raises:
            EmptyReductionError: If the `Iter` is empty and no **initial** was given.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 4).reduce(lambda acc, n: acc + n)
        6
        >>> lc.range(0, 4).reduce(lambda acc, n: acc + n, 1)
        7
        >>> lc.range(0, 4).reduce(lambda acc, n: acc + str(n), "")
        '0123'

        ```
        """
        if initial is not MISSING:
            return functools.reduce(func, self, initial)
        data = iter(self)
        first = next(data, MISSING)
        if first is MISSING:
            msg = "Reduce of empty iterator with no initial value"
            raise EmptyReductionError(msg)
        return functools.reduce(func, data, first)

    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        """Consume the `Iter` and count the elements satisfying **predicate**, or all of them.

        Example:
        ```python
        >>> import lazychain as lc
        >>> data = [10, 15, 15, 20]
        >>> lc.iter(data).count()
        4
        >>> lc.iter(data).count(lambda n: n == 15)
        2

        ```
        """
        if predicate is None:
            return cz.itertoolz.count(self)
        return cz.itertoolz.count(filter(predicate, self))

    def rate(self, predicate: Callable[[T], bool]) -> float:
        """Consume the `Iter` and return the fraction of elements satisfying **predicate**.

        Note:
            An empty `Iter` has no rate: the division by zero is not guarded and raises `ZeroDivisionError`.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([10, 15, 15, 20]).rate(lambda n: n == 15)
        0.5

        ```
        """
        total = 0
        matched = 0
        for item in self:
            total += 1
            if predicate(item):
                matched += 1
        return matched / total

    def min(self, key: Callable[[T], float]) -> Option[T]:
        """Consume the `Iter` and return the element with the smallest **key**, the first one on ties.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([3, 6, 4, 1, 8]).min(lambda n: n)
        Some(value=1)
        >>> lc.iter([3, 6, 4, 1, 8]).min(lambda n: -n)
        Some(value=8)
        >>> lc.iter([]).min(lambda n: n)
        NONE

        ```
        """
        return to_option(min(self, key=key, default=MISSING))

    def max(self, key: Callable[[T], float]) -> Option[T]:
        """Consume the `Iter` and return the element with the largest **key**, the first one on ties.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([3, 6, 4, 1, 8]).max(lambda n: n)
        Some(value=8)
        >>> lc.iter(["ab", "cd", "e"]).max(len)
        Some(value='ab')

        ```
        """
        return to_option(max(self, key=key, default=MISSING))

    def find(self, predicate: Callable[[T, int], bool]) -> Option[T]:
        """Return the first element satisfying **predicate**, consuming the `Iter` up to it.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([7, 11, 3, 6, 5]).find(lambda n, _: n % 2 == 0)
        Some(value=6)
        >>> lc.iter([7, 11]).find(lambda n, _: n % 2 == 0)
        NONE

        ```
        """
        for idx, item in enumerate(self):
            if predicate(item, idx):
                return Some(item)
        return NONE

    def position(self, predicate: Callable[[T, int], bool]) -> Option[int]:
        """Return the index of the first element satisfying **predicate**, consuming the `Iter` up to it.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([7, 11, 3, 6, 5]).position(lambda n, _: n % 2 == 0)
        Some(value=3)

        ```
        """
        for idx, item in enumerate(self):
            if predicate(item, idx):
                return Some(idx)
        return NONE

    def every(self, predicate: Callable[[T, int], bool]) -> bool:
        """Return `True` if every element satisfies **predicate**, stopping at the first failure.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 2]).every(lambda n, _: n == 2)
        False
        >>> lc.iter([]).every(lambda n, _: n == 2)
        True

        ```
        """
        return all(predicate(item, idx) for idx, item in enumerate(self))

    def some(self, predicate: Callable[[T, int], bool]) -> bool:
        """Return `True` if any element satisfies **predicate**, stopping at the first success.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 1, 2]).some(lambda n, _: n == 2)
        True

        ```
        """
        return any(predicate(item, idx) for idx, item in enumerate(self))

    def partition(self, predicate: Callable[[T, int], bool]) -> Partitioned[T]:
        """Consume the `Iter` into the elements satisfying **predicate** and the others.

        Both lists keep the original relative order.

        Returns:
            Partitioned[T]: A named tuple `(matches, rest)`.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 3, 4]).partition(lambda n, _: n % 2 == 0)
        Partitioned(matches=[2, 4], rest=[1, 3])

        ```
        """
        matches: list[T] = []
        rest: list[T] = []
        for idx, item in enumerate(self):
            (matches if predicate(item, idx) else rest).append(item)
        return Partitioned(matches, rest)

    def unzip(self) -> list[list[Any]]:
        """Consume an `Iter` of tuples into one list per tuple position.

        Tuples may have different lengths: the result has as many lists as the widest tuple, and shorter tuples do not contribute to the extra lists.

        Returns:
            list[list[Any]]: The lists of elements at each position.

        Raises:
            TypeMismatchError: If an element is not an iterable, or is a string.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([(0, 3), (1, 4), (2, 5)]).unzip()
        [[0, 1, 2], [3, 4, 5]]
        >>> lc.iter([(0,), (1, "a")]).unzip()
        [[0, 1], ['a']]

        ```
        """
        columns: list[list[Any]] = []
        for item in self:
            if not isinstance(item, Iterable) or isinstance(item, str | bytes):
                msg = "Element type is not an array"
                raise TypeMismatchError(msg)
            for idx, value in enumerate(item):
                if idx == len(columns):
                    columns.append([])
                columns[idx].append(value)
        return columns

    def first(self) -> Option[T]:
        """Return the first element, pulling a single one.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 3]).first()
        Some(value=1)
        >>> lc.iter([]).first()
        NONE

        ```
        """
        return self.nth(0)

    def last(self) -> Option[T]:
        """Consume the whole `Iter` and return its last element.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 3]).last()
        Some(value=3)

        ```
        """
        tail: deque[T] = deque(self, maxlen=1)
        return Some(tail[0]) if tail else NONE

    def nth(self, n: int) -> Option[T]:
        """Return the element at index **n**, consuming the `Iter` up to it.

        A negative or out of range index returns `NONE`.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 3]).nth(2)
        Some(value=3)
        >>> lc.iter([1, 2, 3]).nth(-1)
        NONE

        ```
        """
        if n < 0:
            return NONE
        return to_option(mit.nth(self, n, MISSING))
