from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from .._errors import check_int
from ._common import IterWrapper

if TYPE_CHECKING:
    from ._main import Iter


class BaseFilter[T](IterWrapper[T]):
    __slots__ = ()

    def filter(self, func: Callable[[T, int], bool]) -> Iter[T]:
        """Creates an `Iter` which uses a predicate to determine if an element should be yielded.

        The predicate receives the element and its position in the source, so indices of rejected elements are skipped.

        Args:
            func (Callable[[T, int], bool]): Function evaluating each element and its source index.

        Returns:
            Iter[T]: An iterator over the elements satisfying the predicate.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 4).filter(lambda n, _: n % 2 == 1).collect()
        [1, 3]
        >>> lc.iter("abcd").filter(lambda _, idx: idx != 1).collect()
        ['a', 'c', 'd']

        ```
        """

        def _filter(data: Iterator[T]) -> Iterator[T]:
            return (item for idx, item in enumerate(data) if func(item, idx))

        return self._iter(_filter)

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Skipping past the end yields an empty `Iter`.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Iter[T]: An iterator over the remaining elements.

        Raises:
            InvalidArgumentError: If **n** is not an `int`, or is negative.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 6).skip(3).collect()
        [3, 4, 5]
        >>> lc.range(0, 6).skip(10).collect()
        []

        ```
        """
        check_int(n, "Invalid skip parameter", 0)
        return self._iter(partial(cz.itertoolz.drop, n))

    def skip_while(self, predicate: Callable[[T, int], bool]) -> Iter[T]:
        """Drop elements while a predicate holds, then yield the first failing element and every element after it.

        Args:
            predicate (Callable[[T, int], bool]): Function evaluating each element and its index.

        Returns:
            Iter[T]: An iterator over the elements after the dropped prefix.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 6).skip_while(lambda n, _: n < 3).collect()
        [3, 4, 5]
        >>> lc.iter([]).skip_while(lambda n, _: n < 3).collect()
        []

        ```
        """

        def _skip_while(data: Iterator[T]) -> Iterator[T]:
            indexed = enumerate(data)
            for idx, item in indexed:
                if not predicate(item, idx):
                    yield item
                    break
            yield from (item for _, item in indexed)

        return self._iter(_skip_while)

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the source ends sooner.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator over at most **n** elements.

        Raises:
            InvalidArgumentError: If **n** is not an `int`, or is negative.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range().take(3).collect()
        [0, 1, 2]
        >>> lc.iter([1, 2, 3]).take(5).collect()
        [1, 2, 3]

        ```
        """
        check_int(n, "Invalid take parameter", 0)
        return self._iter(partial(cz.itertoolz.take, n))

    def take_while(self, predicate: Callable[[T, int], bool]) -> Iter[T]:
        """Yield elements while a predicate holds, stopping at the first failing element, which is not yielded.

        Returns a new `Iter`: the receiver is left untouched.

        Args:
            predicate (Callable[[T, int], bool]): Function evaluating each element and its index.

        Returns:
            Iter[T]: An iterator over the leading elements satisfying the predicate.

        Example:
        ```python
        >>> import lazychain as lc
        >>> numbers = lc.range(0, 6)
        >>> numbers.take_while(lambda n, _: n < 3).collect()
        [0, 1, 2]
        >>> numbers.collect()
        [0, 1, 2, 3, 4, 5]

        ```
        """

        def _take_while(data: Iterator[T]) -> Iterator[T]:
            for idx, item in enumerate(data):
                if not predicate(item, idx):
                    return
                yield item

        return self._iter(_take_while)

    def step(self, n: int) -> Iter[T]:
        """Yield every **n**-th element, starting with the first one.

        Args:
            n (int): Distance between two yielded elements.

        Returns:
            Iter[T]: An iterator over the elements at positions 0, n, 2n, ...

        Raises:
            InvalidArgumentError: If **n** is not an `int`, or is not strictly positive.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(1, 10).step(3).collect()
        [1, 4, 7]

        ```
        """
        check_int(n, "Invalid step", 1)
        return self._iter(partial(cz.itertoolz.take_nth, n))

    def slice(self, start: int, end: int | None = None) -> Iter[T]:
        """Yield the elements from position **start** to **end** (excluded).

        Equivalent to `.skip(start).take(end - start)`. Without **end**, every element from **start** is yielded.

        Args:
            start (int): Position of the first yielded element.
            end (int | None): Position after the last yielded element, or `None` for no bound.

        Returns:
            Iter[T]: An iterator over the selected elements.

        Raises:
            InvalidArgumentError: If a bound is not an `int`, is negative, or **start** is greater than **end**.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0, 1, 1, 2, 3]).slice(2, 4).collect()
        [1, 2]
        >>> lc.iter([0, 1, 1, 2, 3]).slice(3).collect()
        [2, 3]

        ```
        """
        msg = "Invalid slice range"
        check_int(start, msg, 0)
        if end is not None:
            check_int(end, msg, start)
        skipped = self.skip(start)
        return skipped if end is None else skipped.take(end - start)

    def unique(self) -> Iter[T]:
        """Drop the elements already seen in the current traversal, keeping the first occurrence.

        Elements must be hashable. The set of seen elements grows with the number of distinct elements.

        Returns:
            Iter[T]: An iterator over the distinct elements, in first-seen order.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0, 1, 1, 2, 3, 2, 4]).unique().collect()
        [0, 1, 2, 3, 4]

        ```
        """
        return self._iter(cz.itertoolz.unique)

    def unique_by(self, key: Callable[[T], Any]) -> Iter[T]:
        """Drop the elements whose **key** was already seen in the current traversal.

        Keys must be hashable. The set of seen keys grows with the number of distinct keys.

        Args:
            key (Callable[[T], Any]): Function computing the identity of an element.

        Returns:
            Iter[T]: An iterator over the first element of each key.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter(["cat", "mouse", "dog", "hen"]).unique_by(len).collect()
        ['cat', 'mouse']

        ```
        """
        return self._iter(cz.itertoolz.unique, key=key)
