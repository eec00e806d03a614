from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, overload

import more_itertools as mit

from .._core import get_config
from .._errors import EmptyReductionError, InvalidArgumentError, check_int
from .._types import Enumerated
from ._common import MISSING, IterWrapper

if TYPE_CHECKING:
    from ._main import Iter


class BaseMap[T](IterWrapper[T]):
    __slots__ = ()

    def map[R](self, func: Callable[[T, int], R]) -> Iter[R]:
        """Apply a function to each element and its index.

        The index counts the elements of the current traversal, starting from 0.

        Args:
            func (Callable[[T, int], R]): Function receiving the element and its index.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 4).map(lambda n, _: n * 2).collect()
        [0, 2, 4, 6]
        >>> lc.iter("abc").map(lambda ch, idx: ch * (idx + 1)).collect()
        ['a', 'bb', 'ccc']

        ```
        """

        def _map(data: Iterator[T]) -> Iterator[R]:
            return map(func, data, itertools.count())

        return self._iter(_map)

    def flat_map(self, func: Callable[[T, int], Any]) -> Iter[Any]:
        """Map each element to an iterable, and flatten the results by one level.

        Equivalent to `.map(func).flatten(1)`.

        Strings and bytes returned by **func** are kept whole, not split into characters: wrap them with `iter()` or `list()` to split them.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2]).flat_map(lambda n, _: [n, -n]).collect()
        [1, -1, 2, -2]
        >>> lc.iter(["ab", "cd"]).flat_map(lambda word, _: word).collect()
        ['ab', 'cd']
        >>> lc.iter(["ab", "cd"]).flat_map(lambda word, _: list(word)).collect()
        ['a', 'b', 'c', 'd']

        ```
        """
        return self.map(func).flatten(1)

    def inspect(self, func: Callable[[T], object]) -> Iter[T]:
        """Call a function on each element before yielding it unchanged.

        Args:
            func (Callable[[T], object]): Function called for its side effects.

        Returns:
            Iter[T]: An iterator over the same elements.

        Example:
        ```python
        >>> import lazychain as lc
        >>> seen: list[int] = []
        >>> lc.range(1, 4).inspect(seen.append).map(lambda n, _: n * 10).inspect(seen.append).consume()
        >>> seen
        [1, 10, 2, 20, 3, 30]

        ```
        """

        def _inspect(data: Iterator[T]) -> Iterator[T]:
            for item in data:
                func(item)
                yield item

        return self._iter(_inspect)

    def enumerate(self) -> Iter[Enumerated[T]]:
        """Pair each element with its zero-based position, index first.

        Returns:
            Iter[Enumerated[T]]: An iterator of `(idx, value)` named tuples.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([4, 5, 6]).enumerate().collect()
        [(0, 4), (1, 5), (2, 6)]
        >>> lc.iter("ab").enumerate().map(lambda e, _: e.value * e.idx).collect()
        ['', 'b']

        ```
        """

        def _enumerate(data: Iterator[T]) -> Iterator[Enumerated[T]]:
            return itertools.starmap(Enumerated, enumerate(data))

        return self._iter(_enumerate)

    @overload
    def accumulate(self, func: Callable[[T, T], T]) -> Iter[T]: ...
    @overload
    def accumulate[U](self, func: Callable[[U, T], U], initial: U) -> Iter[U]: ...
    def accumulate(
        self, func: Callable[[Any, T], Any], initial: Any = MISSING
    ) -> Iter[Any]:
        """Yield the running accumulator of a left fold at every step.

        Without **initial**, the first element seeds the accumulator and is yielded as is.

        With **initial**, the first yielded value is `func(initial, first)`, and an empty source yields nothing.

        Args:
            func (Callable[[Any, T], Any]): Function combining the accumulator and the next element.
            initial (Any): Optional seed of the accumulator.

        Returns:
            Iter[Any]: An iterator over the successive accumulator values.

        Raises:
            EmptyReductionError: On the first pull, if the sequence is empty and no **initial** was given.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(0, 5).accumulate(lambda acc, n: acc + n).collect()
        [0, 1, 3, 6, 10]
        >>> lc.range(0, 5).accumulate(lambda acc, n: acc + n, 2).collect()
        [2, 3, 5, 8, 12]
        >>> lc.iter([]).accumulate(lambda acc, n: acc + n, 0).collect()
        []

        ```
        """

        def _accumulate(data: Iterator[T]) -> Iterator[Any]:
            acc = initial
            if acc is MISSING:
                acc = next(data, MISSING)
                if acc is MISSING:
                    msg = "Reduce of empty iterator with no initial value"
                    raise EmptyReductionError(msg)
                yield acc
            for item in data:
                acc = func(acc, item)
                yield acc

        return self._iter(_accumulate)

    def stretch(self, n: int) -> Iter[T]:
        """Repeat each element **n** times in a row before moving to the next one.

        Args:
            n (int): Number of repetitions of each element.

        Returns:
            Iter[T]: An iterator over the repeated elements.

        Raises:
            InvalidArgumentError: If **n** is not an `int`, or is negative.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([1, 2, 3]).stretch(2).collect()
        [1, 1, 2, 2, 3, 3]
        >>> lc.range().stretch(0).collect()
        []

        ```
        """
        check_int(n, "Invalid stretch parameter", 0)

        def _stretch(data: Iterator[T]) -> Iterator[T]:
            if n == 0:
                return iter(())
            return itertools.chain.from_iterable(
                itertools.repeat(item, n) for item in data
            )

        return self._iter(_stretch)

    def flatten(self, max_depth: int) -> Iter[Any]:
        """Recursively unwrap nested iterables, up to **max_depth** levels.

        Elements that are not iterable are yielded as is, whatever the remaining depth.

        Strings and bytes are never unwrapped.

        Depth 0 leaves the sequence unchanged.

        Args:
            max_depth (int): Number of nesting levels to remove, within `[0, get_config().max_flatten_depth]`.

        Returns:
            Iter[Any]: An iterator over the flattened elements.

        Raises:
            InvalidArgumentError: If **max_depth** is out of the allowed range.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([[0, 1], [2, [3]]]).flatten(1).collect()
        [0, 1, 2, [3]]
        >>> lc.iter([[0, 1], [2, [3]]]).flatten(2).collect()
        [0, 1, 2, 3]
        >>> lc.iter([["ab"], "cd", 4]).flatten(3).collect()
        ['ab', 'cd', 4]

        ```
        """
        limit = get_config().max_flatten_depth
        if type(max_depth) is not int or not 0 <= max_depth <= limit:
            msg = f"Invalid depth for flatten, allowed range is [0, {limit}]"
            raise InvalidArgumentError(msg)

        def _flatten(data: Iterator[T]) -> Iterator[Any]:
            return mit.collapse(data, levels=max_depth)

        return self._iter(_flatten)
