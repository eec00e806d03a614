from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from functools import partial
from typing import TYPE_CHECKING

import cytoolz as cz

from .._errors import check_int
from ._common import IterWrapper

if TYPE_CHECKING:
    from ._main import Iter


class BaseRolling[T](IterWrapper[T]):
    __slots__ = ()

    def chunks(self, size: int) -> Iter[tuple[T, ...]]:
        """Group consecutive elements into tuples of **size** elements.

        The last chunk is shorter if the number of elements is not a multiple of **size**.

        An empty `Iter` yields no chunk at all.

        Args:
            size (int): Number of elements in each chunk.

        Returns:
            Iter[tuple[T, ...]]: An iterator over the chunks.

        Raises:
            InvalidArgumentError: If **size** is not an `int`, or is not strictly positive.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0, 1, 2, 3, 4]).chunks(2).collect()
        [(0, 1), (2, 3), (4,)]
        >>> lc.iter([]).chunks(2).collect()
        []

        ```
        """
        check_int(size, "Invalid chunk length", 1)
        return self._iter(partial(cz.itertoolz.partition_all, size))

    def windows(self, size: int) -> Iter[tuple[T, ...]]:
        """Yield every run of **size** consecutive elements, through a sliding buffer.

        If the whole `Iter` holds fewer than **size** elements, a single shorter window containing all of them is yielded.

        Args:
            size (int): Number of elements in each window.

        Returns:
            Iter[tuple[T, ...]]: An iterator over the windows.

        Raises:
            InvalidArgumentError: If **size** is not an `int`, or is not strictly positive.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter([0, 1, 2, 3, 4]).windows(2).collect()
        [(0, 1), (1, 2), (2, 3), (3, 4)]
        >>> lc.iter([0, 1]).windows(3).collect()
        [(0, 1)]

        ```
        """
        check_int(size, "Invalid window length", 1)

        def _windows(data: Iterator[T]) -> Iterator[tuple[T, ...]]:
            window: deque[T] = deque(maxlen=size)
            yielded = False
            for item in data:
                window.append(item)
                if len(window) == size:
                    yield tuple(window)
                    yielded = True
            if not yielded:
                yield tuple(window)

        return self._iter(_windows)
