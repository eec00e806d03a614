from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate, Final

from .._core import CommonBase, producer_repr
from .._results import NONE, Option, Some

if TYPE_CHECKING:
    from ._main import Iter

MISSING: Final[Any] = object()
"""Marker for an argument that was not given, or a value that was not found."""


def to_option[T](value: T) -> Option[T]:
    return NONE if value is MISSING else Some(value)


class IterWrapper[T](CommonBase[Callable[[], Iterator[T]]]):
    """Shared plumbing of `Iter` and its mixins.

    The wrapped value is a *producer*: calling it returns a fresh iterator over the elements.

    Every adapter wraps the producer of its receiver into a new one, so nothing is computed before a consumer pulls from the outermost producer.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return self._inner()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({producer_repr(self._inner)})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterator[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._main import Iter

        previous = self._inner

        @functools.wraps(factory, updated=())
        def _produce() -> Iterator[U]:
            return factory(previous(), *args, **kwargs)

        return Iter.from_producer(_produce)
