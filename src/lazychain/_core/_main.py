from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.range(4).into(sum)
        6
        >>> lc.iter(["b", "a"]).into(sorted)
        ['a', 'b']

        ```
        """
        return func(self, *args, **kwargs)


class CommonBase[T](ABC, Pipeable):
    """Base class for all lazy wrappers.

    Holds the wrapped value in a single slot, so that every subclass stays free of a `__dict__`.

    Args:
        data (T): The underlying value to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data
