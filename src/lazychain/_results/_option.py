from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: every `Option` is either `Some` and contains a value, or `NONE`.

    Returned by the partial consumers of `Iter` (`find`, `position`, `first`, `nth`, `last`, `min`, `max`) in place of a sentinel, so that a `None` element can still be told apart from an absent one.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Convert an optional Python value into an `Option`.

        Args:
            value (U | None): The value to wrap. `None` becomes `NONE`.

        Returns:
            Option[U]: `Some(value)`, or `NONE` if **value** is `None`.

        Example:
        ```python
        >>> from lazychain import Option
        >>> Option.from_(3)
        Some(value=3)
        >>> Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some(2).is_some()
        True
        >>> NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[_None]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some(2).is_none()
        False
        >>> NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        lazychain._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some("value").expect("fruits are healthy")
        'value'
        >>> NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        lazychain._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some("car").unwrap_or("bike")
        'car'
        >>> NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value, leaving `NONE` untouched.

        Example:
        ```python
        >>> from lazychain import Some, NONE
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function if the option is `Some`, otherwise returns `NONE`.

        Example:
        ```python
        >>> from lazychain import Some, NONE, Option
        >>> def half(x: int) -> Option[int]:
        ...     return Some(x // 2) if x % 2 == 0 else NONE
        >>> Some(8).and_then(half).and_then(half)
        Some(value=2)
        >>> Some(6).and_then(half).and_then(half)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls a function and returns the result."""
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[_None]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class _None(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[_None]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        """Raises `OptionUnwrapError` because there is no value."""
        raise OptionUnwrapError("called `unwrap` on a `None`")


NoneOption = _None
NONE: Option[Any] = _None()
