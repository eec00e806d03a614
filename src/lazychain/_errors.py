"""Exceptions raised by lazychain.

Every error is raised at the point of the offending call, or at the first pull for errors that depend on the data.
"""


class LazyChainError(Exception):
    """Base class of every error raised by lazychain itself."""


class InvalidArgumentError(LazyChainError, ValueError):
    """A count, step, window size, slice range or depth is out of its allowed range."""


class EmptyReductionError(LazyChainError, TypeError):
    """A reduction without initial value was applied to an empty sequence."""


class TypeMismatchError(LazyChainError, TypeError):
    """An element does not have the shape an operation requires."""


def check_int(value: object, msg: str, minimum: int | None = None) -> None:
    """Raise `InvalidArgumentError` with **msg** unless **value** is an `int`, not a `bool`, and at least **minimum**."""
    if type(value) is not int or (minimum is not None and value < minimum):
        raise InvalidArgumentError(msg)
