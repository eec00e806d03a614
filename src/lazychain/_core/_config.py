from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields, replace
from typing import Any, Final

from .._errors import InvalidArgumentError, check_int
from ._format import seq_repr

FLATTEN_DEPTH_LIMIT: Final = 15


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime settings shared by every lazychain object."""

    max_flatten_depth: int = 10
    """Highest depth accepted by `Iter.flatten()`."""
    repr_max_items: int = 20
    """Number of items shown by the representation of materialized results."""
    repr_width: int = 80
    """Line width used when formatting materialized results."""

    def __post_init__(self) -> None:
        msg = f"max_flatten_depth must be within [0, {FLATTEN_DEPTH_LIMIT}], got {self.max_flatten_depth}"
        check_int(self.max_flatten_depth, msg, 0)
        if self.max_flatten_depth > FLATTEN_DEPTH_LIMIT:
            raise InvalidArgumentError(msg)
        check_int(self.repr_max_items, "repr_max_items must be a non-negative int", 0)
        check_int(self.repr_width, "repr_width must be a positive int", 1)

    def seq_repr(self, v: Sequence[Any]) -> str:
        return seq_repr(v, max_items=self.repr_max_items, width=self.repr_width)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active configuration.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.get_config().max_flatten_depth
    10

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active configuration and return the new one.

    Args:
        **changes (Any): Field names of `Config` mapped to their new value.

    Returns:
        Config: The configuration now in use.

    Raises:
        InvalidArgumentError: If a field name is unknown or a value is out of range.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.set_config(max_flatten_depth=15).max_flatten_depth
    15
    >>> lc.set_config(max_flatten_depth=10).max_flatten_depth
    10

    ```
    """
    global _CONFIG  # noqa: PLW0603
    known = {f.name for f in fields(Config)}
    unknown = changes.keys() - known
    if unknown:
        msg = f"Unknown configuration fields: {sorted(unknown)}"
        raise InvalidArgumentError(msg)
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
