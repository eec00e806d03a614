from collections.abc import Callable, Sequence
from functools import partial
from pprint import pformat
from typing import Any


def seq_repr(
    v: Sequence[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = list(v[:max_items])
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix


def producer_repr(producer: Callable[[], object]) -> str:
    func: object = getattr(producer, "__wrapped__", producer)
    while isinstance(func, partial):
        func = func.func
    name: str = getattr(func, "__name__", type(func).__name__)
    return f"<{name.lstrip('_')}>"
