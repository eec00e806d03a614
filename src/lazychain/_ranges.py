from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass

from ._errors import InvalidArgumentError, check_int
from ._results import NONE, Option, Some


@dataclass(slots=True, frozen=True)
class IntRange:
    """A restartable run of integers from `start` to `end` (excluded).

    `end` is `NONE` for an unbounded range. Without an explicit `step`, the direction is derived from the bounds.
    """

    start: int
    end: Option[int]
    step: Option[int]

    def __post_init__(self) -> None:
        msg = f"Invalid range bounds: start={self.start!r}, end={self.end!r}"
        check_int(self.start, msg)
        if self.end.is_some():
            check_int(self.end.unwrap(), msg)
        if self.step.is_some():
            step = self.step.unwrap()
            check_int(step, "Invalid step")
            if step == 0:
                msg = "Invalid step"
                raise InvalidArgumentError(msg)

    @staticmethod
    def from_bounds(*bounds: int | None) -> IntRange:
        """Build a range from the positional forms `()`, `(end)`, `(start, end)` and `(start, end, step)`.

        Args:
            *bounds (int | None): The range bounds. A `None` end means unbounded.

        Returns:
            IntRange: The resolved range.

        Raises:
            InvalidArgumentError: If more than three bounds are given, if a bound is not an `int`, or if the step is zero.
        """
        match bounds:
            case ():
                return IntRange(0, NONE, NONE)
            case (end,):
                return IntRange(0, Option.from_(end), NONE)
            case (int() as start, end):
                return IntRange(start, Option.from_(end), NONE)
            case (int() as start, end, int() as step):
                return IntRange(start, Option.from_(end), Some(step))
            case _:
                msg = f"Invalid range bounds: {bounds!r}"
                raise InvalidArgumentError(msg)

    def direction(self) -> int:
        """Return the step actually used: the explicit one, or +1/-1 depending on the bounds."""
        if self.step.is_some():
            return self.step.unwrap()
        return 1 if self.end.map(lambda end: self.start < end).unwrap_or(True) else -1

    def __iter__(self) -> Iterator[int]:
        step = self.direction()
        if self.end.is_none():
            return itertools.count(self.start, step)
        return iter(range(self.start, self.end.unwrap(), step))
