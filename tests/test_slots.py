"""Tests for slot usage in lazychain classes."""

import lazychain as lc


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(lc.Iter(()))
    assert _check_slots(lc.range(3).map(lambda n, _: n))
    assert _check_slots(lc.Iter.from_producer(lambda: iter(())))
    assert _check_slots(lc.Some(42))
    assert _check_slots(lc.NoneOption())
    assert _check_slots(lc.get_config())
