"""Tests for the runtime configuration."""

from collections.abc import Iterator

import pytest

import lazychain as lc


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    previous = lc.get_config()
    yield
    lc.set_config(
        max_flatten_depth=previous.max_flatten_depth,
        repr_max_items=previous.repr_max_items,
        repr_width=previous.repr_width,
    )


def test_defaults() -> None:
    """Test the default settings."""
    cfg = lc.get_config()
    assert cfg == lc.Config()
    assert cfg.max_flatten_depth == 10


def test_raise_flatten_depth() -> None:
    """Test a wider flatten bound is honored by flatten."""
    nested: list[object] = [0]
    for _ in range(14):
        nested = [nested]
    with pytest.raises(lc.InvalidArgumentError):
        lc.iter(nested).flatten(14)
    lc.set_config(max_flatten_depth=15)
    assert lc.iter(nested).flatten(14).collect() == [0]


def test_lower_flatten_depth_message() -> None:
    """Test the flatten error names the configured bound."""
    lc.set_config(max_flatten_depth=2)
    with pytest.raises(lc.InvalidArgumentError, match=r"allowed range is \[0, 2\]"):
        lc.iter([[[1]]]).flatten(3)


def test_flatten_depth_hard_limit() -> None:
    """Test the configured bound cannot exceed 15."""
    with pytest.raises(lc.InvalidArgumentError):
        lc.set_config(max_flatten_depth=16)
    assert lc.get_config().max_flatten_depth == 10


@pytest.mark.parametrize(
    "changes",
    [{"max_flatten_depth": True}, {"max_flatten_depth": "x"}, {"repr_width": 0}, {"repr_max_items": 2.5}],
)
def test_invalid_values(changes: dict[str, object]) -> None:
    """Test settings which are not ints in range are rejected."""
    with pytest.raises(lc.InvalidArgumentError):
        lc.set_config(**changes)
    assert lc.get_config() == lc.Config()


def test_unknown_field() -> None:
    """Test unknown settings are rejected."""
    with pytest.raises(lc.InvalidArgumentError):
        lc.set_config(colour="blue")


def test_partitioned_repr_truncation() -> None:
    """Test the partition repr follows the repr settings."""
    lc.set_config(repr_max_items=3)
    result = lc.range(10).partition(lambda n, _: n < 8)
    assert repr(result) == "Partitioned(matches=[0, 1, 2]..., rest=[8, 9])"


def test_config_is_frozen() -> None:
    """Test the configuration cannot be mutated in place."""
    with pytest.raises(AttributeError):
        lc.get_config().repr_width = 10  # type: ignore[misc]
