"""Tests for the consumers of Iter."""

import operator

import pytest

import lazychain as lc


class TestCollect:
    """Test materializing an Iter."""

    def test_default_list(self) -> None:
        """Test collect returns a list by default."""
        assert lc.range(3).collect() == [0, 1, 2]

    @pytest.mark.parametrize(
        ("collector", "expected"),
        [(tuple, (1, 2, 1)), (set, {1, 2}), (frozenset, frozenset({1, 2})), (sorted, [1, 1, 2])],
    )
    def test_collectors(self, collector: object, expected: object) -> None:
        """Test any callable can build the collection."""
        assert lc.iter([1, 2, 1]).collect(collector) == expected  # type: ignore[arg-type]

    def test_into(self) -> None:
        """Test into pipes the Iter into a function with extra arguments."""
        assert lc.range(4).into(sum, 10) == 16

    def test_consume_runs_side_effects(self) -> None:
        """Test consume drains the Iter."""
        seen: list[int] = []
        assert lc.range(3).inspect(seen.append).consume() is None
        assert seen == [0, 1, 2]

    def test_for_each(self) -> None:
        """Test for_each receives the element and its index."""
        calls: list[tuple[str, int]] = []
        lc.iter("ab").for_each(lambda ch, idx: calls.append((ch, idx)))
        assert calls == [("a", 0), ("b", 1)]


class TestReduce:
    """Test folds and counts."""

    def test_reduce(self) -> None:
        """Test a left fold without seed."""
        assert lc.iter([0, 1, 2, 3]).reduce(operator.add) == 6

    def test_reduce_order(self) -> None:
        """Test the fold goes from left to right."""
        assert lc.iter("abc").reduce(lambda acc, ch: ch + acc) == "cba"

    def test_reduce_initial(self) -> None:
        """Test a seeded fold."""
        assert lc.iter([1, 2]).reduce(operator.add, 10) == 13

    def test_reduce_empty_with_initial(self) -> None:
        """Test a seeded fold of nothing returns the seed."""
        assert lc.Iter.new().reduce(operator.add, 5) == 5

    def test_reduce_empty(self) -> None:
        """Test a fold of nothing without seed raises."""
        with pytest.raises(lc.EmptyReductionError, match="Reduce of empty iterator with no initial value"):
            lc.Iter.new().reduce(operator.add)

    def test_empty_reduction_is_type_error(self) -> None:
        """Test EmptyReductionError can be caught as a TypeError."""
        with pytest.raises(TypeError):
            lc.Iter.new().reduce(operator.add)

    def test_count(self) -> None:
        """Test counting all or matching elements."""
        assert lc.range(0, 10).count() == 10
        assert lc.range(0, 10).count(lambda n: n % 3 == 0) == 4

    def test_rate(self) -> None:
        """Test the fraction of matching elements."""
        assert lc.range(4, 9).rate(lambda n: n % 2 == 0) == 3 / 5

    def test_rate_empty(self) -> None:
        """Test the rate of nothing is a division by zero."""
        with pytest.raises(ZeroDivisionError):
            lc.Iter.new().rate(bool)


class TestSearch:
    """Test consumers returning an Option."""

    def test_min_max(self) -> None:
        """Test min and max by key."""
        data = ["bb", "a", "cc", "d"]
        assert lc.iter(data).min(len) == lc.Some("a")
        assert lc.iter(data).max(len) == lc.Some("bb")

    def test_min_max_empty(self) -> None:
        """Test min and max of nothing."""
        assert lc.Iter.new().min(len).is_none()
        assert lc.Iter.new().max(len).is_none()

    def test_find(self) -> None:
        """Test find stops at the first match."""
        pulled: list[int] = []
        found = lc.range().inspect(pulled.append).find(lambda n, _: n > 2)
        assert found.unwrap() == 3
        assert pulled == [0, 1, 2, 3]

    def test_find_none_element(self) -> None:
        """Test a None element can be found."""
        assert lc.iter([1, None]).find(lambda x, _: x is None) == lc.Some(None)

    def test_find_missing(self) -> None:
        """Test find without match."""
        assert lc.range(3).find(lambda n, _: n > 5) is lc.NONE

    def test_find_index(self) -> None:
        """Test find receives the index."""
        assert lc.iter("abc").find(lambda _, idx: idx == 1).unwrap() == "b"

    def test_position(self) -> None:
        """Test the index of the first match."""
        assert lc.iter("abc").position(lambda ch, _: ch == "c") == lc.Some(2)
        assert lc.iter("abc").position(lambda ch, _: ch == "z").is_none()

    def test_every_some(self) -> None:
        """Test the short circuiting booleans."""
        assert lc.range(0, 4).every(lambda n, _: n < 4)
        assert not lc.range(0, 4).every(lambda n, _: n < 3)
        assert lc.range(0, 4).some(lambda n, _: n == 3)
        assert not lc.Iter.new().some(lambda _n, _: True)

    def test_some_short_circuits(self) -> None:
        """Test some stops pulling at the first success."""
        assert lc.range().some(lambda n, _: n == 100)

    def test_first_last_nth(self) -> None:
        """Test positional access."""
        it = lc.iter([4, 5, 6])
        assert it.first() == lc.Some(4)
        assert it.last() == lc.Some(6)
        assert it.nth(1) == lc.Some(5)
        assert it.nth(3).is_none()
        assert it.nth(-1).is_none()
        assert lc.Iter.new().first().is_none()
        assert lc.Iter.new().last().is_none()

    def test_first_on_infinite(self) -> None:
        """Test first pulls a single element."""
        assert lc.range(7, None).first().unwrap() == 7

    def test_last_propagates_errors(self) -> None:
        """Test last does not hide an error raised while draining."""
        with pytest.raises(lc.EmptyReductionError):
            lc.Iter.new().accumulate(operator.add).last()


class TestSplit:
    """Test partition and unzip."""

    def test_partition(self) -> None:
        """Test partition keeps the relative order."""
        result = lc.iter([1, 2, 3, 4]).partition(lambda n, _: n % 2 == 0)
        assert result == ([2, 4], [1, 3])
        assert result.matches == [2, 4]
        assert result.rest == [1, 3]

    def test_partition_index(self) -> None:
        """Test partition receives the index."""
        matches, rest = lc.iter("abcd").partition(lambda _, idx: idx < 1)
        assert matches == ["a"]
        assert rest == ["b", "c", "d"]

    def test_unzip(self) -> None:
        """Test unzip splits pairs."""
        assert lc.iter([(0, "a"), (1, "b")]).unzip() == [[0, 1], ["a", "b"]]

    def test_unzip_after_zip(self) -> None:
        """Test unzip reverts zip."""
        left, right = lc.range(3).zip("xyz").unzip()
        assert left == [0, 1, 2]
        assert right == ["x", "y", "z"]

    def test_unzip_ragged(self) -> None:
        """Test tuples of different lengths."""
        assert lc.iter([(1, 2, 3), (4,)]).unzip() == [[1, 4], [2], [3]]

    def test_unzip_empty(self) -> None:
        """Test unzip of nothing."""
        assert lc.Iter.new().unzip() == []

    @pytest.mark.parametrize("bad", [[(1, 2), 3], ["ab", "cd"]])
    def test_unzip_not_iterable(self, bad: list[object]) -> None:
        """Test unzip rejects atoms and strings."""
        with pytest.raises(lc.TypeMismatchError, match="Element type is not an array"):
            lc.iter(bad).unzip()
