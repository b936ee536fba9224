import logging

import pytest

from lazyseq import (
    ReentrantPullError,
    drop,
    first,
    map,
    partition,
    partition_while,
    split,
    take,
    to_list,
)


def is_odd(element, index):
    return element % 2 == 1


class TestPartition:
    """Test partition()"""

    def test_partition(self):
        result = to_list(map(partition([2, 1, 3, 4, 5, 6], is_odd), lambda side, _: to_list(side)))
        assert result == [[1, 3, 5], [2, 4, 6]]

    def test_sides_are_independent(self):
        """Reading part of one side does not disturb the other"""
        odd, even = partition([2, 1, 3, 4, 5, 6], is_odd)
        assert first(odd).unwrap() == 1
        assert to_list(even) == [2, 4, 6]

    def test_predicate_receives_source_index(self):
        left, right = partition(["abc", "def", "ghi"], lambda _, i: i % 2 == 0)
        assert to_list(left) == ["abc", "ghi"]
        assert to_list(right) == ["def"]

    def test_type_discriminating_predicate(self):
        results = [
            {"type": "success", "value": "hello"},
            {"type": "error"},
            {"type": "success", "value": "goodbye"},
        ]
        successes, errors = partition(results, lambda r, _: r["type"] == "success")
        assert to_list(successes) == [results[0], results[2]]
        assert to_list(errors) == [{"type": "error"}]

    def test_any_drain_order(self):
        """Right-first, left-first and alternating reads agree"""
        items = [2, 1, 3, 4, 5, 6, 7]

        odd, even = partition(iter(items), is_odd)
        assert to_list(even) == [2, 4, 6]
        assert to_list(odd) == [1, 3, 5, 7]

        odd, even = partition(iter(items), is_odd)
        odd_iter, even_iter = iter(odd), iter(even)
        interleaved = [next(odd_iter), next(even_iter), next(odd_iter), next(even_iter)]
        assert interleaved == [1, 2, 3, 4]
        assert to_list(odd_iter) == [5, 7]
        assert to_list(even_iter) == [6]

    def test_every_element_lands_once(self):
        items = list(range(20))
        matched, rest = partition(iter(items), lambda e, _: e % 3 == 0)
        left, right = to_list(matched), to_list(rest)
        assert sorted(left + right) == items
        assert left == [e for e in items if e % 3 == 0]
        assert right == [e for e in items if e % 3 != 0]

    def test_predicate_runs_once_per_element(self):
        calls = []

        def predicate(element, index):
            calls.append(index)
            return element % 2 == 0

        left, right = partition(iter(range(6)), predicate)
        to_list(right)
        to_list(left)
        to_list(left)
        assert calls == [0, 1, 2, 3, 4, 5]

    def test_nothing_read_until_pulled(self, counting):
        source = counting([1, 2, 3])
        odd, even = partition(source, is_odd)
        assert source.pulls == 0
        assert first(odd).unwrap() == 1
        assert source.pulls == 1

    def test_pulls_only_as_far_as_needed(self, counting):
        """Elements for the other side are buffered on the way"""
        source = counting([2, 4, 1, 6])
        odd, _ = partition(source, is_odd)
        assert first(odd).unwrap() == 1
        assert source.pulls == 3

    def test_sides_replay_buffer(self):
        """Each iteration of a side starts from its first element"""
        odd, even = partition(iter([1, 2, 3]), is_odd)
        assert to_list(odd) == [1, 3]
        assert to_list(odd) == [1, 3]
        assert to_list(even) == [2]

    def test_infinite_source(self):
        def naturals():
            n = 0
            while True:
                yield n
                n += 1

        odd, even = partition(naturals(), is_odd)
        assert to_list(take(even, 3)) == [0, 2, 4]
        assert to_list(take(odd, 3)) == [1, 3, 5]

    def test_reentrant_pull_is_rejected(self):
        sides = []

        def predicate(element, index):
            if index == 1:
                to_list(sides[1])
            return element % 2 == 1

        sides.extend(partition(iter([1, 2, 3]), predicate))
        with pytest.raises(ReentrantPullError):
            to_list(sides[0])

    def test_failed_predicate_breaks_both_sides(self):
        """An element whose predicate raised is never silently dropped"""

        def predicate(element, index):
            if element == 2:
                raise ValueError("bad element")
            return element % 2 == 1

        odd, even = partition(iter([1, 2, 3, 4]), predicate)
        with pytest.raises(ValueError):
            to_list(even)
        with pytest.raises(ValueError):
            to_list(odd)

        odd_iter = iter(odd)
        assert next(odd_iter) == 1
        with pytest.raises(ValueError):
            next(odd_iter)


class TestPartitionWhile:
    """Test partition_while()"""

    def test_partition_while(self):
        result = to_list(map(partition_while([1, 3, 2, 4, 5, 6], is_odd), lambda side, _: to_list(side)))
        assert result == [[1, 3], [2, 4, 5, 6]]

    def test_first_of_leading_run(self):
        run, rest = partition_while([1, 3, 2, 4, 5, 6], is_odd)
        assert first(run).unwrap() == 1
        assert to_list(rest) == [2, 4, 5, 6]

    def test_index_predicate(self):
        run, rest = partition_while(["abc", "def", "ghi"], lambda _, i: i % 2 == 0)
        assert to_list(run) == ["abc"]
        assert to_list(rest) == ["def", "ghi"]

    def test_results(self):
        results = [
            {"type": "success", "value": "hello"},
            {"type": "error"},
            {"type": "success", "value": "goodbye"},
        ]
        successes, rest = partition_while(results, lambda r, _: r["type"] == "success")
        assert to_list(successes) == [results[0]]
        assert to_list(rest) == [{"type": "error"}, results[2]]

    def test_rest_first(self):
        """Draining the rest first still leaves the leading run intact"""
        run, rest = partition_while(iter([1, 3, 2, 4, 5]), is_odd)
        assert to_list(rest) == [2, 4, 5]
        assert to_list(run) == [1, 3]

    def test_run_closes_after_first_failure(self, counting):
        """The leading side stops at the break without reading further"""
        source = counting([1, 3, 2, 5, 7])
        run, _ = partition_while(source, is_odd)
        assert to_list(run) == [1, 3]
        assert source.pulls == 3

    def test_predicate_not_called_after_break(self):
        calls = []

        def predicate(element, index):
            calls.append(index)
            return element % 2 == 1

        run, rest = partition_while(iter([1, 2, 3, 5]), predicate)
        to_list(rest)
        to_list(run)
        assert calls == [0, 1]


class TestSplit:
    """Test split()"""

    def test_split(self, generator):
        left, right = split(generator(), 2)
        assert to_list(left) == [1, 2]
        assert to_list(right) == [3]

    def test_matches_take_and_drop(self):
        items = [5, 6, 7, 8]
        for n in range(6):
            left, right = split(iter(items), n)
            assert to_list(right) == to_list(drop(items, n))
            assert to_list(left) == to_list(take(items, n))

    def test_left_does_not_read_past_index(self, counting):
        source = counting(range(10))
        left, _ = split(source, 3)
        assert to_list(left) == [0, 1, 2]
        assert source.pulls == 3

    @pytest.mark.parametrize("index", [2.5, "2", True, None])
    def test_rejects_non_int_index(self, counting, index):
        source = counting([1, 2, 3])
        with pytest.raises(TypeError):
            split(source, index)
        assert source.pulls == 0


class TestCursorLogging:
    """Test the split cursor's debug logging"""

    def test_logs_close_and_exhaustion(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyseq.split.cursor"):
            _, right = partition_while([1, 2, 3], is_odd)
            assert to_list(right) == [2, 3]
        assert "left side closed at index 1" in caplog.text
        assert "exhausted after 3 elements" in caplog.text
