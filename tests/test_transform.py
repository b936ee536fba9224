from lazyseq import (
    exclude,
    exclude_first,
    exclude_none,
    filter,
    filter_first,
    map,
    remove,
    remove_first,
    tap,
    to_list,
)


class TestMap:
    """Test map()"""

    def test_map(self, generator):
        assert to_list(map(generator(), lambda e, _: e + 1)) == [2, 3, 4]
        assert to_list(map(generator(), lambda e, i: e * 10 if i == 1 else e)) == [1, 20, 3]

    def test_deferred_execution(self):
        """Mapper runs on pull, once per element"""
        call_count = 0

        def track_calls(element, index):
            nonlocal call_count
            call_count += 1
            return element * 2

        lazy = map(range(10), track_calls)
        assert call_count == 0, "Should not execute during definition"
        assert next(lazy) == 0
        assert next(lazy) == 2
        assert call_count == 2, f"Expected 2 calls, got {call_count}"


class TestFilter:
    """Test filter(), exclude() and exclude_none()"""

    def test_filter(self, generator):
        assert to_list(filter(generator(), lambda e, _: e % 2 == 1)) == [1, 3]
        assert to_list(filter([1, 3, 2, 4, 5], lambda _, i: i % 2 == 0)) == [1, 2, 5]

    def test_exclude(self):
        assert to_list(exclude([1, 2, 3, 4, 3, 2, 1], lambda e, _: e < 3)) == [3, 4, 3]

    def test_exclude_none(self):
        items = [1, 2, None, 3, 4, None, 3, 2, 1, 0, False]
        assert to_list(exclude_none(items)) == [1, 2, 3, 4, 3, 2, 1, 0, False]

    def test_remove(self):
        assert to_list(remove([1, 2, 3, 4, 3, 2, 1], 2)) == [1, 3, 4, 3, 1]


class TestFirstRejection:
    """Test filter_first(), exclude_first() and remove_first()"""

    def test_filter_first(self):
        """Only the first failing element is dropped"""
        assert to_list(filter_first([1, 2, 3, 4, 3, 2, 1], lambda e, _: e < 3)) == [1, 2, 4, 3, 2, 1]

    def test_filter_first_stops_testing(self):
        """The predicate is not consulted after the first failure"""
        seen = []

        def predicate(element, index):
            seen.append(element)
            return element < 3

        to_list(filter_first([1, 5, 6, 1], predicate))
        assert seen == [1, 5]

    def test_filter_first_without_failure(self):
        assert to_list(filter_first([1, 2], lambda e, _: e < 3)) == [1, 2]

    def test_exclude_first(self):
        assert to_list(exclude_first([1, 2, 3, 4, 3, 2, 1], lambda e, _: e > 2)) == [1, 2, 4, 3, 2, 1]

    def test_remove_first(self):
        assert to_list(remove_first([1, 2, 3, 4, 3, 2, 1], 2)) == [1, 3, 4, 3, 2, 1]


class TestTap:
    """Test tap()"""

    def test_observes_without_changing(self):
        seen = []
        lazy = tap([1, 2, 3], lambda e, i: seen.append((i, e)))
        assert seen == []
        assert to_list(lazy) == [1, 2, 3]
        assert seen == [(0, 1), (1, 2), (2, 3)]
