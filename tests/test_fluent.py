from kungfu import Nothing

from lazyseq import Flow, flow, fn, pipe, to_list


class TestPipe:
    """Test pipe() with curried forms"""

    def test_pipeline(self):
        result = pipe(
            range(10),
            fn.filter_fn(lambda e, _: e % 2 == 0),
            fn.map_fn(lambda e, _: e * e),
            fn.take_fn(3),
            to_list,
        )
        assert result == [0, 4, 16]

    def test_curried_reductions(self, generator):
        assert fn.fold_fn(lambda a, e, _: a + e, initial=10)(generator()) == 16
        assert fn.maximum_fn()(generator()).unwrap() == 3
        assert fn.contains_fn(2)(generator())

    def test_curried_split(self):
        odd, even = fn.partition_fn(lambda e, _: e % 2 == 1)([1, 2, 3])
        assert to_list(odd) == [1, 3]
        assert to_list(even) == [2]

    def test_zip_fn_order(self):
        assert to_list(fn.zip_fn(["a", "b"])([1, 2, 3])) == [(1, "a"), (2, "b")]


class TestFlow:
    """Test the fluent chain"""

    def test_chain(self):
        result = (
            flow(range(100))
            .map(lambda e, _: e * e)
            .filter(lambda e, _: e % 2 == 0)
            .drop(5)
            .take(3)
            .to_list()
        )
        assert result == [100, 144, 196]

    def test_building_runs_nothing(self):
        call_count = 0

        def track_calls(element, index):
            nonlocal call_count
            call_count += 1
            return element

        chain = flow([1, 2, 3]).map(track_calls).filter(lambda e, _: True)
        assert isinstance(chain, Flow)
        assert call_count == 0
        assert chain.stages() == ("map", "filter")
        assert chain.first().unwrap() == 1
        assert call_count == 1

    def test_reiterable_over_list(self):
        chain = flow([1, 2, 3]).map(lambda e, _: e + 1)
        assert list(chain) == [2, 3, 4]
        assert list(chain) == [2, 3, 4]

    def test_terminals(self, generator):
        assert flow(generator()).sum() == 6
        assert flow([3, 1, 2]).minimum().unwrap() == 1
        assert isinstance(flow([]).last(), Nothing)
        assert flow([1, 3, 4, 2]).key_by(lambda e, _: e % 2) == {1: [1, 3], 0: [4, 2]}
        assert flow([True, False]).and_() is False
        assert flow([0, "", 3]).or_() is True
        assert flow([]).and_() is True
        assert flow([]).or_() is False
        words = ["apple", "avocado", "banana"]
        assert flow(words).map_key_first_by(lambda w, _: (w[0], len(w))) == {"a": 5, "b": 6}
        assert flow(words).map_key_last_by(lambda w, _: (w[0], len(w))) == {"a": 7, "b": 6}

    def test_partition_returns_flows(self):
        odd, even = flow([2, 1, 3, 4]).partition(lambda e, _: e % 2 == 1)
        assert odd.map(lambda e, _: e * 10).to_list() == [10, 30]
        assert even.to_list() == [2, 4]

    def test_combinators(self):
        assert flow([[1, 2], [], [3]]).concat().map(lambda e, _: e * 2).to_list() == [2, 4, 6]
        assert flow([2, 3]).prepend([1]).append([4]).push(5).to_list() == [1, 2, 3, 4, 5]
        assert flow([1, 2, 3]).pairwise().to_list() == [(1, 2), (2, 3)]
        assert flow([1, 2, 3]).scan1(lambda a, e, i: a + e * i).to_list() == [1, 3, 9]
