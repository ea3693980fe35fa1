import pytest

from iterviews import Chain, Enumerate, Filter, Iterate, Map, as_const
from iterviews.engines import Filtered, ForwardFiltered
from conftest import ForwardList, SizedForwardList, is_odd


class TestFilter:
    def test_values(self):
        view = Filter([1, 2, 3, 4, 5], is_odd)
        assert isinstance(view, Filtered)
        assert list(view) == [1, 3, 5]

    @pytest.mark.parametrize('values, expected', [
        ([], []),
        ([0, 1], [1]),
        ([1, 0], [1]),
        ([0, 2, 4], []),
        ([0, 0, 0, 1, 2, 2, 2, 3, 4, 4, 4], [1, 3]),
    ])
    def test_skips_runs_of_rejected_elements(self, values, expected):
        assert list(Filter(values, is_odd)) == expected

    def test_modify(self, numbers):
        view = Filter(numbers, is_odd)
        view.begin().value = 123
        assert list(view) == [123, 3, 5]

    def test_const(self, numbers):
        with pytest.raises(TypeError):
            Filter(as_const(numbers), is_odd).begin().value = 123

    def test_reversed(self):
        assert list(reversed(Filter([1, 2, 3, 4, 5], is_odd))) == [5, 3, 1]

    def test_predicate_is_not_called_on_construction(self):
        calls = []
        Filter([1, 2, 3], calls.append)
        assert calls == []

    def test_size_and_empty(self):
        assert Filter([1, 2, 3], is_odd).size() == 2
        assert Filter([2, 4], is_odd).size() == 0
        assert Filter([2, 4], is_odd).empty()
        assert not Filter([2, 3], is_odd).empty()

    def test_len_does_not_traverse(self):
        calls = []
        view = Filter([1, 2, 3], lambda x: calls.append(x) or is_odd(x))
        with pytest.raises(TypeError):
            len(view)
        assert calls == []

    def test_list_calls_predicate_once_per_element(self):
        calls = []
        view = Filter([1, 2, 3, 4, 5], lambda x: calls.append(x) or is_odd(x))
        assert list(view) == [1, 3, 5]
        assert calls == [1, 2, 3, 4, 5]

    def test_stacked_views_call_predicate_once_per_element(self):
        calls = []
        view = Enumerate(Filter([1, 2, 3, 4, 5], lambda x: calls.append(x) or is_odd(x)))
        assert [tuple(item) for item in view] == [(0, 1), (1, 3), (2, 5)]
        assert calls == [1, 2, 3, 4, 5]
        calls.clear()
        assert list(Map(Filter([1, 2], lambda x: calls.append(x) or is_odd(x)), str)) == ['1']
        assert calls == [1, 2]

    def test_size_of_stacked_views(self):
        view = Enumerate(Filter([1, 2, 3], is_odd))
        assert view.size() == 2
        with pytest.raises(TypeError):
            len(view)
        assert [tuple(item) for item in reversed(view)] == [(1, 3), (0, 1)]

    def test_chain_of_filters(self):
        view = Chain([Filter([1, 2], is_odd), Filter([3, 4], is_odd)])
        assert view.size() == 2
        with pytest.raises(TypeError):
            len(view)
        assert list(view) == [1, 3]

    def test_size_is_recomputed(self):
        values = [1, 2]
        view = Filter(values, is_odd)
        assert view.size() == 1
        values.append(3)
        assert view.size() == 2

    def test_forward_only(self):
        view = Filter(ForwardList([1, 2, 3]), is_odd)
        assert isinstance(view, ForwardFiltered)
        assert list(view) == [1, 3]
        assert not view.empty()
        with pytest.raises(TypeError):
            view.size()

    def test_forward_only_sized(self):
        assert Filter(SizedForwardList([1, 2, 3]), is_odd).size() == 2

    def test_chained(self):
        view = Iterate([1, 2, 3, 4]).map(lambda x: x * 10).filter(lambda x: x > 15)
        assert list(view) == [20, 30, 40]
