import pytest

from iterviews import Held, Iterate, Map, absorb, as_const, borrow
from iterviews.ownership import hold
from conftest import ForwardList, increase_all, is_odd


class TestOwnershipTags:
    def test_borrow(self):
        values = [1]
        held = borrow(values)
        assert held == Held(values, False, True)

    def test_absorb(self):
        values = (1,)
        held = absorb(values)
        assert held.owned
        assert not held.writable

    def test_absorb_keeps_const(self):
        held = absorb(as_const(Held([1], False, True)))
        assert held.owned
        assert not held.writable

    def test_as_const_collection_is_read_only(self):
        values = [1, 2]
        const = as_const(values)
        assert list(const) == [1, 2]
        assert const[1] == 2
        assert len(const) == 2
        with pytest.raises(TypeError):
            const[0] = 3

    def test_as_const_view(self):
        values = [1, 2]
        view = Map(as_const(Iterate(values)), lambda x: x)
        assert not view.mutable
        held = as_const(Iterate(values))
        assert isinstance(held, Held)
        assert not held.writable

    def test_const_view_source(self):
        values = [1, 2]
        view = Iterate(as_const(Iterate(values)))
        with pytest.raises(TypeError):
            increase_all(view)
        assert values == [1, 2]

    def test_hold_warns_on_one_shot_iterator(self):
        with pytest.warns(UserWarning, match='one-shot'):
            hold(iter([1]))

    def test_one_shot_view(self):
        with pytest.warns(UserWarning):
            view = Iterate(iter([1, 2, 3]))
        assert list(view) == [1, 2, 3]


class TestChainedOperators:
    def test_receiver_is_consumed(self):
        view = Iterate([1, 2])
        mapped = view.map(str)
        assert list(mapped) == ['1', '2']
        with pytest.raises(AttributeError, match='consumed'):
            list(view)
        with pytest.raises(AttributeError):
            view.begin()

    def test_consumed_repr(self):
        view = Iterate([1, 2])
        view.reverse()
        assert 'consumed' in repr(view)

    def test_result_owns_its_source(self):
        assert not Iterate([1]).owns_source
        assert Iterate([1]).map(str).owns_source

    def test_returned_composition_outlives_the_factory(self):
        def make():
            return Iterate([1, 2, 3]).reverse().enumerate()
        assert [tuple(item) for item in make()] == [(0, 3), (1, 2), (2, 1)]

    def test_long_chain(self):
        view = (Iterate([1, 2, 3, 4, 5, 6])
                .filter(is_odd)
                .map(lambda x: x * 10)
                .reverse()
                .enumerate())
        assert [tuple(item) for item in view] == [(0, 50), (1, 30), (2, 10)]

    def test_chain_keeps_mutability(self):
        values = [1, 2, 3]
        increase_all(Iterate(values).reverse())
        assert values == [2, 3, 4]

    def test_chain_keeps_const(self):
        values = [1, 2, 3]
        view = Iterate(as_const(values)).reverse()
        with pytest.raises(TypeError):
            increase_all(view)

    def test_reverse_forward_only(self):
        with pytest.raises(TypeError):
            Iterate(ForwardList([1])).reverse()

    def test_map_by_ref(self):
        values = [1, 2]

        def double(ref):
            ref.value *= 2
            return ref.value

        assert list(Iterate(values).map(double, by_ref=True)) == [2, 4]
        assert values == [2, 4]
