import pytest

from iterviews import Box, ConstRef, Iterate, SlotRef, ValueRef, ref_to, walk
from iterviews.cursors import IndexCursor, IterCursor, count_between
from iterviews.refs import AttrRef, deref, deref_unique
from conftest import ForwardList


class TestIndexCursor:
    def test_walk(self):
        values = [1, 2, 3]
        begin, end = IndexCursor(values, 0), IndexCursor(values, 3)
        assert [cursor.value for cursor in walk(begin, end)] == [1, 2, 3]
        assert begin == end
        assert begin.at_end

    def test_reverse_walk(self):
        values = [1, 2, 3]
        begin, end = IndexCursor(values, 2, -1), IndexCursor(values, -1, -1)
        assert [cursor.value for cursor in walk(begin, end)] == [3, 2, 1]

    def test_equality(self):
        values = [1, 2]
        assert IndexCursor(values, 0) == IndexCursor(values, 0)
        assert IndexCursor(values, 0) != IndexCursor(values, 1)
        assert IndexCursor(values, 0) != IndexCursor([1, 2], 0)

    def test_write(self):
        values = [1, 2]
        cursor = IndexCursor(values, 1, writable=True)
        cursor.value = 5
        assert values == [1, 5]
        with pytest.raises(TypeError):
            IndexCursor(values, 0).value = 5

    def test_repr(self):
        assert repr(IndexCursor([7], 0)) == '<IndexCursor : 7>'
        assert repr(IndexCursor([7], 1)) == '<IndexCursor : end>'


class TestIterCursor:
    def test_walk(self):
        values = ForwardList('ab')
        begin, end = IterCursor(values), IterCursor(values, start=False)
        assert count_between(begin, end) == 2

    def test_reverse(self):
        begin, end = IterCursor('abc', reverse=True), IterCursor('abc', reverse=True, start=False)
        assert ''.join(cursor.value for cursor in walk(begin, end)) == 'cba'

    def test_end_positions_are_equal(self):
        assert IterCursor([], start=True) == IterCursor([1], start=False)

    def test_read_only(self):
        with pytest.raises(TypeError):
            IterCursor([1]).value = 2

    def test_mixed_types_never_compare_equal(self):
        assert IterCursor([]) != IndexCursor([], 0)


class TestViewCursors:
    def test_cursors_reuse_one_object(self):
        cursors = list(Iterate([1, 2]).cursors())
        assert cursors[0] is cursors[1]

    def test_cursor_ref(self):
        values = [1, 2]
        ref = Iterate(values).begin().ref()
        assert ref == SlotRef(values, 0)
        ref.value = 10
        assert values == [10, 2]

    def test_rcursors(self):
        values = [1, 2]
        for cursor in Iterate(values).rcursors():
            cursor.value = -cursor.value
        assert values == [-1, -2]

    def test_const_cursors(self):
        view = Iterate([1])
        with pytest.raises(TypeError):
            view.cbegin().value = 2
        with pytest.raises(TypeError):
            view.crbegin().value = 2
        assert not view.cbegin().writable
        assert view.begin().writable


class TestRefs:
    def test_ref_to(self):
        data = {'a': 1}
        ref = ref_to(data, 'a')
        assert ref.writable
        ref.value = 2
        assert data == {'a': 2}
        assert not ref_to((1,), 0).writable

    def test_const_ref(self):
        values = [1]
        ref = SlotRef(values, 0).readonly()
        assert isinstance(ref, ConstRef)
        assert ref.value == 1
        with pytest.raises(TypeError):
            ref.value = 2

    def test_value_ref(self):
        ref = ValueRef(3)
        assert ref.get() == 3
        assert ref.readonly() is ref
        with pytest.raises(TypeError):
            ref.set(4)

    def test_attr_ref(self):
        box = Box(1)
        AttrRef(box, 'value').set(2)
        assert box.value == 2
        with pytest.raises(TypeError):
            AttrRef(box, 'value', writable=False).set(3)

    def test_box(self):
        box = Box([1])
        assert box.get() == [1]
        box.set(None)
        assert box.value is None
        assert repr(Box(1)) == 'Box(1)'
        assert Box(1) != Box(1)

    def test_deref(self):
        values = [1]
        ref = SlotRef(values, 0)
        assert deref(ref, True) is ref
        assert isinstance(deref(ref, False), ConstRef)
        with pytest.raises(TypeError):
            deref(values, True)
        box = Box(1)
        deref(box, True).set(2)
        assert box.value == 2
        with pytest.raises(TypeError):
            deref(box, False).set(3)

    def test_deref_unique(self):
        box = Box(1)
        deref_unique(box, True).set(2)
        assert box.value == 2
        with pytest.raises(TypeError):
            deref_unique(box, False).set(3)
        with pytest.raises(TypeError):
            deref_unique(1, True)
