import typing as tp

import attr

from ..cursors import Cursor
from ..mixins import size_of, is_empty
from ..refs import Ref, ValueRef
from .base import View, Bidirectional, source_cursor

__all__ = ['ZippedPair', 'ForwardZipped', 'Zipped']

@attr.s(slots=True, eq=False, repr=False)
class ZippedPair:
    ''' Returned value when iterating Zip; both members write through '''
    _first  : Ref = attr.ib()
    _second : Ref = attr.ib()

    @property
    def first(self) -> tp.Any:
        return self._first.get()

    @first.setter
    def first(self, value) -> None:
        self._first.set(value)

    @property
    def second(self) -> tp.Any:
        return self._second.get()

    @second.setter
    def second(self, value) -> None:
        self._second.set(value)

    def __iter__(self) -> tp.Iterator:
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f'ZippedPair({self.first!r}, {self.second!r})'


class ZippedCursor(Cursor):
    ''' Co-iterates two sources, ending as soon as either one ends '''
    __slots__ = '_first', '_first_end', '_second', '_second_end', '_pair'

    def __init__(self,
            first      : Cursor,
            first_end  : Cursor,
            second     : Cursor,
            second_end : Cursor,
            ) -> None:
        self._first = first
        self._first_end = first_end
        self._second = second
        self._second_end = second_end
        self._pair = None
        self._set_pair()

    def _set_pair(self) -> None:
        if not self.at_end:
            self._pair = ZippedPair(self._first.ref(), self._second.ref())

    @property
    def at_end(self) -> bool:
        return self._first == self._first_end or self._second == self._second_end

    def advance(self) -> None:
        self._first.advance()
        self._second.advance()
        self._set_pair()

    def ref(self) -> Ref:
        return ValueRef(self._pair)

    @property
    def writable(self) -> bool:
        return self._first.writable and self._second.writable

    def _same_position(self, other : 'ZippedCursor') -> bool:
        return self.at_end == other.at_end


class _ZippedBase(View):
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        # a read-only source makes both members read only
        writable = writable and self.mutable
        first, second = self._sources
        return ZippedCursor(
                source_cursor(first, writable, reverse, end),
                source_cursor(first, writable, reverse, True),
                source_cursor(second, writable, reverse, end),
                source_cursor(second, writable, reverse, True))

    def size(self) -> int:
        first, second = self._sources
        return min(size_of(first.obj), size_of(second.obj))

    def empty(self) -> bool:
        first, second = self._sources
        return is_empty(first.obj) or is_empty(second.obj)


class ForwardZipped(_ZippedBase):
    __slots__ = ()


class Zipped(Bidirectional, _ZippedBase):
    __slots__ = ()
