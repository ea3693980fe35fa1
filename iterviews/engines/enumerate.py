import typing as tp

import attr

from ..cursors import Cursor
from ..refs import Ref, ValueRef
from .base import View, Bidirectional, source_cursor

__all__ = ['Item', 'ForwardEnumerated', 'Enumerated']

@attr.s(slots=True, eq=False, repr=False)
class Item:
    '''
    Returned value when iterating Enumerate

    `value` reads and writes through to the enumerated source.
    '''
    position : int = attr.ib()
    _ref     : Ref = attr.ib()

    @property
    def value(self) -> tp.Any:
        return self._ref.get()

    @value.setter
    def value(self, value) -> None:
        self._ref.set(value)

    def __iter__(self) -> tp.Iterator:
        yield self.position
        yield self.value

    def __repr__(self) -> str:
        return f'Item({self.position}, {self.value!r})'


class EnumeratedCursor(Cursor):
    __slots__ = '_inner', '_position', '_delta', '_item'

    def __init__(self, inner : Cursor, position : int, delta : int) -> None:
        self._inner = inner
        self._position = position
        self._delta = delta
        self._item = None
        self._set_item()

    def _set_item(self) -> None:
        if not self._inner.at_end:
            self._item = Item(self._position, self._inner.ref())

    @property
    def at_end(self) -> bool:
        return self._inner.at_end

    def advance(self) -> None:
        self._inner.advance()
        self._position += self._delta
        self._set_item()

    def ref(self) -> Ref:
        return ValueRef(self._item)

    @property
    def writable(self) -> bool:
        return self._inner.writable

    def _same_position(self, other : 'EnumeratedCursor') -> bool:
        return self._inner == other._inner


class _EnumeratedBase(View):
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        inner = source_cursor(self._sources[0], writable, reverse, end)
        if not reverse:
            return EnumeratedCursor(inner, 0, 1)
        # reverse positions count down from the last index
        start = -1 if end else self._count() - 1
        return EnumeratedCursor(inner, start, -1)


class ForwardEnumerated(_EnumeratedBase):
    __slots__ = ()


class Enumerated(Bidirectional, _EnumeratedBase):
    __slots__ = ()
