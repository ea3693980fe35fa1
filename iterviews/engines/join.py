from ..cursors import Cursor
from ..mixins import size_of, is_empty
from ..refs import Ref
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardJoined', 'Joined']

class JoinedCursor(Cursor):
    ''' Walks the first source to its end, then the second '''
    __slots__ = '_first', '_first_end', '_second', '_second_end'

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

    def _current(self) -> Cursor:
        if self._first != self._first_end:
            return self._first
        return self._second

    @property
    def at_end(self) -> bool:
        return self._first == self._first_end and self._second == self._second_end

    def advance(self) -> None:
        self._current().advance()

    def ref(self) -> Ref:
        return self._current().ref()

    @property
    def writable(self) -> bool:
        return self._current().writable

    def _same_position(self, other : 'JoinedCursor') -> bool:
        return self._first == other._first and self._second == other._second


class _JoinedBase(View):
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        # a read-only source makes the whole join read only
        writable = writable and self.mutable
        first, second = self._sources
        if reverse:
            first, second = second, first
        return JoinedCursor(
                source_cursor(first, writable, reverse, end),
                source_cursor(first, writable, reverse, True),
                source_cursor(second, writable, reverse, end),
                source_cursor(second, writable, reverse, True))

    def size(self) -> int:
        first, second = self._sources
        return size_of(first.obj) + size_of(second.obj)

    def empty(self) -> bool:
        first, second = self._sources
        return is_empty(first.obj) and is_empty(second.obj)


class ForwardJoined(_JoinedBase):
    __slots__ = ()


class Joined(Bidirectional, _JoinedBase):
    __slots__ = ()
