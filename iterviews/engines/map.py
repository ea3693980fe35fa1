import typing as tp

from ..cursors import Cursor
from ..ownership import Held
from ..refs import Ref, ValueRef
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardMapped', 'Mapped']

class MappedCursor(Cursor):
    '''
    Applies the mapping function on every dereference.

    With by_ref the function receives the Ref of the source element, which
    is writable when the traversal path is mutable.
    '''
    __slots__ = '_inner', '_function', '_by_ref'

    def __init__(self, inner : Cursor, function : tp.Callable, by_ref : bool) -> None:
        self._inner = inner
        self._function = function
        self._by_ref = by_ref

    @property
    def at_end(self) -> bool:
        return self._inner.at_end

    def advance(self) -> None:
        self._inner.advance()

    def ref(self) -> Ref:
        arg = self._inner.ref() if self._by_ref else self._inner.value
        return ValueRef(self._function(arg))

    def _same_position(self, other : 'MappedCursor') -> bool:
        return self._inner == other._inner


class _MappedBase(View):
    __slots__ = '_function', '_by_ref'

    def __init__(self, source : Held, function : tp.Callable, by_ref : bool = False) -> None:
        super().__init__(source)
        self._function = function
        self._by_ref = by_ref

    @property
    def function(self) -> tp.Callable:
        return self._function

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        inner = source_cursor(self._sources[0], writable, reverse, end)
        return MappedCursor(inner, self._function, self._by_ref)


class ForwardMapped(_MappedBase):
    __slots__ = ()


class Mapped(Bidirectional, _MappedBase):
    __slots__ = ()
