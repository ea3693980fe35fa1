import typing as tp

from ..cursors import Cursor
from ..refs import Ref, deref, deref_unique
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardReferenced', 'Referenced', 'ForwardReferencedUnique', 'ReferencedUnique']

Dereference = tp.Callable[[tp.Any, bool], Ref]

class ReferencedCursor(Cursor):
    __slots__ = '_inner', '_deref'

    def __init__(self, inner : Cursor, dereference : Dereference) -> None:
        self._inner = inner
        self._deref = dereference

    @property
    def at_end(self) -> bool:
        return self._inner.at_end

    def advance(self) -> None:
        self._inner.advance()

    def ref(self) -> Ref:
        return self._deref(self._inner.value, self._inner.writable)

    @property
    def writable(self) -> bool:
        return self._inner.writable

    def _same_position(self, other : 'ReferencedCursor') -> bool:
        return self._inner == other._inner


class _ReferencedBase(View):
    ''' Presents a collection of pointers as the values they point to '''
    __slots__ = ()

    _dereference : tp.ClassVar[Dereference] = staticmethod(deref)

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        inner = source_cursor(self._sources[0], writable, reverse, end)
        return ReferencedCursor(inner, self._dereference)


class ForwardReferenced(_ReferencedBase):
    __slots__ = ()


class Referenced(Bidirectional, _ReferencedBase):
    __slots__ = ()


class _ReferencedUniqueBase(_ReferencedBase):
    ''' Same, for a collection of Boxes: dereferencing goes through the owner '''
    __slots__ = ()

    _dereference = staticmethod(deref_unique)


class ForwardReferencedUnique(_ReferencedUniqueBase):
    __slots__ = ()


class ReferencedUnique(Bidirectional, _ReferencedUniqueBase):
    __slots__ = ()
