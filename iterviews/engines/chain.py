import typing as tp

from .. import traits
from ..cursors import Cursor
from ..mixins import size_of, is_empty
from ..ownership import Held
from ..refs import Ref
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardChained', 'Chained']

InnerOpener = tp.Callable[[tp.Any], tp.Tuple[Cursor, Cursor]]

class ChainedCursor(Cursor):
    '''
    Two level cursor over a source of sources.

    Invariant: unless the outer cursor is at its end, the inner cursor
    denotes an element. Exhausted and empty inner sources are skipped by
    advancing the outer cursor.
    '''
    __slots__ = '_outer', '_outer_end', '_inner', '_inner_end', '_open_inner'

    def __init__(self, outer : Cursor, outer_end : Cursor, open_inner : InnerOpener) -> None:
        self._outer = outer
        self._outer_end = outer_end
        self._open_inner = open_inner
        self._inner = self._inner_end = None
        self._load_inner()
        self._skip_exhausted()

    def _load_inner(self) -> None:
        if not self.at_end:
            self._inner, self._inner_end = self._open_inner(self._outer.value)

    def _skip_exhausted(self) -> None:
        while not self.at_end and self._inner == self._inner_end:
            self._outer.advance()
            self._load_inner()

    @property
    def at_end(self) -> bool:
        return self._outer == self._outer_end

    def advance(self) -> None:
        self._inner.advance()
        self._skip_exhausted()

    def ref(self) -> Ref:
        return self._inner.ref()

    @property
    def writable(self) -> bool:
        return self._inner is not None and self._inner.writable

    def _same_position(self, other : 'ChainedCursor') -> bool:
        return self.at_end == other.at_end


class _ChainedBase(View):
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        outer = self._sources[0]
        writable = writable and outer.writable

        def open_inner(collection) -> tp.Tuple[Cursor, Cursor]:
            inner = Held(collection, False, traits.is_mutable(collection))
            return (source_cursor(inner, writable, reverse, False),
                    source_cursor(inner, writable, reverse, True))

        return ChainedCursor(
                source_cursor(outer, writable, reverse, end),
                source_cursor(outer, writable, reverse, True),
                open_inner)

    def _inner_sources(self) -> tp.Iterator:
        return iter(self._sources[0].obj)

    @property
    def countable(self) -> bool:
        outer = self._sources[0].obj
        if not traits.can_count_and_is_empty(outer) or traits.is_one_shot(outer):
            return False
        return all(map(traits.can_count_and_is_empty, self._inner_sources()))

    @property
    def counts_by_traversal(self) -> bool:
        if super().counts_by_traversal:
            return True
        if traits.is_one_shot(self._sources[0].obj):
            return False
        return any(isinstance(c, View) and c.counts_by_traversal for c in self._inner_sources())

    def size(self) -> int:
        if not self.countable:
            raise TypeError(f"object of type '{type(self).__name__}' cannot count its elements")
        return sum(map(size_of, self._inner_sources()))

    def empty(self) -> bool:
        return all(map(is_empty, self._inner_sources()))


class ForwardChained(_ChainedBase):
    __slots__ = ()


class Chained(Bidirectional, _ChainedBase):
    __slots__ = ()
