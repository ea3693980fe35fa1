import copy
import typing as tp
from abc import abstractmethod

from .. import traits
from ..cursors import Cursor, IndexCursor, IterCursor, walk, count_between
from ..mixins import size_of, is_empty, chained
from ..ownership import Held
from ..util.classutil import ValidContainer

__all__ = ['View', 'Bidirectional', 'source_cursor']

class _Sources(ValidContainer):
    __slots__ = ()
    invalid_message = 'view was consumed by a chained operator'


def source_cursor(held : Held, writable : bool, reverse : bool, end : bool) -> Cursor:
    '''
    A cursor over a held source, at its first element or at its end.

    The cursor is writable only when both the caller asks for it and the
    source was held writable.
    '''
    obj = held.obj
    writable = writable and held.writable
    if isinstance(obj, View):
        return obj._make_cursor(writable, reverse, end)
    elif isinstance(obj, tp.Sequence):
        n = len(obj)
        if reverse:
            return IndexCursor(obj, -1 if end else n - 1, -1, writable)
        return IndexCursor(obj, n if end else 0, 1, writable)
    return IterCursor(obj, reverse, start=not end)


class View(traits.Traversable):
    '''
        View:
            a lazy wrapper presenting a traversal over held sources

        begin()/end() give cursors on the mutable path, which is mutable
        only if every source was held writable. cbegin()/cend() are always
        read only.
    '''
    __slots__ = '_held', '__weakref__'

    def __init__(self, *sources : Held) -> None:
        self._held = _Sources()
        self._held.data = sources

    @property
    def _sources(self) -> tp.Tuple[Held, ...]:
        return self._held.data

    @abstractmethod
    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        pass

    def _consume(self) -> 'View':
        moved = copy.copy(self)
        moved._held = self._held.moved()
        return moved

    @property
    def bidirectional(self) -> bool:
        return False

    @property
    def countable(self) -> bool:
        return all(traits.can_count_and_is_empty(h.obj) for h in self._sources)

    @property
    def mutable(self) -> bool:
        return all(h.writable for h in self._sources)

    @property
    def owns_source(self) -> bool:
        return any(h.owned for h in self._sources)

    def begin(self) -> Cursor:
        return self._make_cursor(self.mutable, False, False)

    def end(self) -> Cursor:
        return self._make_cursor(self.mutable, False, True)

    def cbegin(self) -> Cursor:
        return self._make_cursor(False, False, False)

    def cend(self) -> Cursor:
        return self._make_cursor(False, False, True)

    def cursors(self) -> tp.Iterator[Cursor]:
        return walk(self.begin(), self.end())

    def __iter__(self) -> tp.Iterator:
        for cursor in self.cursors():
            yield cursor.value

    def size(self) -> int:
        return size_of(self._sources[0].obj)

    def empty(self) -> bool:
        return is_empty(self._sources[0].obj)

    @property
    def counts_by_traversal(self) -> bool:
        return any(isinstance(h.obj, View) and h.obj.counts_by_traversal for h in self._sources)

    def __len__(self) -> int:
        # len() is taken as a length hint by list(); it must never walk the view
        if self.counts_by_traversal:
            raise TypeError(f"'{type(self).__name__}' object counts its elements by traversal, use size()")
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def _count(self) -> int:
        if self.countable:
            return self.size()
        return count_between(self.cbegin(), self.cend())

    map = chained('Map')
    filter = chained('Filter')
    reverse = chained('Reverse')
    enumerate = chained('Enumerate')

    def __repr__(self) -> str:
        if not self._held.valid:
            return f'<{self.__class__.__name__} : consumed>'
        args = ', '.join(repr(h.obj) for h in self._sources)
        return f'{self.__class__.__name__}({args})'


class Bidirectional:
    ''' Reverse traversal entry points for views whose sources allow it '''
    __slots__ = ()

    @property
    def bidirectional(self) -> bool:
        return True

    def rbegin(self) -> Cursor:
        return self._make_cursor(self.mutable, True, False)

    def rend(self) -> Cursor:
        return self._make_cursor(self.mutable, True, True)

    def crbegin(self) -> Cursor:
        return self._make_cursor(False, True, False)

    def crend(self) -> Cursor:
        return self._make_cursor(False, True, True)

    def rcursors(self) -> tp.Iterator[Cursor]:
        return walk(self.rbegin(), self.rend())

    def __reversed__(self) -> tp.Iterator:
        for cursor in self.rcursors():
            yield cursor.value
