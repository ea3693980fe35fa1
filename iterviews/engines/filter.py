import typing as tp

from ..cursors import Cursor, count_between
from ..ownership import Held
from ..refs import Ref
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardFiltered', 'Filtered']

class FilteredCursor(Cursor):
    '''
    Invariant: when not at the end, the cursor denotes an element for which
    the predicate holds. Rejected elements are skipped on construction and
    after every advance.
    '''
    __slots__ = '_inner', '_end', '_predicate'

    def __init__(self, inner : Cursor, end : Cursor, predicate : tp.Callable[[tp.Any], bool]) -> None:
        self._inner = inner
        self._end = end
        self._predicate = predicate
        self._skip_rejected()

    def _skip_rejected(self) -> None:
        while self._inner != self._end and not self._predicate(self._inner.value):
            self._inner.advance()

    @property
    def at_end(self) -> bool:
        return self._inner == self._end

    def advance(self) -> None:
        self._inner.advance()
        self._skip_rejected()

    def ref(self) -> Ref:
        return self._inner.ref()

    @property
    def writable(self) -> bool:
        return self._inner.writable

    def _same_position(self, other : 'FilteredCursor') -> bool:
        return self._inner == other._inner


class _FilteredBase(View):
    __slots__ = '_predicate',

    def __init__(self, source : Held, predicate : tp.Callable[[tp.Any], bool]) -> None:
        super().__init__(source)
        self._predicate = predicate

    @property
    def predicate(self) -> tp.Callable[[tp.Any], bool]:
        return self._predicate

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        source = self._sources[0]
        return FilteredCursor(
                source_cursor(source, writable, reverse, end),
                source_cursor(source, writable, reverse, True),
                self._predicate)

    @property
    def counts_by_traversal(self) -> bool:
        return True

    def size(self) -> int:
        if not self.countable:
            raise TypeError(f"object of type '{type(self).__name__}' cannot count its elements")
        return count_between(self.cbegin(), self.cend())

    def empty(self) -> bool:
        return self.cbegin() == self.cend()


class ForwardFiltered(_FilteredBase):
    __slots__ = ()


class Filtered(Bidirectional, _FilteredBase):
    __slots__ = ()
