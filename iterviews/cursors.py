import typing as tp
from abc import ABCMeta, abstractmethod

from .refs import Ref, SlotRef, ValueRef

__all__ = ['Cursor', 'IndexCursor', 'IterCursor', 'walk', 'count_between']

class Cursor(metaclass=ABCMeta):
    '''
        Cursor:
            a position in a traversal, either at an element or at the end

        Cursors compare equal iff they denote the same position.
        Advancing a cursor that is already at the end is undefined.
    '''
    __slots__ = ()

    @property
    @abstractmethod
    def at_end(self) -> bool:
        pass

    @abstractmethod
    def advance(self) -> None:
        pass

    @abstractmethod
    def ref(self) -> Ref:
        pass

    @abstractmethod
    def _same_position(self, other : 'Cursor') -> bool:
        pass

    @property
    def writable(self) -> bool:
        return False

    @property
    def value(self) -> tp.Any:
        return self.ref().get()

    @value.setter
    def value(self, value) -> None:
        self.ref().set(value)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._same_position(other)

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self) -> str:
        if self.at_end:
            return f'<{self.__class__.__name__} : end>'
        return f'<{self.__class__.__name__} : {self.value!r}>'


class IndexCursor(Cursor):
    ''' Position in a sequence, walking it with a fixed step '''
    __slots__ = '_seq', '_index', '_step', '_writable'

    _seq : tp.Sequence
    _index : int
    _step : int
    _writable : bool

    def __init__(self, seq : tp.Sequence, index : int, step : int = 1, writable : bool = False) -> None:
        self._seq = seq
        self._index = index
        self._step = step
        self._writable = writable

    @property
    def at_end(self) -> bool:
        return not 0 <= self._index < len(self._seq)

    def advance(self) -> None:
        self._index += self._step

    def ref(self) -> Ref:
        return SlotRef(self._seq, self._index, self._writable)

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def value(self) -> tp.Any:
        return self._seq[self._index]

    @value.setter
    def value(self, value) -> None:
        self.ref().set(value)

    def _same_position(self, other : 'IndexCursor') -> bool:
        return (self._seq is other._seq
                and self._index == other._index
                and self._step == other._step)


_END = object()

class IterCursor(Cursor):
    '''
    Position in a plain iterable, one element ahead of its iterator.

    Only the element under the cursor is kept, so the cursor is read only.
    '''
    __slots__ = '_origin', '_reverse', '_it', '_current', '_position'

    def __init__(self, origin : tp.Iterable, reverse : bool = False, start : bool = True) -> None:
        self._origin = origin
        self._reverse = reverse
        self._position = 0
        if start:
            self._it = reversed(origin) if reverse else iter(origin)
            self._current = next(self._it, _END)
        else:
            self._it = None
            self._current = _END

    @property
    def at_end(self) -> bool:
        return self._current is _END

    def advance(self) -> None:
        self._current = next(self._it, _END)
        self._position += 1

    def ref(self) -> Ref:
        return ValueRef(self._current)

    @property
    def value(self) -> tp.Any:
        return self._current

    @value.setter
    def value(self, value) -> None:
        self.ref().set(value)

    def _same_position(self, other : 'IterCursor') -> bool:
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        return (self._origin is other._origin
                and self._reverse == other._reverse
                and self._position == other._position)


def walk(begin : Cursor, end : Cursor) -> tp.Iterator[Cursor]:
    ''' Yield begin at every position up to end; the same cursor object is reused '''
    while begin != end:
        yield begin
        begin.advance()


def count_between(begin : Cursor, end : Cursor) -> int:
    return sum(1 for _ in walk(begin, end))
