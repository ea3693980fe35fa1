from ..cursors import Cursor
from .base import View, Bidirectional, source_cursor

__all__ = ['ForwardIterated', 'Iterated']

class _IteratedBase(View):
    ''' Exposes a collection without exposing the collection itself '''
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        return source_cursor(self._sources[0], writable, reverse, end)


class ForwardIterated(_IteratedBase):
    __slots__ = ()


class Iterated(Bidirectional, _IteratedBase):
    __slots__ = ()
