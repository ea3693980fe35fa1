from ..cursors import Cursor
from .base import View, Bidirectional, source_cursor

__all__ = ['Reversed']

class Reversed(Bidirectional, View):
    '''
    Walks a bidirectional source back to front.

    There is no forward-only variant: the factory refuses sources that
    cannot be traversed from the end.
    '''
    __slots__ = ()

    def _make_cursor(self, writable : bool, reverse : bool, end : bool) -> Cursor:
        return source_cursor(self._sources[0], writable, not reverse, end)
