from .factories import (
    Enumerate,
    Iterate,
    Chain,
    AsReferences,
    Reverse,
    Join,
    Map,
    Filter,
    Zip,
    MapKeys,
    MapValues,
)
from .ownership import Held, borrow, absorb, as_const
from .refs import Ref, SlotRef, AttrRef, ValueRef, ConstRef, Box, ref_to
from .cursors import Cursor, walk
from .engines import View, Item, ZippedPair

__version__ = '0.1.0'
