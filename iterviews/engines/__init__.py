from .base import View, Bidirectional, source_cursor
from .chain import ForwardChained, Chained
from .enumerate import Item, ForwardEnumerated, Enumerated
from .filter import ForwardFiltered, Filtered
from .iterate import ForwardIterated, Iterated
from .join import ForwardJoined, Joined
from .map import ForwardMapped, Mapped
from .references import ForwardReferenced, Referenced, ForwardReferencedUnique, ReferencedUnique
from .reverse import Reversed
from .zip import ZippedPair, ForwardZipped, Zipped
