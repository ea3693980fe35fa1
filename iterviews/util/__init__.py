from .classutil import ValidContainer
from .views import IterableView, CollectionView, ReversibleView, MapView, SequenceView, SetView, readonly
