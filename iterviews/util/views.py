import typing as tp
'''A collection of adapters that give read-only access to a collection'''

__all__ = ['IterableView', 'CollectionView', 'ReversibleView', 'MapView', 'SequenceView', 'SetView', 'readonly']

T_co = tp.TypeVar('T_co', covariant=True)
KT = tp.TypeVar('KT')
VT_co = tp.TypeVar('VT_co', covariant=True)

class IterableView(tp.Iterable[T_co]):
    __slots__ = '_obj',

    _obj : tp.Iterable[T_co]

    def __init__(self, obj : tp.Iterable[T_co]) -> None:
        self._obj = obj

    def __iter__(self) -> tp.Iterator[T_co]:
        return self._obj.__iter__()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._obj.__repr__()})'


class CollectionView(IterableView[T_co], tp.Collection[T_co]):
    __slots__ = ()

    _obj : tp.Collection[T_co]

    def __contains__(self, elem) -> bool:
        return self._obj.__contains__(elem)

    def __len__(self) -> int:
        return self._obj.__len__()


class ReversibleView(CollectionView[T_co], tp.Reversible[T_co]):
    __slots__ = ()

    def __reversed__(self) -> tp.Iterator[T_co]:
        return self._obj.__reversed__()


class MapView(CollectionView[KT], tp.Mapping[KT, VT_co]):
    __slots__ = ()

    _obj : tp.Mapping[KT, VT_co]

    def __getitem__(self, idx : KT) -> VT_co:
        return self._obj.__getitem__(idx)

    def __reversed__(self) -> tp.Iterator[KT]:
        return reversed(self._obj)


class SequenceView(CollectionView[T_co], tp.Sequence[T_co]):
    __slots__ = ()

    _obj : tp.Sequence[T_co]

    @tp.overload
    def __getitem__(self, idx : int) -> T_co:
        ...

    @tp.overload
    def __getitem__(self, idx : slice) -> tp.Sequence[T_co]:
        ...

    def __getitem__(self, idx):
        return self._obj.__getitem__(idx)


class SetView(CollectionView[T_co], tp.AbstractSet[T_co]):
    __slots__ = ()
    _obj : tp.AbstractSet[T_co]


def readonly(obj : tp.Iterable[T_co]) -> IterableView[T_co]:
    ''' Wrap obj in the narrowest read-only adapter that keeps its capabilities '''
    if isinstance(obj, IterableView):
        return obj
    elif isinstance(obj, tp.Sequence):
        return SequenceView(obj)
    elif isinstance(obj, tp.Mapping):
        return MapView(obj)
    elif isinstance(obj, tp.Collection) and isinstance(obj, tp.Reversible):
        return ReversibleView(obj)
    elif isinstance(obj, tp.AbstractSet):
        return SetView(obj)
    elif isinstance(obj, tp.Collection):
        return CollectionView(obj)
    else:
        return IterableView(obj)
