'''
Handles on single storage slots.

Python has no references to list elements, so a cursor hands out a Ref
that knows how to read and (when allowed) replace the element it denotes.
Refs double as the plain pointers understood by AsReferences.
'''
import typing as tp
import weakref
from abc import ABCMeta, abstractmethod

import attr

__all__ = ['Ref', 'SlotRef', 'AttrRef', 'ValueRef', 'ConstRef', 'Box', 'ref_to', 'deref', 'deref_unique']

class Ref(metaclass=ABCMeta):
    __slots__ = ()

    @abstractmethod
    def get(self) -> tp.Any:
        pass

    def set(self, value) -> None:
        raise TypeError(f"'{type(self).__name__}' is read only")

    @property
    def writable(self) -> bool:
        return False

    @property
    def value(self) -> tp.Any:
        return self.get()

    @value.setter
    def value(self, value) -> None:
        self.set(value)

    def readonly(self) -> 'Ref':
        if self.writable:
            return ConstRef(self)
        return self

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} : {self.get()!r}>'


class SlotRef(Ref):
    ''' container[key] '''
    __slots__ = '_container', '_key', '_writable'

    def __init__(self, container, key, writable : bool = True) -> None:
        self._container = container
        self._key = key
        self._writable = writable

    def get(self):
        return self._container[self._key]

    def set(self, value) -> None:
        if not self._writable:
            super().set(value)
        self._container[self._key] = value

    @property
    def writable(self) -> bool:
        return self._writable

    def __eq__(self, other) -> bool:
        return (isinstance(other, SlotRef)
                and self._container is other._container
                and self._key == other._key)

    def __ne__(self, other) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((id(self._container), self._key))


class AttrRef(Ref):
    ''' getattr(obj, name) '''
    __slots__ = '_obj', '_name', '_writable'

    def __init__(self, obj, name : str, writable : bool = True) -> None:
        self._obj = obj
        self._name = name
        self._writable = writable

    def get(self):
        return getattr(self._obj, self._name)

    def set(self, value) -> None:
        if not self._writable:
            super().set(value)
        setattr(self._obj, self._name, value)

    @property
    def writable(self) -> bool:
        return self._writable


class ValueRef(Ref):
    ''' A computed value; there is no slot to write back to '''
    __slots__ = '_value',

    def __init__(self, value) -> None:
        self._value = value

    def get(self):
        return self._value


class ConstRef(Ref):
    __slots__ = '_ref',

    def __init__(self, ref : Ref) -> None:
        self._ref = ref

    def get(self):
        return self._ref.get()


@attr.s(slots=True, eq=False, repr=False)
class Box:
    '''
        Box:
            an exclusively owned pointer to a value

        The box is the only owner of its value; collections of boxes are
        dereferenced by AsReferences through the box.
    '''
    value : tp.Any = attr.ib(default=None)

    def get(self) -> tp.Any:
        return self.value

    def set(self, value) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f'Box({self.value!r})'


def ref_to(container, key) -> SlotRef:
    writable = isinstance(container, (tp.MutableSequence, tp.MutableMapping))
    return SlotRef(container, key, writable)


def deref(pointer, writable : bool) -> Ref:
    '''
    Dereference a plain (non-owning) pointer.

    A Box is accepted too, for collections that could not be recognized
    as boxes up front.
    '''
    if isinstance(pointer, Box):
        return deref_unique(pointer, writable)
    elif isinstance(pointer, weakref.ReferenceType):
        target = pointer()
        if target is None:
            raise TypeError('dereferencing a dead weak reference')
        return ValueRef(target)
    elif isinstance(pointer, Ref):
        return pointer if writable else pointer.readonly()
    raise TypeError(f"'{type(pointer).__name__}' object is not a pointer")


def deref_unique(box : Box, writable : bool) -> Ref:
    ''' Dereference an owning pointer '''
    if not isinstance(box, Box):
        raise TypeError(f"'{type(box).__name__}' object is not a Box")
    return AttrRef(box, 'value', writable)
