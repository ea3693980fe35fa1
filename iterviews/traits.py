'''
Capability traits

Predicates over sources that decide which engine variant a factory builds.
They are evaluated once, when a view is constructed.
'''
import typing as tp
from abc import ABCMeta, abstractmethod

from .refs import Box

__all__ = [
    'Traversable',
    'can_count_and_is_empty',
    'can_traverse_both_ways',
    'are_bidirectional',
    'is_nested_bidirectional',
    'is_unique_ownership_collection',
    'is_mutable',
    'is_one_shot',
]

_MISSING = object()

class Traversable(metaclass=ABCMeta):
    ''' Sources that report their capabilities themselves (views) '''
    __slots__ = ()

    @property
    @abstractmethod
    def bidirectional(self) -> bool:
        pass

    @property
    @abstractmethod
    def countable(self) -> bool:
        pass

    @property
    @abstractmethod
    def mutable(self) -> bool:
        pass


def is_one_shot(obj) -> bool:
    return isinstance(obj, tp.Iterator)


def can_count_and_is_empty(obj) -> bool:
    if isinstance(obj, Traversable):
        return obj.countable
    return isinstance(obj, tp.Sized)


def can_traverse_both_ways(obj) -> bool:
    if isinstance(obj, Traversable):
        return obj.bidirectional
    return isinstance(obj, (tp.Sequence, tp.Reversible))


def are_bidirectional(*objs) -> bool:
    return all(map(can_traverse_both_ways, objs))


def is_nested_bidirectional(obj) -> bool:
    if not can_traverse_both_ways(obj) or is_one_shot(obj):
        return False
    return all(map(can_traverse_both_ways, obj))


def is_unique_ownership_collection(obj) -> bool:
    # peeking into a view would run its functions at construction
    if is_one_shot(obj) or isinstance(obj, Traversable):
        return False
    return isinstance(next(iter(obj), _MISSING), Box)


def is_mutable(obj) -> bool:
    if isinstance(obj, Traversable):
        return obj.mutable
    return isinstance(obj, tp.MutableSequence)
