'''
Entry points: one factory per adapter.

Every factory holds its argument(s) (a bare argument is borrowed, see
iterviews.ownership for absorb and as_const), inspects their capabilities
and builds the bidirectional engine when the sources allow it, the
forward-only engine otherwise.

    values = [1, 2, 3, 4]
    for item in Iterate(values).filter(is_even).map(str).enumerate():
        print(item.position, item.value)
'''
import operator
import typing as tp

from . import traits
from . import engines
from .ownership import hold

__all__ = [
    'Enumerate',
    'Iterate',
    'Chain',
    'AsReferences',
    'Reverse',
    'Join',
    'Map',
    'Filter',
    'Zip',
    'MapKeys',
    'MapValues',
]

def Enumerate(iterable) -> engines.View:
    '''
    Pairs every element with its position.

        for item in Enumerate(['A', 'B', 'C']):
            print(f'{item.position}: {item.value}')

    prints 0: A, 1: B, 2: C. Walking it in reverse pairs positions 2, 1, 0.
    '''
    held = hold(iterable)
    if traits.can_traverse_both_ways(held.obj):
        return engines.Enumerated(held)
    return engines.ForwardEnumerated(held)


def Iterate(iterable) -> engines.View:
    ''' Exposes a collection without exposing the collection itself '''
    held = hold(iterable)
    if traits.can_traverse_both_ways(held.obj):
        return engines.Iterated(held)
    return engines.ForwardIterated(held)


def Chain(iterable) -> engines.View:
    ''' Walks every element of every collection in a collection of collections '''
    held = hold(iterable)
    if traits.is_nested_bidirectional(held.obj):
        return engines.Chained(held)
    return engines.ForwardChained(held)


def AsReferences(iterable) -> engines.View:
    '''
    Walks a collection of pointers as the values they point to.

    Collections of Box are dereferenced through the owning box, anything
    else must hold Refs (or weak references).
    '''
    held = hold(iterable)
    bidirectional = traits.can_traverse_both_ways(held.obj)
    if traits.is_unique_ownership_collection(held.obj):
        return engines.ReferencedUnique(held) if bidirectional else engines.ForwardReferencedUnique(held)
    return engines.Referenced(held) if bidirectional else engines.ForwardReferenced(held)


def Reverse(iterable) -> engines.View:
    held = hold(iterable)
    if not traits.can_traverse_both_ways(held.obj):
        raise TypeError(f"cannot reverse '{type(held.obj).__name__}' object: it only supports forward traversal")
    return engines.Reversed(held)


def Join(iterable_1, iterable_2) -> engines.View:
    ''' Walks the elements of the first collection, then the ones of the second '''
    first, second = hold(iterable_1), hold(iterable_2)
    if traits.are_bidirectional(first.obj, second.obj):
        return engines.Joined(first, second)
    return engines.ForwardJoined(first, second)


def Map(iterable, function : tp.Callable, by_ref : bool = False) -> engines.View:
    '''
    Applies function to every element.

    By default function receives the element's value, so it cannot replace
    the element even when the source is mutable. With by_ref=True function
    receives a Ref to the element instead, and may write through it when
    the source is mutable.
    '''
    held = hold(iterable)
    if traits.can_traverse_both_ways(held.obj):
        return engines.Mapped(held, function, by_ref)
    return engines.ForwardMapped(held, function, by_ref)


def MapKeys(mapping) -> engines.View:
    ''' Keys of a mapping, or first members of a collection of pairs '''
    if isinstance(mapping, tp.Mapping):
        mapping = mapping.items()
    return Map(mapping, operator.itemgetter(0))


def MapValues(mapping) -> engines.View:
    ''' Values of a mapping, or second members of a collection of pairs '''
    if isinstance(mapping, tp.Mapping):
        mapping = mapping.items()
    return Map(mapping, operator.itemgetter(1))


def Filter(iterable, predicate : tp.Callable[[tp.Any], bool]) -> engines.View:
    ''' Walks the elements for which predicate(element) is true '''
    held = hold(iterable)
    if traits.can_traverse_both_ways(held.obj):
        return engines.Filtered(held, predicate)
    return engines.ForwardFiltered(held, predicate)


def Zip(iterable_1, iterable_2) -> engines.View:
    '''
    Pairs the elements of both collections.

    Iteration stops as soon as one collection is exhausted, so the size is
    the size of the shortest collection.

        for pair in Zip([1, 2, 3, 4, 5], ['A', 'B', 'C']):
            print(pair.first, pair.second)

    prints 1 A, 2 B, 3 C.
    '''
    first, second = hold(iterable_1), hold(iterable_2)
    if traits.are_bidirectional(first.obj, second.obj):
        return engines.Zipped(first, second)
    return engines.ForwardZipped(first, second)
