'''
Ownership tags

A view either borrows its source (the caller keeps it alive) or absorbs it
(the view is then its sole owner). Independently, access may be read only.
The choice is explicit and fixed when the view is built.
'''
import typing as tp
import warnings

import attr

from . import traits
from .util import views

__all__ = ['Held', 'borrow', 'absorb', 'as_const', 'hold']

@attr.s(slots=True, frozen=True, auto_attribs=True)
class Held:
    obj      : tp.Any
    owned    : bool = False
    writable : bool = False


def borrow(obj) -> Held:
    if isinstance(obj, Held):
        return attr.evolve(obj, owned=False)
    return Held(obj, False, traits.is_mutable(obj))


def absorb(obj) -> Held:
    ''' The returned record makes the view the only owner of obj '''
    if isinstance(obj, Held):
        return attr.evolve(obj, owned=True)
    return Held(obj, True, traits.is_mutable(obj))


def as_const(obj):
    '''
    Read-only access to obj.

    Plain collections are wrapped in a read-only adapter, views and held
    records lose their writable flag.
    '''
    if isinstance(obj, Held):
        return attr.evolve(obj, writable=False)
    elif isinstance(obj, traits.Traversable):
        return Held(obj, False, False)
    return views.readonly(obj)


def hold(obj) -> Held:
    held = obj if isinstance(obj, Held) else borrow(obj)
    if traits.is_one_shot(held.obj):
        warnings.warn(
            f'{type(held.obj).__name__} is a one-shot iterator, '
            'views over it can only be traversed once',
            stacklevel=3)
    return held
