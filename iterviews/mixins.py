'''
Behaviour shared by every view, provided as plain helpers rather than
base classes: size and emptiness delegated to a source, and the chained
operator surface (view.map(f).filter(p).reverse().enumerate()).
'''
import typing as tp

from . import traits
from .ownership import absorb

__all__ = ['size_of', 'is_empty', 'chained']

_MISSING = object()

def size_of(obj) -> int:
    if not traits.can_count_and_is_empty(obj):
        raise TypeError(f"object of type '{type(obj).__name__}' cannot count its elements")
    elif isinstance(obj, traits.Traversable):
        return obj.size()
    return len(obj)


def is_empty(obj) -> bool:
    if isinstance(obj, traits.Traversable):
        return obj.empty()
    elif traits.can_count_and_is_empty(obj):
        return len(obj) == 0
    return next(iter(obj), _MISSING) is _MISSING


def chained(factory_name : str) -> tp.Callable:
    '''
    Make a view method that moves the view into a new one built by the
    named factory. The receiver is unusable afterwards, so a composed view
    can never outlive an intermediate it refers to.
    '''
    def operator(self, *args, **kwargs):
        from . import factories
        factory = getattr(factories, factory_name)
        return factory(absorb(self._consume()), *args, **kwargs)

    operator.__name__ = operator.__qualname__ = factory_name.lower()
    operator.__doc__ = f'Consume this view and return {factory_name}(self, ...)'
    return operator
