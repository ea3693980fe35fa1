'''
Shared source types for the view tests.

Python lists and tuples cover the bidirectional, countable sources; these
classes cover the capability combinations the builtins do not.
'''

import pytest


class ForwardList:
    '''Forward traversal only: no len(), no reversed(), no indexing'''

    def __init__(self, values=()):
        self._values = list(values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return f'ForwardList({self._values!r})'


class SizedForwardList(ForwardList):
    '''Forward traversal with a count'''

    def __len__(self):
        return len(self._values)


class ReversibleBag:
    '''Traversal from both ends and a count, but no indexing'''

    def __init__(self, values=()):
        self._values = list(values)

    def __iter__(self):
        return iter(self._values)

    def __reversed__(self):
        return reversed(self._values)

    def __len__(self):
        return len(self._values)


def increase_all(view):
    '''Add one to every element through the view's cursors'''
    for cursor in view.cursors():
        cursor.value += 1
    return view


def double_all(view):
    '''Double every element through the view's cursors'''
    for cursor in view.cursors():
        cursor.value *= 2
    return view


def is_odd(value):
    return value % 2 != 0


@pytest.fixture
def chars():
    return ['A', 'B', 'C']


@pytest.fixture
def numbers():
    return [1, 3, 5]
