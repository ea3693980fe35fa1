import typing as tp

__all__ = ['ValidContainer']

T = tp.TypeVar('T')

class ValidContainer(tp.Generic[T]):
    '''wrapper class that allows data to be marked invalid, or moved out'''
    __slots__ = '_data', '_valid'

    invalid_message : tp.ClassVar[str] = 'Data is invalid'

    def __init__(self, data : tp.Optional[T] = None, valid : bool = False) -> None:
        self._data = data
        self._valid = valid

    def mark_invalid(self) -> None:
        self._data = None
        self._valid = False

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def data(self) -> T:
        if not self.valid:
            raise AttributeError(self.invalid_message)
        return self._data

    @data.setter
    def data(self, data : T) -> None:
        self._valid = True
        self._data = data

    def moved(self) -> 'ValidContainer[T]':
        ''' Transfer the data to a new container, invalidating this one '''
        other = type(self)(self.data, True)
        self.mark_invalid()
        return other

    def __repr__(self) -> str:
        if self.valid:
            return repr(self._data)
        else:
            return 'Invalid'
