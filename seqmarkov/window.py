"""
Optional symbols and memory windows.

A memory window holds the last `order` outcomes seen while walking a
sequence. Positions that have no history yet hold the terminator, so the
window at the start of every sequence is all-terminator.
"""
from functools import total_ordering
from numbers import Integral


@total_ordering
class _Terminator:
    """End-of-sequence marker. There is exactly one instance, TERMINATOR."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    is_terminator = True

    @property
    def sort_key(self):
        return (0,)

    def __eq__(self, other):
        return other is self

    def __lt__(self, other):
        if not isinstance(other, (_Terminator, Symbol)):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self):
        return hash(_Terminator)

    def __repr__(self):
        return 'TERMINATOR'

    def __reduce__(self):
        return (_Terminator, ())


TERMINATOR = _Terminator()


@total_ordering
class Symbol:
    """A concrete symbol observed in a training sequence."""

    __slots__ = ('value',)

    is_terminator = False

    def __init__(self, value):
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError('Symbol is immutable')

    @property
    def sort_key(self):
        return (1, self.value)

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.value == other.value
        if isinstance(other, _Terminator):
            return False
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, (_Terminator, Symbol)):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self):
        return hash((Symbol, self.value))

    def __repr__(self):
        return f'Symbol({self.value!r})'

    def __reduce__(self):
        return (Symbol, (self.value,))


def wrap(value):
    """Lift a raw value into an optional symbol; optional symbols pass through."""
    if isinstance(value, (Symbol, _Terminator)):
        return value
    return Symbol(value)


class MemoryWindow(tuple):
    """
    Fixed-length, immutable history key.

    Equality and ordering are the tuple's, so two windows match only if
    every position holds the same outcome (position matters).
    """

    __slots__ = ()

    def __new__(cls, items=()):
        return super().__new__(cls, (wrap(item) for item in items))

    @classmethod
    def initial(cls, order):
        """The all-terminator window used at the start of every sequence."""
        if not isinstance(order, Integral) or isinstance(order, bool) or order < 1:
            raise ValueError(f'order must be a positive integer, got {order!r}')
        return cls((TERMINATOR,) * int(order))

    @property
    def order(self):
        return len(self)

    def shift(self, outcome):
        """
        Return a new window with the oldest entry dropped and `outcome`
        appended. The receiver is left untouched.
        """
        return MemoryWindow(self[1:] + (wrap(outcome),))

    def __repr__(self):
        inner = ', '.join('∅' if item is TERMINATOR else repr(item.value) for item in self)
        return f'MemoryWindow([{inner}])'


def shift(window, outcome):
    """Functional alias of MemoryWindow.shift."""
    return window.shift(outcome)
