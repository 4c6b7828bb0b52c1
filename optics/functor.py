""" Abstract base class for the payload functors (Maybe, Pair, Array...) """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)

class Functor[A](ABC):
    """Base class for the value containers that lenses focus into.

    Sub-classes override map so that the functor laws hold:
        x.map(identity) == x
        x.map(comp(f, g)) == x.map(g).map(f)
    The mapped() lens relies on these laws to stay a lawful lens.
    """

    @abstractmethod
    def __rand__(self, other):
        """Defines the right-hand side of the map operation (f & x)."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to the value(s) inside the Functor."""

def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value inside the functor
    'f' using its map method."""
    return f.map(fn)
