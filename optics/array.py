""" Implements an immutable purescript-like Array, the container for list() results."""
from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable, TypeVar

from .functor import Functor

B = TypeVar('B')

@dataclass(frozen=True)
class Array[A](Functor[A]):
    """
    Represents an immutable array.
    """
    a: tuple[A, ...]

    def __iter__(self):
        """Iterates over the elements of the Array."""
        return iter(self.a)

    def __len__(self):
        return len(self.a)

    def __getitem__(self, index: int) -> A:
        return self.a[index]

    def __contains__(self, item: A) -> bool:
        """
        Membership test: allows "item in my_array".
        """
        return item in self.a

    @classmethod
    def make(cls, items: Iterable[A]) -> 'Array[A]':
        """Creates a new Array holding the given elements, in order."""
        return cls(tuple(items))

    def __rand__(self, other: Callable[[A], B]) -> 'Array[B]':
        """Defines the right-hand side of the map operation."""
        return self.map(other)

    def map(self, f: Callable[[A], B]) -> 'Array[B]':
        return Array(tuple(f(x) for x in self.a))

    def __repr__(self):
        """String representation of the Array."""
        return f"[{', '.join(map(repr, self.a))}]"
