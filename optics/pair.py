"""
This module defines Pair, the product payload that split() focuses on.
"""
from collections.abc import Callable
from typing import Iterator, Self, TypeVar
from dataclasses import dataclass

from .functor import Functor, map # pylint:disable=W0622
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


@dataclass(frozen=True)
class Pair[L, R](Functor[R]):
    """An immutable pair of values, the cartesian product L x R."""

    first: L
    second: R

    @classmethod
    def of(cls, first: A, second: B) -> "Pair[A, B]":
        """Creates a new instance of the specific subtype."""
        return cls(first, second)

    def first_map(self, f: Callable[[L], C]) -> "Pair[C, R]":
        """Applies a function to the first value, keeping the second."""
        return self.of(f(self.first), self.second)

    def second_map(self, f: Callable[[R], C]) -> "Pair[L, C]":
        """Applies a function to the second value, keeping the first."""
        return self.of(self.first, f(self.second))

    def on_both(self: "Pair[A, A]", f: Callable[[A], B]) -> "Pair[B, B]":
        """
        Applies the same function to both values of a homogeneous pair.
        The first value is computed before the second.
        """
        return self.of(f(self.first), f(self.second))

    def for_both(self: "Pair[A, A]", action: Callable[[A], object]) -> None:
        """Runs a side-effecting action on the first and then the second value."""
        action(self.first)
        action(self.second)

    def swap(self) -> "Pair[R, L]":
        """Returns the pair with its values exchanged."""
        return self.of(self.second, self.first)

    def map(self: Self, f: Callable[[R], C]) -> "Pair[L, C]":
        """Functor map over the second value, as for a Haskell tuple."""
        return self.second_map(f)

    def __rand__(self, other: Callable[[R], C]):
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[L | R]:
        yield self.first
        yield self.second

    def __getitem__(self, index: int):
        """Allows indexing into the Pair."""
        match index:
            case 0: return self.first
            case 1: return self.second
            case _: raise IndexError("Pair index out of range")

    def __repr__(self):
        """String representation of the Pair."""
        return f'Pair ({self.first!r}, {self.second!r})'
