"""
Implementation of DiscrimUnion, the two-case sum payload (A U B).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, TypeVar, Callable

from .functor import Functor, map # pylint:disable=redefined-builtin
from .maybe import Just, Maybe, Nothing

L = TypeVar("L")
R = TypeVar("R")
C = TypeVar("C")
D = TypeVar("D")

type DiscrimUnion[L, R] = Left[L] | Right[R]

@dataclass(frozen=True)
class Left[L](Functor[L]):
    """
    The first case of a discriminated union.
    """
    l: L

    def first(self) -> Maybe[L]:
        """The held value, since this is the first case."""
        return Just(self.l)

    def second(self) -> Maybe[Any]:
        """Always Nothing for the first case."""
        return Nothing

    def left_map(self, f: Callable[[L], C]) -> Left[C]:
        """Transforms the held value."""
        return Left(f(self.l))

    def right_map(self, f: Callable[[Any], C]) -> Left[L]:  # pylint: disable=unused-argument
        """Leaves the first case untouched."""
        return self

    def either(self, on_left: Callable[[L], C], on_right: Callable[[Any], C]) -> C:  # pylint: disable=unused-argument
        """Folds the union by dispatching on its case."""
        return on_left(self.l)

    def map(self, f: Callable[[Any], C]) -> Left[L]:
        return self

    def __rand__(self, other: Callable[[Any], C]) -> Left[L]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"

@dataclass(frozen=True)
class Right[R](Functor[R]):
    """
    The second case of a discriminated union.
    """
    r: R

    def first(self) -> Maybe[Any]:
        """Always Nothing for the second case."""
        return Nothing

    def second(self) -> Maybe[R]:
        """The held value, since this is the second case."""
        return Just(self.r)

    def left_map(self, f: Callable[[Any], C]) -> Right[R]:  # pylint: disable=unused-argument
        """Leaves the second case untouched."""
        return self

    def right_map(self, f: Callable[[R], D]) -> Right[D]:
        """Transforms the held value."""
        return Right(f(self.r))

    def either(self, on_left: Callable[[Any], C], on_right: Callable[[R], C]) -> C:  # pylint: disable=unused-argument
        """Folds the union by dispatching on its case."""
        return on_right(self.r)

    def map(self, f: Callable[[R], D]) -> Right[D]:
        return self.right_map(f)

    def __rand__(self, other: Callable[[R], D]) -> Right[D]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"
