""" Implementation of Maybe, the optional functor used by optional() lifts."""
from abc import ABCMeta
from enum import Enum, EnumMeta
from dataclasses import dataclass
from typing import Callable, TypeVar, overload

from .functor import Functor, map  # pylint:disable=redefined-builtin
from .functions import ap

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

type Maybe[A] = Just[A] | _Nothing


class NothingMaybeMeta(ABCMeta, EnumMeta):
    pass


class _Nothing(Functor, Enum, metaclass=NothingMaybeMeta):
    NOTHING = "Nothing"

    def __rand__(self, other: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def __mul__(self, other: Maybe) -> "_Nothing":
        return Nothing

    def _apply(self, other: Maybe) -> "_Nothing":
        return Nothing

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def _bind(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

    def pure(self, value):
        return Nothing

    def __eq__(self, other) -> bool:
        """Equality check for Nothing."""
        return isinstance(other, _Nothing)

    def __hash__(self) -> int:
        return hash(_Nothing)

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING

@dataclass(frozen=True)
class Just[A](Functor[A]):
    """A present optional value."""
    a: A

    @classmethod
    def make(cls, value) -> 'Just':
        return Just(value)

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return self.make(f(self.a))

    def __rand__(self, other: Callable[[A], B]) -> "Just[B]":
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    @overload
    def __mul__(self: "Just[Callable[[B], C]]", other: "Just[B]") -> "Just[C]": ...
    @overload
    def __mul__(self: "Just[Callable[[B], C]]", other: _Nothing) -> "_Nothing": ...

    def __mul__(self: "Just[Callable[[B], C]]", other: "Maybe[B]") -> Maybe[C]:
        return self._apply(other)

    def _apply(self: "Just[Callable[[B], C]]", other: Maybe[B]) -> Maybe[C]:
        """Applies a function wrapped in Just to a value wrapped in Maybe."""
        return ap(self, other, Just)

    def __rshift__(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Chains computations by passing the value inside Just to function m."""
        return self._bind(m)

    def _bind(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return m(self.a)

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"

    @classmethod
    def pure(cls, value: A) -> 'Just[A]':
        """Wraps a value in the Just context."""
        return cls(value)


def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default

def to_maybe(value: A | None) -> Maybe[A]:
    """Converts a possibly-None value into a Maybe."""
    return Nothing if value is None else Just(value)

def is_just(m: Maybe[A]) -> bool:
    """True when the Maybe holds a value."""
    return isinstance(m, Just)
