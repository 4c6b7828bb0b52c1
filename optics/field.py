"""
References to single storage cells, the capability through which
FieldLens mutates structures in place.
"""
from abc import ABC, abstractmethod
from collections.abc import Callable, MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import Any


class FieldReference[T](ABC):
    """
    Read/write access to one storage cell of type T.

    Implementations must make set(get()) a no-op as observed by a
    later get(). No synchronization is performed.
    """

    @abstractmethod
    def get(self) -> T:
        """Reads the current value of the cell."""

    @abstractmethod
    def set(self, value: T) -> None:
        """Overwrites the value of the cell."""

    def transform(self, f: Callable[[T], T]) -> T:
        """
        Gets the value, transforms it with f, sets the cell to the result
        and returns the new value.
        """
        result = f(self.get())
        self.set(result)
        return result

    @staticmethod
    def of(setter: Callable[[T], object], getter: Callable[[], T]) \
        -> "FieldReference[T]":
        """
        Builds a reference from an explicit setter and getter.
        """
        return _Accessors(setter, getter)


@dataclass(frozen=True)
class _Accessors[T](FieldReference[T]):
    setter: Callable[[T], object]
    getter: Callable[[], T]

    def get(self) -> T:
        return self.getter()

    def set(self, value: T) -> None:
        self.setter(value)


@dataclass(eq=False)
class Field[T](FieldReference[T]):
    """
    A plain in-memory cell. A None value marks the cell as empty.
    Cells compare by identity, not by content.
    """
    value: T | None = None

    @classmethod
    def init_null(cls) -> "Field[T]":
        """A Field holding no value."""
        return cls(None)

    @classmethod
    def with_default(cls, value: T) -> "Field[T]":
        """A Field holding value."""
        return cls(value)

    def get(self) -> T:
        return self.value  # type: ignore[return-value]

    def set(self, value: T) -> None:
        self.value = value


@dataclass(frozen=True)
class AttributeReference(FieldReference[Any]):
    """
    References an attribute of an ordinary object through getattr/setattr.
    """
    owner: Any
    name: str

    def get(self) -> Any:
        return getattr(self.owner, self.name)

    def set(self, value: Any) -> None:
        setattr(self.owner, self.name, value)


@dataclass(frozen=True)
class ItemReference(FieldReference[Any]):
    """
    References container[key] of a mutable mapping or sequence.
    """
    container: MutableMapping[Any, Any] | MutableSequence[Any]
    key: Any

    def get(self) -> Any:
        return self.container[self.key]

    def set(self, value: Any) -> None:
        self.container[self.key] = value
