"""
The canonical lens library: lenses into collections, optional values,
pairs, unions and functions, plus split()/both_of() for focusing on
two parts of one structure at once.
"""
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import reduce
from itertools import chain as iter_chain
from typing import Any

from .field import AttributeReference, ItemReference
from .functions import comp
from .functor import Functor
from .lens import FieldLens, FieldObtainer, Lens, SelfLens, as_lens
from .maybe import Just, Maybe, Nothing
from .pair import Pair
from .union import DiscrimUnion


def id_[S]() -> SelfLens[S, S]:
    """
    The identity lens, which hands a transformation back unchanged.
    """
    return SelfLens(lambda f: f)

# --- Collections ---

def list_elements[A, B]() -> Lens[Iterable[A], list[B], A, B]:
    """
    Maps a transformation over the elements of a sequence, into a list.
    """
    return Lens(lambda f: lambda xs: [f(x) for x in xs])

def list_reduce[A]() -> Lens[Sequence[A], Maybe[A], A, Callable[[A], A]]:
    """
    Focuses on curried combiners a -> (b -> a . b) to reduce a sequence,
    left to right, to an optional value (Nothing when it is empty).
    The combiner should be associative.
    """
    def run(f: Callable[[A], Callable[[A], A]]) -> Callable[[Sequence[A]], Maybe[A]]:
        def reduced(xs: Sequence[A]) -> Maybe[A]:
            if not xs:
                return Nothing
            return Just(reduce(lambda a, b: f(a)(b), xs))
        return reduced
    return Lens(run)

def set_elements[A, B]() -> Lens[set[A] | frozenset[A], set[B] | frozenset[B], A, B]:
    """
    Maps a transformation over the elements of a set, keeping frozensets
    frozen. Elements that map to the same value collapse.
    """
    def run(f: Callable[[A], B]):
        def mapped_set(s):
            result = {f(x) for x in s}
            return frozenset(result) if isinstance(s, frozenset) else result
        return mapped_set
    return Lens(run)

def stream_elements[A, B]() -> Lens[Iterable[A], Iterator[B], A, B]:
    """
    Lazily maps a transformation over an iterable.
    """
    return Lens(lambda f: lambda xs: map(f, xs), lazy=True)

def flat_map_stream[A, B]() -> Lens[Iterable[A], Iterator[B], A, Iterable[B]]:
    """
    Lazily maps an A -> Iterable[B] over an iterable and flattens the result.
    """
    return Lens(lambda f: lambda xs: iter_chain.from_iterable(map(f, xs)),
                lazy=True)

def mapped[A, B]() -> Lens[Functor[A], Functor[B], A, B]:
    """
    Maps a transformation over any Functor (Array, Maybe, Pair...).
    """
    return Lens(lambda f: lambda fa: fa.map(f))

# --- Optional values ---

def optional_element[A, B]() -> Lens[Maybe[A], Maybe[B], A, B]:
    """
    Maps a transformation over a value wrapped in Maybe.
    """
    return Lens(lambda f: lambda m: m.map(f))

def flat_map_optional[A, B]() -> Lens[Maybe[A], Maybe[B], A, Maybe[B]]:
    """
    Binds an A -> Maybe[B] over a Maybe[A].
    """
    return Lens(lambda f: lambda m: m >> f)

# --- Functions ---

def function_arg[A, B, C]() -> Lens[Callable[[A], B], Callable[[C], B], C, A]:
    """
    Focuses on the argument of a function, by precomposition.
    Contravariant: the transformation runs before the function.
    """
    return Lens(lambda morphism: lambda g: comp(g, morphism))

def function_return[A, B, C]() -> Lens[Callable[[A], B], Callable[[A], C], B, C]:
    """
    Focuses on the return value of a function, by postcomposition.
    """
    return Lens(lambda morphism: lambda g: comp(morphism, g))

# --- Pairs and unions ---

def pair_first[A, B, C]() -> Lens[Pair[A, B], Pair[C, B], A, C]:
    """
    Focuses on the first element of a pair.
    """
    return Lens(lambda f: lambda pair: pair.first_map(f))

def pair_second[A, B, C]() -> Lens[Pair[A, B], Pair[A, C], B, C]:
    """
    Focuses on the second element of a pair.
    """
    return Lens(lambda f: lambda pair: pair.second_map(f))

def pair_both[A, B]() -> Lens[Pair[A, A], Pair[B, B], A, B]:
    """
    Focuses simultaneously on both elements of a homogeneous pair,
    first then second.
    """
    return Lens(lambda f: lambda pair: pair.on_both(f))

def union_left[A, B, C]() -> Lens[DiscrimUnion[A, C], DiscrimUnion[B, C], A, B]:
    """
    Focuses on the first branch of a discriminated union, if it holds one.
    """
    return Lens(lambda f: lambda u: u.left_map(f))

def union_right[A, B, C]() -> Lens[DiscrimUnion[C, A], DiscrimUnion[C, B], A, B]:
    """
    Focuses on the second branch of a discriminated union, if it holds one.
    """
    return Lens(lambda f: lambda u: u.right_map(f))

# --- Mutable containers ---

def attribute(name: str) -> FieldLens[Any, Any]:
    """
    A mutating lens over a plain attribute of an object.
    """
    return FieldLens(lambda owner: AttributeReference(owner, name))

def item(key: Any) -> FieldLens[Any, Any]:
    """
    A mutating lens over container[key] of a mutable mapping or sequence.
    """
    return FieldLens(lambda container: ItemReference(container, key))

# --- Several parts of one structure ---

def split[S, A, B](first: Lens[S, S, A, A] | FieldObtainer[S, A],
                   second: Lens[S, S, B, B] | FieldObtainer[S, B]) \
    -> SelfLens[S, Pair[A, B]]:
    """
    Focuses on two parts of one structure as if they were a Pair.

    Applying the result to f: Pair[A, B] -> Pair[A, B] reads both parts,
    applies f, then sets the first part followed by the second. When the
    two lenses alias the same storage, the second write wins.
    """
    first_lens = SelfLens.of(as_lens(first))
    second_lens = SelfLens.of(as_lens(second))
    get_first = first_lens.to_getter()
    get_second = second_lens.to_getter()
    set_first = first_lens.to_setter()
    set_second = second_lens.to_setter()

    def run(f: Callable[[Pair[A, B]], Pair[A, B]]) -> Callable[[S], S]:
        def on_container(container: S) -> S:
            updated = f(Pair(get_first(container), get_second(container)))
            return set_second(set_first(container, updated.first),
                              updated.second)
        return on_container
    return SelfLens(run, first_lens.mutating or second_lens.mutating,
                    first_lens.lazy or second_lens.lazy)

def both_of[S, A](first: Lens[S, S, A, A] | FieldObtainer[S, A],
                  second: Lens[S, S, A, A] | FieldObtainer[S, A]) \
    -> SelfLens[S, A]:
    """
    Focuses on two parts of the same type at once, so that one
    transformation updates both (first, then second).
    """
    return SelfLens.of(split(first, second).focus(pair_both()))
