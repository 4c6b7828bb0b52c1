"""
Lenses for focusing on, and transforming, parts of larger structures.

A Lens[S, T, A, B] is a transformer of part-transformations into
whole-transformations: given a function A -> B it yields a function
S -> T. Lenses compose with focus(), lift to transformations returning
Maybe or sequences with optional() and list(), and come in two tagged
variants: pure lenses rebuild values, mutating lenses (FieldLens and
anything composed with one) write through a FieldReference in place.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, is_dataclass, replace
from typing import Any

from .array import Array
from .errors import FocusMismatchError, LazyLensError, MutatingLensError, \
    ProbeLimitError
from .field import Field, FieldReference
from .functions import comp, const, identity
from .maybe import Just, Maybe, Nothing
from .settings import get_settings

logger = logging.getLogger(__name__)

type Transform[A, B] = Callable[[A], B]
type FieldObtainer[S, A] = Callable[[S], FieldReference[A]]


# Private control-flow sentinel for the early exit of a lifted application.
# Each application raises it with its own origin and catches only that one.

class _Halt(Exception):
    __slots__ = ("origin",)

    def __init__(self, origin: object):
        super().__init__()
        self.origin = origin


# False while the read pass of a mutating optional() runs: FieldLens then
# computes but does not store. Caller transformations always see True.

_writes: ContextVar[bool] = ContextVar("optics_writes", default=True)


@contextmanager
def _writes_enabled(enabled: bool):
    token = _writes.set(enabled)
    try:
        yield
    finally:
        _writes.reset(token)


def _is_present(outcome: object) -> bool:
    if isinstance(outcome, Just):
        return True
    if outcome is Nothing:
        return False
    raise TypeError(
        f"optional lens transformation returned {outcome!r}, "
        "expected Just or Nothing")


class _Unwrap:
    """Unwraps Just results of a transformation, halting on Nothing."""

    def __init__(self, f: Callable[[Any], Maybe[Any]]):
        self.f = f

    def __call__(self, a):
        outcome = self.f(a)
        if _is_present(outcome):
            return outcome.a
        raise _Halt(self)


class _Probe:
    """Selects one index of every sequence a transformation produces."""

    def __init__(self, f: Callable[[Any], Sequence[Any]], index: int):
        self.f = f
        self.index = index
        self.visits = 0

    def __call__(self, a):
        self.visits += 1
        options = self.f(a)
        if self.index < len(options):
            return options[self.index]
        raise _Halt(self)


class _Replay:
    """Hands recorded values back to the foci of a lens, in visiting order."""

    def __init__(self, values: list[Any]):
        self.values = values
        self.position = 0

    def __call__(self, _):
        if self.position >= len(self.values):
            raise FocusMismatchError(
                f"commit pass visited more than {len(self.values)} foci")
        value = self.values[self.position]
        self.position += 1
        return value

    def finish(self) -> None:
        """Checks that every recorded value was consumed."""
        if self.position != len(self.values):
            raise FocusMismatchError(
                f"commit pass visited {self.position} of "
                f"{len(self.values)} foci")


@dataclass(frozen=True)
class Lens[S, T, A, B]:
    """
    Tells how to transform an S into a T given a function from A to B.

    run is the transformer itself; mutating marks lenses that write
    into the structures they are applied to, lazy marks lenses whose
    result visits the foci only when it is consumed (streams).
    """
    run: Callable[[Transform[A, B]], Callable[[S], T]] = field(repr=False)
    mutating: bool = False
    lazy: bool = False

    def apply(self, f: Transform[A, B]) -> Callable[[S], T]:
        """
        Turns a transformation of the focused part into a transformation
        of the whole structure.
        """
        return self.run(f)

    def __call__(self, f: Transform[A, B]) -> Callable[[S], T]:
        return self.apply(f)

    def focus[C, D](self, inner: Lens[A, B, C, D] | FieldObtainer[A, C]) \
        -> Lens[S, T, C, D]:
        """
        Composes this lens with a lens into the part it focuses on.
        The caller's C -> D goes through inner first, then through self.

        inner may also be a field obtainer, which is wrapped in a FieldLens.
        Two SelfLenses compose into a SelfLens; the result is mutating
        when either side is.
        """
        inner_lens = as_lens(inner)

        def run(f: Transform[C, D]) -> Callable[[S], T]:
            return self.apply(inner_lens.apply(f))

        mutating = self.mutating or inner_lens.mutating
        lazy = self.lazy or inner_lens.lazy
        if isinstance(self, SelfLens) and isinstance(inner_lens, SelfLens):
            return SelfLens(run, mutating, lazy)
        return Lens(run, mutating, lazy)

    def within[P, Q](self, outer: Lens[P, Q, S, T] | FieldObtainer[P, S]) \
        -> Lens[P, Q, A, B]:
        """
        Reversed focus: x.focus(y) is equivalent to y.within(x).
        """
        return as_lens(outer).focus(self)

    def _require_eager(self, lift: str) -> None:
        if self.lazy:
            raise LazyLensError(
                f"{lift} needs every focus visited before it returns; "
                "materialize the stream first, e.g. with list_elements()")

    def optional(self) -> Lens[S, Maybe[T], A, Maybe[B]]:
        """
        Lifts the lens to transformations that may fail.

        L.optional()(lambda a: Just(f(a)))(s) == Just(L(f)(s))
        L.optional()(lambda a: Nothing)(s) == Nothing

        A mutating lens is first run as a dry pass, in which FieldLens
        stores nothing, while the outcomes are recorded. The recorded
        values are committed by a second pass only if all of them are
        present, so an absent outcome leaves every storage cell as it
        was, holding the same object as before. Mutating lenses built
        from a raw run function rather than from FieldLens are not
        covered by the dry pass.

        Lazy lenses are rejected, since their foci are not visited
        before the lifted application returns.
        """
        self._require_eager("optional()")
        if self.mutating:
            return Lens(self._commit_if_present, mutating=True)
        return Lens(self._halt_on_absent)

    def _halt_on_absent(self, f: Transform[A, Maybe[B]]) \
        -> Callable[[S], Maybe[T]]:
        def run(s: S) -> Maybe[T]:
            unwrap = _Unwrap(f)
            try:
                return Just(self.apply(unwrap)(s))
            except _Halt as halt:
                if halt.origin is not unwrap:
                    raise
                logger.debug("optional lens met an absent value")
                return Nothing
        return run

    def _commit_if_present(self, f: Transform[A, Maybe[B]]) \
        -> Callable[[S], Maybe[T]]:
        def run(s: S) -> Maybe[T]:
            outcomes: list[Maybe[B]] = []

            def record(a):
                with _writes_enabled(True):
                    outcomes.append(f(a))
                return a

            with _writes_enabled(False):
                self.apply(record)(s)
            if not all(_is_present(outcome) for outcome in outcomes):
                logger.debug(
                    "optional lens met an absent value, %d foci left unchanged",
                    len(outcomes))
                return Nothing
            replay = _Replay([outcome.a for outcome in outcomes])
            result = self.apply(replay)(s)
            replay.finish()
            return Just(result)
        return run

    def list(self) -> Lens[S, Array[T], A, Sequence[B]]:
        """
        Lifts the lens to transformations returning several candidates.

        The i-th result is the lens applied with a -> f(a)[i], for every
        index that all foci can supply, so that
        L.list()(lambda a: [g(a) for g in gs])(s) == [L(g)(s) for g in gs]
        A lens that visits no focus yields exactly one result.

        f is called once per focus and probe, and must be free of side
        effects. Mutating lenses are rejected: use SelfLens.list(cloner).
        Lazy lenses are rejected as for optional().
        """
        self._require_eager("list()")
        if self.mutating:
            raise MutatingLensError(
                "list() would apply every probe to the same mutable "
                "structure; use SelfLens.list(cloner) instead")
        return Lens(self._each_index)

    def _each_index(self, f: Transform[A, Sequence[B]]) \
        -> Callable[[S], Array[T]]:
        def run(s: S) -> Array[T]:
            limit = get_settings().list_probe_limit
            results: list[T] = []
            for index in range(limit + 1):
                probe = _Probe(f, index)
                try:
                    result = self.apply(probe)(s)
                except _Halt as halt:
                    if halt.origin is not probe:
                        raise
                    break
                if index == limit:
                    raise ProbeLimitError(
                        f"list() lens produced more than {limit} results")
                results.append(result)
                if probe.visits == 0:
                    break
            logger.debug("list lens produced %d results", len(results))
            return Array.make(results)
        return run


class SelfLens[S, A](Lens[S, S, A, A]):
    """
    A Lens[S, S, A, A]: updates an A within an S without changing types.
    Supports direct getting and setting of the focused part.
    """

    @classmethod
    def of(cls, lens: Lens[S, S, A, A] | FieldObtainer[S, A]) -> SelfLens[S, A]:
        """
        Wraps a lens whose whole and part types are already known to
        match, keeping its mutating and lazy tags.
        """
        lens = as_lens(lens)
        if isinstance(lens, SelfLens):
            return lens
        return SelfLens(lens.run, lens.mutating, lens.lazy)

    def to_getter(self) -> Callable[[S], A]:
        """
        Forgets how to set the part, leaving a plain getter.
        """
        def getter(container: S) -> A:
            seen: Field[A] = Field.init_null()

            def record(a: A) -> A:
                seen.set(a)
                return a

            self.apply(record)(container)
            return seen.get()
        return getter

    def to_setter(self) -> Callable[[S, A], S]:
        """
        Forgets how to get the part, leaving a plain setter
        (container, new value) -> updated container.
        """
        def setter(container: S, value: A) -> S:
            return self.apply(const(value))(container)
        return setter

    def set(self, val: A) -> Callable[[S], S]:
        """
        Terminal operation setting the part to a constant.
        """
        return self.then_set(val).apply(identity)

    def then_set(self, val: A) -> SelfLens[S, A]:
        """
        Sets the part to val before the transformation the resulting
        lens is applied to.
        """
        def run(f: Transform[A, A]) -> Callable[[S], S]:
            return self.apply(comp(f, const(val)))
        return SelfLens(run, self.mutating, self.lazy)

    def perform(self, action: Callable[[A], object]) -> Callable[[S], S]:
        """
        Terminal operation running a side-effecting action on the part,
        once per focus, without changing it.
        """
        def touch(a: A) -> A:
            action(a)
            return a
        return self.apply(touch)

    def list(self, cloner: Callable[[S], S] | None = None) \
        -> Lens[S, Array[S], A, Sequence[A]]:
        """
        Without a cloner this is Lens.list(). With one, every candidate
        part is set on a fresh clone of the structure, so the original
        and the results stay independent. This is the variant to use
        with mutating lenses.
        """
        if cloner is None:
            return super().list()
        self._require_eager("list()")
        getter = self.to_getter()
        setter = self.to_setter()

        def run(f: Transform[A, Sequence[A]]) -> Callable[[S], Array[S]]:
            def clones(s: S) -> Array[S]:
                results = Array.make(
                    setter(cloner(s), a) for a in f(getter(s)))
                logger.debug("cloning list lens produced %d structures",
                             len(results))
                return results
            return clones
        return Lens(run)


@dataclass(frozen=True, init=False)
class FieldLens[S, A](SelfLens[S, A]):
    """
    A SelfLens that locates a field of the container through a
    FieldReference and mutates it in place, returning the same container.
    """
    obtainer: FieldObtainer[S, A]

    def __init__(self, obtainer: FieldObtainer[S, A]):
        def run(f: Transform[A, A]) -> Callable[[S], S]:
            def in_place(container: S) -> S:
                reference = obtainer(container)
                if _writes.get():
                    reference.transform(f)
                else:
                    f(reference.get())
                return container
            return in_place
        object.__setattr__(self, "run", run)
        object.__setattr__(self, "mutating", True)
        object.__setattr__(self, "lazy", False)
        object.__setattr__(self, "obtainer", obtainer)

    def to_getter(self) -> Callable[[S], A]:
        return lambda container: self.obtainer(container).get()

    def to_setter(self) -> Callable[[S, A], S]:
        def setter(container: S, value: A) -> S:
            if _writes.get():
                self.obtainer(container).set(value)
            return container
        return setter


def as_lens(target: Lens | FieldObtainer) -> Lens:
    """
    Returns target if it is a lens, or the FieldLens of a field obtainer.
    """
    if isinstance(target, Lens):
        return target
    if callable(target):
        return FieldLens(target)
    raise TypeError(f"cannot build a lens from {target!r}")


def lens(field_name: str) -> SelfLens[Any, Any]:
    """
    Create a pure lens over a field of a frozen dataclass or named tuple.
    Updates rebuild the structure instead of mutating it.
    """
    def rebuild(s, v):
        if is_dataclass(s):
            return replace(s, **{field_name: v})
        return s._replace(**{field_name: v})

    def update(s, f):
        old = getattr(s, field_name)
        new = f(old)
        return s if new is old else rebuild(s, new)

    def run(f):
        return lambda s: update(s, f)
    return SelfLens(run)


# --- Plain accessors ---

def view[S, A](l: Lens[S, S, A, A], s: S) -> A:
    """
    Get the focused value out of a structure.
    """
    return SelfLens.of(l).to_getter()(s)

def set_[S, A](l: Lens[S, S, A, A], v: A, s: S) -> S:
    """
    Set the focused value in a structure.
    """
    return SelfLens.of(l).to_setter()(s, v)

def over[S, T, A, B](l: Lens[S, T, A, B], f: Transform[A, B], s: S) -> T:
    """
    Modify the focused value using a function.
    """
    return l.apply(f)(s)
