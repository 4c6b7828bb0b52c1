"""
Plain function helpers shared by the lens algebra.
"""
from typing import Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
S = TypeVar('S')

def identity(x: A) -> A:
    """
    Returns the argument unchanged.
    """
    return x

def const(x: A) -> Callable[[object], A]:
    """
    Returns a function that ignores its argument and always returns x.
    """
    return lambda _: x

def comp(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """
    Composes two functions f and g into a single function (f after g).
    """
    return lambda x: f(g(x))

def chain(*funcs: Callable[[S], S]) -> Callable[[S], S]:
    """
    Chains functions on a structure left to right, so that
    chain(f, g, h)(s) == h(g(f(s))).
    Used to script a sequence of lens updates on the same structure.
    """
    def run(s: S) -> S:
        for func in funcs:
            s = func(s)
        return s
    return run

def ap(mf, mx, mtype):
    """
    Used to implement apply in terms of bind
    The binds provide the monadic logic that would need to be replicated
    in both bind and apply
    """
    return \
        mf >> (lambda f:
        mx >> (lambda x:
        mtype.pure(f(x))
        ))
