## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Shifting and substitution over de Bruijn indices. Subtrees without free variables
# affected by an operation come back as the very same objects.
#

from dataclasses import replace

from .types import Term, Variable, Abstraction, Application, TrueTerm, FalseTerm, If, Zero, Succ, Pred, IsZero
from .errors import LambdaInternalError


def _map_children(term: Term, fn, cutoff: int) -> Term:
    """Rebuild `term` with `fn(child, cutoff')` applied to each subterm, cutoff+1 under a binder."""
    match term:
        case Variable():
            raise LambdaInternalError("Variables have no children.")
        case TrueTerm() | FalseTerm() | Zero():
            return term
        case Abstraction(body=body):
            new_body = fn(body, cutoff + 1)
            return term if new_body is body else replace(term, body=new_body)
        case Application(func=func, argument=argument):
            new_func, new_argument = fn(func, cutoff), fn(argument, cutoff)
            if new_func is func and new_argument is argument:
                return term
            return replace(term, func=new_func, argument=new_argument)
        case If(condition=condition, then=then, else_=else_):
            children = (condition, then, else_)
            new = tuple(fn(t, cutoff) for t in children)
            if all(a is b for a, b in zip(new, children)):
                return term
            return replace(term, condition=new[0], then=new[1], else_=new[2])
        case Succ(n=n) | Pred(n=n) | IsZero(n=n):
            new_n = fn(n, cutoff)
            return term if new_n is n else replace(term, n=new_n)
    raise LambdaInternalError(f"Unhandled term `{type(term).__name__}` while shifting or substituting.")


def shift_above(d: int, cutoff: int, term: Term) -> Term:
    """The d-place shift of `term` above `cutoff`: indices below the cutoff are bound inside `term`."""
    def walk(t, c):
        if isinstance(t, Variable):
            if t.index < c or d == 0:
                return t
            return replace(t, index=t.index + d)
        return _map_children(t, walk, c)
    return walk(term, cutoff)


def shift(d: int, term: Term) -> Term:
    return shift_above(d, 0, term)


def substitute(j: int, replacement: Term, term: Term) -> Term:
    """[j ↦ replacement] term"""
    # Under `depth` binders the target is j+depth, and the replacement must be shifted by depth.
    def walk(t, depth):
        if isinstance(t, Variable):
            return shift(depth, replacement) if t.index == j + depth else t
        return _map_children(t, walk, depth)
    return walk(term, 0)


def substitute_top(replacement: Term, body: Term) -> Term:
    """Beta-reduce `(λ. body) replacement`; the order of the three steps is essential."""
    return shift(-1, substitute(0, shift(1, replacement), body))
