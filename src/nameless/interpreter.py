## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import replace

from .types import Term, Abstraction, Application, TrueTerm, FalseTerm, If, Zero, Succ, Pred, IsZero
from .context import Context, empty
from .shifting import substitute_top
from .formatting import show_step


def is_numeric_value(term: Term) -> bool:
    while isinstance(term, Succ):
        term = term.n
    return isinstance(term, Zero)


def is_value(term: Term) -> bool:
    """Values of all three calculi; each calculus only ever builds its own forms."""
    return isinstance(term, (Abstraction, TrueTerm, FalseTerm)) or is_numeric_value(term)


def step(term: Term) -> Term | None:
    """Perform one call-by-value reduction, leftmost-outermost first; None if in normal form."""
    match term:
        case Application(func=Abstraction(body=body), argument=argument) if is_value(argument):
            return substitute_top(argument, body)
        case Application(func=func, argument=argument):
            if not is_value(func):
                if (new_func := step(func)) is None: return None
                return replace(term, func=new_func)
            if (new_argument := step(argument)) is None: return None
            return replace(term, argument=new_argument)
        case If(condition=TrueTerm(), then=then):
            return then
        case If(condition=FalseTerm(), else_=else_):
            return else_
        case If(condition=condition):
            # A guard that is some other value is stuck.
            if is_value(condition) or (new_condition := step(condition)) is None: return None
            return replace(term, condition=new_condition)
        case Succ() if is_numeric_value(term):
            return None
        case Succ(n=n):
            if (new_n := step(n)) is None: return None
            return replace(term, n=new_n)
        case Pred(n=Zero() as zero):
            return zero
        case Pred(n=Succ(n=n)):
            return n
        case IsZero(n=Zero()):
            return TrueTerm()
        case IsZero(n=Succ()):
            return FalseTerm()
        case Pred(n=n) | IsZero(n=n):
            if (new_n := step(n)) is None: return None
            return replace(term, n=new_n)
    return None


def evaluate(term: Term, context: Context = empty, verbosity=0, stats=None) -> Term:
    """Apply `step` until it no longer applies; non-terminating terms do not return."""
    steps = 0
    while (reduced := step(term)) is not None:
        if verbosity > 0:
            show_step(steps, term, context)
        steps += 1
        term = reduced

    if verbosity > 0:
        show_step(steps, term, context)
    if stats is not None:
        stats['steps'] = stats.get('steps', 0) + steps

    return term
