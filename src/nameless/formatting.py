## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from .types import (Type, Bool, Arrow, Term, Variable, Abstraction, Application, TrueTerm, FalseTerm, If,
                    Zero, Succ, Pred, IsZero)
from .context import Context, empty, add_name, index_to_name
from .errors import LambdaInternalError


_OPERATORS = {Succ: 'succ', Pred: 'pred', IsZero: 'is_zero'}


def type_to_string(type_: Type) -> str:
    match type_:
        case Bool():
            return 'Bool'
        case Arrow(parameter=parameter, body=body):
            return f"({type_to_string(parameter)} → {type_to_string(body)})"
    raise LambdaInternalError(f"Unhandled type `{type_!r}` in printer.")


def term_to_string(context: Context, term: Term) -> str:
    """Render `term` with the names visible in `context`; shadowed names are printed as-is."""
    match term:
        case Variable(index=index):
            return index_to_name(context, index, term.info)
        case Application(func=func, argument=argument):
            return f"({term_to_string(context, func)} {term_to_string(context, argument)})"
        case Abstraction(parameter_name=name, parameter_type=parameter_type, body=body):
            body_str = term_to_string(add_name(context, name), body)
            if parameter_type is None:
                return f"(λ {name}. {body_str})"
            return f"(λ {name}: {type_to_string(parameter_type)}. {body_str})"
        case TrueTerm():
            return 'true'
        case FalseTerm():
            return 'false'
        case If(condition=condition, then=then, else_=else_):
            return (f"if {term_to_string(context, condition)} then {term_to_string(context, then)}"
                    f" else {term_to_string(context, else_)}")
        case Zero():
            return '0'
        case Succ() | Pred() | IsZero():
            # Iterative, since numerals nest one `succ` per unit.
            ops = []
            while isinstance(term, (Succ, Pred, IsZero)):
                ops.append(_OPERATORS[type(term)])
                term = term.n
            text = term_to_string(context, term)
            for op in reversed(ops):
                text = f"({op} {text})"
            return text
    raise LambdaInternalError(f"Unhandled term `{type(term).__name__}` in printer.")


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def show_step(step: int, term: Term, context: Context = empty, width=96, file=None):
    term_str = term_to_string(context, term)
    if width is not None and len(term_str) > width:
        term_str = term_str[:width-2] + ' …'
    print(f"\033[90m{step:>3} :\033[0m  {term_str}", file=file or sys.stdout)
