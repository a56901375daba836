## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Nameless (de Bruijn) representation shared by the three calculi. Positions are
# carried on every term, but never take part in equality.
#

from typing import Any
from dataclasses import dataclass, field

from .info import Info, UNKNOWN


# Types ───────────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Bool:
    pass

@dataclass(frozen=True)
class Arrow:
    parameter: 'Type'
    body: 'Type'

Type = Bool | Arrow


# Terms ───────────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Variable:
    index: int
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Abstraction:
    parameter_name: str
    parameter_type: Type | None     # None in the untyped calculus
    body: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Application:
    func: 'Term'
    argument: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class TrueTerm:
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class FalseTerm:
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class If:
    condition: 'Term'
    then: 'Term'
    else_: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Zero:
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Succ:
    n: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Pred:
    n: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class IsZero:
    n: 'Term'
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

Term = Variable | Abstraction | Application | TrueTerm | FalseTerm | If | Zero | Succ | Pred | IsZero


# Bindings & commands ─────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NameBind:
    pass

@dataclass(frozen=True)
class VarBind:
    type: Type

Binding = NameBind | VarBind


@dataclass(frozen=True)
class Eval:
    term: Term
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

@dataclass(frozen=True)
class Bind:
    name: str
    binding: Binding
    info: Info = field(default=UNKNOWN, compare=False, repr=False)

Command = Eval | Bind


# Results of the type checker, so failures are plain values until a caller raises them.
@dataclass(frozen=True)
class Ok:
    value: Any

@dataclass(frozen=True)
class Err:
    info: Info
    message: str
