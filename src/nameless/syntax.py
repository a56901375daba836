## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Named abstract syntax, as produced by the parser before names are removed.
#

from typing import Literal as Kind
from dataclasses import dataclass, field

from .info import Info, UNKNOWN
from .types import Type


@dataclass(frozen=True)
class Name:
    name: str
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class Lambda:
    parameter_name: str
    parameter_type: Type | None
    body: 'NamedTerm'
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class Apply:
    func: 'NamedTerm'
    argument: 'NamedTerm'
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class Literal:
    value: Kind['true', 'false', 'zero']
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class Conditional:
    condition: 'NamedTerm'
    then: 'NamedTerm'
    else_: 'NamedTerm'
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class Primitive:
    op: Kind['succ', 'pred', 'is_zero']
    operand: 'NamedTerm'
    info: Info = field(default=UNKNOWN, compare=False)

NamedTerm = Name | Lambda | Apply | Literal | Conditional | Primitive


@dataclass(frozen=True)
class EvalCommand:
    term: NamedTerm
    info: Info = field(default=UNKNOWN, compare=False)

@dataclass(frozen=True)
class BindCommand:
    name: str
    type: Type | None       # declared type, only in typed calculi
    info: Info = field(default=UNKNOWN, compare=False)

NamedCommand = EvalCommand | BindCommand
