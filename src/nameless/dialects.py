## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass


@dataclass(frozen=True)
class Dialect:
    name: str
    typed: bool             # terms are type-checked, binders carry types
    variables: bool         # calculus has variables, abstractions and bind commands
    description: str

    def __str__(self):
        return self.name


ARITH = Dialect('arith', typed=False, variables=False,
                description="Untyped arithmetic and boolean expressions.")
UNTYPED = Dialect('untyped', typed=False, variables=True,
                  description="Pure untyped lambda calculus.")
SIMPLEBOOL = Dialect('simplebool', typed=True, variables=True,
                     description="Simply-typed lambda calculus with booleans.")

DIALECTS: dict[str, Dialect] = {d.name: d for d in (ARITH, UNTYPED, SIMPLEBOOL)}


def get_dialect(dialect: str | Dialect) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    if (found := DIALECTS.get(dialect)) is None:
        raise ValueError(f"Unknown dialect `{dialect}`, expected one of: {', '.join(DIALECTS)}.")
    return found
