## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Term, Type, Ok, Err, Binding
from .context import Context, empty, add_binding, names
from .dialects import Dialect, get_dialect
from .parser import parse
from .syntax import NamedTerm, EvalCommand, BindCommand
from .naming import remove_names
from .typechecker import type_of, check
from .interpreter import step, evaluate, is_value
from .processor import fold_commands
from .formatting import term_to_string, type_to_string


class Runtime:
    """Minimal runtime facade for embedding; keeps the naming context between runs."""

    def __init__(self, dialect: str | Dialect = 'simplebool', context: Context = empty):
        self.dialect = get_dialect(dialect)
        self.context = context

    def reset(self) -> None:
        self.context = empty

    # Assembly ────────────────────────────────────────────────────────────────────────────────
    def parse(self, source: str, filename: str | None = None) -> list:
        return list(parse(source, self.dialect, filename=filename))

    def translate(self, term: NamedTerm) -> Term:
        return remove_names(term, self.context)

    def term(self, source: str) -> Term:
        """Parse a single term, given without its trailing `;`, into nameless form."""
        commands = self.parse(source.rstrip().rstrip(';') + ';')
        match commands:
            case [EvalCommand(term=term)]:
                return self.translate(term)
            case [BindCommand(name=name)]:
                raise ValueError(f"Expected a term, got a bind command for `{name}`.")
        raise ValueError(f"Expected a single term, got {len(commands)} commands.")

    def bind(self, name: str, binding: Binding) -> None:
        self.context = add_binding(self.context, name, binding)

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def run(self, source: str, filename: str | None = None, verbosity: int = 0, stats: dict | None = None) -> str:
        commands = parse(source, self.dialect, filename=filename)
        text, self.context = fold_commands(commands, self.dialect, self.context, verbosity=verbosity, stats=stats)
        return text

    def step(self, term: Term) -> Term | None:
        return step(term)

    def evaluate(self, term: Term, verbosity: int = 0, stats: dict | None = None) -> Term:
        return evaluate(term, self.context, verbosity=verbosity, stats=stats)

    def is_value(self, term: Term) -> bool:
        return is_value(term)

    # Typing ──────────────────────────────────────────────────────────────────────────────────
    def type_of(self, term: Term) -> Ok | Err:
        return type_of(self.context, term)

    def check(self, term: Term) -> Type:
        return check(self.context, term)

    # Introspection ───────────────────────────────────────────────────────────────────────────
    def to_string(self, term_or_type: Term | Type) -> str:
        if isinstance(term_or_type, Type):
            return type_to_string(term_or_type)
        return term_to_string(self.context, term_or_type)

    def names(self) -> list[str]:
        return names(self.context)
