## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Commands are folded left to right with a (text, context) accumulator; the context
# produced by one command is the only state the next one sees.
#

from functools import reduce

from .types import Command, Eval, Bind, VarBind
from .context import Context, empty, add_binding
from .dialects import Dialect, get_dialect
from .naming import remove_command_names
from .typechecker import check
from .interpreter import evaluate
from .formatting import term_to_string, type_to_string
from .errors import LambdaInternalError


def process_command(context: Context, command: Command, dialect: Dialect,
                    verbosity=0, stats=None) -> tuple[str, Context]:
    match command:
        case Bind(name=name, binding=binding):
            if not dialect.variables:
                raise LambdaInternalError(f"Dialect `{dialect}` cannot bind `{name}`.", info=command.info)
            line = f"ℬ {name}: {type_to_string(binding.type)};\n" if isinstance(binding, VarBind) else f"ℬ {name};\n"
            return line, add_binding(context, name, binding)
        case Eval(term=term):
            # Typing failures abort before any evaluation happens.
            type_ = check(context, term) if dialect.typed else None
            value = evaluate(term, context, verbosity=verbosity, stats=stats)
            if type_ is None:
                return f"{term_to_string(context, value)};\n", context
            return f"{term_to_string(context, value)}: {type_to_string(type_)};\n", context
    raise LambdaInternalError(f"Unhandled command `{type(command).__name__}`.")


def fold_commands(commands, dialect: str | Dialect, context: Context = empty,
                  verbosity=0, stats=None) -> tuple[str, Context]:
    """Process parsed (named) commands in order, returning the output text and final context."""
    dialect = get_dialect(dialect)

    def _process(acc, named):
        text, ctx = acc
        line, ctx = process_command(ctx, remove_command_names(named, ctx, dialect), dialect,
                                    verbosity=verbosity, stats=stats)
        return text + line, ctx

    return reduce(_process, commands, ("", context))


def process_commands(commands, dialect: str | Dialect) -> str:
    text, _ = fold_commands(commands, dialect)
    return text
