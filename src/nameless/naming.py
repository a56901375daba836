## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Name removal: named syntax from the parser into de Bruijn terms. This pass is the only
# producer of indices, so every `Variable` it builds is in range for its context.
#

from .types import (Term, Variable, Abstraction, Application, TrueTerm, FalseTerm, If,
                    Zero, Succ, Pred, IsZero, Command, Eval, Bind, NameBind, VarBind)
from .syntax import Name, Lambda, Apply, Literal, Conditional, Primitive, NamedTerm, EvalCommand, BindCommand
from .context import Context, add_name, name_to_index
from .dialects import Dialect
from .errors import LambdaInternalError


_LITERALS = {'true': TrueTerm, 'false': FalseTerm, 'zero': Zero}
_PRIMITIVES = {'succ': Succ, 'pred': Pred, 'is_zero': IsZero}


def remove_names(term: NamedTerm, context: Context) -> Term:
    info = term.info
    match term:
        case Name(name=name):
            return Variable(name_to_index(context, name, info), info)
        case Lambda(parameter_name=name, parameter_type=type_, body=body):
            # The parameter type has no names in it; only the body sees the new binder.
            return Abstraction(name, type_, remove_names(body, add_name(context, name)), info)
        case Apply(func=func, argument=argument):
            return Application(remove_names(func, context), remove_names(argument, context), info)
        case Literal(value=value):
            return _LITERALS[value](info)
        case Conditional(condition=condition, then=then, else_=else_):
            return If(remove_names(condition, context), remove_names(then, context), remove_names(else_, context), info)
        case Primitive():
            # Numerals become long `succ` chains, so nested primitives are unwound without recursing.
            chain = []
            while isinstance(term, Primitive):
                chain.append(term)
                term = term.operand
            result = remove_names(term, context)
            for primitive in reversed(chain):
                result = _PRIMITIVES[primitive.op](result, primitive.info)
            return result
    raise LambdaInternalError(f"Unhandled syntax node `{type(term).__name__}` in name removal.")


def remove_command_names(command, context: Context, dialect: Dialect) -> Command:
    match command:
        case EvalCommand(term=term, info=info):
            return Eval(remove_names(term, context), info)
        case BindCommand(name=name, type=type_, info=info):
            if not dialect.variables:
                raise LambdaInternalError(f"Dialect `{dialect}` has no bind command, found `{name}`.", info=info)
            if dialect.typed:
                if type_ is None:
                    raise LambdaInternalError(f"Bind command for `{name}` is missing its type.", info=info)
                return Bind(name, VarBind(type_), info)
            return Bind(name, NameBind(), info)
    raise LambdaInternalError(f"Unhandled command `{type(command).__name__}` in name removal.")
