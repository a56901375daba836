## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import (Type, Bool, Arrow, Term, Variable, Abstraction, Application, TrueTerm, FalseTerm, If,
                    VarBind, Ok, Err)
from .info import info_to_string
from .context import Context, add_binding, get_type_from_context
from .formatting import type_to_string
from .errors import LambdaTypeError, LambdaInternalError


def type_equal(a: Type, b: Type) -> bool:
    return a == b


def type_of(context: Context, term: Term) -> Ok | Err:
    """Derive the type of `term`, or the first failure found checking subterms left to right."""
    info = term.info
    match term:
        case Variable(index=index):
            return Ok(get_type_from_context(context, index, info))
        case Abstraction(parameter_name=name, parameter_type=parameter_type, body=body):
            if parameter_type is None:
                raise LambdaInternalError(f"Abstraction over `{name}` has no parameter type.", info=info)
            body_result = type_of(add_binding(context, name, VarBind(parameter_type)), body)
            if isinstance(body_result, Err): return body_result
            return Ok(Arrow(parameter_type, body_result.value))
        case Application(func=func, argument=argument):
            func_result = type_of(context, func)
            if isinstance(func_result, Err): return func_result
            argument_result = type_of(context, argument)
            if isinstance(argument_result, Err): return argument_result

            func_type, argument_type = func_result.value, argument_result.value
            if not isinstance(func_type, Arrow):
                return Err(info, f"arrow type expected, got {type_to_string(func_type)}")
            if not type_equal(func_type.parameter, argument_type):
                return Err(info, f"parameter type mismatch: expected {type_to_string(func_type.parameter)}, "
                                 f"got {type_to_string(argument_type)}")
            return Ok(func_type.body)
        case TrueTerm() | FalseTerm():
            return Ok(Bool())
        case If(condition=condition, then=then, else_=else_):
            results = []
            for subterm in (condition, then, else_):
                if isinstance(result := type_of(context, subterm), Err): return result
                results.append(result.value)

            condition_type, then_type, else_type = results
            if not isinstance(condition_type, Bool):
                return Err(info, f"guard of conditional not a boolean, got {type_to_string(condition_type)}")
            if not type_equal(then_type, else_type):
                return Err(info, f"arms of conditional have different types: "
                                 f"{type_to_string(then_type)} and {type_to_string(else_type)}")
            return Ok(then_type)
    raise LambdaInternalError(f"Term `{type(term).__name__}` has no typing rule.", info=info)


def check(context: Context, term: Term) -> Type:
    """Like `type_of`, but a failure is raised as `LambdaTypeError`."""
    match type_of(context, term):
        case Ok(value=type_):
            return type_
        case Err(info=info, message=message):
            raise LambdaTypeError(f"{message} at {info_to_string(info)}", reason=message, info=info)
