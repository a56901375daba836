## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from nameless.runtime import Runtime
from nameless.types import Bool, Arrow, Abstraction, TrueTerm, VarBind, NameBind, Ok, Err
from nameless.context import empty
from nameless.dialects import SIMPLEBOOL, UNTYPED
from nameless.syntax import EvalCommand, BindCommand
from nameless.errors import LambdaNameError, LambdaTypeError, LambdaParseError


def test_default_dialect_is_simplebool():
    rt = Runtime()
    assert rt.dialect is SIMPLEBOOL
    assert rt.context is empty


def test_unknown_dialect():
    with pytest.raises(ValueError):
        Runtime('systemf')


def test_run_keeps_context_between_calls():
    rt = Runtime()
    assert rt.run("x : Bool;") == "ℬ x: Bool;\n"
    assert rt.run("(λy: Bool. y) x;") == "((λ y: Bool. y) x): Bool;\n"
    assert rt.run("(λy: Bool. y) true;") == "true: Bool;\n"
    assert rt.names() == ["x"]


def test_failed_run_leaves_context_unchanged():
    rt = Runtime()
    rt.run("x : Bool;")
    with pytest.raises(LambdaTypeError):
        rt.run("y : Bool; true true;")
    assert rt.names() == ["x"]


def test_reset():
    rt = Runtime('untyped')
    rt.run("a/; b/;")
    rt.reset()
    assert rt.context is empty
    with pytest.raises(LambdaNameError):
        rt.run("a;")


def test_parse_returns_named_commands():
    rt = Runtime()
    commands = rt.parse("x: Bool; x;")
    assert isinstance(commands[0], BindCommand) and isinstance(commands[1], EvalCommand)


def test_term_and_translate_use_context():
    rt = Runtime()
    rt.bind("b", VarBind(Bool()))
    term = rt.term("λx: Bool. b")
    assert rt.to_string(term) == "(λ x: Bool. b)"
    assert rt.check(term) == Arrow(Bool(), Bool())
    assert rt.type_of(term) == Ok(Arrow(Bool(), Bool()))


def test_type_of_failure_is_a_value():
    rt = Runtime()
    assert isinstance(rt.type_of(rt.term("true true")), Err)


def test_step_and_evaluate():
    rt = Runtime('untyped')
    term = rt.term("(λx. x) ((λz. z) (λy. y))")
    once = rt.step(term)
    assert rt.to_string(once) == "((λ x. x) (λ y. y))"
    value = rt.evaluate(term)
    assert rt.is_value(value) and rt.step(value) is None


def test_evaluate_with_stats():
    rt = Runtime('arith')
    stats = {}
    rt.evaluate(rt.term("iszero (pred (succ 0))"), stats=stats)
    assert stats == {'steps': 2}


def test_to_string_types():
    assert Runtime().to_string(Arrow(Bool(), Arrow(Bool(), Bool()))) == "(Bool → (Bool → Bool))"


def test_untyped_bind_via_runtime():
    rt = Runtime(UNTYPED)
    rt.bind("x", NameBind())
    assert rt.run("(λy. y) x;") == "((λ y. y) x);\n"


def test_parse_error_propagates():
    with pytest.raises(LambdaParseError):
        Runtime().run("λx. x;")


def test_term_rejects_bind_commands():
    with pytest.raises(ValueError, match="bind command for `x`"):
        Runtime().term("x : Bool")


def test_term_rejects_several_commands():
    with pytest.raises(ValueError, match="single term"):
        Runtime().term("true; false")
