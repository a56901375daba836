## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from nameless.types import Bool, Arrow
from nameless.syntax import Name, Lambda, Apply, Literal, Conditional, Primitive, EvalCommand, BindCommand
from nameless.info import Span, UNKNOWN
from nameless.parser import parse, format_parse_error_context, format_source_lines
from nameless.errors import LambdaParseError, LambdaIncompleteParse


B = Bool()


def _terms(source, dialect):
    return [c.term for c in parse(source, dialect)]


def test_parse_is_lazy_generator():
    commands = parse("true;", "simplebool")
    assert next(commands) == EvalCommand(Literal('true'))


def test_simplebool_bind_and_eval():
    commands = list(parse("x : Bool; f: Bool -> Bool; f x;", "simplebool"))
    assert commands == [BindCommand("x", B), BindCommand("f", Arrow(B, B)),
                        EvalCommand(Apply(Name("f"), Name("x")))]


def test_arrow_is_right_associative():
    [bind] = parse("f: Bool -> Bool → Bool;", "simplebool")
    assert bind.type == Arrow(B, Arrow(B, B))
    [bind] = parse("f: (Bool -> Bool) -> Bool;", "simplebool")
    assert bind.type == Arrow(Arrow(B, B), B)


@pytest.mark.parametrize("binder", ["λ", "lambda ", "\\"])
def test_lambda_spellings(binder):
    [term] = _terms(f"{binder}x: Bool. x;", "simplebool")
    assert term == Lambda("x", B, Name("x"))


def test_application_is_left_associative():
    [term] = _terms("f x y;", "untyped")
    assert term == Apply(Apply(Name("f"), Name("x")), Name("y"))


def test_abstraction_body_extends_right():
    [term] = _terms("λx. x x;", "untyped")
    assert term == Lambda("x", None, Apply(Name("x"), Name("x")))
    [term] = _terms("(λx. x) λy. y;", "untyped")
    assert term == Apply(Lambda("x", None, Name("x")), Lambda("y", None, Name("y")))


def test_abstraction_as_last_argument():
    [term] = _terms("f x λy. y z;", "untyped")
    assert term == Apply(Apply(Name("f"), Name("x")), Lambda("y", None, Apply(Name("y"), Name("z"))))
    [term] = _terms("(λg: Bool -> Bool. g true) λb: Bool. b;", "simplebool")
    assert term == Apply(Lambda("g", Arrow(B, B), Apply(Name("g"), Literal('true'))), Lambda("b", B, Name("b")))


def test_abstraction_as_last_argument_inside_conditional():
    [term] = _terms("if true then f λx: Bool. x else f λx: Bool. false;", "simplebool")
    assert term.then == Apply(Name("f"), Lambda("x", B, Name("x")))
    assert term.else_ == Apply(Name("f"), Lambda("x", B, Literal('false')))


def test_untyped_bind():
    assert list(parse("x/; y/;", "untyped")) == [BindCommand("x", None), BindCommand("y", None)]


def test_conditional():
    [term] = _terms("if true then λx: Bool. x else λy: Bool. false;", "simplebool")
    assert term == Conditional(Literal('true'), Lambda("x", B, Name("x")), Lambda("y", B, Literal('false')))


def test_arith_primitives_and_numerals():
    [term] = _terms("iszero (pred 2);", "arith")
    two = Primitive('succ', Primitive('succ', Literal('zero')))
    assert term == Primitive('is_zero', Primitive('pred', two))
    assert _terms("is_zero 0;", "arith") == [Primitive('is_zero', Literal('zero'))]


def test_arith_conditional():
    [term] = _terms("if iszero 0 then succ 0 else false;", "arith")
    assert term == Conditional(Primitive('is_zero', Literal('zero')), Primitive('succ', Literal('zero')), Literal('false'))


def test_comments_are_ignored():
    source = "/* a\n multi-line comment */ x/;  # trailing\n x;"
    assert list(parse(source, "untyped")) == [BindCommand("x", None), EvalCommand(Name("x"))]


def test_empty_program():
    assert list(parse("  # nothing here\n", "simplebool")) == []


def test_positions_are_recorded():
    [_, command] = parse("x/;\n  x (λy. y);", "untyped", filename="prog.f")
    assert isinstance(command.info, Span)
    assert command.info.filename == "prog.f"
    assert (command.info.start.line, command.info.start.column) == (2, 3)
    argument = command.term.argument
    assert (argument.info.start.line, argument.info.start.column) == (2, 6)
    assert (argument.info.end.line, argument.info.end.column) == (2, 11)


def test_numeral_nodes_share_the_literal_position():
    [term] = _terms("  3;", "arith")
    assert term.info.start.column == 3
    assert term.operand.operand.operand.info == term.info


def test_syntax_error():
    with pytest.raises(LambdaParseError) as exc:
        list(parse("x : Bool;\n(λy Bool. y) x;", "simplebool", filename="bad.f"))
    assert not isinstance(exc.value, LambdaIncompleteParse)
    assert exc.value.filename == "bad.f"
    assert exc.value.line == 2


def test_unexpected_character():
    with pytest.raises(LambdaParseError) as exc:
        list(parse("x / $;", "untyped"))
    assert not isinstance(exc.value, LambdaIncompleteParse)


@pytest.mark.parametrize("source", ["x : Bool; x", "(λx: Bool. x", "if true then"])
def test_incomplete_input(source):
    with pytest.raises(LambdaIncompleteParse):
        list(parse(source, "simplebool"))


def test_keywords_are_not_variables_in_untyped():
    # The untyped calculus has no literals, so `true` is an ordinary identifier there.
    assert _terms("true;", "untyped") == [Name("true")]


def test_unknown_dialect():
    with pytest.raises(ValueError):
        list(parse("x;", "systemf"))


def test_parse_error_context_highlights_token():
    source = "x : Bool;\n(λy Bool. y) x;\n"
    text = format_parse_error_context("bad.f", 2, 5, "Bool", source=source)
    assert 'File "bad.f", line 2' in text
    assert "2 |" in text and "Bool" in text


def test_source_lines_for_unknown_info():
    assert "Position unknown" in format_source_lines(UNKNOWN, "term")


def test_source_lines_for_span():
    [command] = parse("  (λy: Bool. z) true;", "simplebool", filename="prog.f")
    text = format_source_lines(command.term.func.body.info, "z", source="  (λy: Bool. z) true;")
    assert 'File "prog.f", line 1, in z' in text
