## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys

import pytest

from nameless.types import Bool, Arrow, NameBind, VarBind
from nameless.context import (Context, Entry, empty, add_binding, add_name, context_length, names,
                              name_to_index, index_to_name, get_binding, get_type_from_context)
from nameless.errors import LambdaNameError, LambdaInternalError


def test_empty_is_singleton():
    assert empty.head is None and empty.tail is None
    with pytest.raises(ValueError):
        Context(None, None)


def test_context_truth_value_is_ambiguous():
    with pytest.raises(TypeError):
        bool(add_name(empty, "x"))


def test_extension_is_persistent():
    outer = add_name(empty, "x")
    left = add_name(outer, "y")
    right = add_name(outer, "z")

    assert names(outer) == ["x"]
    assert names(left) == ["y", "x"]
    assert names(right) == ["z", "x"]
    assert left.tail is outer and right.tail is outer


def test_context_length_matches_binder_depth():
    ctx = empty
    for i, name in enumerate("abcd"):
        assert context_length(ctx) == i
        ctx = add_name(ctx, name)
    assert context_length(ctx) == 4


def test_name_to_index_finds_innermost():
    ctx = add_name(add_name(add_name(empty, "x"), "y"), "x")
    assert name_to_index(ctx, "x") == 0
    assert name_to_index(ctx, "y") == 1


def test_name_to_index_unbound_raises():
    ctx = add_name(empty, "x")
    with pytest.raises(LambdaNameError) as exc:
        name_to_index(ctx, "y")
    assert exc.value.name == "y"
    assert "unbound identifier" in str(exc.value)


def test_index_to_name_and_binding():
    ctx = add_binding(add_name(empty, "f"), "x", VarBind(Bool()))
    assert index_to_name(ctx, 0) == "x"
    assert index_to_name(ctx, 1) == "f"
    assert get_binding(ctx, 0) == VarBind(Bool())
    assert get_binding(ctx, 1) == NameBind()
    assert ctx.head == Entry("x", VarBind(Bool()))


@pytest.mark.parametrize("index", [2, 5, -1])
def test_out_of_range_lookup_is_internal_error(index):
    ctx = add_name(add_name(empty, "x"), "y")
    with pytest.raises(LambdaInternalError):
        index_to_name(ctx, index)
    with pytest.raises(LambdaInternalError):
        get_binding(ctx, index)


def test_get_type_from_context():
    arrow = Arrow(Bool(), Bool())
    ctx = add_binding(add_binding(empty, "b", VarBind(Bool())), "f", VarBind(arrow))
    assert get_type_from_context(ctx, 0) == arrow
    assert get_type_from_context(ctx, 1) == Bool()


def test_get_type_from_name_binding_is_internal_error():
    ctx = add_name(empty, "x")
    with pytest.raises(LambdaInternalError):
        get_type_from_context(ctx, 0)


def test_context_is_compact_namedtuple():
    # Every context is a two-slot cell regardless of depth, sharing its tail.
    deep = empty
    for i in range(100):
        deep = add_name(deep, f"v{i}")
    assert sys.getsizeof(deep) == sys.getsizeof(add_name(empty, "x"))
