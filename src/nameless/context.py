## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from collections import namedtuple

from .types import Binding, NameBind, VarBind, Type
from .info import Info, UNKNOWN, info_to_string
from .errors import LambdaNameError, LambdaInternalError


Entry = namedtuple('Entry', ['name', 'binding'])


# Naming context is a namedtuple cons-list; extending never touches the previous context,
# so sibling subterms each keep the context of their own entry point.
class Context(namedtuple('Context', ['tail', 'head'])):
    __slots__ = ()
    _empty_singleton = None

    def __new__(cls, tail, head):
        if tail is None and head is None:
            # Only one singleton creation is allowed, and it's the one just below.
            if cls._empty_singleton is None:
                self = super(Context, cls).__new__(cls, tail, head)
                cls._empty_singleton = self
                return self
            # By convention, all other code should use `empty` explicitly.
            raise ValueError("Use the canonical `empty` instance for empty contexts")
        return super(Context, cls).__new__(cls, tail, head)

    def __repr__(self):
        if self is empty:
            return "Γ[]"
        return "Γ[" + ", ".join(e.name for e in self.entries()) + "]"

    def __bool__(self):
        raise TypeError("Context truth value is ambiguous; compare with `is empty` or `is not empty`.")

    def entries(self):
        """Iterate over entries, innermost binder (index 0) first."""
        current = self
        while current is not empty:
            yield current.head
            current = current.tail

    def extended(self, name: str, binding: Binding) -> "Context":
        return Context(self, Entry(name, binding))


# All checks for empty context must be done by comparing to this.
empty = Context(None, None)


def add_binding(context: Context, name: str, binding: Binding) -> Context:
    return context.extended(name, binding)

def add_name(context: Context, name: str) -> Context:
    return add_binding(context, name, NameBind())

def context_length(context: Context) -> int:
    return sum(1 for _ in context.entries())

def names(context: Context) -> list[str]:
    return [e.name for e in context.entries()]


def name_to_index(context: Context, name: str, info: Info = UNKNOWN) -> int:
    for index, entry in enumerate(context.entries()):
        if entry.name == name:
            return index
    raise LambdaNameError(f"unbound identifier `{name}` at {info_to_string(info)}", name=name, info=info)


def _entry_at(context: Context, index: int, info: Info) -> Entry:
    if index >= 0:
        for i, entry in enumerate(context.entries()):
            if i == index:
                return entry
    raise LambdaInternalError(
        f"variable lookup failure: index {index} out of range for context of length "
        f"{context_length(context)} at {info_to_string(info)}", info=info)

def index_to_name(context: Context, index: int, info: Info = UNKNOWN) -> str:
    return _entry_at(context, index, info).name

def get_binding(context: Context, index: int, info: Info = UNKNOWN) -> Binding:
    return _entry_at(context, index, info).binding

def get_type_from_context(context: Context, index: int, info: Info = UNKNOWN) -> Type:
    entry = _entry_at(context, index, info)
    if not isinstance(entry.binding, VarBind):
        raise LambdaInternalError(
            f"wrong kind of binding for variable `{entry.name}` at {info_to_string(info)}", info=info)
    return entry.binding.type
