## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import textwrap

import lark

from .info import Span, info_from_meta
from .types import Bool, Arrow, Type
from .syntax import Name, Lambda, Apply, Literal, Conditional, Primitive, EvalCommand, BindCommand
from .dialects import Dialect, get_dialect
from .errors import LambdaParseError, LambdaIncompleteParse


ARITH_GRAMMAR = r"""start: command*
command: term ";"                                   -> eval

?term: app_term
     | "if" term "then" term "else" term            -> conditional

?app_term: atom
         | "succ" atom                              -> succ
         | "pred" atom                              -> pred
         | ("iszero" | "is_zero") atom              -> is_zero

?atom: "true"                                       -> true
     | "false"                                      -> false
     | INT                                          -> numeral
     | "(" term ")"
"""

UNTYPED_GRAMMAR = r"""start: command*
command: term ";"                                   -> eval
       | NAME "/" ";"                               -> bind

?term: app_term
     | abstraction
     | app_term abstraction                         -> application

abstraction: _lambda NAME "." term

?app_term: atom
         | app_term atom                            -> application

?atom: NAME                                         -> variable
     | "(" term ")"

_lambda: "λ" | "lambda" | "\\"
"""

SIMPLEBOOL_GRAMMAR = r"""start: command*
command: term ";"                                   -> eval
       | NAME ":" type ";"                          -> bind

?term: app_term
     | abstraction
     | app_term abstraction                         -> application
     | "if" term "then" term "else" term            -> conditional

abstraction: _lambda NAME ":" type "." term

?app_term: atom
         | app_term atom                            -> application

?atom: NAME                                         -> variable
     | "true"                                       -> true
     | "false"                                      -> false
     | "(" term ")"

?type: atype
     | atype _arrow type                            -> arrow

?atype: "Bool"                                      -> bool
      | "(" type ")"

_lambda: "λ" | "lambda" | "\\"
_arrow: "->" | "→"
"""

COMMON_GRAMMAR = r"""
// TOKENS
NAME: /[A-Za-z_][A-Za-z0-9_']*/
INT: /\d+/

// COMMENTS
COMMENT: /\/\*.*?\*\//s
LINE_COMMENT: /#[^\r\n]*/

// WHITESPACE
%import common.WS
%ignore WS
%ignore COMMENT
%ignore LINE_COMMENT
"""

GRAMMARS: dict[str, str] = {
    'arith': ARITH_GRAMMAR,
    'untyped': UNTYPED_GRAMMAR,
    'simplebool': SIMPLEBOOL_GRAMMAR,
}

_PARSERS: dict[str, lark.Lark] = {}


def _get_parser(dialect: Dialect) -> lark.Lark:
    if dialect.name not in _PARSERS:
        grammar = GRAMMARS[dialect.name] + COMMON_GRAMMAR
        _PARSERS[dialect.name] = lark.Lark(grammar, start='start', parser="lalr", lexer="contextual", propagate_positions=True)
    return _PARSERS[dialect.name]


def parse(source: str, dialect: str | Dialect = 'simplebool', filename=None):
    """Parse a program into named commands, yielding `EvalCommand` and `BindCommand` in order."""
    dialect = get_dialect(dialect)
    parser = _get_parser(dialect)

    def _info(node):
        return info_from_meta(node.meta if isinstance(node, lark.Tree) else node, filename)

    def _type(tree) -> Type:
        match tree.data:
            case 'bool':
                return Bool()
            case 'arrow':
                parameter, body = tree.children
                return Arrow(_type(parameter), _type(body))
        raise NotImplementedError(f"Unexpected type node `{tree.data}` from parser.")

    def _term(tree):
        info = _info(tree)
        match tree.data:
            case 'variable':
                [name] = tree.children
                return Name(name.value, info)
            case 'abstraction':
                if dialect.typed:
                    name, type_, body = tree.children
                    return Lambda(name.value, _type(type_), _term(body), info)
                name, body = tree.children
                return Lambda(name.value, None, _term(body), info)
            case 'application':
                func, argument = tree.children
                return Apply(_term(func), _term(argument), info)
            case 'true' | 'false':
                return Literal(tree.data, info)
            case 'conditional':
                condition, then, else_ = tree.children
                return Conditional(_term(condition), _term(then), _term(else_), info)
            case 'numeral':
                # Decimal literals are sugar for `succ` chains ending in zero.
                [digits] = tree.children
                term = Literal('zero', info)
                for _ in range(int(digits.value)):
                    term = Primitive('succ', term, info)
                return term
            case 'succ' | 'pred' | 'is_zero':
                [operand] = tree.children
                return Primitive(tree.data, _term(operand), info)
        raise NotImplementedError(f"Unexpected term node `{tree.data}` from parser.")

    def _command(tree):
        info = _info(tree)
        match tree.data:
            case 'eval':
                [term] = tree.children
                return EvalCommand(_term(term), info)
            case 'bind':
                name, *rest = tree.children
                return BindCommand(name.value, _type(rest[0]) if rest else None, info)
        raise NotImplementedError(f"Unexpected command node `{tree.data}` from parser.")

    try:
        tree = parser.parse(source)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token = attr('token')
        token_val = getattr(token, 'value', '') if token is not None else (attr('char') or '')
        at_end = isinstance(exc, lark.exceptions.UnexpectedEOF) or getattr(token, 'type', None) == '$END'
        error_class = LambdaIncompleteParse if at_end else LambdaParseError
        raise error_class(str(exc), filename=filename, line=attr('line'), column=attr('column'), token=token_val) from None

    for child in tree.children:
        yield _command(child)


def load_source_lines(info: Span, source: str | None = None) -> str:
    if source is None:
        if info.filename is None or not os.path.isfile(info.filename): return ""
        source = open(info.filename, 'r', encoding='utf-8').read()
    lines = source.split('\n')[info.start.line-1:info.end.line]
    if not lines: return ""
    # Only the first line of a span is highlighted, up to its end or the end of that line.
    first, start = lines[0], info.start.column - 1
    stop = info.end.column - 1 if info.end.line == info.start.line else len(first)
    lines[0] = first[:start] + f"\033[48;5;30m\033[1;97m{first[start:stop]}\033[0m" + first[stop:]
    return '\n'.join(lines)

def format_source_lines(info, identifier: str, source: str | None = None) -> str:
    if not isinstance(info, Span):
        return f"\033[97m  Position unknown, in {identifier}\033[0m\n"
    header = f"\033[97m  File \"{info.filename or '<input>'}\", line {info.start.line}, in {identifier}\033[0m\n"
    lines = load_source_lines(info, source)
    return header + (textwrap.indent(textwrap.dedent(lines), prefix='    ') + "\n" if lines else "")


def format_parse_error_context(filename, line, column, token_value, source=None):
    lines = source.splitlines(keepends=True) if source is not None else open(filename, 'r').readlines()
    line, column = line or len(lines), column or 0
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = [f"\033[97m  File \"{filename}\", line {line}\033[0m"]

    for i in range(start_line, end_line):
        line_content = lines[i].rstrip('\n')
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column > 0 and column <= len(line_content):
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+len(token_value)-1]}\033[0m" +
                    line_content[column+len(token_value)-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
