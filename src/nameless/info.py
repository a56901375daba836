## nameless — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    offset: int     # absolute, 0-based
    line: int       # 1-based
    column: int     # 1-based


@dataclass(frozen=True)
class Span:
    start: Position
    end: Position
    filename: str | None = None


class Unknown:
    """Info of synthesized nodes; only one instance exists, see `UNKNOWN`."""
    __slots__ = ()
    _singleton = None

    def __new__(cls):
        if cls._singleton is None:
            cls._singleton = super().__new__(cls)
        return cls._singleton

    def __repr__(self):
        return "UNKNOWN"


UNKNOWN = Unknown()

Info = Unknown | Span


def info_from_meta(meta, filename: str | None = None) -> Info:
    """Build a span from a lark `Tree.meta` or `Token`, both expose the same position attributes."""
    if meta is None or getattr(meta, 'empty', False) or getattr(meta, 'line', None) is None:
        return UNKNOWN
    start = Position(meta.start_pos, meta.line, meta.column)
    end = Position(meta.end_pos, meta.end_line, meta.end_column)
    return Span(start, end, filename)


def info_to_string(info: Info) -> str:
    if not isinstance(info, Span):
        return "<unknown>"
    return f"{info.filename or '<input>'}:{info.start.line}.{info.start.column}"
