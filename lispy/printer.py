"""Rendering of Values as source-like text.

Builtins print as <function: 'name'>, the name being recovered from the
Environment, which is why every entry point takes one.
"""
from __future__ import annotations

from io import StringIO

from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, Expr, Number, QExpr, SExpr, Symbol, Value


def _write_expr(buffer: StringIO, env: Environment, v: Expr, open_: str, close: str) -> None:
    buffer.write(open_)
    for i, cell in enumerate(v):
        if i:
            buffer.write(" ")
        _write(buffer, env, cell)
    buffer.write(close)


def _write(buffer: StringIO, env: Environment, v: Value) -> None:
    match v:
        case Number():
            buffer.write(str(v.num))
        case Error():
            buffer.write(f"Error: {v.message}")
        case Symbol():
            buffer.write(v.name)
        case Builtin():
            buffer.write(f"<function: '{env.resolve_display_name(v.fn)}'>")
        case SExpr():
            _write_expr(buffer, env, v, "(", ")")
        case QExpr():
            _write_expr(buffer, env, v, "{", "}")
        case _:
            raise TypeError(f"Cannot render {v!r}")


def render(env: Environment, v: Value) -> str:
    with StringIO() as buffer:
        _write(buffer, env, v)
        return buffer.getvalue()
