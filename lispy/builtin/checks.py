"""Argument-shape checks shared by the builtins.

A builtin owns its argument list. Checks run before any side effect; when
one fails it raises ArgumentCheckFailed, and the @checked wrapper releases
the whole argument list and returns the carried Error value. Nothing escapes
the wrapper: callers of a builtin only ever see Values.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import Error, SExpr, Value, ValueType


class ArgumentCheckFailed(Exception):
    def __init__(self, error: Error):
        super().__init__(error.message)
        self.error = error


def checked(fn: Callable[..., Value]) -> Callable[..., Value]:
    @functools.wraps(fn)
    def wrapper(env: Environment, args: SExpr, *extra: Any) -> Value:
        try:
            return fn(env, args, *extra)
        except ArgumentCheckFailed as exc:
            args.release()
            return exc.error
    return wrapper


def expect(condition: bool, kind: ErrorKind, message: str) -> None:
    if not condition:
        raise ArgumentCheckFailed(Error(kind, message))


def expect_count(func: str, args: SExpr, expected: int) -> None:
    expect(
        args.count == expected,
        ErrorKind.ARITY_MISMATCH,
        f"Function '{func}' passed an incorrect number of arguments. "
        f"Expected {expected}, Got {args.count}.",
    )


def expect_at_least(func: str, args: SExpr, minimum: int) -> None:
    expect(
        args.count >= minimum,
        ErrorKind.ARITY_MISMATCH,
        f"Function '{func}' passed an incorrect number of arguments. "
        f"Expected at least {minimum}, Got {args.count}.",
    )


def expect_type(
    func: str,
    args: SExpr,
    position: int,
    expected: ValueType,
    kind: ErrorKind = ErrorKind.TYPE_MISMATCH,
) -> None:
    got = args[position].type
    expect(
        got == expected,
        kind,
        f"Function '{func}' passed an incorrect type for argument {position}. "
        f"Expected {expected.value}, Got {got.value}.",
    )


def expect_not_empty(func: str, args: SExpr, position: int) -> None:
    expect(
        len(args[position]) != 0,
        ErrorKind.EMPTY_LIST_OPERAND,
        f"Function '{func}' passed {{}} for argument {position}.",
    )
