from __future__ import annotations

import operator
from typing import Callable

from lispy.builtin.checks import checked, expect_at_least, expect_type
from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import Error, Number, SExpr, Value, ValueType


# -------------------------------
# Integer division (truncating, like C)
# -------------------------------
def truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncating_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * truncating_div(a, b)


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
    "%": truncating_rem,
}

ZERO_CHECKED = frozenset({"/", "%"})


@checked
def builtin_op(env: Environment, args: SExpr, op: str) -> Value:
    """Left fold of `op` over Number arguments; unary '-' negates."""
    expect_at_least(op, args, 1)
    for i in range(args.count):
        expect_type(op, args, i, ValueType.NUMBER)

    combine = OPERATORS[op]
    x = args.remove_at(0)
    result = x.num
    x.release()

    if op == "-" and args.count == 0:
        result = -result

    while args.count > 0:
        y = args.remove_at(0)
        if op in ZERO_CHECKED and y.num == 0:
            y.release()
            args.release()
            return Error(ErrorKind.DIVISION_BY_ZERO, "Division by zero")
        # Wrap each step so intermediate results stay in 64 bits.
        result = Number(combine(result, y.num)).num
        y.release()

    args.release()
    return Number(result)


def builtin_add(env: Environment, args: SExpr) -> Value:
    return builtin_op(env, args, "+")


def builtin_sub(env: Environment, args: SExpr) -> Value:
    return builtin_op(env, args, "-")


def builtin_mul(env: Environment, args: SExpr) -> Value:
    return builtin_op(env, args, "*")


def builtin_div(env: Environment, args: SExpr) -> Value:
    return builtin_op(env, args, "/")


def builtin_rem(env: Environment, args: SExpr) -> Value:
    return builtin_op(env, args, "%")
