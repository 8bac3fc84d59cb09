"""List builtins: list, head, tail, eval, join, cons, len, init.

Each builtin owns `args` and returns a Value it owns; elements it does not
hand back are released.
"""
from __future__ import annotations

from lispy.builtin.checks import (
    checked,
    expect,
    expect_count,
    expect_not_empty,
    expect_type,
)
from lispy.errors import ErrorKind
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Number, QExpr, SExpr, Value, ValueType


@checked
def builtin_list(env: Environment, args: SExpr) -> Value:
    """(list a b ...) -> {a b ...}"""
    return args.relabel(QExpr)


@checked
def builtin_head(env: Environment, args: SExpr) -> Value:
    """(head {a b ...}) -> {a}"""
    expect_count("head", args, 1)
    expect_type("head", args, 0, ValueType.QEXPR)
    expect_not_empty("head", args, 0)

    v = args.take_at(0)
    while v.count > 1:
        v.remove_at(1).release()
    return v


@checked
def builtin_tail(env: Environment, args: SExpr) -> Value:
    """(tail {a b ...}) -> {b ...}"""
    expect_count("tail", args, 1)
    expect_type("tail", args, 0, ValueType.QEXPR)
    expect_not_empty("tail", args, 0)

    v = args.take_at(0)
    v.remove_at(0).release()
    return v


@checked
def builtin_eval(env: Environment, args: SExpr) -> Value:
    """(eval {f a b}) evaluates (f a b)."""
    expect_count("eval", args, 1)
    expect_type("eval", args, 0, ValueType.QEXPR)

    x = args.take_at(0).relabel(SExpr)
    return evaluate(env, x)


@checked
def builtin_join(env: Environment, args: SExpr) -> Value:
    """Concatenate Q-Expressions left to right; (join) is {}."""
    for i in range(args.count):
        expect_type("join", args, i, ValueType.QEXPR)

    if args.count == 0:
        args.release()
        return QExpr()

    x = args.remove_at(0)
    while args.count:
        x.join(args.remove_at(0))
    args.release()
    return x


@checked
def builtin_cons(env: Environment, args: SExpr) -> Value:
    """(cons x {a b}) -> {x a b}; x must be a Number or a Function."""
    expect_count("cons", args, 2)
    expect(
        isinstance(args[0], (Number, Builtin)),
        ErrorKind.TYPE_MISMATCH,
        "Function 'cons' passed incorrect type for argument 0. Expected Number or Function.",
    )
    expect_type("cons", args, 1, ValueType.QEXPR)

    x = args.remove_at(0)
    q = args.remove_at(0)
    q.prepend(x)
    args.release()
    return q


@checked
def builtin_len(env: Environment, args: SExpr) -> Value:
    expect_count("len", args, 1)
    expect_type("len", args, 0, ValueType.QEXPR)

    x = Number(args[0].count)
    args.release()
    return x


@checked
def builtin_init(env: Environment, args: SExpr) -> Value:
    """(init {a b c}) -> {a b}"""
    expect_count("init", args, 1)
    expect_type("init", args, 0, ValueType.QEXPR)
    expect_not_empty("init", args, 0)

    v = args.take_at(0)
    v.remove_at(v.count - 1).release()
    return v
