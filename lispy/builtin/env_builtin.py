"""Binding builtins and the builtin catalog.

`register` installs every primitive into an Environment under its Lisp name.
"""
from __future__ import annotations

import logging

from lispy.builtin.checks import checked, expect, expect_at_least, expect_type
from lispy.builtin.list_builtin import (
    builtin_cons,
    builtin_eval,
    builtin_head,
    builtin_init,
    builtin_join,
    builtin_len,
    builtin_list,
    builtin_tail,
)
from lispy.builtin.math_builtin import (
    builtin_add,
    builtin_div,
    builtin_mul,
    builtin_rem,
    builtin_sub,
)
from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import BuiltinFn, SExpr, Symbol, Value, ValueType

logger = logging.getLogger(__name__)


@checked
def builtin_def(env: Environment, args: SExpr) -> Value:
    """(def {a b} 1 2) binds a to 1 and b to 2; returns ()."""
    expect_at_least("def", args, 1)
    expect_type("def", args, 0, ValueType.QEXPR, ErrorKind.MALFORMED_DEFINITION)

    syms = args[0]
    for sym in syms:
        expect(
            isinstance(sym, Symbol),
            ErrorKind.MALFORMED_DEFINITION,
            "Function 'def' cannot define non-symbol",
        )
    expect(
        syms.count == args.count - 1,
        ErrorKind.MALFORMED_DEFINITION,
        "Function 'def' cannot define incorrect number of values to symbols",
    )

    for sym, value in zip(syms, args.cells[1:]):
        logger.debug("def %s", sym.name)
        env.put(sym, value)

    args.release()
    return SExpr()


# Registration order is display order for name lookups.
BUILTINS: list[tuple[str, BuiltinFn]] = [
    # List functions
    ("list", builtin_list),
    ("head", builtin_head),
    ("tail", builtin_tail),
    ("eval", builtin_eval),
    ("join", builtin_join),
    ("cons", builtin_cons),
    ("len", builtin_len),
    ("init", builtin_init),
    # Mathematical functions
    ("%", builtin_rem),
    ("+", builtin_add),
    ("-", builtin_sub),
    ("*", builtin_mul),
    ("/", builtin_div),
    # Variable functions
    ("def", builtin_def),
]


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, fn in BUILTINS:
        env.register_builtin(name, fn)
    logger.debug("Registered %d builtins", len(BUILTINS))
