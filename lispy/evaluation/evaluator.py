"""Core evaluator for the Lispy interpreter.

Reduces a Value against the Environment:

    - Symbol -> bound value (copy) or an UnboundSymbol Error
    - SExpr  -> children reduced left to right, then applied
    - anything else evaluates to itself

Errors are ordinary values. The first Error produced while reducing an
SExpr's children becomes the result of the whole SExpr; siblings to its right
are released without being evaluated.
"""

from __future__ import annotations

import logging

from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, SExpr, Symbol, Value

logger = logging.getLogger(__name__)


def evaluate(env: Environment, value: Value) -> Value:
    """Evaluate `value`, taking ownership of it."""
    if isinstance(value, Symbol):
        x = env.get(value)
        value.release()
        return x
    if isinstance(value, SExpr):
        return evaluate_sexpr(env, value)
    return value


def evaluate_sexpr(env: Environment, v: SExpr) -> Value:
    for i in range(v.count):
        reduced = evaluate(env, v.cells[i])
        v.cells[i] = reduced
        if isinstance(reduced, Error):
            logger.debug("Short-circuit on child %d: %s", i, reduced.message)
            return v.take_at(i)

    if v.count == 0:
        return v

    if v.count == 1:
        return v.take_at(0)

    first = v.remove_at(0)
    if not isinstance(first, Builtin):
        first.release()
        v.release()
        return Error(
            ErrorKind.NON_FUNCTION_APPLICATION,
            "S-expression does not begin with symbol!",
        )

    logger.debug("Applying %s to %d argument(s)", first, v.count)
    result = first(env, v)
    first.release()
    return result


def evaluate_top_level(env: Environment, value: Value) -> Value:
    """Entry point for front ends: evaluate one read line."""
    result = evaluate(env, value)
    if isinstance(result, Error):
        logger.debug("Top-level evaluation produced %s", result.kind.value)
    return result
