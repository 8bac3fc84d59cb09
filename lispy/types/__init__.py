from lispy.types.value import (
    Value,
    ValueType,
    Number,
    Error,
    Symbol,
    Builtin,
    BuiltinFn,
    Expr,
    SExpr,
    QExpr,
    INT64_MIN,
    INT64_MAX,
    to_int64,
)
from lispy.types.environment import Environment, NO_NAME_FOUND
