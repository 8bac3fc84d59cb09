# Lispy: a small Lisp-family interpreter.
#
# The runtime data model lives in lispy.types (Value variants and the
# Environment). Source text flows parser -> reader -> evaluator -> printer;
# lispy.interpreter wires those together and lispy.repl is the front end.
#
# Naming guidance:
# - AstNode: the generic syntax tree emitted by lispy.reader.parser.
# - Value:   the runtime datum every other layer passes around.

__version__ = "0.0.0.1"

# Public aliases; defined after __version__ since lispy.repl imports it.
from lispy.errors import ErrorKind, LispyContractError, LispyError, LispySyntaxError
from lispy.evaluation.evaluator import evaluate, evaluate_top_level
from lispy.interpreter import Interpreter
from lispy.printer import render
from lispy.reader.parser import AstNode, parse
from lispy.reader.reader import read
from lispy.types.environment import Environment
from lispy.types.value import (
    Builtin,
    Error,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
    ValueType,
)
