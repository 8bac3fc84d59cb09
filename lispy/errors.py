from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Taxonomy carried by every Error value."""

    INVALID_NUMBER_LITERAL = "InvalidNumberLiteral"
    ARITY_MISMATCH = "ArityMismatch"
    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_LIST_OPERAND = "EmptyListOperand"
    UNBOUND_SYMBOL = "UnboundSymbol"
    DIVISION_BY_ZERO = "DivisionByZero"
    NON_FUNCTION_APPLICATION = "NonFunctionApplication"
    MALFORMED_DEFINITION = "MalformedDefinition"


class LispyError(Exception):
    """ Base class for all Lispy exceptions"""
    pass


class LispyContractError(LispyError):
    """ Raised when a Value operation is called outside its contract"""


class LispySyntaxError(LispyError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, column: int = 1):
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
        super().__init__(f"{filename}:{line}:{column}: error: {message}")
