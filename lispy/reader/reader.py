"""Reader: syntax tree -> Value tree.

Consumes any node exposing `tag`, `text` and `children`; classification is by
substring of the tag (or the exact root tag), never by node type, so trees
from other parsers can be read as long as they tag their nodes the same way.
"""

from __future__ import annotations

import re
from typing import Protocol, Sequence

from lispy.errors import ErrorKind, LispyContractError
from lispy.reader.parser import REGEX_TAG, ROOT_TAG
from lispy.types.value import (
    INT64_MAX,
    INT64_MIN,
    Error,
    Expr,
    Number,
    QExpr,
    SExpr,
    Symbol,
    Value,
)

BRACKETS = frozenset({"(", ")", "{", "}"})
# ASCII digits only; int() alone also accepts underscores and padding.
NUMBER_RE = re.compile(r"-?[0-9]+")


class SyntaxNode(Protocol):
    tag: str
    text: str
    children: Sequence[SyntaxNode]


def read_number(node: SyntaxNode) -> Value:
    """Base-10 signed integer leaf; out-of-range literals become an Error value."""
    if not NUMBER_RE.fullmatch(node.text):
        return Error(ErrorKind.INVALID_NUMBER_LITERAL, "invalid number")
    x = int(node.text)
    if not INT64_MIN <= x <= INT64_MAX:
        return Error(ErrorKind.INVALID_NUMBER_LITERAL, "invalid number")
    return Number(x)


def read(node: SyntaxNode) -> Value:
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.text)

    x: Expr
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        raise LispyContractError(f"Cannot read syntax node tagged {node.tag!r}")

    for child in node.children:
        if child.text in BRACKETS or child.tag == REGEX_TAG:
            continue
        x.append(read(child))
    return x
