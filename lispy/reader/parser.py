"""
  Lispy Lexer and Parser

Turns a line of source text into a generic syntax tree of AstNode objects.
The grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

Node tags follow the rule path that produced the node:

    - root            -> ">"  (children: regex ^, exprs..., regex $)
    - number / symbol -> "expr|number|regex" / "expr|symbol|regex"
    - sexpr / qexpr   -> "expr|sexpr|>" / "expr|qexpr|>" (brackets kept as "char")

Bracket and regex children are grammar punctuation; the reader skips them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from lispy.errors import LispySyntaxError

ROOT_TAG = ">"
REGEX_TAG = "regex"
CHAR_TAG = "char"
NUMBER_TAG = "expr|number|regex"
SYMBOL_TAG = "expr|symbol|regex"
SEXPR_TAG = "expr|sexpr|>"
QEXPR_TAG = "expr|qexpr|>"

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
    r"|(?P<number>-?[0-9]+)"  # tried before symbol: "-5" is a number, "-" a symbol
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"
)

# Deeper input would exhaust the interpreter stack while reading or evaluating.
MAX_DEPTH = 64

OPENERS = {"lparen": ("rparen", SEXPR_TAG), "lbrace": ("rbrace", QEXPR_TAG)}
CLOSERS = {"rparen": ")", "rbrace": "}"}


class Token(NamedTuple):
    type: str
    text: str
    offset: int


@dataclass
class AstNode:
    """Generic syntax tree node: a tag, the literal text and ordered children."""
    tag: str
    text: str = ""
    children: list[AstNode] = field(default_factory=list)

    @property
    def children_num(self) -> int:
        return len(self.children)


def line_col(source: str, offset: int) -> tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields Token(type, text, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            line, column = line_col(source, pos)
            raise LispySyntaxError(
                f"unexpected character {source[pos]!r}", filename, line, column
            )
        yield Token(m.lastgroup, m.group(), pos)
        pos = m.end()


class TokenStream:
    def __init__(self, source: str, filename: str = "<stdin>", max_depth: int = MAX_DEPTH):
        self.source = source
        self.filename = filename
        self.max_depth = max_depth
        self.depth = 0
        self.tokens = lex(source, filename)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, offset: int) -> LispySyntaxError:
        line, column = line_col(self.source, offset)
        return LispySyntaxError(message, self.filename, line, column)

    def parse_expr(self) -> AstNode:
        tok = self.advance()
        if tok is None:
            raise self.error("unexpected end of input", len(self.source))

        if tok.type == "number":
            return AstNode(NUMBER_TAG, tok.text)
        if tok.type == "symbol":
            return AstNode(SYMBOL_TAG, tok.text)

        if tok.type in OPENERS:
            if self.depth >= self.max_depth:
                raise self.error(
                    f"maximum nesting depth of {self.max_depth} exceeded", tok.offset
                )
            self.depth += 1
            try:
                return self._parse_list(tok)
            finally:
                self.depth -= 1

        raise self.error(f"unexpected '{tok.text}'", tok.offset)

    def _parse_list(self, tok: Token) -> AstNode:
        closer, tag = OPENERS[tok.type]
        node = AstNode(tag, children=[AstNode(CHAR_TAG, tok.text)])
        while True:
            nxt = self.peek()
            if nxt is None:
                raise self.error(
                    f"expected '{CLOSERS[closer]}' at end of input", len(self.source)
                )
            if nxt.type == closer:
                self.advance()
                node.children.append(AstNode(CHAR_TAG, nxt.text))
                return node
            if nxt.type in CLOSERS:
                raise self.error(
                    f"expected '{CLOSERS[closer]}' but found '{nxt.text}'", nxt.offset
                )
            node.children.append(self.parse_expr())

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()

    def parse_program(self) -> AstNode:
        root = AstNode(ROOT_TAG, children=[AstNode(REGEX_TAG)])
        root.children.extend(self.parse_all())
        root.children.append(AstNode(REGEX_TAG))
        return root


def parse(source: str, filename: str = "<stdin>", max_depth: int = MAX_DEPTH) -> AstNode:
    """Parse a whole line of source into a root AstNode."""
    return TokenStream(source, filename, max_depth).parse_program()
