"""Runtime values for Lispy.

Every datum the evaluator touches is one of six Value variants:

    - Number  -> signed 64-bit integer
    - Error   -> first-class failure, carries an ErrorKind and a message
    - Symbol  -> unresolved identifier
    - Builtin -> native operation (identity = the wrapped Python function)
    - SExpr   -> expression awaiting evaluation, rendered with ()
    - QExpr   -> literal list, never auto-reduced, rendered with {}

Containers own their children: a Value lives in exactly one parent sequence
(or one Environment slot). Operations that hand a child to someone else move
it out of the container (remove_at / take_at); anything that needs to keep a
value while also giving it away must copy() it first. copy() is always deep.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar, Iterable, Iterator

from lispy.errors import ErrorKind, LispyContractError

if TYPE_CHECKING:
    from lispy.types.environment import Environment


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def to_int64(n: int) -> int:
    """Wrap an arbitrary Python int to two's complement 64-bit."""
    n &= 0xFFFFFFFFFFFFFFFF
    return n - (1 << 64) if n > INT64_MAX else n


class ValueType(str, Enum):
    NUMBER = "Number"
    ERROR = "Error"
    SYMBOL = "Symbol"
    FUNCTION = "Function"
    SEXPR = "S-Expression"
    QEXPR = "Q-Expression"


class Value:
    """Base of the closed set of runtime values."""

    __slots__ = ()
    type: ClassVar[ValueType]

    @property
    def type_name(self) -> str:
        return self.type.value

    def copy(self) -> Value:
        raise NotImplementedError

    def release(self) -> None:
        """Give up ownership. Atoms hold nothing worth dropping."""


class Number(Value):
    __slots__ = ("num",)
    type = ValueType.NUMBER

    def __init__(self, num: int):
        self.num = to_int64(num)

    def copy(self) -> Number:
        return Number(self.num)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.num == other.num

    def __repr__(self) -> str:
        return f"Number({self.num})"


class Error(Value):
    __slots__ = ("kind", "message")
    type = ValueType.ERROR

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message

    def copy(self) -> Error:
        return Error(self.kind, self.message)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind == other.kind
            and self.message == other.message
        )

    def __repr__(self) -> str:
        return f"Error({self.kind.value}, {self.message!r})"


class Symbol(Value):
    __slots__ = ("name",)
    type = ValueType.SYMBOL

    def __init__(self, name: str):
        self.name = name

    def copy(self) -> Symbol:
        return Symbol(self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"


BuiltinFn = Callable[["Environment", "SExpr"], Value]


class Builtin(Value):
    """A native operation.

    Only the function object is stored; its display name is recovered from
    the Environment it was registered in (Environment.resolve_display_name).
    """

    __slots__ = ("fn",)
    type = ValueType.FUNCTION

    def __init__(self, fn: BuiltinFn):
        self.fn = fn

    def __call__(self, env: Environment, args: SExpr) -> Value:
        return self.fn(env, args)

    def copy(self) -> Builtin:
        return Builtin(self.fn)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    def __repr__(self) -> str:
        return f"Builtin({getattr(self.fn, '__name__', self.fn)!r})"


class Expr(Value):
    """Ordered sequence of owned child Values; shared base of SExpr and QExpr."""

    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Value] = ()):
        self.cells: list[Value] = list(cells)

    @property
    def count(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        # Borrow only; the container keeps ownership.
        return self.cells[i]

    def append(self, child: Value) -> Expr:
        """Move `child` to the end of this sequence."""
        self.cells.append(child)
        return self

    def prepend(self, child: Value) -> Expr:
        self.cells.insert(0, child)
        return self

    def remove_at(self, i: int) -> Value:
        """Detach element `i`; later elements shift left by one."""
        if not 0 <= i < len(self.cells):
            raise LispyContractError(
                f"remove_at index {i} out of range for {self.type_name} of {len(self.cells)}"
            )
        return self.cells.pop(i)

    def take_at(self, i: int) -> Value:
        """remove_at(i), then release what is left of this sequence."""
        x = self.remove_at(i)
        self.release()
        return x

    def join(self, other: Expr) -> Expr:
        """Move every element of `other` onto the end of this sequence."""
        while other.cells:
            self.append(other.remove_at(0))
        other.release()
        return self

    def relabel(self, cls: type[Expr]) -> Expr:
        """Move all children into a fresh container of type `cls`.

        The type tag of a value never changes, so relabelling hands the
        children over and leaves this container empty.
        """
        moved = cls()
        moved.cells, self.cells = self.cells, []
        return moved

    def release(self) -> None:
        # Iterative, so teardown works at any nesting depth.
        pending: list[Expr] = [self]
        while pending:
            x = pending.pop()
            pending.extend(c for c in x.cells if isinstance(c, Expr))
            x.cells.clear()

    def copy(self) -> Expr:
        return type(self)(cell.copy() for cell in self.cells)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()
    type = ValueType.SEXPR


class QExpr(Expr):
    __slots__ = ()
    type = ValueType.QEXPR
