"""Runtime environment for Lispy.

A single global scope: an insertion-ordered table of name -> Value bindings.
Names are unique; binding an existing name replaces its value in place, so
redefinition never grows the table. The Environment owns every bound value:
put() stores a copy and get() hands out a copy.
"""

from __future__ import annotations

import logging
from io import StringIO

from lispy.errors import ErrorKind
from lispy.types.value import Builtin, BuiltinFn, Error, Symbol, Value

logger = logging.getLogger(__name__)

NO_NAME_FOUND = "No name found"


def _key(name: Symbol | str) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """Mapping from symbol names to owned Values."""

    __slots__ = ("bindings",)

    def __init__(self) -> None:
        self.bindings: dict[str, Value] = {}

    def get(self, name: Symbol | str) -> Value:
        """Copy of the value bound to `name`, or an UnboundSymbol Error."""
        key = _key(name)
        value = self.bindings.get(key)
        if value is None:
            return Error(ErrorKind.UNBOUND_SYMBOL, f"unbound symbol '{key}'")
        return value.copy()

    def put(self, name: Symbol | str, value: Value) -> None:
        """Bind a copy of `value`; the caller keeps ownership of `value`."""
        key = _key(name)
        new = value.copy()
        old = self.bindings.get(key)
        if old is not None:
            old.release()
        # Assigning an existing key keeps its position in the table.
        self.bindings[key] = new

    def register_builtin(self, name: str, fn: BuiltinFn) -> None:
        logger.debug("Registering builtin %r", name)
        self.put(name, Builtin(fn))

    def resolve_display_name(self, fn: BuiltinFn) -> str:
        """Reverse lookup of the first name bound to builtin `fn`."""
        for key, value in self.bindings.items():
            if isinstance(value, Builtin) and value.fn is fn:
                return key
        return NO_NAME_FOUND

    def names(self) -> list[str]:
        return list(self.bindings)

    def release(self) -> None:
        """Tear down: release every bound value and empty the table."""
        for value in self.bindings.values():
            value.release()
        self.bindings.clear()

    def __len__(self) -> int:
        return len(self.bindings)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (Symbol, str)):
            return _key(name) in self.bindings
        return False

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment {")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.bindings.items()))
            buffer.write("}>")
            return buffer.getvalue()
