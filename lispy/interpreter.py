from __future__ import annotations

import logging

from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate_top_level
from lispy.printer import render
from lispy.reader.parser import parse
from lispy.reader.reader import read
from lispy.types.environment import Environment
from lispy.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lispy source one line at a time.
    Keeps a single Environment alive so definitions persist across calls.
    """

    def __init__(self) -> None:
        self.env: Environment = Environment()
        register(self.env)

    def read(self, code: str, filename: str = "<stdin>") -> Value:
        """Parse and read `code`; the whole line reads as one S-Expression."""
        return read(parse(code, filename))

    def eval(self, code: str, filename: str = "<stdin>") -> Value:
        return evaluate_top_level(self.env, self.read(code, filename))

    def render(self, value: Value) -> str:
        return render(self.env, value)

    def eval_to_string(self, code: str, filename: str = "<stdin>") -> str:
        result = self.eval(code, filename)
        text = self.render(result)
        result.release()
        return text

    def close(self) -> None:
        logger.debug("Releasing environment with %d bindings", len(self.env))
        self.env.release()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
