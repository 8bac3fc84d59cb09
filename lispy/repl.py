#!/usr/bin/env python3
"""
Lispy interactive front end.

Usage:
    python -m lispy [options]
    lispy [options]

Examples:
    lispy
    lispy -e "+ 1 2" -e "head {1 2 3}"
    LISPY_HISTORY_FILE=~/.lispy_history lispy --log-level debug
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from lispy import __version__
from lispy.config import get_history_file, get_prompt, setup_logging
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter

try:
    import readline
except ImportError:  # not built on every platform; history is then unavailable
    readline = None

logger = logging.getLogger(__name__)

BANNER = f"Lispy version {__version__}\nPress Ctrl-C to exit\n"
# Values can grow deep across lines (repeated `def {a} (list a)`).
RECURSION_MESSAGE = "Error: value nests too deeply to evaluate"


class Repl:
    """Read-eval-print loop over an Interpreter."""

    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        input_fn: Callable[[str], str] = input,
        output: TextIO = sys.stdout,
    ):
        self.interp = interp or Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.history_file = history_file
        self.input_fn = input_fn
        self.output = output

    def handle_line(self, line: str) -> str:
        """Evaluate one line; returns the text to print (without newline)."""
        try:
            return self.interp.eval_to_string(line)
        except LispySyntaxError as e:
            logger.debug("Syntax error: %s", e.message)
            return str(e)
        except RecursionError:
            logger.warning("Recursion limit reached while evaluating line")
            return RECURSION_MESSAGE

    def _load_history(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.read_history_file(str(self.history_file))
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Cannot read history file %s: %s", self.history_file, e)

    def _save_history(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.write_history_file(str(self.history_file))
        except OSError as e:
            logger.warning("Cannot write history file %s: %s", self.history_file, e)

    def run(self, banner: bool = True) -> int:
        if banner:
            print(BANNER, file=self.output)
        self._load_history()
        try:
            while True:
                try:
                    line = self.input_fn(self.prompt)
                except EOFError:
                    print(file=self.output)
                    break
                print(self.handle_line(line), file=self.output)
        except KeyboardInterrupt:
            print(file=self.output)
        finally:
            self._save_history()
            self.interp.close()
        return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Minimal Lisp-family expression evaluator",
    )
    parser.add_argument(
        "-e", "--eval",
        dest="exprs",
        action="append",
        metavar="EXPR",
        help="evaluate EXPR, print the result and exit (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $LISPY_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="do not print the version banner",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"lispy: {e}", file=sys.stderr)
        return 2

    if args.exprs:
        status = 0
        with Interpreter() as interp:
            for code in args.exprs:
                try:
                    print(interp.eval_to_string(code, "<eval>"))
                except LispySyntaxError as e:
                    print(e, file=sys.stderr)
                    status = 1
                except RecursionError:
                    print(RECURSION_MESSAGE, file=sys.stderr)
                    status = 1
        return status

    return Repl(history_file=get_history_file()).run(banner=not args.no_banner)


if __name__ == "__main__":
    sys.exit(main())
