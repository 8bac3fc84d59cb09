import io

import pytest

from lispy.interpreter import Interpreter
from lispy.reader.parser import MAX_DEPTH
from lispy.repl import BANNER, RECURSION_MESSAGE, Repl, main


def feed(*lines):
    it = iter(lines)

    def input_fn(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return input_fn


def interrupt(prompt):
    raise KeyboardInterrupt


def test_session_keeps_definitions():
    out = io.StringIO()
    repl = Repl(prompt="> ", input_fn=feed("def {x} 10", "+ x 1", "x y"), output=out)
    assert repl.run(banner=False) == 0
    assert out.getvalue().splitlines() == ["()", "11", "Error: unbound symbol 'y'", ""]


def test_banner():
    out = io.StringIO()
    Repl(input_fn=feed(), output=out).run()
    assert out.getvalue().startswith(BANNER)
    assert out.getvalue().startswith("Lispy version 0.0.0.1\nPress Ctrl-C to exit\n")


def test_syntax_error_does_not_end_session():
    out = io.StringIO()
    Repl(input_fn=feed("(+ 1", "+ 1 2"), output=out).run(banner=False)
    lines = out.getvalue().splitlines()
    assert lines[0] == "<stdin>:1:5: error: expected ')' at end of input"
    assert lines[1] == "3"


def test_deeply_nested_line_does_not_end_session():
    deep = "(" * 600 + "+ 1 2" + ")" * 600
    out = io.StringIO()
    Repl(input_fn=feed(deep, "+ 1 1"), output=out).run(banner=False)
    lines = out.getvalue().splitlines()
    assert lines[0] == (
        f"<stdin>:1:{MAX_DEPTH + 1}: error: maximum nesting depth of {MAX_DEPTH} exceeded"
    )
    assert lines[1] == "2"


def test_nesting_at_limit_evaluates():
    at_limit = "(" * MAX_DEPTH + "+ 1 2" + ")" * MAX_DEPTH
    repl = Repl(input_fn=feed(), output=io.StringIO())
    assert repl.handle_line(at_limit) == "3"
    inner = "{" * (MAX_DEPTH - 1) + "}" * (MAX_DEPTH - 1)
    assert repl.handle_line("eval {" + inner + "}") == inner


def test_value_grown_across_lines_does_not_end_session():
    # Each line wraps `a` once more; copying it eventually overflows the stack.
    lines = ["def {a} {}"] + ["def {a} (list a)"] * 1200 + ["+ 1 1"]
    out = io.StringIO()
    assert Repl(input_fn=feed(*lines), output=out).run(banner=False) == 0
    printed = out.getvalue().splitlines()
    assert RECURSION_MESSAGE in printed
    assert printed[-2:] == ["2", ""]


def test_ctrl_c_exits_cleanly():
    out = io.StringIO()
    assert Repl(input_fn=interrupt, output=out).run(banner=False) == 0


def test_prompt_passed_to_input():
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        raise EOFError

    Repl(prompt="lispy> ", input_fn=input_fn, output=io.StringIO()).run(banner=False)
    assert prompts == ["lispy> "]


def test_handle_line():
    repl = Repl(input_fn=feed(), output=io.StringIO())
    assert repl.handle_line("len {1 2 3}") == "3"
    assert repl.handle_line("}") == "<stdin>:1:1: error: unexpected '}'"


def test_history_file_round_trip(tmp_path):
    readline = pytest.importorskip("readline")
    history = tmp_path / "history"
    readline.clear_history()
    readline.add_history("+ 1 2")
    Repl(history_file=history, input_fn=feed(), output=io.StringIO()).run(banner=False)
    assert history.exists()


def test_main_eval(capsys):
    assert main(["-e", "+ 1 2", "-e", "head {1 2 3}"]) == 0
    assert capsys.readouterr().out == "3\n{1}\n"


def test_main_eval_shares_environment(capsys):
    assert main(["-e", "def {a} 4", "-e", "* a a"]) == 0
    assert capsys.readouterr().out == "()\n16\n"


def test_main_eval_syntax_error(capsys):
    assert main(["-e", "(+ 1", "-e", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "<eval>:1:5: error: expected ')' at end of input" in captured.err


def test_main_eval_recursion_error(capsys, monkeypatch):
    def overflow(self, code, filename="<stdin>"):
        raise RecursionError

    monkeypatch.setattr(Interpreter, "eval_to_string", overflow)
    assert main(["-e", "a", "-e", "b"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{RECURSION_MESSAGE}\n{RECURSION_MESSAGE}\n"


def test_main_rejects_unknown_log_level(capsys):
    assert main(["--log-level", "chatty", "-e", "1"]) == 2
    assert "Unknown log level" in capsys.readouterr().err


def test_main_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "0.0.0.1" in capsys.readouterr().out
