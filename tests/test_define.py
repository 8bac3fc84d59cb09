import pytest

from lispy.builtin.env_builtin import builtin_def
from lispy.errors import ErrorKind
from lispy.types.value import Error, Number, QExpr, SExpr, Symbol


def test_define_and_lookup(interp):
    assert interp.eval_to_string("def {x y} 1 2") == "()"
    assert interp.eval_to_string("x") == "1"
    assert interp.eval_to_string("y") == "2"
    assert interp.eval_to_string("+ x y") == "3"


def test_redefinition_does_not_grow_environment(interp):
    interp.eval("def {x y} 1 2")
    size = len(interp.env)
    interp.eval("def {x} 5")
    assert len(interp.env) == size
    assert interp.eval_to_string("x") == "5"


def test_define_lists_and_functions(interp):
    interp.eval("def {xs add} {1 2 3} +")
    assert interp.eval_to_string("xs") == "{1 2 3}"
    assert interp.eval_to_string("add 1 2") == "3"
    # The display name is the first name bound to the builtin.
    assert interp.eval_to_string("add") == "<function: '+'>"


def test_define_with_no_symbols(interp):
    size = len(interp.env)
    assert interp.eval_to_string("def {}") == "()"
    assert len(interp.env) == size


def test_define_through_eval(interp):
    interp.eval("def {arglist} {a b}")
    interp.eval("def arglist 10 20")
    assert interp.eval_to_string("list a b") == "{10 20}"


def test_builtins_can_be_shadowed(interp):
    interp.eval("def {head} 1")
    assert interp.eval_to_string("head") == "1"


@pytest.mark.parametrize(
    "source,message",
    [
        ("def {1} 2", "Function 'def' cannot define non-symbol"),
        ("def {a b} 1", "Function 'def' cannot define incorrect number of values to symbols"),
        ("def {a} 1 2", "Function 'def' cannot define incorrect number of values to symbols"),
        ("def 1 2",
         "Function 'def' passed an incorrect type for argument 0. Expected Q-Expression, Got Number."),
    ]
)
def test_malformed_definitions(interp, source, message):
    size = len(interp.env)
    assert interp.eval(source) == Error(ErrorKind.MALFORMED_DEFINITION, message)
    assert len(interp.env) == size


def test_checks_precede_binding(interp):
    interp.eval("def {a 1} 5 6")
    assert interp.eval("a").kind == ErrorKind.UNBOUND_SYMBOL


def test_define_without_arguments(env):
    result = builtin_def(env, SExpr())
    assert result.kind == ErrorKind.ARITY_MISMATCH


def test_define_stores_copies(env):
    value = QExpr([Number(1)])
    args = SExpr([QExpr([Symbol("v")]), value])
    assert builtin_def(env, args) == SExpr()
    assert args.count == 0
    assert env.get("v") == QExpr([Number(1)])
