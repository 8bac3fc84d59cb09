import lispy
from lispy import Interpreter, Number, QExpr, parse, read, render


def test_top_level_names():
    assert lispy.Interpreter is lispy.interpreter.Interpreter
    assert lispy.Environment is lispy.types.environment.Environment
    assert lispy.evaluate_top_level is lispy.evaluation.evaluator.evaluate_top_level
    assert issubclass(lispy.LispySyntaxError, lispy.LispyError)


def test_pipeline_through_top_level_names():
    with Interpreter() as interp:
        value = lispy.evaluate_top_level(interp.env, read(parse("tail {1 2 3}")))
        assert value == QExpr([Number(2), Number(3)])
        assert render(interp.env, value) == "{2 3}"
