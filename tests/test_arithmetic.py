import pytest

from cinder import errors
from cinder.evaluation.evaluator import evaluate
from cinder.reader.parser import read


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(- 4)", -4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 1)", 1),
        ("(/ 5)", 0),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("+", 0),
    ]
)
def test_arithmetic(env, source, expected):
    assert evaluate(read(source), env) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(-)", errors.CinderArityError),
        ("(/)", errors.CinderArityError),
        ("(/ 1 0)", errors.CinderZeroDivisionError),
        ("(/ 0)", errors.CinderZeroDivisionError),
        ("(+ 1 (lambda (x) x))", errors.CinderTypeError),
        ("(+ 9223372036854775807 1)", errors.CinderOverflowError),
        ("(- -9223372036854775808)", errors.CinderOverflowError),
        ("(* 4294967296 4294967296)", errors.CinderOverflowError),
        ("(/ -9223372036854775808 -1)", errors.CinderOverflowError),
    ]
)
def test_arithmetic_errors(env, source, error):
    with pytest.raises(error):
        evaluate(read(source), env)


def test_builtins_can_be_shadowed(env):
    evaluate(read("(def f (lambda (+) +))"), env)
    assert evaluate(read("(f 3)"), env) == 3
    assert evaluate(read("(+ 1 1)"), env) == 2
