import pytest

from cinder.errors import CinderTypeError
from cinder.interpreter import Interpreter
from cinder.printer import to_string, FUNCTION_MARKER
from cinder.repl import Repl
from cinder.types.function import Builtin, Constant
from cinder.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "5"),
        (-12, "-12"),
        (Symbol("abc"), "abc"),
        (Constant(1), FUNCTION_MARKER),
        (Builtin("+", sum), FUNCTION_MARKER),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_to_string_rejects_foreign_values():
    with pytest.raises(CinderTypeError):
        to_string("text")


def test_interpreter_eval(interp):
    assert interp.eval("(def x 5)") == 5
    assert interp.eval("x") == 5
    assert interp.eval("   ") is None


def test_interpreter_eval_source_and_load(tmp_path):
    source = tmp_path / "defs.cin"
    source.write_text("; helpers\n(def sq (lambda (n)\n  (* n n)))\n(def nine (sq 3))\n")
    interp = Interpreter()
    assert interp.load(source) == 9
    assert interp.eval("(sq 4)") == 16
    assert interp.eval_source("") is None


def test_interpreter_without_builtins():
    interp = Interpreter(builtins=False)
    assert interp.env.vars == {}


def feed(repl, lines):
    it = iter(lines)
    out = []

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    repl.run(read_line=read_line, write=out.append)
    return out


def test_repl_session_survives_errors(interp):
    repl = Repl(interp)
    out = feed(repl, [
        "(def x 1)",
        "",
        "(oops",
        "undefined_name",
        "(1 2)",
        "(lambda (x))",
        "(def f (lambda (a b) a))",
        "(f 1)",
        "(f x 2)",
    ])
    assert out[0] == "1"
    assert out[1].startswith("error: ")
    assert out[2] == "error: Cannot lookup unbound symbol undefined_name"
    assert out[3].startswith("error: Expected symbol in operator position")
    assert out[4].startswith("error: ")
    assert out[5] == FUNCTION_MARKER
    assert out[6].startswith("error: Expected 2 argument(s), got 1")
    assert out[7] == "1"
    assert len(out) == 8


def test_repl_reports_stack_exhaustion(interp):
    repl = Repl(interp)
    repl.eval_line("(def loop (lambda (n) (loop n)))")
    assert repl.eval_line("(loop 1)") == "error: maximum recursion depth exceeded"
    assert repl.eval_line("(+ 1 2)") == "3"


def test_repl_completion(interp):
    repl = Repl(interp)
    interp.eval("(def alpha 1)")
    interp.eval("(def alps 2)")
    assert repl.complete("al", 0) == "alpha"
    assert repl.complete("al", 1) == "alps"
    assert repl.complete("al", 2) is None


def test_repl_survives_huge_integer_literal(interp):
    repl = Repl(interp)
    out = feed(repl, ["9" * 5000, "(+ 1 2)"])
    assert out[0].startswith("error: Integer literal out of range")
    assert out[1] == "3"
