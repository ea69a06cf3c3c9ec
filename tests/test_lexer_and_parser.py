import pytest

from cinder.errors import CinderSyntaxError
from cinder.reader.parser import lex, TokenStream, read, read_all
from cinder.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(def x 5)", [("lparen", "("), ("symbol", "def"), ("symbol", "x"), ("symbol", "5"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("x;trailing", [("symbol", "x")]),
        ("   ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("-", Symbol("-")),
        ("x1", Symbol("x1")),
        ("undefined_name", Symbol("undefined_name")),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("(lambda (x) (+ x 1))",
         [Symbol("lambda"), [Symbol("x")], [Symbol("+"), Symbol("x"), 1]]),
        ("9223372036854775807", 2**63 - 1),
        ("0000000000000000000000042", 42),
        ("-9223372036854775808", -(2**63)),
    ]
)
def test_read(source, expected):
    assert read(source) == expected


def test_nested_lists():
    assert read("((a b) (c d))") == [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]


@pytest.mark.parametrize("source", ["", "   ", "; only a comment"])
def test_blank_line_reads_as_none(source):
    assert read(source) is None


@pytest.mark.parametrize(
    "source",
    [
        "(a b",
        ")",
        "(a))",
        "a b",
        "9223372036854775808",
        "-9223372036854775809",
        "9" * 5000,
        "-" + "1" * 20,
    ]
)
def test_read_errors(source):
    with pytest.raises(CinderSyntaxError):
        read(source)


def test_parse_all_and_read_all():
    source = "(def x 1)\n; comment\n(def y 2) x"
    expected = [
        [Symbol("def"), Symbol("x"), 1],
        [Symbol("def"), Symbol("y"), 2],
        Symbol("x"),
    ]
    assert list(TokenStream(lex(source)).parse_all()) == expected
    assert read_all(source) == expected
