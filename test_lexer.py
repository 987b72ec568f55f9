import pytest

from errors import EndOfInput, LiteralTooLong, UnknownToken
from lexer import MAX_LITERAL_DIGITS, Cursor, lex
from nodes import Operand
from operators import OPS


def test_cursor():
    c = Cursor("ab")
    assert c.peek() == "a" and c.pos == 0
    assert c.advance() == "a"
    assert c.peek() == "b"
    assert c.advance() == "b"
    assert c.exhausted and c.pos == 2
    with pytest.raises(EndOfInput):
        c.peek()
    with pytest.raises(EndOfInput):
        c.advance()


def test_empty_cursor():
    assert Cursor("").exhausted
    with pytest.raises(EndOfInput):
        Cursor("").peek()


def test_tokens():
    assert list(lex("1+22")) == [Operand(1), OPS["+"], Operand(22)]
    assert list(lex("(1)")) == [OPS["("], Operand(1), OPS[")"]]
    assert list(lex("2^3*4/5-6")) == [
        Operand(2), OPS["^"], Operand(3), OPS["*"], Operand(4),
        OPS["/"], Operand(5), OPS["-"], Operand(6),
    ]


def test_whitespace_is_skipped():
    assert list(lex("")) == []
    assert list(lex(" \t\n ")) == []
    assert list(lex("\t1\n+   1 ")) == list(lex("1+1"))


def test_adjacent_numbers_need_whitespace():
    assert list(lex("12 34")) == [Operand(12), Operand(34)]
    assert list(lex("1234")) == [Operand(1234)]


def test_long_literals():
    assert list(lex("007")) == [Operand(7)]
    assert list(lex("2147483647")) == [Operand(2147483647)]
    assert list(lex("9" * 40)) == [Operand(int("9" * 40))]


def test_lex_is_lazy():
    tokens = lex("1 + x")
    assert next(tokens) == Operand(1)
    assert next(tokens) == OPS["+"]
    with pytest.raises(UnknownToken, match="'x' at position 4"):
        next(tokens)
    # parsing stops at the first bad character
    assert list(tokens) == []


@pytest.mark.parametrize("text", ["1 $ 2", "1.5", "a", "1 % 2", "½", "٣"])
def test_unknown_tokens(text):
    with pytest.raises(UnknownToken):
        list(lex(text))


def test_lex_resumes_cursor():
    c = Cursor("1 2 3")
    tokens = lex(c)
    assert next(tokens) == Operand(1)
    assert c.pos == 1
    assert list(tokens) == [Operand(2), Operand(3)]
    assert c.exhausted


def test_literal_length_limit():
    assert list(lex("9" * MAX_LITERAL_DIGITS)) == [Operand(int("9" * MAX_LITERAL_DIGITS))]
    tokens = lex("1 + " + "9" * (MAX_LITERAL_DIGITS + 700))
    assert next(tokens) == Operand(1)
    assert next(tokens) == OPS["+"]
    with pytest.raises(LiteralTooLong, match="position 4"):
        next(tokens)
