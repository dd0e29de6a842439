import pytest

from symdiff import ParseFailure
from symdiff.charstream import CharStream, END_OF_LINE


def test_peek_and_advance():
    stream = CharStream("ab\n")
    assert stream.peek() == "a"
    assert stream.advance() == "a"
    assert stream.advance() == "b"
    assert stream.peek() == END_OF_LINE
    assert stream.advance() == END_OF_LINE
    assert stream.at_end_of_line()


def test_skip_blanks():
    stream = CharStream(" \t x")
    stream.skip_blanks()
    assert stream.peek() == "x"


def test_read_number():
    stream = CharStream("12.5e-1 rest")
    assert stream.read_number() == 1.25
    assert stream.peek() == " "


def test_read_number_stops_before_non_digits():
    stream = CharStream("3x")
    assert stream.read_number() == 3.0
    assert stream.peek() == "x"


def test_read_number_failure():
    with pytest.raises(ParseFailure):
        CharStream("x").read_number()


def test_consume_line():
    stream = CharStream("1 + 2\r\n")
    stream.advance()
    assert stream.consume_line() == " + 2"
    assert stream.at_end_of_line()
    assert stream.consume_line() == ""


def test_read_number_rejects_infinity():
    stream = CharStream("1e999")
    with pytest.raises(ParseFailure):
        stream.read_number()
    assert stream.peek() == "1"
