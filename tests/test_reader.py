import sys

import pytest

from pbmkit import MalformedHeader, UnexpectedEOF
from pbmkit.codec import TokenReader

from .helpers import stream


def test_next_line_skips_comments_and_blank_lines():
    reader = TokenReader(stream("# created by hand\n\n   \n  P1  \n# size\n3 2\n"))
    assert reader.next_line() == "P1"
    assert reader.next_line() == "3 2"


def test_inline_comment_is_dropped():
    reader = TokenReader(stream("P2 # greymap\n"))
    assert reader.next_line() == "P2"


def test_next_line_at_end_raises():
    reader = TokenReader(stream("P1\n"))
    reader.next_line()
    with pytest.raises(UnexpectedEOF):
        reader.next_line()


def test_next_token_crosses_lines():
    reader = TokenReader(stream("1 2\n# skip\n3\n"))
    assert [reader.next_token() for _ in range(3)] == ["1", "2", "3"]


def test_next_line_tokens_returns_rest_of_current_line_first():
    reader = TokenReader(stream("P1 2 1 1 0\n0 1\n"))
    assert reader.next_token() == "P1"
    assert reader.next_int("width") == 2
    assert reader.next_int("height") == 1
    assert reader.next_line_tokens() == ["1", "0"]
    assert reader.next_line_tokens() == ["0", "1"]


def test_tokens_splits_on_any_whitespace():
    assert TokenReader.tokens("1\t2   3") == ["1", "2", "3"]


@pytest.mark.parametrize("text", ["x\n", "-1\n", "1.5\n", ""])
def test_next_int_rejects_bad_values(text):
    reader = TokenReader(stream(text))
    with pytest.raises(MalformedHeader):
        reader.next_int("width")


@pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"), reason="no int digit limit")
def test_next_int_rejects_number_over_digit_limit():
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(1000)
    try:
        reader = TokenReader(stream("1" * 5000 + "\n"))
        with pytest.raises(MalformedHeader, match="too long"):
            reader.next_int("width")
    finally:
        sys.set_int_max_str_digits(previous)


def test_raw_bytes_follow_the_header_line():
    reader = TokenReader(stream(b"P4\n8 1\n\xa5"))
    reader.next_token()
    reader.next_int("width")
    reader.next_int("height")
    reader.end_header()
    assert reader.read_bytes(1) == b"\xa5"
