import io

import pytest

from fdf.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string_and_code():
    out = io.StringIO()
    put_char("a", out)
    put_char(ord("b"), out)
    assert out.getvalue() == "ab"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text_unchanged():
    out = io.StringIO()
    put_str("Hello, world", out)
    assert out.getvalue() == "Hello, world"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1234509876])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("shown")
    put_endl("")
    assert capsys.readouterr().out == "shown\n"