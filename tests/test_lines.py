import io

import pytest

from fdf.lines import LineReader, iter_lines


def test_lines_keep_newlines():
    assert list(iter_lines(io.StringIO("a\nb\n"))) == ["a\n", "b\n"]


def test_last_line_without_newline():
    assert list(iter_lines(io.StringIO("first\nlast"))) == ["first\n", "last"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_sequence_then_none():
    reader = LineReader(io.StringIO("x\ny"))
    assert reader.read_line() == "x\n"
    assert reader.read_line() == "y"
    assert reader.read_line() is None


def test_empty_lines_preserved():
    assert list(iter_lines(io.StringIO("\n\nz\n"))) == ["\n", "\n", "z\n"]


def test_binary_stream():
    assert list(iter_lines(io.BytesIO(b"x\ny"))) == [b"x\n", b"y"]


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 42, 1000])
@pytest.mark.parametrize(
    "text",
    ["", "one", "one\n", "0 1 2\n3 4 5\n6 7 8", "long line " * 30 + "\nend\n"],
)
def test_round_trip(text, buffer_size):
    lines = list(iter_lines(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line.endswith("\n") for line in lines[:-1])


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size)


def test_reader_is_iterable():
    reader = LineReader(io.StringIO("p\nq\n"), 1)
    assert [line.strip() for line in reader] == ["p", "q"]