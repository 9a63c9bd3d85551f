import io

import pytest

from minishell.linereader import LineReader


def test_lines_keep_newlines_and_last_line_has_none():
    reader = LineReader(io.StringIO("first\nsecond\nthird"))
    assert reader.next_line() == "first\n"
    assert reader.next_line() == "second\n"
    assert reader.next_line() == "third"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_rejoin_to_the_input(size):
    text = "alpha\n\nbeta gamma\n" + "x" * 100 + "\nend\n"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_blank_line_is_returned():
    reader = LineReader(io.StringIO("\n\nz"))
    assert list(reader) == ["\n", "\n", "z"]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"ls -l\npwd\n"), 3)
    assert reader.next_line() == b"ls -l\n"
    assert reader.next_line() == b"pwd\n"
    assert reader.next_line() is None


def test_buffer_size_must_be_positive():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), 0)


class _FailingStream:
    def read(self, n):
        raise OSError("read failed")


def test_read_error_is_raised():
    reader = LineReader(_FailingStream())
    with pytest.raises(OSError):
        reader.next_line()