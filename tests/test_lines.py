import io

import pytest

from ftselect.lines import LineReader


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 5, 100])
def test_lines_in_order(chunk_size):
    reader = LineReader(io.StringIO("one\ntwo\nthree"), chunk_size)
    assert list(reader) == ["one", "two", "three"]


@pytest.mark.parametrize("chunk_size", [1, 4, 4096])
def test_trailing_newline_does_not_add_line(chunk_size):
    reader = LineReader(io.StringIO("one\ntwo\n"), chunk_size)
    assert list(reader) == ["one", "two"]


def test_empty_lines_preserved():
    reader = LineReader(io.StringIO("a\n\nb\n"), 2)
    assert list(reader) == ["a", "", "b"]


def test_empty_stream_gives_nothing():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_read_line_returns_none_after_end():
    reader = LineReader(io.StringIO("only"), 3)
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"alpha\nbeta"), 3)
    assert list(reader) == [b"alpha", b"beta"]


@pytest.mark.parametrize("chunk_size", [1, 7, 64])
def test_round_trip_join(chunk_size):
    content = "first line\nsecond\n\nfourth one here\nlast"
    assert "\n".join(LineReader(io.StringIO(content), chunk_size)) == content


def test_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)