import io

import pytest

from solong.lines import iter_lines, split_fields, substring


def test_iter_lines_keeps_newlines():
    text = "ab\ncd\n"
    assert list(iter_lines(io.StringIO(text), 128)) == ["ab\n", "cd\n"]


def test_iter_lines_last_line_without_newline():
    lines = list(iter_lines(io.StringIO("first\nlast"), 4))
    assert lines == ["first\n", "last"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 128])
def test_iter_lines_round_trip(size):
    text = "1111\n1PCE\n\n1001\nend"
    lines = list(iter_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])


def test_iter_lines_bytes():
    data = b"xy\nz"
    assert list(iter_lines(io.BytesIO(data), 2)) == [b"xy\n", b"z"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""), 16)) == []


def test_iter_lines_bad_buffer_size():
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("a"), 0))


def test_split_fields_drops_empty():
    assert split_fields("\n\nab\n\ncd\n", "\n") == ["ab", "cd"]


def test_split_fields_only_separators():
    assert split_fields("\n\n\n", "\n") == []
    assert split_fields("", "\n") == []


def test_split_fields_join_invariant():
    fields = split_fields(",a,,bb,ccc,", ",")
    assert ",".join(fields) == "a,bb,ccc"


def test_split_fields_bad_separator():
    with pytest.raises(ValueError):
        split_fields("a b", "  ")


def test_substring_basic():
    assert substring("hello", 1, 3) == "ell"


def test_substring_clamped():
    assert substring("hello", 3, 100) == "lo"


def test_substring_start_past_end():
    assert substring("abc", 10, 2) == ""


def test_substring_negative():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)