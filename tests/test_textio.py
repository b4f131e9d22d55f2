import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minirt.textio import LineReader, compare_prefix, parse_int, read_lines


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17abc", -17),
        ("\t\n\v\f\r +5", 5),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
        ("007", 7),
        ("12 34", 12),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_parse_int_positive_overflow_gives_minus_one():
    assert parse_int("9223372036854775808") == -1


def test_parse_int_negative_overflow_gives_zero():
    assert parse_int("-9223372036854775808") == 0


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_parse_int_round_trips_int_range(value):
    assert parse_int(str(value)) == value


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1), st.text(alphabet=" \t\n"))
def test_parse_int_ignores_leading_blanks(value, blanks):
    assert parse_int(blanks + str(value)) == parse_int(str(value))


def test_compare_prefix_equal_within_limit():
    assert compare_prefix("abc", "abd", 2) == 0


def test_compare_prefix_difference_at_limit():
    assert compare_prefix("abc", "abd", 3) == ord("c") - ord("d")


def test_compare_prefix_shorter_string():
    assert compare_prefix("ab", "abc", 5) == -ord("c")


def test_compare_prefix_zero_length():
    assert compare_prefix("x", "y", 0) == 0


def test_compare_prefix_same_strings_beyond_end():
    assert compare_prefix("abc", "abc", 100) == 0


def test_compare_prefix_bytes_are_unsigned():
    assert compare_prefix(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_compare_prefix_negative_n():
    with pytest.raises(ValueError):
        compare_prefix("a", "b", -1)


_ascii = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))


@given(_ascii, _ascii, st.integers(min_value=0, max_value=20))
def test_compare_prefix_antisymmetric(a, b, n):
    assert compare_prefix(a, b, n) == -compare_prefix(b, a, n)


@given(_ascii, _ascii, st.integers(min_value=0, max_value=20))
def test_compare_prefix_agrees_with_ordering(a, b, n):
    result = compare_prefix(a, b, n)
    left, right = a[:n], b[:n]
    assert (result < 0) == (left < right)
    assert (result == 0) == (left == right)


@pytest.mark.parametrize("size", [1, 2, 3, 10, 100])
def test_line_reader_text(size):
    reader = LineReader(io.StringIO("a\nbb\nccc"), buffer_size=size)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "bb\n"
    assert reader.read_line() == "ccc"
    assert reader.read_line() is None


def test_line_reader_binary():
    lines = list(LineReader(io.BytesIO(b"one\ntwo\n"), buffer_size=4))
    assert lines == [b"one\n", b"two\n"]


def test_line_reader_empty_lines():
    assert list(LineReader(io.StringIO("\n\nx\n"))) == ["\n", "\n", "x\n"]


def test_line_reader_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


@pytest.mark.parametrize("size", [0, -3, 2**31])
def test_line_reader_rejects_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text("A 0.2 255,255,255\nC 0,0,0 0,0,1 70\n")
    with path.open() as handle:
        lines = list(read_lines(handle))
    assert lines == ["A 0.2 255,255,255\n", "C 0,0,0 0,0,1 70\n"]


@given(st.text(), st.integers(min_value=1, max_value=16))
def test_line_reader_round_trip(text, size):
    lines = list(LineReader(io.StringIO(text, newline=""), buffer_size=size))
    assert "".join(lines) == text
    for line in lines[:-1]:
        assert line.endswith("\n")
    for line in lines:
        assert line.count("\n") <= 1
        assert line != ""