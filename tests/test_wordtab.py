import pytest
from hypothesis import given
from hypothesis import strategies as st

from minirt.wordtab import find_substring, find_unquoted, split_words


def test_split_words_spaces_and_tabs():
    assert split_words(" a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


_word = st.text(
    alphabet=st.characters(blacklist_characters=" \t", blacklist_categories=("Cs",)),
    min_size=1,
)


@given(st.lists(_word), st.sampled_from([" ", "\t", " \t ", "  "]))
def test_split_words_round_trip(words, separator):
    assert split_words(separator + separator.join(words)) == words


def test_find_substring_locates_needle():
    text = "hello world"
    pos = find_substring(text, "world", len(text))
    assert text[pos:pos + 5] == "world"
    assert pos == text.index("world")


def test_find_substring_missing():
    assert find_substring("abc", "zz", 3) == -1


def test_find_substring_needle_longer_than_length():
    assert find_substring("abcd", "abcd", 3) == -1


def test_find_substring_empty_needle():
    with pytest.raises(ValueError):
        find_substring("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = 'say "key" key'
    assert find_unquoted(text, "key", len(text)) == text.rindex("key")
    assert find_substring(text, "key", len(text)) == text.index("key")


def test_find_unquoted_only_quoted():
    text = 'x "abc"'
    assert find_unquoted(text, "abc", len(text)) == -1


def test_find_unquoted_needle_longer_than_length():
    assert find_unquoted("abc", "abc", 2) == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)


_plain = st.text(alphabet="abc ", max_size=20)


@given(_plain, st.text(alphabet="abc", min_size=1, max_size=3))
def test_find_unquoted_matches_find_without_quotes(text, needle):
    assert find_unquoted(text, needle, len(text)) == text.find(needle)
    assert find_substring(text, needle, len(text)) == text.find(needle)