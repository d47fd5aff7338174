import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import (
    find_substring,
    kmp_search,
    length_of_last_word,
    length_of_longest_substring,
    lps_array,
    postfix_to_infix,
)

small_text = st.text(alphabet="abc", max_size=30)


def test_kmp_search_source_example():
    assert kmp_search("abxabcabcaby", "abcaby") == [6]


@given(text=small_text, pattern=st.text(alphabet="abc", min_size=1, max_size=4))
def test_kmp_search_finds_all_occurrences(text, pattern):
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert kmp_search(text, pattern) == expected


def test_kmp_search_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


def test_lps_array_pinned():
    assert lps_array("abcaby") == [0, 0, 0, 1, 2, 0]


@given(pattern=small_text)
def test_lps_array_invariant(pattern):
    lps = lps_array(pattern)
    assert len(lps) == len(pattern)
    for end, length in enumerate(lps, start=1):
        assert 0 <= length < end
        assert pattern[:length] == pattern[end - length:end]


def test_longest_substring_source_examples():
    assert length_of_longest_substring("abcabcbb") == 3
    assert length_of_longest_substring("bbbbb") == 1
    assert length_of_longest_substring("") == 0


@given(text=st.text(alphabet="abcde", max_size=30))
def test_longest_substring_has_distinct_window(text):
    best = length_of_longest_substring(text)
    assert best <= len(set(text))
    windows = [text[i:i + best] for i in range(len(text) - best + 1)]
    assert any(len(set(w)) == best for w in windows)
    longer = [text[i:i + best + 1] for i in range(len(text) - best)]
    assert all(len(set(w)) < best + 1 for w in longer)


@given(
    words=st.lists(st.text(alphabet="xy", min_size=1, max_size=6), min_size=1, max_size=5),
    trailing=st.integers(0, 3),
)
def test_length_of_last_word(words, trailing):
    text = " ".join(words) + " " * trailing
    assert length_of_last_word(text) == len(words[-1])


def test_length_of_last_word_blank():
    assert length_of_last_word("   ") == 0
    assert length_of_last_word("") == 0


def test_find_substring_missing():
    assert find_substring("abc", "z") is None


def test_postfix_to_infix_simple():
    assert postfix_to_infix("ab+") == "(a+b)"
    assert postfix_to_infix("ab+c*") == "((a+b)*c)"


def test_postfix_to_infix_ignores_unknown_characters():
    assert postfix_to_infix("a b +") == postfix_to_infix("ab+")


def test_postfix_single_operand():
    assert postfix_to_infix("x") == "x"


@pytest.mark.parametrize("expression", ["a+", "+", "", "  "])
def test_postfix_to_infix_malformed(expression):
    with pytest.raises(ValueError):
        postfix_to_infix(expression)