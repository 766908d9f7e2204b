import pytest

from algokit.palindromes import (
    PalindromicTree,
    count_palindromic_splits,
    palindrome_value,
)


def test_palindrome_value_sample():
    assert palindrome_value("abacaba") == 7


def test_palindrome_value_of_palindrome_at_least_its_length():
    text = "racecar"
    assert palindrome_value(text) >= len(text)


def test_palindrome_value_at_least_letter_frequency():
    text = "abcbdbb"
    assert palindrome_value(text) >= max(text.count(ch) for ch in set(text))


def test_palindrome_value_empty():
    assert palindrome_value("") == 0


def test_add_returns_longest_palindromic_suffix():
    tree = PalindromicTree()
    tree.add("a")
    tree.add("b")
    node = tree.add("a")
    assert tree.length[node] == 3


def test_distinct_palindromes_bounded_by_length():
    tree = PalindromicTree()
    text = "abaabbaab"
    for ch in text:
        tree.add(ch)
    assert 1 <= len(tree) <= len(text)


def test_add_rejects_strings():
    with pytest.raises(ValueError):
        PalindromicTree().add("ab")


def test_splits_sample():
    assert count_palindromic_splits("abcdcdab") == 1


def test_splits_second_sample():
    assert count_palindromic_splits("abbababababbab") == 3


def test_odd_length_has_no_splits():
    assert count_palindromic_splits("abcba") == 0