import random

import pytest

from algokit.general_sam import GeneralSuffixAutomaton


def _substrings(text):
    return {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}


def _random_strings(seed):
    rng = random.Random(seed)
    return [
        "".join(rng.choice("abc") for _ in range(rng.randint(1, 8)))
        for _ in range(rng.randint(1, 4))
    ]


@pytest.mark.parametrize("seed", range(25))
def test_distinct_substrings_match_brute(seed):
    strings = _random_strings(seed)
    expected = set().union(*(_substrings(s) for s in strings))
    assert GeneralSuffixAutomaton(strings).distinct_substrings() == len(expected)


@pytest.mark.parametrize("seed", range(25))
def test_longest_common_substring_matches_brute(seed):
    strings = _random_strings(seed + 100)
    common = set.intersection(*(_substrings(s) for s in strings))
    expected = max((len(x) for x in common), default=0)
    assert GeneralSuffixAutomaton(strings).longest_common_substring() == expected


def test_single_string_common_is_whole_string():
    automaton = GeneralSuffixAutomaton(["abcab"])
    assert automaton.longest_common_substring() == len("abcab")
    assert automaton.distinct_substrings() == len(_substrings("abcab"))


def test_no_strings():
    automaton = GeneralSuffixAutomaton([])
    assert automaton.distinct_substrings() == 0
    assert automaton.longest_common_substring() == 0


def test_disjoint_alphabets_share_nothing():
    automaton = GeneralSuffixAutomaton(["aaa", "bbb"])
    assert automaton.longest_common_substring() == 0
    assert automaton.distinct_substrings() == 6