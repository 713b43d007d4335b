import random

import pytest
from hypothesis import given, strategies as st

from dsakit.strings import (
    compare_version,
    count_and_say,
    find_first,
    is_anagram,
    is_valid_parentheses,
    longest_common_prefix,
)


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_of_nothing():
    assert longest_common_prefix([]) == ""


@given(st.lists(st.text(alphabet="ab", max_size=6), min_size=1, max_size=6))
def test_longest_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    if all(len(s) > len(prefix) for s in strs):
        assert len({s[len(prefix)] for s in strs}) > 1


balanced = st.recursive(
    st.just(""),
    lambda inner: st.builds(
        lambda a, b, pair: pair[0] + a + pair[1] + b,
        inner,
        inner,
        st.sampled_from(["()", "[]", "{}"]),
    ),
    max_leaves=10,
)


@given(balanced)
def test_balanced_brackets_are_valid(s):
    assert is_valid_parentheses(s) is True
    assert is_valid_parentheses(s + ")") is False
    assert is_valid_parentheses("]" + s) is False


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "a", "((("])
def test_invalid_brackets(s):
    assert is_valid_parentheses(s) is False


@pytest.mark.parametrize("s", ["", "()[]{}", "(a)"])
def test_valid_brackets(s):
    assert is_valid_parentheses(s) is True


@given(st.text(alphabet="ab", max_size=12), st.text(alphabet="ab", min_size=1, max_size=3))
def test_find_first_locates_first_occurrence(haystack, needle):
    index = find_first(haystack, needle)
    if index == -1:
        assert needle not in haystack
    else:
        assert haystack[index:index + len(needle)] == needle
        assert needle not in haystack[:index + len(needle) - 1]


def test_find_first_empty_needle_is_not_found():
    assert find_first("abc", "") == -1


def test_find_first_absent():
    assert find_first("leetcode", "leeto") == -1


def test_count_and_say_first_terms():
    assert count_and_say(1) == "1"
    assert count_and_say(4) == "1211"


@pytest.mark.parametrize("n", range(1, 12))
def test_count_and_say_next_term_describes_previous(n):
    following = count_and_say(n + 1)
    decoded = "".join(
        digit * int(count) for count, digit in zip(following[::2], following[1::2])
    )
    assert decoded == count_and_say(n)


def test_count_and_say_rejects_zero():
    with pytest.raises(ValueError):
        count_and_say(0)


versions = st.lists(st.integers(0, 20), min_size=1, max_size=4)


def _dotted(parts):
    return ".".join(map(str, parts))


@given(versions)
def test_compare_version_ignores_trailing_zero_revisions(parts):
    version = _dotted(parts)
    assert compare_version(version, version) == 0
    assert compare_version(version, version + ".0") == 0
    assert compare_version(version + ".0.0", version) == 0


@given(versions, versions)
def test_compare_version_is_antisymmetric(a, b):
    result = compare_version(_dotted(a), _dotted(b))
    assert result in (-1, 0, 1)
    assert result == -compare_version(_dotted(b), _dotted(a))


@given(versions, st.data())
def test_compare_version_bumped_revision_is_newer(parts, data):
    position = data.draw(st.integers(0, len(parts) - 1))
    bumped = list(parts)
    bumped[position] += 1
    assert compare_version(_dotted(parts), _dotted(bumped)) == -1
    assert compare_version(_dotted(bumped), _dotted(parts)) == 1


def test_compare_version_leading_zeros():
    assert compare_version("1.01", "1.001") == 0


def test_compare_version_rejects_empty_revision():
    with pytest.raises(ValueError):
        compare_version("1..2", "1")


@given(st.text(max_size=15), st.randoms())
def test_shuffled_text_is_anagram(s, rng):
    chars = list(s)
    rng.shuffle(chars)
    shuffled = "".join(chars)
    assert is_anagram(s, shuffled) is True
    assert is_anagram(s, shuffled + "x") is False


def test_different_letters_are_not_anagrams():
    rng = random.Random(0)
    assert is_anagram("rat", "car") is False
    assert is_anagram("anagram", "".join(rng.sample("anagram", 7))) is True