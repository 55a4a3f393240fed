"""
Hypothesis-based tests for the string and array algorithms.
"""
from hypothesis import given, strategies as st

from dynarray import reverse, substring, is_anagram, rotate_array, two_sum

Latin1Text = st.text(alphabet=st.characters(max_codepoint=255))


@given(Latin1Text)
def test_reverse_twice_is_identity(s):
    assert reverse(reverse(s)) == s


@given(Latin1Text)
def test_reverse_matches_slicing(s):
    assert reverse(s) == s[::-1]


@given(Latin1Text, st.data())
def test_substring_matches_slicing(s, data):
    start = data.draw(st.integers(0, len(s)))
    end = data.draw(st.integers(start, len(s)))

    assert substring(s, start, end) == s[start:end]


@given(Latin1Text, st.randoms())
def test_permutation_is_anagram(s, random):
    chars = list(s)
    random.shuffle(chars)

    assert is_anagram(''.join(chars), s)


@given(Latin1Text)
def test_extra_character_is_not_anagram(s):
    assert not is_anagram(s, s + 'x')


@given(Latin1Text, Latin1Text)
def test_anagram_matches_sorting(a, b):
    assert is_anagram(a, b) == (sorted(a) == sorted(b))


@given(st.lists(st.integers(), min_size=1), st.integers(0, 1000))
def test_rotate_is_periodic(items, k):
    chars = list(items)
    n = len(chars)

    rotate_array(chars, k)
    rotate_array(chars, (n - k % n) % n)

    assert chars == items


@given(st.lists(st.integers(), min_size=1), st.integers(0, 1000))
def test_rotate_moves_tail_to_front(items, k):
    chars = list(items)
    rotate_array(chars, k)

    k %= len(items)
    assert chars == items[len(items) - k:] + items[:len(items) - k]


@given(st.lists(st.integers(-20, 20)), st.integers(-40, 40))
def test_two_sum_pairs_add_up(nums, target):
    pairs = two_sum(nums, target)

    for i, j in pairs:
        assert i < j
        assert nums[i] + nums[j] == target

    # Every position pairs at most once with an earlier one
    assert len(set(j for _, j in pairs)) == len(pairs)
    assert [j for _, j in pairs] == sorted(j for _, j in pairs)


@given(st.lists(st.integers(-20, 20)), st.integers(-40, 40))
def test_two_sum_finds_every_complement(nums, target):
    found = set(j for _, j in two_sum(nums, target))
    expected = set(j for j in range(len(nums)) if target - nums[j] in nums[:j])

    assert found == expected
