"""
String and array algorithms built on plain sequences and DynamicArray.
"""
from dynarray._dynamic_array import DynamicArray

ALPHABET_SIZE = 256


class SubstringRangeError(IndexError, ValueError):
    """
    Raised by substring() for bounds outside the sequence or in the wrong order.

    Attributes:
    start -- requested start index (inclusive)
    end -- requested end index (exclusive)
    length -- length of the sequence
    """
    def __init__(self, start, end, length, *args, **kwargs):
        super(SubstringRangeError, self).__init__(
            "Invalid substring indices: start=%s, end=%s, length=%s" % (start, end, length), *args, **kwargs)
        self.start = start
        self.end = end
        self.length = length


def _reverse_range(chars, start, end):
    # Both ends inclusive
    while start < end:
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1


def reverse(sequence):
    """
    Return a copy of sequence with the order of the elements inverted. Strings give
    strings back, other sequences give a list. The argument is left untouched.

    >>> reverse('Hello, World!')
    '!dlroW ,olleH'
    >>> reverse([1, 2, 3])
    [3, 2, 1]
    >>> reverse(None) is None
    True
    """
    if sequence is None:
        return None

    chars = list(sequence)
    _reverse_range(chars, 0, len(chars) - 1)
    if isinstance(sequence, str):
        return ''.join(chars)

    return chars


def substring(sequence, start, end):
    """
    Return the part of sequence from start (inclusive) to end (exclusive).

    >>> substring('Hello, World!', 7, 12)
    'World'
    >>> substring('Hello', 3, 2)
    Traceback (most recent call last):
    ...
    dynarray._algorithms.SubstringRangeError: Invalid substring indices: start=3, end=2, length=5
    """
    if sequence is None:
        return None

    length = len(sequence)
    if start < 0 or end > length or start > end:
        raise SubstringRangeError(start, end, length)

    result = [sequence[start + i] for i in range(end - start)]
    if isinstance(sequence, str):
        return ''.join(result)

    return result


def is_anagram(first, second):
    """
    True if second is a rearrangement of exactly the characters in first.

    Characters are tallied in a fixed table of ALPHABET_SIZE counters, a
    character outside it gives a ValueError. Two None arguments are considered
    anagrams, a single None is not.

    >>> is_anagram('listen', 'silent')
    True
    >>> is_anagram('listen', 'hello')
    False
    """
    if first is None or second is None:
        return first is second

    if len(first) != len(second):
        return False

    counts = [0] * ALPHABET_SIZE
    for c in first:
        counts[_code_point(c)] += 1

    for c in second:
        code = _code_point(c)
        counts[code] -= 1
        if counts[code] < 0:
            return False

    return True


def _code_point(c):
    code = ord(c)
    if code >= ALPHABET_SIZE:
        raise ValueError("Character %r is outside the supported alphabet of %d characters" % (c, ALPHABET_SIZE))

    return code


def rotate_array(chars, k):
    """
    Rotate the mutable sequence chars k steps to the right, in place.

    Reverses the whole sequence, then the first k elements and finally the
    remaining ones, so no extra buffer is needed. A negative k rotates to the
    left.

    >>> chars = list('abcdefg')
    >>> rotate_array(chars, 3)
    >>> ''.join(chars)
    'efgabcd'
    """
    if chars is None or len(chars) <= 1:
        return

    n = len(chars)
    k = k % n
    if k == 0:
        return

    _reverse_range(chars, 0, n - 1)
    _reverse_range(chars, 0, k - 1)
    _reverse_range(chars, k, n - 1)


def two_sum(nums, target):
    """
    Find the index pairs [i, j], i < j, with nums[i] + nums[j] == target.

    The numbers are scanned once from the left. Every number is checked against
    the most recent index of its complement among the numbers before it, so a
    repeated value only pairs through its latest occurrence. Pairs are returned
    in the order they are found.

    >>> two_sum([2, 7, 11, 15], 9)
    [[0, 1]]
    >>> two_sum([3, 3, 3], 6)
    [[0, 1], [1, 2]]
    """
    if nums is None or len(nums) < 2:
        return []

    pairs = DynamicArray()
    seen = {}
    for idx, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            pairs.add((seen[complement], idx))

        seen[num] = idx

    return [[i, j] for i, j in pairs]
