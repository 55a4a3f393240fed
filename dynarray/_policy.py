"""
Capacity policy for DynamicArray.

Growth and shrink decisions are plain functions of (size, capacity) so that
they can be reasoned about and tested without touching any storage.
"""
import os

GROWTH_FACTOR = 2
SHRINK_DIVISOR = 4


def _capacity_from_env(name, default):
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        capacity = int(value)
    except ValueError:
        raise ValueError("%s must be an integer, was %r" % (name, value))

    if capacity < 0:
        raise ValueError("%s cannot be negative, was %s" % (name, capacity))

    return capacity


DEFAULT_CAPACITY = _capacity_from_env('DYNARRAY_DEFAULT_CAPACITY', 10)


def compute_growth(capacity, min_capacity):
    """
    Return the capacity needed to hold min_capacity elements.

    The current capacity is returned unchanged when it is already large enough.
    Otherwise the capacity is doubled, or set to min_capacity if doubling is
    not enough. An empty (zero) capacity starts over from DEFAULT_CAPACITY.

    >>> compute_growth(10, 11)
    20
    >>> compute_growth(10, 25)
    25
    >>> compute_growth(0, 1)
    10
    >>> compute_growth(8, 5)
    8
    >>> compute_growth(0, 0)
    0
    """
    if min_capacity <= capacity:
        return capacity

    if capacity == 0:
        return max(DEFAULT_CAPACITY, min_capacity)

    return max(capacity * GROWTH_FACTOR, min_capacity)


def should_shrink(size, capacity):
    """
    True when utilization has dropped below a quarter of the capacity.

    An empty container is never shrunk, only a non-empty one that is
    sparsely used.

    >>> should_shrink(2, 20)
    True
    >>> should_shrink(5, 20)
    False
    >>> should_shrink(0, 20)
    False
    """
    return 0 < size < capacity // SHRINK_DIVISOR


def compute_shrink(capacity):
    return capacity // GROWTH_FACTOR
