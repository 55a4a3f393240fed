from numbers import Integral
from types import GenericAlias
import logging

from dynarray._policy import DEFAULT_CAPACITY, compute_growth, compute_shrink, should_shrink

logger = logging.getLogger(__name__)


class IndexOutOfRangeError(IndexError):
    """
    Raised when an index falls outside the live part of a DynamicArray.

    Attributes:
    index -- the offending index
    size -- the number of elements in the array at the time of the call
    """
    def __init__(self, index, size, *args, **kwargs):
        super(IndexOutOfRangeError, self).__init__("Index: %s, Size: %s" % (index, size), *args, **kwargs)
        self.index = index
        self.size = size


def _check_integral(value):
    if not isinstance(value, Integral):
        raise TypeError("'%s' object cannot be interpreted as an index" % type(value).__name__)


class DynamicArray(object):
    """
    Resizable array. Meant for teaching how a list-like container manages its
    backing storage, and as an accumulator for the algorithms in this package.

    Elements live in a backing block of fixed length (the capacity). Appending
    to a full block replaces it with one twice as large, which makes append
    amortized O(1). Removing elements until less than a quarter of the block is
    in use halves it again. Empty arrays are never shrunk by a removal.

    Indexing is strict: only 0 <= index < size() is valid, negative indexes are
    out of range rather than counted from the end. Any index error is raised
    before the array is modified.

    The array is not synchronized. Callers sharing an instance between threads
    have to serialize access themselves.

    >>> a = DynamicArray()
    >>> a.capacity()
    10
    >>> for x in range(11):
    ...     a.add(x * 10)
    >>> a.size(), a.capacity()
    (11, 20)
    >>> a.insert(3, 333)
    >>> a.get(3)
    333
    >>> a.set(0, -1)
    0
    >>> a.remove(1)
    10
    >>> print(a)
    [-1, 20, 333, 30, 40, 50, 60, 70, 80, 90, 100]
    >>> a
    dynarray([-1, 20, 333, 30, 40, 50, 60, 70, 80, 90, 100])
    """
    __slots__ = ('_elements', '_size')

    __class_getitem__ = classmethod(GenericAlias)

    def __init__(self, initial_capacity=None):
        if initial_capacity is None:
            initial_capacity = DEFAULT_CAPACITY

        _check_integral(initial_capacity)
        if initial_capacity < 0:
            raise ValueError("Initial capacity cannot be negative: %s" % (initial_capacity,))

        self._elements = [None] * initial_capacity
        self._size = 0

    def size(self):
        """
        Number of elements in the array. O(1).
        """
        return self._size

    def is_empty(self):
        return self._size == 0

    def capacity(self):
        """
        Number of slots in the backing storage, always >= size(). O(1).
        """
        return len(self._elements)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size != 0

    def _check_index(self, index):
        _check_integral(index)
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)

    def get(self, index):
        """
        Return the element at index. O(1).

        >>> da('a', 'b').get(1)
        'b'
        >>> da('a', 'b').get(2)
        Traceback (most recent call last):
        ...
        dynarray._dynamic_array.IndexOutOfRangeError: Index: 2, Size: 2
        """
        self._check_index(index)
        return self._elements[index]

    __getitem__ = get

    def set(self, index, value):
        """
        Replace the element at index with value and return the element that was
        there before. The capacity is never changed. O(1).

        >>> a = da(1, 2, 3)
        >>> a.set(1, 22)
        2
        >>> a
        dynarray([1, 22, 3])
        """
        self._check_index(index)
        old_value = self._elements[index]
        self._elements[index] = value
        return old_value

    def __setitem__(self, index, value):
        self.set(index, value)

    def _resize(self, new_capacity):
        # Fresh storage, live elements copied in order
        self._elements = self._elements[:self._size] + [None] * (new_capacity - self._size)

    def _ensure_capacity(self, min_capacity):
        capacity = len(self._elements)
        new_capacity = compute_growth(capacity, min_capacity)
        if new_capacity != capacity:
            logger.debug('Growing capacity from %d to %d (size %d)', capacity, new_capacity, self._size)
            self._resize(new_capacity)

    def add(self, value):
        """
        Append value to the end of the array.

        O(1) amortized, O(n) for the call that has to grow the storage.
        """
        self._ensure_capacity(self._size + 1)
        self._elements[self._size] = value
        self._size += 1

    append = add

    def insert(self, index, value):
        """
        Insert value before index, shifting the elements from index onwards one
        step to the right. Inserting at size() is the same as add(). O(n).

        >>> a = da(1, 2, 3)
        >>> a.insert(0, 0)
        >>> a.insert(4, 4)
        >>> a
        dynarray([0, 1, 2, 3, 4])
        >>> a.insert(6, 6)
        Traceback (most recent call last):
        ...
        dynarray._dynamic_array.IndexOutOfRangeError: Index: 6, Size: 5
        """
        _check_integral(index)
        if index < 0 or index > self._size:
            raise IndexOutOfRangeError(index, self._size)

        self._ensure_capacity(self._size + 1)
        self._elements[index + 1:self._size + 1] = self._elements[index:self._size]
        self._elements[index] = value
        self._size += 1

    def remove(self, index):
        """
        Remove and return the element at index, shifting the following elements
        one step to the left. O(n).

        If less than a quarter of the capacity is in use afterwards, and the array
        is not empty, the capacity is halved.

        >>> a = dynarray(range(3), initial_capacity=16)
        >>> a.remove(0)
        0
        >>> a.capacity()
        8
        """
        self._check_index(index)
        removed = self._elements[index]
        self._elements[index:self._size - 1] = self._elements[index + 1:self._size]
        self._size -= 1
        self._elements[self._size] = None

        capacity = len(self._elements)
        if should_shrink(self._size, capacity):
            new_capacity = compute_shrink(capacity)
            logger.debug('Shrinking capacity from %d to %d (size %d)', capacity, new_capacity, self._size)
            self._resize(new_capacity)

        return removed

    def __delitem__(self, index):
        self.remove(index)

    def extend(self, iterable):
        """
        Append all values in iterable, one at a time.

        >>> a = da(1, 2)
        >>> a.extend([3, 4])
        >>> a
        dynarray([1, 2, 3, 4])
        """
        values = iterable.tolist() if isinstance(iterable, DynamicArray) else iterable
        for value in values:
            self.add(value)

    def __iter__(self):
        for i in range(self._size):
            yield self._elements[i]

    def __contains__(self, value):
        return any(element is value or element == value for element in self)

    def index(self, value):
        """
        Return the position of the first element equal to value.

        >>> da(1, 2, 3, 2).index(2)
        1
        """
        for i, element in enumerate(self):
            if element is value or element == value:
                return i

        raise ValueError("%r is not in dynarray" % (value,))

    def count(self, value):
        return sum(1 for element in self if element is value or element == value)

    def tolist(self):
        """
        The elements as a new Python list.
        """
        return self._elements[:self._size]

    def __eq__(self, other):
        if not isinstance(other, DynamicArray):
            return NotImplemented

        return self.tolist() == other.tolist()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    __hash__ = None

    def __str__(self):
        return '[' + ', '.join(str(element) for element in self) + ']'

    def __repr__(self):
        return 'dynarray({0})'.format(self.tolist())


def dynarray(iterable=(), initial_capacity=None):
    """
    Create a new DynamicArray containing the elements in iterable.

    >>> a = dynarray([1, 2, 3])
    >>> a
    dynarray([1, 2, 3])
    >>> a.capacity()
    10
    """
    result = DynamicArray(initial_capacity)
    result.extend(iterable)
    return result


def da(*elements):
    """
    Create a new DynamicArray containing all parameters to this function.

    >>> da(1, 2, 3)
    dynarray([1, 2, 3])
    """
    return dynarray(elements)
