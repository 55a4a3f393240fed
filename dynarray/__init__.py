# -*- coding: utf-8 -*-

from dynarray._policy import DEFAULT_CAPACITY, GROWTH_FACTOR, compute_growth, should_shrink, compute_shrink

from dynarray._dynamic_array import DynamicArray, IndexOutOfRangeError, dynarray, da

from dynarray._algorithms import reverse, substring, is_anagram, rotate_array, two_sum, SubstringRangeError

from _dynarray_version import __version__

__all__ = ('DynamicArray', 'IndexOutOfRangeError', 'dynarray', 'da',
           'reverse', 'substring', 'is_anagram', 'rotate_array', 'two_sum', 'SubstringRangeError',
           'DEFAULT_CAPACITY', 'GROWTH_FACTOR', 'compute_growth', 'should_shrink', 'compute_shrink')
