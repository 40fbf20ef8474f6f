# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# The suffix array index: text, index points and lcp array, built
# together and never modified afterwards.
from suffixarray.search import PatternMatcher
from suffixarray.suffix_array import lcp_array, suffix_array
from suffixarray.text import TextBuffer

class SuffixArray:
    '''Index over all suffixes of a str or bytes text.

    >>> sa = SuffixArray('abracadabra')
    >>> sa.index_points()
    [10, 7, 0, 3, 5, 8, 1, 4, 6, 9, 2]
    >>> sa.search('ca')
    4

    method is 'doubling' or 'sais', defaulting to the
    SUFFIXARRAY_METHOD environment variable or 'doubling'. cancel is
    polled between construction rounds and Cancelled is raised if it
    returns true.
    '''
    def __init__(self, text = None, method = None, cancel = None):
        buf = TextBuffer(text)
        sa = suffix_array(buf.code_units(), method, cancel)
        rank, lcp = lcp_array(buf.text, sa)
        self._buf = buf
        self._sa = sa
        self._rank = rank
        self._lcp = lcp
        self._matcher = PatternMatcher(buf, sa)

    def __len__(self):
        return len(self._buf)

    def __contains__(self, pattern):
        return self.contains(pattern)

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._buf.text)

    def text(self):
        return self._buf.text

    def index_points(self):
        return list(self._sa)

    ipoint = index_points

    def lcp(self):
        return list(self._lcp)

    def rank(self):
        return list(self._rank)

    def contains(self, pattern):
        return self._matcher.contains(pattern)

    def count(self, pattern):
        return self._matcher.count(pattern)

    def occurrences(self, pattern, by_offset = False):
        return self._matcher.occurrences(pattern, by_offset)

    def search(self, pattern):
        '''Offset of the first occurrence of pattern in suffix order, or
        -1 if it doesn't occur.'''
        return self._matcher.search(pattern)

    def longest_repeat(self):
        '''Returns (offset, length) of the longest substring occurring
        at least twice. Ties go to the smallest suffix. (0, 0) if no
        code unit repeats.'''
        best_p, best_len = 0, 0
        for p, l in enumerate(self._lcp):
            if l > best_len:
                best_p, best_len = p, l
        if best_len == 0:
            return 0, 0
        return self._sa[best_p - 1], best_len

def construct(text = None, method = None, cancel = None):
    return SuffixArray(text, method, cancel)
