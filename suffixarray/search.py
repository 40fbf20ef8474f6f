# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Substring queries by binary search over the suffix array.
#
# Both bounds are found with the lower + 1 != upper loop, keeping the
# length of the match between the pattern and the suffixes at the two
# boundaries. Every suffix between the boundaries shares at least the
# smaller of those lengths with the pattern, so comparisons can skip
# that many code units.

def compare_suffix(text, pattern, ofs, skip):
    '''Compares the suffix at ofs with pattern, starting at code unit
    skip which must already be known to match. A suffix having pattern
    as a prefix compares equal. Returns (cmp, matched) where cmp is
    negative, zero or positive as the suffix is smaller, equal or
    larger and matched is the length of the common prefix.
    '''
    n = len(text)
    m = len(pattern)
    i = skip
    while i < m:
        if ofs + i >= n:
            # Suffix ran out first so it is smaller.
            return -1, i
        a = text[ofs + i]
        b = pattern[i]
        if a != b:
            return (-1 if a < b else 1), i
        i += 1
    return 0, m

def boundary(text, sa, pattern, inclusive, low = 0, high = None):
    '''Returns the first index p in [low, high) such that the suffix at
    sa[p] compares greater than pattern (inclusive) or not smaller than
    it (not inclusive).'''
    if high is None:
        high = len(sa)
    lower = low - 1
    upper = high
    lower_lcp = upper_lcp = 0
    while lower + 1 != upper:
        mid = (lower + upper) // 2
        skip = min(lower_lcp, upper_lcp)
        cmp, matched = compare_suffix(text, pattern, sa[mid], skip)
        if cmp < 0 or (inclusive and cmp == 0):
            lower = mid
            lower_lcp = matched
        else:
            upper = mid
            upper_lcp = matched
    return upper

class PatternMatcher:
    '''Answers substring queries over a text and its suffix array.

    The empty pattern is a prefix of every suffix so it matches every
    offset: its range is the whole array. Patterns longer than the text
    or that can't be compared with it (None, ints, bytes that aren't
    UTF-8 against a str text) match nothing. No query raises.
    '''
    def __init__(self, buf, sa):
        self.buf = buf
        self.sa = sa

    def find_range(self, pattern):
        pattern = self.buf.coerce(pattern)
        n = len(self.sa)
        if pattern is None or len(pattern) > n:
            return 0, 0
        text = self.buf.text
        lo = boundary(text, self.sa, pattern, False)
        hi = boundary(text, self.sa, pattern, True, lo)
        return lo, hi

    def contains(self, pattern):
        lo, hi = self.find_range(pattern)
        return lo < hi

    def count(self, pattern):
        lo, hi = self.find_range(pattern)
        return hi - lo

    def occurrences(self, pattern, by_offset = False):
        lo, hi = self.find_range(pattern)
        ofs = self.sa[lo:hi]
        if by_offset:
            ofs.sort()
        return ofs

    def search(self, pattern):
        lo, hi = self.find_range(pattern)
        if lo < hi:
            return self.sa[lo]
        return -1
