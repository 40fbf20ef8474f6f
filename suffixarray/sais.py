# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Linear time suffix sorting by induced sorting (SA-IS), after Nong,
# Zhang and Chan. The end of the text acts as a virtual sentinel smaller
# than every symbol, so shorter suffixes sort before longer ones that
# they are prefixes of.
from suffixarray.errors import check_cancel
from suffixarray.utils import SP

def sais(s, upper, cancel = None):
    '''Returns the suffix array of s, a list of ints in [0, upper].'''
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1] if s[0] < s[1] else [1, 0]
    check_cancel(cancel)

    # ls[i] is True if the suffix at i is S-type, i.e. smaller than
    # the suffix at i + 1.
    ls = [False] * n
    for i in range(n - 2, -1, -1):
        ls[i] = ls[i + 1] if s[i] == s[i + 1] else s[i] < s[i + 1]

    # Bucket starts: sum_l[c] is where L-type suffixes starting with c
    # go, sum_s[c] where S-type ones do.
    sum_l = [0] * (upper + 1)
    sum_s = [0] * (upper + 1)
    for i in range(n):
        if not ls[i]:
            sum_s[s[i]] += 1
        else:
            sum_l[s[i] + 1] += 1
    for i in range(upper + 1):
        sum_s[i] += sum_l[i]
        if i < upper:
            sum_l[i + 1] += sum_s[i]

    sa = [-1] * n

    def induce(lms):
        for i in range(n):
            sa[i] = -1
        buf = sum_s[:]
        for d in lms:
            if d == n:
                continue
            sa[buf[s[d]]] = d
            buf[s[d]] += 1
        buf = sum_l[:]
        sa[buf[s[n - 1]]] = n - 1
        buf[s[n - 1]] += 1
        for i in range(n):
            v = sa[i]
            if v >= 1 and not ls[v - 1]:
                sa[buf[s[v - 1]]] = v - 1
                buf[s[v - 1]] += 1
        buf = sum_l[:]
        for i in range(n - 1, -1, -1):
            v = sa[i]
            if v >= 1 and ls[v - 1]:
                buf[s[v - 1] + 1] -= 1
                sa[buf[s[v - 1] + 1]] = v - 1

    lms_map = [-1] * (n + 1)
    lms = []
    for i in range(1, n):
        if not ls[i - 1] and ls[i]:
            lms_map[i] = len(lms)
            lms.append(i)
    m = len(lms)
    SP.print('%d code units, %d lms suffixes.', (n, m))

    induce(lms)
    if not m:
        return sa

    # Name the lms substrings in sorted order and recurse on the names
    # if any of them are equal.
    sorted_lms = [v for v in sa if lms_map[v] != -1]
    rec_s = [0] * m
    rec_upper = 0
    for i in range(1, m):
        l = sorted_lms[i - 1]
        r = sorted_lms[i]
        end_l = lms[lms_map[l] + 1] if lms_map[l] + 1 < m else n
        end_r = lms[lms_map[r] + 1] if lms_map[r] + 1 < m else n
        same = True
        if end_l - l != end_r - r:
            same = False
        else:
            while l < end_l:
                if s[l] != s[r]:
                    break
                l += 1
                r += 1
            if l == n or r == n or s[l] != s[r]:
                same = False
        if not same:
            rec_upper += 1
        rec_s[lms_map[sorted_lms[i]]] = rec_upper

    rec_sa = sais(rec_s, rec_upper, cancel)
    sorted_lms = [lms[i] for i in rec_sa]
    induce(sorted_lms)
    return sa
