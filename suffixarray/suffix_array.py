# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array and lcp array construction.
from os import environ
from suffixarray.errors import check_cancel
from suffixarray.sais import sais
from suffixarray.utils import SP, dense_ranks

import numpy as np

# Second key of offsets whose suffix ends before the compared prefix
# does. Real ranks are never negative.
SENTINEL_LOW = -1

def doubling_suffix_array(codes, cancel = None):
    '''Sorts the suffixes of codes, a sequence of non-negative ints, by
    prefix doubling. Each round sorts the offsets on the pair (rank of
    the first k units, rank of the next k units) which gives the ranks
    of the first 2k units.
    '''
    n = len(codes)
    rank = np.asarray(codes, dtype = np.int64)
    order = np.arange(n)
    SP.header('PREFIX DOUBLING', '%d code units', n)
    k = 1
    try:
        while k < n:
            check_cancel(cancel)
            second = np.full(n, SENTINEL_LOW, dtype = np.int64)
            second[:n - k] = rank[k:]
            order = np.lexsort((second, rank))
            changed = np.logical_or(np.diff(rank[order]),
                                    np.diff(second[order]))
            rank = np.empty(n, dtype = np.int64)
            rank[order[0]] = 0
            rank[order[1:]] = np.cumsum(changed)
            n_distinct = int(rank[order[-1]]) + 1
            SP.print('k = %d: %d distinct ranks.', (k, n_distinct))
            if n_distinct == n:
                break
            k *= 2
    finally:
        SP.leave()
    assert n <= 1 or len(set(rank.tolist())) == n
    return order.tolist()

def sais_suffix_array(codes, cancel = None):
    if len(codes) == 0:
        return []
    seq, upper = dense_ranks([int(c) for c in codes])
    SP.header('INDUCED SORTING', '%d code units, %d symbols',
              (len(seq), upper + 1))
    try:
        sa = sais(seq, upper, cancel)
    finally:
        SP.leave()
    return sa

METHODS = {
    'doubling' : doubling_suffix_array,
    'sais' : sais_suffix_array
}

def default_method():
    return environ.get('SUFFIXARRAY_METHOD', 'doubling')

def get_method(name):
    if name is None:
        name = default_method()
    fun = METHODS.get(name)
    if fun:
        return fun
    names = sorted(METHODS)
    fmt = '%s is not a construction method. Specify one of %s'
    raise ValueError(fmt % (name, ', '.join(names)))

def suffix_array(codes, method = None, cancel = None):
    sa = get_method(method)(codes, cancel)
    assert sorted(sa) == list(range(len(codes)))
    return sa

def lcp_array(seq, sa):
    '''Returns both the rank array and the lcp array using Kasai's
    algorithm. lcp[p] is the length of the common prefix of the
    suffixes at sa[p - 1] and sa[p] and lcp[0] is 0.

    Offsets are visited in text order. The match length carried over
    from offset i to offset i + 1 drops by at most one, so the inner
    loop runs at most 2n times in total.
    '''
    n = len(sa)
    lcp = [0] * n
    rank = [0] * n
    for i in range(n):
        rank[sa[i]] = i
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            k = 0
            continue
        j = sa[rank_el - 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
        if k > 0:
            k -= 1
    return rank, lcp
