# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
"""Suffix array tool

Usage:
    suffix-array [-hv] index <file> [--method=<s> --bytes --lcp]
    suffix-array [-hv] search <file> <pattern>...
        [--method=<s> --bytes]
    suffix-array [-hv] repeat <file> [--method=<s> --bytes]

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --method=<s>           construction method; doubling or sais
    --bytes                index the raw bytes of the file instead of
                           its UTF-8 decoded text
    --lcp                  also print the lcp array
"""
from docopt import docopt
from pathlib import Path
from suffixarray.index import SuffixArray
from suffixarray.suffix_array import get_method
from suffixarray.utils import SP, print_term_table
from sys import exit
from time import time

def load_index(path, method, as_bytes):
    if as_bytes:
        text = path.read_bytes()
    else:
        text = path.read_text(encoding = 'utf-8')
    SP.header('INDEXING %s' % path)
    try:
        start = time()
        sa = SuffixArray(text, method)
        SP.print('Built in %.2f seconds.' % (time() - start))
    finally:
        SP.leave()
    return sa

def print_index(sa, with_lcp):
    text = sa.text()
    sa_ofs = sa.index_points()
    lcp = sa.lcp()
    def prefix(ofs):
        return repr(text[ofs:ofs + 20])
    if with_lcp:
        rows = list(zip(range(len(sa_ofs)), sa_ofs, lcp, sa_ofs))
        print_term_table(['%d', '%d', '%d', prefix], rows,
                         ['Pos', 'Offset', 'LCP', 'Suffix'], 'rrrl')
    else:
        rows = list(zip(range(len(sa_ofs)), sa_ofs, sa_ofs))
        print_term_table(['%d', '%d', prefix], rows,
                         ['Pos', 'Offset', 'Suffix'], 'rrl')

def print_matches(sa, patterns):
    def fmt_offsets(ofs):
        s = ', '.join(str(o) for o in ofs[:10])
        if len(ofs) > 10:
            s += ', ...'
        return s
    rows = [(pat, sa.count(pat), sa.occurrences(pat, True))
            for pat in patterns]
    print_term_table(['%s', '%d', fmt_offsets], rows,
                     ['Pattern', 'Count', 'Offsets'], 'lrl')

def print_repeat(sa):
    ofs, n = sa.longest_repeat()
    if n == 0:
        print('No repeated substrings.')
        return
    text = sa.text()
    print('%d %r' % (ofs, text[ofs:ofs + n]))

def main(argv = None):
    args = docopt(__doc__, argv = argv, version = 'Suffix array tool 1.0')
    SP.enabled = args['--verbose']

    try:
        get_method(args['--method'])
    except ValueError as e:
        exit(str(e))

    path = Path(args['<file>'])
    sa = load_index(path, args['--method'], args['--bytes'])
    if args['index']:
        print_index(sa, args['--lcp'])
    elif args['search']:
        patterns = args['<pattern>']
        if args['--bytes']:
            patterns = [p.encode('utf-8') for p in patterns]
        print_matches(sa, patterns)
    elif args['repeat']:
        print_repeat(sa)

if __name__ == '__main__':
    main()
