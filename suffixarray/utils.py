# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Printing and small sequence helpers.
from termtables import to_string

class StructuredPrinter:
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

def find_subseq(seq, subseq):
    '''Find indices to occurrences of subseq in seq by scanning every
    offset. Quadratic, so only useful for checking the index against.
    '''
    l = len(subseq)
    for i in range(len(seq) - l + 1):
        if seq[i:i+l] == subseq:
            yield i

def dense_ranks(seq):
    '''Maps each item of seq to its position in the sorted set of
    distinct items. Returns the mapped list and the largest rank.
    '''
    vocab = sorted(set(seq))
    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    return [ch2idx[ch] for ch in seq], len(vocab) - 1

def print_term_table(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    if not rows:
        print(' (empty)')
        return
    s = to_string(rows,
                  header = header,
                  padding = (0, 0, 0, 0),
                  alignment = alignment,
                  style = "            -- ")
    m = len(s.splitlines()[1]) - 2
    print(' ' + '=' * m)
    print(s)
    print(' ' + '=' * m)
