# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from suffixarray.utils import SP, dense_ranks, find_subseq

def test_find_subseq():
    assert list(find_subseq('banana', 'ana')) == [1, 3]
    assert list(find_subseq('banana', '')) == list(range(7))
    assert list(find_subseq('ban', 'banana')) == []

def test_dense_ranks():
    seq, upper = dense_ranks([100, 3, 100, 7])
    assert seq == [2, 0, 2, 1]
    assert upper == 2

def test_printer_disabled(capsys):
    SP.header('BUILDING')
    SP.print('%d rounds', 3)
    SP.leave()
    assert capsys.readouterr().out == ''

def test_printer_indents(capsys):
    SP.enabled = True
    try:
        SP.header('BUILDING', '%d code units', 6)
        SP.print('%d rounds', 3)
        SP.leave()
    finally:
        SP.enabled = False
    assert capsys.readouterr().out == '* BUILDING 6 code units\n  3 rounds\n'
