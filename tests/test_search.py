# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from random import Random
from suffixarray.search import PatternMatcher, boundary, compare_suffix
from suffixarray.suffix_array import suffix_array
from suffixarray.text import TextBuffer
from suffixarray.utils import find_subseq

def matcher(text):
    buf = TextBuffer(text)
    return PatternMatcher(buf, suffix_array(buf.code_units()))

def test_compare_suffix():
    examples = [
        # text, pattern, ofs, expected
        ('banana', 'ana', 1, (0, 3)),
        ('banana', 'ana', 3, (0, 3)),
        ('banana', 'ana', 5, (-1, 1)),
        ('banana', 'ana', 0, (1, 0)),
        ('banana', 'anb', 1, (-1, 2)),
        ('banana', '', 2, (0, 0))
        ]
    for text, pattern, ofs, expected in examples:
        assert compare_suffix(text, pattern, ofs, 0) == expected

def test_boundary():
    text = 'banana'
    sa = [5, 3, 1, 0, 4, 2]
    assert boundary(text, sa, 'ana', False) == 1
    assert boundary(text, sa, 'ana', True) == 3
    assert boundary(text, sa, 'c', False) == 4
    assert boundary(text, sa, 'z', False) == 6
    assert boundary(text, sa, '', False) == 0
    assert boundary(text, sa, '', True) == 6

def test_banana():
    m = matcher('banana')
    assert m.occurrences('ana') == [3, 1]
    assert m.occurrences('ana', True) == [1, 3]
    assert m.count('ana') == 2
    assert m.contains('ana')
    assert m.search('ana') == 3
    assert m.occurrences('nan') == [2]
    assert m.count('banana') == 1
    assert m.count('bananas') == 0
    assert m.count('x') == 0
    assert m.search('x') == -1

def test_empty_pattern_matches_everywhere():
    m = matcher('abracadabra')
    assert m.count('') == 11
    assert m.occurrences('', True) == list(range(11))
    assert m.contains('')

def test_empty_text():
    m = matcher('')
    assert m.count('') == 0
    assert m.occurrences('a') == []
    assert not m.contains('a')
    assert m.search('') == -1

def test_absent_or_odd_patterns():
    m = matcher('banana')
    for pattern in [None, 5, ['a'], 'banana!', b'\xff']:
        assert m.find_range(pattern) == (0, 0)
        assert m.occurrences(pattern) == []
        assert not m.contains(pattern)

def test_bytes_text():
    m = matcher('añana'.encode('utf-8'))
    assert m.occurrences('ña', True) == [1]
    assert m.occurrences(b'a', True) == [0, 3, 5]

def test_random_patterns():
    rnd = Random(42)
    for _ in range(30):
        n = rnd.randrange(0, 80)
        text = ''.join(rnd.choice('abc') for _ in range(n))
        m = matcher(text)
        for _ in range(20):
            l = rnd.randrange(0, 6)
            if text and rnd.random() < 0.5:
                i = rnd.randrange(len(text))
                pattern = text[i:i + l]
            else:
                pattern = ''.join(rnd.choice('abcd') for _ in range(l))
            # The empty pattern matches at every offset but not at n.
            expected = [i for i in find_subseq(text, pattern)
                        if i < len(text)]
            assert m.occurrences(pattern, True) == expected
            assert m.count(pattern) == len(expected)

def test_unencodable_pattern_on_bytes_text():
    m = matcher(b'banana')
    for pattern in ['\ud800', 'a\udbff', '\ud800ana']:
        assert m.find_range(pattern) == (0, 0)
        assert m.count(pattern) == 0
        assert m.search(pattern) == -1
    assert m.count('\udc80') == 0
