import itertools
import os.path

import pytest

from kyopro.strings import (
    lcp_array,
    sa_doubling,
    sa_is,
    sa_naive,
    suffix_array,
    z_algorithm,
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _all_sequences():
    for n in range(1, 6):
        for tup in itertools.product(range(4), repeat=n):
            yield list(tup)
    for n in range(1, 11):
        for tup in itertools.product(range(2), repeat=n):
            yield list(tup)


def _common_prefix(x, y):
    return len(os.path.commonprefix([list(x), list(y)]))


def test_empty():
    assert suffix_array("") == []
    assert suffix_array([]) == []
    assert z_algorithm("") == []
    assert z_algorithm([]) == []


def test_sa_naive_orders_suffixes():
    for s in _all_sequences():
        sa = sa_naive(s)
        assert sorted(sa) == list(range(len(s)))
        assert all(s[a:] < s[b:] for a, b in zip(sa, sa[1:]))


def test_sa_lcp_against_naive():
    for s in _all_sequences():
        sa = sa_naive(s)
        assert suffix_array(s) == sa
        assert suffix_array(s, max(s)) == sa
        lcp = lcp_array(s, sa)
        assert lcp == [_common_prefix(s[a:], s[b:]) for a, b in zip(sa, sa[1:])]


def test_sa_doubling_against_naive():
    for s in _all_sequences():
        assert sa_doubling(s) == sa_naive(s)


def test_sa_is_without_shortcuts_against_naive():
    for s in _all_sequences():
        assert sa_is(s, max(s), -1, -1) == sa_naive(s)


def test_sa_all_same():
    for n in range(1, 101):
        s = [10] * n
        expected = sa_naive(s)
        assert suffix_array(s) == expected
        assert suffix_array(s, 10) == expected
        assert suffix_array(s, 12) == expected


def test_sa_alternating():
    for n in range(1, 101):
        s = [i % 2 for i in range(n)]
        assert suffix_array(s) == sa_naive(s)
        assert suffix_array(s, 3) == sa_naive(s)
    for n in range(1, 101):
        s = [1 - i % 2 for i in range(n)]
        assert suffix_array(s) == sa_naive(s)
        assert suffix_array(s, 3) == sa_naive(s)


def test_sa_missisippi():
    s = "missisippi"
    sa = suffix_array(s)
    answer = [
        "i",
        "ippi",
        "isippi",
        "issisippi",
        "missisippi",
        "pi",
        "ppi",
        "sippi",
        "sisippi",
        "ssisippi",
    ]
    assert [s[i:] for i in sa] == answer


@pytest.mark.parametrize("value", [0, -1, 1, INT_MIN, INT_MAX])
def test_sa_single(value):
    assert suffix_array([value]) == [0]


def test_suffix_array_rejects_out_of_range():
    with pytest.raises(ValueError):
        suffix_array([0, 5, 1], 3)
    with pytest.raises(ValueError):
        suffix_array([0, -1], 3)


def test_lcp():
    s = "aab"
    sa = suffix_array(s)
    assert sa == [0, 1, 2]
    lcp = lcp_array(s, sa)
    assert lcp == [1, 0]
    assert lcp_array([0, 0, 1], sa) == lcp
    assert lcp_array([-100, -100, 100], sa) == lcp
    assert lcp_array([INT_MIN, INT_MIN, INT_MAX], sa) == lcp
    assert lcp_array([-(2**63), -(2**63), 2**63 - 1], sa) == lcp
    assert lcp_array([0, 0, 2**32 - 1], sa) == lcp
    assert lcp_array([0, 0, 2**64 - 1], sa) == lcp


def test_lcp_empty_rejected():
    with pytest.raises(ValueError):
        lcp_array([], [])


def test_z_algorithm():
    assert z_algorithm("abab") == [4, 0, 2, 0]
    assert z_algorithm([1, 10, 1, 10]) == [4, 0, 2, 0]
    assert z_algorithm([0] * 7) == [7, 6, 5, 4, 3, 2, 1]


def test_z_against_prefix_lengths():
    sequences = [
        list(t) for n in range(1, 7) for t in itertools.product(range(4), repeat=n)
    ] + [list(t) for n in range(1, 11) for t in itertools.product(range(2), repeat=n)]
    for s in sequences:
        z = z_algorithm(s)
        assert z == [_common_prefix(s, s[i:]) for i in range(len(s))]