"""Suffix arrays, LCP arrays and the Z-algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sa_naive(s: Sequence[Any]) -> list[int]:
    """Suffix array by sorting the suffixes directly."""
    return sorted(range(len(s)), key=lambda i: s[i:])


def sa_doubling(s: Sequence[int]) -> list[int]:
    """Suffix array by prefix doubling."""
    n = len(s)
    sa = list(range(n))
    rank = list(s)
    k = 1
    while k < n:
        def key(i: int, rank: list[int] = rank, k: int = k) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        sa.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) < key(cur))
        rank = new_rank
        k *= 2
    return sa


def sa_is(
    s: Sequence[int],
    upper: int,
    threshold_naive: int = 10,
    threshold_doubling: int = 40,
) -> list[int]:
    """Suffix array by SA-IS for values in ``[0, upper]``."""
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1] if s[0] < s[1] else [1, 0]
    if n < threshold_naive:
        return sa_naive(s)
    if n < threshold_doubling:
        return sa_doubling(s)

    sa = [0] * n
    ls = [False] * n
    for i in range(n - 2, -1, -1):
        ls[i] = ls[i + 1] if s[i] == s[i + 1] else s[i] < s[i + 1]

    sum_l = [0] * (upper + 1)
    sum_s = [0] * (upper + 1)
    for c, is_s in zip(s, ls):
        if is_s:
            sum_l[c + 1] += 1
        else:
            sum_s[c] += 1
    for i in range(upper + 1):
        sum_s[i] += sum_l[i]
        if i < upper:
            sum_l[i + 1] += sum_s[i]

    def induce(lms: list[int]) -> None:
        sa[:] = [-1] * n
        buf = sum_s.copy()
        for d in lms:
            if d == n:
                continue
            sa[buf[s[d]]] = d
            buf[s[d]] += 1
        buf = sum_l.copy()
        sa[buf[s[n - 1]]] = n - 1
        buf[s[n - 1]] += 1
        # sa is filled while it is scanned, so positions are read one by one.
        for i in range(n):
            v = sa[i]
            if v >= 1 and not ls[v - 1]:
                sa[buf[s[v - 1]]] = v - 1
                buf[s[v - 1]] += 1
        buf = sum_l.copy()
        for i in range(n - 1, -1, -1):
            v = sa[i]
            if v >= 1 and ls[v - 1]:
                buf[s[v - 1] + 1] -= 1
                sa[buf[s[v - 1] + 1]] = v - 1

    lms = [i for i in range(1, n) if not ls[i - 1] and ls[i]]
    m = len(lms)
    lms_map = [-1] * (n + 1)
    for idx, pos in enumerate(lms):
        lms_map[pos] = idx

    induce(lms)

    if m:
        sorted_lms = [v for v in sa if lms_map[v] != -1]
        rec_s = [0] * m
        rec_upper = 0
        rec_s[lms_map[sorted_lms[0]]] = 0
        for prev, cur in zip(sorted_lms, sorted_lms[1:]):
            left, right = prev, cur
            end_l = lms[lms_map[left] + 1] if lms_map[left] + 1 < m else n
            end_r = lms[lms_map[right] + 1] if lms_map[right] + 1 < m else n
            same = True
            if end_l - left != end_r - right:
                same = False
            else:
                while left < end_l and s[left] == s[right]:
                    left += 1
                    right += 1
                if left == n or right == n or s[left] != s[right]:
                    same = False
            if not same:
                rec_upper += 1
            rec_s[lms_map[cur]] = rec_upper

        rec_sa = sa_is(rec_s, rec_upper, threshold_naive, threshold_doubling)
        sorted_lms = [lms[i] for i in rec_sa]
        induce(sorted_lms)
    return sa


def suffix_array(s: Sequence[Any], upper: int | None = None) -> list[int]:
    """Return the suffix array of ``s``.

    With ``upper`` the elements must be integers in ``[0, upper]``; otherwise
    any comparable elements (including the characters of a string) are accepted.
    """
    if upper is not None:
        if upper < 0:
            raise ValueError(f"upper must be non-negative, got {upper}")
        for d in s:
            if not 0 <= d <= upper:
                raise ValueError(f"value {d} outside [0, {upper}]")
        return sa_is(list(s), upper)
    ranks = {value: rank for rank, value in enumerate(sorted(set(s)))}
    compressed = [ranks[value] for value in s]
    return sa_is(compressed, max(len(ranks) - 1, 0))


def lcp_array(s: Sequence[Any], sa: Sequence[int]) -> list[int]:
    """Return longest common prefixes of adjacent suffixes in ``sa`` (Kasai)."""
    n = len(s)
    if n < 1:
        raise ValueError("lcp_array needs a non-empty sequence")
    rank = [0] * n
    for i, p in enumerate(sa):
        rank[p] = i
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rank[i] == 0:
            continue
        j = sa[rank[i] - 1]
        while j + h < n and i + h < n and s[j + h] == s[i + h]:
            h += 1
        lcp[rank[i] - 1] = h
    return lcp


def z_algorithm(s: Sequence[Any]) -> list[int]:
    """Return ``z`` where ``z[i]`` is the common prefix length of ``s`` and ``s[i:]``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    j = 0
    for i in range(1, n):
        k = 0 if j + z[j] <= i else min(j + z[j] - i, z[i - j])
        while i + k < n and s[k] == s[i + k]:
            k += 1
        z[i] = k
        if j + z[j] < i + z[i]:
            j = i
    z[0] = n
    return z