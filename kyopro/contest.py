"""Solutions to a set of small contest problems, with a command-line entry."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Sequence
from itertools import permutations

INF = 10**9


def min_pair_time(a: Sequence[int], b: Sequence[int]) -> int:
    """Least time to finish two jobs.

    One worker may do both (``a[i] + b[i]``), or two different workers share
    them (``max(a[i], b[j])``).
    """
    if len(a) != len(b):
        raise ValueError("a and b differ in length")
    together = (x + y for x, y in zip(a, b))
    apart = (max(a[i], b[j]) for i, j in permutations(range(len(a)), 2))
    return min(together, apart, default=INF) if False else min(
        min(together, default=INF), min(apart, default=INF)
    )


def pairwise_square_sum(values: Sequence[int]) -> int:
    """Return the sum of ``(x - y) ** 2`` over all unordered pairs."""
    counts = Counter(values)
    total = sum(
        cx * cy * (x - y) ** 2
        for x, cx in counts.items()
        for y, cy in counts.items()
    )
    return total // 2


def harmonic_expectation(n: int) -> float:
    """Return ``n/(n-1) + n/(n-2) + ... + n/1``."""
    return sum((n / i for i in range(n - 1, 0, -1)), 0.0)


def min_window_mex(values: Sequence[int], m: int) -> int:
    """Return the smallest mex over all windows of length ``m``."""
    if not 0 <= m <= len(values):
        raise ValueError(f"window length must lie in [0, {len(values)}], got {m}")
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    counts = Counter(values[:m])
    ans = 0
    while counts[ans]:
        ans += 1
    for old, new in zip(values, values[m:]):
        counts[old] -= 1
        counts[new] += 1
        if old < ans and counts[old] == 0:
            ans = old
    return ans


def _solve(problem: str, tokens: list[int]) -> str:
    it = iter(tokens)
    if problem == "b":
        n = next(it)
        pairs = [(next(it), next(it)) for _ in range(n)]
        return str(min_pair_time([p[0] for p in pairs], [p[1] for p in pairs]))
    if problem == "c":
        n = next(it)
        return str(pairwise_square_sum([next(it) for _ in range(n)]))
    if problem == "d":
        return f"{harmonic_expectation(next(it)):.10f}"
    n, m = next(it), next(it)
    return str(min_window_mex([next(it) for _ in range(n)], m))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="kyopro", description=__doc__)
    parser.add_argument("problem", choices=["b", "c", "d", "e"])
    args = parser.parse_args(argv)
    tokens = [int(t) for t in sys.stdin.read().split()]
    try:
        answer = _solve(args.problem, tokens)
    except StopIteration:
        parser.error("input ended early")
    print(answer)
    return 0