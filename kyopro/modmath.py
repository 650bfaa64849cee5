"""Modular arithmetic: powers, inverses, CRT and floor sums."""

from __future__ import annotations

from collections.abc import Sequence

_LIMIT_32 = 1 << 32


def _inv_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(g, x)`` with ``g = gcd(a, b)`` and ``a*x = g (mod b)``, ``0 <= x < b/g``."""
    a %= b
    if a == 0:
        return b, 0
    s, t = b, a
    m0, m1 = 0, 1
    while t:
        u = s // t
        s -= t * u
        m0 -= m1 * u
        s, t = t, s
        m0, m1 = m1, m0
    if m0 < 0:
        m0 += b // s
    return s, m0


def pow_mod(x: int, n: int, m: int) -> int:
    """Return ``x ** n mod m``."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    if m < 1:
        raise ValueError(f"modulus must be at least 1, got {m}")
    if m == 1:
        return 0
    return pow(x % m, n, m)


def inv_mod(x: int, m: int) -> int:
    """Return ``y`` in ``[0, m)`` with ``x*y = 1 (mod m)``."""
    if m < 1:
        raise ValueError(f"modulus must be at least 1, got {m}")
    g, inverse = _inv_gcd(x, m)
    if g != 1:
        raise ValueError(f"{x} has no inverse modulo {m}")
    return inverse


def crt(r: Sequence[int], m: Sequence[int]) -> tuple[int, int]:
    """Solve ``x = r[i] (mod m[i])``.

    Returns ``(x, lcm)`` with ``0 <= x < lcm``, or ``(0, 0)`` when there is no
    solution. With no congruences the answer is ``(0, 1)``.
    """
    if len(r) != len(m):
        raise ValueError("remainders and moduli differ in length")
    r0, m0 = 0, 1
    for ri, mi in zip(r, m):
        if mi < 1:
            raise ValueError(f"modulus must be at least 1, got {mi}")
        r1, m1 = ri % mi, mi
        if m0 < m1:
            r0, r1 = r1, r0
            m0, m1 = m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g, im = _inv_gcd(m0, m1)
        u1 = m1 // g
        if (r1 - r0) % g:
            return 0, 0
        x = (r1 - r0) // g % u1 * im % u1
        r0 += x * m0
        m0 *= u1
        if r0 < 0:
            r0 += m0
    return r0, m0


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """Return the sum of ``(a*i + b) // m`` for ``i`` in ``range(n)``."""
    if not 0 <= n < _LIMIT_32:
        raise ValueError(f"n must lie in [0, 2**32), got {n}")
    if not 1 <= m < _LIMIT_32:
        raise ValueError(f"m must lie in [1, 2**32), got {m}")
    ans = 0
    while True:
        if a >= m or a < 0:
            ans += n * (n - 1) // 2 * (a // m)
            a %= m
        if b >= m or b < 0:
            ans += n * (b // m)
            b %= m
        y_max = a * n + b
        if y_max < m:
            return ans
        n, b, m, a = y_max // m, y_max % m, a, m