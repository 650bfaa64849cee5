# kyopro

Algorithms for competitive programming in plain Python, with no third-party
dependencies.

## Modules

- `kyopro.modmath`: modular arithmetic.
  - `pow_mod(x, n, m)` returns `x ** n mod m`.
  - `inv_mod(x, m)` returns the inverse of `x` modulo `m`. It raises
    `ValueError` when no inverse exists.
  - `crt(r, m)` solves a system of congruences. It returns `(x, lcm)`, or
    `(0, 0)` when the system has no solution.
  - `floor_sum(n, m, a, b)` returns the sum of `(a*i + b) // m` for
    `i` in `range(n)`.
- `kyopro.maxflow`: maximum flow by Dinic's algorithm.
  - `MFGraph` provides `add_edge`, `flow(s, t, flow_limit=None)`, `get_edge`,
    `edges`, `change_edge` and `min_cut`.
  - Edges are reported as frozen `FlowEdge(frm, to, cap, flow)` records.
- `kyopro.scc`: `SCCGraph`, strongly connected components.
  - `scc_ids()` returns `(count, ids)`.
  - `scc()` returns the components in topological order.
- `kyopro.strings`: string algorithms.
  - `suffix_array(s, upper=None)` builds a suffix array by SA-IS.
  - `lcp_array(s, sa)` computes the LCP array by Kasai's method.
  - `z_algorithm(s)` computes the Z array.
  - The lower-level builders `sa_naive`, `sa_doubling` and `sa_is` are also
    available.
- `kyopro.contest`: solutions to four small contest problems. Each one is
  available as a function and through the `kyopro` command:
  - `min_pair_time(a, b)`
  - `pairwise_square_sum(values)`
  - `harmonic_expectation(n)`
  - `min_window_mex(values, m)`

Invalid arguments are reported as follows:

- Vertex or edge indices out of range raise `IndexError`.
- Other invalid arguments raise `ValueError`. Examples are a negative
  capacity, `s == t` in a flow, and a value outside `[0, upper]`.

## Installation

```
pip install .
```

## Examples

```python
from kyopro.modmath import crt, floor_sum, inv_mod, pow_mod
from kyopro.maxflow import MFGraph
from kyopro.scc import SCCGraph
from kyopro.strings import lcp_array, suffix_array, z_algorithm

print(pow_mod(3, 4, 5))               # 1
print(inv_mod(3, 7))                  # 5
print(crt([2, 3], [3, 5]))            # (8, 15)
print(floor_sum(4, 10, 6, 3))         # 3

g = MFGraph(4)
g.add_edge(0, 1, 1)
g.add_edge(0, 2, 1)
g.add_edge(1, 3, 1)
g.add_edge(2, 3, 1)
print(g.flow(0, 3))                   # 2
print(g.min_cut(0))                   # [True, False, False, False]

h = SCCGraph(3)
h.add_edge(0, 1)
h.add_edge(1, 0)
h.add_edge(1, 2)
print(h.scc())                        # [[0, 1], [2]]

sa = suffix_array("aab")              # [0, 1, 2]
print(lcp_array("aab", sa))           # [1, 0]
print(z_algorithm("abab"))            # [4, 0, 2, 0]
```

## Command line

`kyopro PROBLEM` reads whitespace-separated integers from standard input and
prints the answer. `PROBLEM` is one of `b`, `c`, `d` or `e`:

- `b`: `n`, then `n` pairs `a b`. Prints the least time to finish two jobs,
  either by one worker (`a[i] + b[i]`) or by two different workers
  (`max(a[i], b[j])`).
- `c`: `n`, then `n` values. Prints the sum of `(x - y) ** 2` over all
  unordered pairs.
- `d`: `n`. Prints `n/(n-1) + ... + n/1` with ten decimals.
- `e`: `n m`, then `n` non-negative values. Prints the smallest mex over all
  windows of length `m`.

Example:

```
echo "3 1 2 3" | kyopro c
```

## What it does not include

- There is no modular integer type: modular values are plain `int`s handled
  through `kyopro.modmath`.
- There is no polynomial convolution or number-theoretic transform.
- There is no disjoint-set (union-find) structure.

## Running the tests

```
pip install .[test]
pytest
```