"""Strongly connected components (Tarjan's algorithm)."""

from __future__ import annotations


class SCCGraph:
    """A directed graph on vertices ``0 .. n-1`` for finding its strong components."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def num_vertices(self) -> int:
        return self._n

    def add_edge(self, frm: int, to: int) -> None:
        """Add a directed edge ``frm -> to``."""
        for v in (frm, to):
            if not 0 <= v < self._n:
                raise IndexError(f"vertex {v} out of range for {self._n} vertices")
        self._adj[frm].append(to)

    def scc_ids(self) -> tuple[int, list[int]]:
        """Return ``(count, ids)``; ids are in topological order of components."""
        n = self._n
        adj = self._adj
        now_ord = 0
        group_num = 0
        visited: list[int] = []
        low = [0] * n
        order = [-1] * n
        ids = [0] * n

        for root in range(n):
            if order[root] != -1:
                continue
            order[root] = low[root] = now_ord
            now_ord += 1
            visited.append(root)
            stack = [(root, 0)]
            while stack:
                v, i = stack[-1]
                if i < len(adj[v]):
                    stack[-1] = (v, i + 1)
                    to = adj[v][i]
                    if order[to] == -1:
                        order[to] = low[to] = now_ord
                        now_ord += 1
                        visited.append(to)
                        stack.append((to, 0))
                    else:
                        low[v] = min(low[v], order[to])
                    continue
                stack.pop()
                if low[v] == order[v]:
                    while True:
                        u = visited.pop()
                        order[u] = n
                        ids[u] = group_num
                        if u == v:
                            break
                    group_num += 1
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[v])

        return group_num, [group_num - 1 - x for x in ids]

    def scc(self) -> list[list[int]]:
        """Return the components, each sorted, in topological order."""
        group_num, ids = self.scc_ids()
        groups: list[list[int]] = [[] for _ in range(group_num)]
        for v, group in enumerate(ids):
            groups[group].append(v)
        return groups