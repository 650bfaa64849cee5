"""Maximum flow on directed graphs (Dinic's algorithm)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowEdge:
    """An edge as seen from outside: endpoints, capacity and current flow."""

    frm: int
    to: int
    cap: int
    flow: int


class _Arc:
    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: int, rev: int, cap: int) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap


class MFGraph:
    """A flow network on vertices ``0 .. n-1``."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._n = n
        self._graph: list[list[_Arc]] = [[] for _ in range(n)]
        self._pos: list[tuple[int, int]] = []

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range for {self._n} vertices")

    def _check_edge(self, i: int) -> None:
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range for {len(self._pos)} edges")

    def add_edge(self, frm: int, to: int, cap: int) -> int:
        """Add an edge of capacity ``cap`` and return its index."""
        self._check_vertex(frm)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError(f"capacity must be non-negative, got {cap}")
        index = len(self._pos)
        from_id = len(self._graph[frm])
        to_id = len(self._graph[to])
        if frm == to:
            to_id += 1
        self._pos.append((frm, from_id))
        self._graph[frm].append(_Arc(to, to_id, cap))
        self._graph[to].append(_Arc(frm, from_id, 0))
        return index

    def get_edge(self, i: int) -> FlowEdge:
        """Return the state of edge ``i``."""
        self._check_edge(i)
        frm, idx = self._pos[i]
        arc = self._graph[frm][idx]
        back = self._graph[arc.to][arc.rev]
        return FlowEdge(frm, arc.to, arc.cap + back.cap, back.cap)

    def edges(self) -> list[FlowEdge]:
        """Return every edge in the order they were added."""
        return [self.get_edge(i) for i in range(len(self._pos))]

    def change_edge(self, i: int, new_cap: int, new_flow: int) -> None:
        """Set the capacity and flow of edge ``i``."""
        self._check_edge(i)
        if not 0 <= new_flow <= new_cap:
            raise ValueError(
                f"flow must satisfy 0 <= flow <= cap, got flow={new_flow}, cap={new_cap}"
            )
        frm, idx = self._pos[i]
        arc = self._graph[frm][idx]
        back = self._graph[arc.to][arc.rev]
        arc.cap = new_cap - new_flow
        back.cap = new_flow

    def flow(self, s: int, t: int, flow_limit: int | None = None) -> int:
        """Push as much flow from ``s`` to ``t`` as possible, up to ``flow_limit``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        n = self._n
        graph = self._graph
        level = [-1] * n
        cursor = [0] * n

        def bfs() -> None:
            level[:] = [-1] * n
            level[s] = 0
            queue = deque([s])
            while queue:
                v = queue.popleft()
                for arc in graph[v]:
                    if arc.cap == 0 or level[arc.to] >= 0:
                        continue
                    level[arc.to] = level[v] + 1
                    if arc.to == t:
                        return
                    queue.append(arc.to)

        def dfs(v: int, up: float) -> int:
            if v == s:
                return up  # type: ignore[return-value]
            res = 0
            level_v = level[v]
            adj = graph[v]
            while cursor[v] < len(adj):
                arc = adj[cursor[v]]
                back = graph[arc.to][arc.rev]
                if level_v > level[arc.to] and back.cap > 0:
                    d = dfs(arc.to, min(up - res, back.cap))
                    if d > 0:
                        arc.cap += d
                        back.cap -= d
                        res += d
                        if res == up:
                            return res
                cursor[v] += 1
            level[v] = n
            return res

        total = 0
        while flow_limit is None or total < flow_limit:
            bfs()
            if level[t] == -1:
                break
            cursor[:] = [0] * n
            remaining = float("inf") if flow_limit is None else flow_limit - total
            pushed = dfs(t, remaining)
            if not pushed:
                break
            total += pushed
        return total

    def min_cut(self, s: int) -> list[bool]:
        """Return which vertices are reachable from ``s`` in the residual graph."""
        self._check_vertex(s)
        visited = [False] * self._n
        visited[s] = True
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for arc in self._graph[v]:
                if arc.cap and not visited[arc.to]:
                    visited[arc.to] = True
                    queue.append(arc.to)
        return visited