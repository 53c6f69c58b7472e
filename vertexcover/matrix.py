"""Adjacency-matrix graphs with shortest paths and vertex-cover solvers."""

from __future__ import annotations

import warnings
from itertools import combinations

from .sat import Solver

__all__ = ["GraphError", "Matrix"]

_UNREACHED = 2**31 - 1


class GraphError(ValueError):
    """Raised when a graph operation refers to invalid vertices or edges."""


def _format_cover(label: str, cover: list[int]) -> str:
    numbers = "".join(f"{vertex} " for vertex in sorted(cover))
    return f"{label}: {numbers}({len(cover)})"


class Matrix:
    """An undirected weighted graph stored as an adjacency matrix.

    Vertices are indexed from 0 in method arguments and numbered from 1 in
    the strings the solvers return.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise GraphError(f"Invalid graph size ({rows}, {cols}).")
        self._rows = rows
        self._cols = cols
        self._graph = [[0] * cols for _ in range(rows)]
        self._distance = [_UNREACHED] * rows
        self._parent = [-1] * rows
        self._edges: list[tuple[int, int]] = []

    def get(self, r: int, c: int) -> int:
        """Return the weight between vertices ``r`` and ``c`` (0 if none)."""
        if not (0 <= r < self._rows and 0 <= c < self._cols):
            raise GraphError(f"Edge ({r}, {c}) is out of bounds.")
        return self._graph[r][c]

    def set(self, r: int, c: int, w: int) -> None:
        """Add the edge ``(r, c)`` with weight ``w``, or change its weight."""
        if r < 0 or c < 0 or w <= 0 or r >= self._rows or c >= self._cols:
            raise GraphError(f"Edge ({r}, {c}) is out of bounds.")
        current = self.get(r, c)
        if current != 0:
            if current == w:
                raise GraphError(
                    "Edge with same weight already exists. Did not update graph."
                )
            warnings.warn("Edge already exists. Updating weight.", stacklevel=2)
        self._edges.append((r, c))
        self._graph[r][c] = w
        self._graph[c][r] = w

    def resize(self, r: int, c: int) -> None:
        """Change the recorded dimensions without touching the stored weights."""
        self._rows = r
        self._cols = c

    def __str__(self) -> str:
        lines = ["".join(f"{value} " for value in row[: self._cols]) for row in
                 self._graph[: self._rows]]
        parents = "".join(f"{p}, " for p in self._parent[: self._rows])
        distances = "".join(f"{d}, " for d in self._distance[: self._rows])
        lines.append(f"Parent Array: {parents}")
        lines.append(f"Distance Array: {distances}")
        return "\n".join(lines) + "\n"

    def dijkstra(self, source: int) -> None:
        """Compute shortest distances and parents from ``source``."""
        if not 0 <= source < self._rows:
            raise GraphError(f"Vertex {source} is out of bounds.")
        self._parent = [-1] * self._rows
        self._distance = [_UNREACHED] * self._rows
        visited = [False] * self._rows
        distance = self._distance
        distance[source] = 0

        for _ in range(self._rows):
            u = min(
                (
                    c
                    for c in range(self._cols)
                    if not visited[c] and distance[c] < _UNREACHED
                ),
                key=distance.__getitem__,
                default=None,
            )
            if u is None:
                break
            visited[u] = True
            for v, weight in enumerate(self._graph[u][: self._rows]):
                if not visited[v] and weight != 0 and distance[u] + weight < distance[v]:
                    distance[v] = distance[u] + weight
                    self._parent[v] = u

    def path(self, source: int, target: int, size: int) -> str:
        """Describe the path found by :meth:`dijkstra` from ``source`` to ``target``.

        The result lists 1-based vertices joined by ``-`` followed by the total
        weight; at most ``size`` parent links are followed.
        """
        if not 0 <= target < len(self._distance):
            raise GraphError(f"Vertex {target} is out of bounds.")
        if self._distance[target] >= _UNREACHED:
            return "No path exists."
        pathway = [target + 1]
        node = target
        for _ in range(size):
            node = self._parent[node]
            if node < 0:
                break
            pathway.append(node + 1)
            if node == source:
                break
        route = "-".join(str(vertex) for vertex in reversed(pathway))
        return f"{route} {self._distance[target]}"

    def _adjacency(self) -> dict[int, list[int]]:
        return {
            r + 1: [c + 1 for c, weight in enumerate(row) if weight != 0]
            for r, row in enumerate(self._graph)
        }

    def greedy_solver1(self) -> str:
        """Vertex cover built by repeatedly taking the vertex of highest degree."""
        adjacency = self._adjacency()
        cover: list[int] = []
        while adjacency:
            current, degree = 0, 0
            for vertex, neighbours in adjacency.items():
                if len(neighbours) > degree:
                    current, degree = vertex, len(neighbours)
            cover.append(current)
            for neighbours in adjacency.values():
                neighbours[:] = [u for u in neighbours if u != current]
            adjacency = {
                vertex: neighbours
                for vertex, neighbours in adjacency.items()
                if vertex != current and neighbours
            }
        return _format_cover("VC-GREEDY-1", cover)

    def greedy_solver2(self) -> str:
        """Vertex cover built by taking both ends of the busiest uncovered edge.

        The recorded edges are consumed: covered edges are removed as they are
        taken, so afterwards no edges remain recorded.
        """
        adjacency = self._adjacency()
        cover: list[int] = []
        while self._edges:
            best = (0, 0)
            highest = 0
            for a, b in self._edges:
                x, y = a + 1, b + 1
                total = sum(len(adjacency[v]) for v in {x, y} if v in adjacency)
                if total > highest:
                    highest = total
                    best = (x, y)
            px, py = best
            cover.extend(best)
            taken = {px, py}
            for neighbours in adjacency.values():
                neighbours[:] = [u for u in neighbours if u not in taken]
            adjacency = {
                vertex: neighbours
                for vertex, neighbours in adjacency.items()
                if vertex not in taken and neighbours
            }
            self._edges = [
                (a, b) for a, b in self._edges if not ({a + 1, b + 1} & taken)
            ]
        return _format_cover("VC-GREEDY-2", cover)

    def vc_exact(self, size: int) -> str:
        """Minimum vertex cover over the first ``size`` vertices, found by SAT.

        Returns an empty string when no cover of any size from 1 up was found.
        """
        n = size
        best = ""
        for k in range(size, 0, -1):
            solver = Solver()
            x = [[solver.new_var() for _ in range(n)] for _ in range(k)]

            for position in x:
                solver.add_clause(position)
            for m in range(n):
                for q, p in combinations(range(k), 2):
                    solver.add_clause([-x[p][m], -x[q][m]])
            for position in x:
                for p, q in combinations(range(n), 2):
                    solver.add_clause([-position[p], -position[q]])
            for a, b in self._edges:
                solver.add_clause(
                    [lit for position in x for lit in (position[a], position[b])]
                )

            if not solver.solve():
                break
            cover = [
                j + 1
                for position in x
                for j, literal in enumerate(position)
                if solver.value(literal)
            ]
            best = _format_cover("VC-EXACT", cover)
        return best