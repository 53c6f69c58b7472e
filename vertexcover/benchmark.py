"""Benchmark runner comparing greedy vertex covers with exact SAT covers.

Edge lists here use 1-based vertex numbers, as written on the command line.
"""

from __future__ import annotations

import argparse
import concurrent.futures
import re
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations

from .formatter import CommandError
from .sat import Solver

__all__ = [
    "parse_vertex_count",
    "parse_cnf_header",
    "parse_clause",
    "parse_edge_list",
    "build_cnf",
    "solve_cover",
    "format_cover",
    "edge_map",
    "greedy_cover1",
    "greedy_cover2",
    "append_record",
    "main",
]

DEFAULT_RECORD_PATH = "Output/random_file.txt"
DEFAULT_TIMEOUT = 600.0

_VERTEX_COUNT = re.compile(r"\s*V\s+(-?\d+)\s*")
_CNF_HEADER = re.compile(r"\s*p\s+cnf\s+(-?\d+)\s+(-?\d+)\s*")
_INTEGER = re.compile(r"-?\d+")
_EDGE = re.compile(r"<(\d+),(\d+)>")

Edge = tuple[int, int]


def parse_vertex_count(line: str) -> int:
    """Return the number given by a ``V <int>`` line."""
    match = _VERTEX_COUNT.fullmatch(line)
    if match is None:
        raise CommandError("Invalid V command format. Input should take the form V <int>.")
    return int(match.group(1))


def parse_cnf_header(line: str) -> tuple[int, int]:
    """Return the variable and clause counts of a ``p cnf <int> <int>`` line."""
    match = _CNF_HEADER.fullmatch(line)
    if match is None:
        raise CommandError("Invalid header. Expected the form p cnf <int> <int>.")
    return int(match.group(1)), int(match.group(2))


def parse_clause(line: str) -> list[int]:
    """Return every integer on a DIMACS clause line, terminating zeros included."""
    return [int(token) for token in _INTEGER.findall(line)]


def parse_edge_list(line: str) -> list[Edge]:
    """Return the ``<a,b>`` pairs found in ``line``."""
    return [(int(a), int(b)) for a, b in _EDGE.findall(line)]


def build_cnf(n: int, edges: Iterable[Edge], k: int) -> list[str]:
    """Encode "a vertex cover of size ``k`` exists" as DIMACS lines.

    The first line is the header; variable ``i * n + j + 1`` means that
    vertex ``j + 1`` occupies position ``i`` of the cover.
    """
    edges = list(edges)
    if k > 0:
        for a, b in edges:
            if not (1 <= a <= n and 1 <= b <= n):
                raise ValueError(f"Edge <{a},{b}> refers to a vertex outside 1..{n}.")

    literals = [[i * n + j + 1 for j in range(n)] for i in range(k)]
    clauses: list[str] = []

    for position in literals:
        clauses.append("".join(f"{lit} " for lit in position) + "0")
    for m in range(n):
        for p, q in combinations(range(k), 2):
            clauses.append(f"{-literals[p][m]} {-literals[q][m]} 0")
    for position in literals:
        for p, q in combinations(range(n), 2):
            clauses.append(f"{-position[q]} {-position[p]} 0")
    for a, b in edges:
        body = "".join(f"{position[a - 1]} {position[b - 1]} " for position in literals)
        clauses.append(body + "0")

    return [f"p cnf {n} {len(clauses)}", *clauses]


def _clauses(lines: Iterable[str]) -> Iterator[list[int]]:
    current: list[int] = []
    for line in lines:
        for literal in parse_clause(line):
            if literal == 0:
                yield current
                current = []
            else:
                current.append(literal)


def solve_cover(n: int, edges: Iterable[Edge], k: int) -> list[int]:
    """Return a sorted vertex cover of size ``k``, or an empty list if none exists."""
    lines = build_cnf(n, edges, k)
    solver = Solver()
    for _ in range(n * k):
        solver.new_var()
    for clause in _clauses(lines[1:]):
        solver.add_clause(clause)
    if not solver.solve():
        return []
    return sorted(
        j
        for i in range(k)
        for j in range(1, n + 1)
        if solver.value(j + n * i)
    )


def format_cover(cover: Iterable[int]) -> str:
    """Render a cover as sorted vertices followed by its size in parentheses."""
    ordered = sorted(cover)
    return "".join(f"{vertex} " for vertex in ordered) + f"({len(ordered)})"


def edge_map(edges: Iterable[Edge]) -> dict[int, list[int]]:
    """Return the undirected adjacency lists of ``edges``, keyed in vertex order."""
    adjacency: dict[int, list[int]] = {}
    for a, b in edges:
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    return dict(sorted(adjacency.items()))


def greedy_cover1(edges: Iterable[Edge]) -> list[int]:
    """Cover built by repeatedly taking the vertex of highest remaining degree."""
    adjacency = edge_map(edges)
    cover: list[int] = []
    while adjacency:
        current, degree = 0, 0
        for vertex, neighbours in adjacency.items():
            if len(neighbours) > degree:
                current, degree = vertex, len(neighbours)
        cover.append(current)
        adjacency = {
            vertex: remaining
            for vertex, neighbours in adjacency.items()
            if vertex != current
            and (remaining := [u for u in neighbours if u != current])
        }
    return cover


def greedy_cover2(edges: Iterable[Edge]) -> list[int]:
    """Cover built by taking both ends of the uncovered edge with most neighbours."""
    remaining = list(edges)
    adjacency = edge_map(remaining)
    cover: list[int] = []
    while remaining:
        best = (0, 0)
        highest = 0
        for x, y in remaining:
            total = sum(len(adjacency[v]) for v in {x, y} if v in adjacency)
            if total > highest:
                highest = total
                best = (x, y)
        px, py = best
        cover.extend(best)
        taken = {px, py}
        adjacency = {
            vertex: left
            for vertex, neighbours in adjacency.items()
            if vertex not in taken
            and (left := [u for u in neighbours if u not in taken])
        }
        remaining = [(a, b) for a, b in remaining if not ({a, b} & taken)]
    return cover


def append_record(data: str, path: str = DEFAULT_RECORD_PATH) -> bool:
    """Append ``data`` to the record file; return whether it could be written."""
    try:
        with open(path, "a", encoding="utf-8") as record:
            record.write(data)
    except OSError:
        return False
    return True


def _complete_lines(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        if not line.endswith("\n"):
            return
        yield line.rstrip("\n").rstrip("\r")


def _elapsed_us(start: int) -> int:
    return (time.perf_counter_ns() - start) // 1000


def _run_edges(
    n: int, edges: list[Edge], record_path: str, timeout: float
) -> None:
    def record(data: str) -> None:
        append_record(data, record_path)

    max_k = len(greedy_cover1(edges))

    start = time.perf_counter_ns()
    record(f"VC-GREEDY-1: {format_cover(greedy_cover1(edges))}\n")
    record(f"Execution time: {_elapsed_us(start)}\n")

    start = time.perf_counter_ns()
    record(f"VC-GREEDY-2: {format_cover(greedy_cover2(edges))}\n")
    record(f"Execution time: {_elapsed_us(start)}\n")

    min_cover: list[int] = []
    while max_k > 0:
        start = time.perf_counter_ns()
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        future = executor.submit(solve_cover, n, edges, max_k)
        try:
            cover = future.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            executor.shutdown(wait=False, cancel_futures=True)
            record(f"VC (non-optimal): {format_cover(min_cover)}\n")
            record(f"Execution time: {_elapsed_us(start)}\n\n")
            break
        executor.shutdown(wait=False)

        if not cover:
            print(f"VC-EXACT: {format_cover(min_cover)}", flush=True)
            record(f"VC-EXACT: {format_cover(min_cover)}\n")
            record(f"Execution time: {_elapsed_us(start)}\n\n")
            break
        min_cover = cover
        max_k -= 1

    print(f"VC-GREEDY-1: {format_cover(greedy_cover1(edges))}")
    print(f"VC-GREEDY-2: {format_cover(greedy_cover2(edges))}", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read V and E lines from standard input, printing and recording covers."""
    parser = argparse.ArgumentParser(
        description="Compare greedy and exact vertex covers."
    )
    parser.add_argument(
        "--output", default=DEFAULT_RECORD_PATH, help="file that timings are appended to"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="seconds allowed for each exact solve",
    )
    args = parser.parse_args(argv)

    vertices = 0
    for line in _complete_lines(sys.stdin):
        try:
            if line.startswith("V"):
                vertices = parse_vertex_count(line)
                append_record(f"{vertices}\n", args.output)
            elif line.startswith("E"):
                _run_edges(vertices, parse_edge_list(line), args.output, args.timeout)
        except (CommandError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())