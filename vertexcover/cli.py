"""Command loop that reads graph commands and prints covers and paths."""

from __future__ import annotations

import sys
import warnings
from collections.abc import Sequence

from .formatter import (
    CommandError,
    parse_command,
    parse_edges,
    parse_shortest_path,
    parse_vertices,
)
from .matrix import GraphError, Matrix

__all__ = ["main"]


def _report(message: object) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _add_edges(graph: Matrix, edges: list[tuple[int, int, int]]) -> None:
    for first, second, weight in edges:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                graph.set(first - 1, second - 1, weight)
            except GraphError as exc:
                _report(exc)
        for warning in caught:
            _report(warning.message)


def _complete_lines(stream):
    """Yield newline-terminated lines; an unterminated final line is ignored."""
    for line in stream:
        if not line.endswith("\n"):
            return
        yield line.rstrip("\n").rstrip("\r")


def main(argv: Sequence[str] | None = None) -> int:
    """Process commands from standard input until end of file."""
    graph: Matrix | None = None
    size = 0

    for line in _complete_lines(sys.stdin):
        try:
            command = parse_command(line)
        except CommandError as exc:
            _report(exc)
            continue

        if graph is None and command != "V":
            _report("Must create graph first before using E or S.")
            continue

        if command == "V":
            try:
                size = parse_vertices(line)
            except CommandError as exc:
                _report(exc)
                continue
            graph = Matrix(size, size)

        elif command == "E":
            try:
                edges = parse_edges(line)
            except CommandError as exc:
                _report(exc)
                continue
            _add_edges(graph, edges)
            print(graph.vc_exact(size))
            print(graph.greedy_solver1())
            print(graph.greedy_solver2())

        elif command == "S":
            try:
                source, target = parse_shortest_path(line)
            except CommandError as exc:
                _report(exc)
                continue
            if source > size or target > size:
                _report("Input is out of bounds. Choose valid vertice.")
                continue
            try:
                graph.dijkstra(source - 1)
                answer = graph.path(source - 1, target - 1, size - 1)
            except GraphError as exc:
                _report(exc)
                continue
            print(answer)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())