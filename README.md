# vertexcover

This package finds vertex covers of small undirected graphs. A built-in SAT solver finds an exact minimum cover. Two greedy heuristics give quick approximations. The package also finds weighted shortest paths with Dijkstra's algorithm.

It needs nothing beyond the Python standard library, on Python 3.10 or later.

## Installation

```
pip install .
```

## Interactive use

The `vertexcover` command reads commands from standard input, one per line:

```
V 5
E {<1,2>,<2,3>,<3,4>,<4,5>}
S 1 4
```

- `V <n>` creates an empty graph with vertices `1..n`. It replaces any earlier graph.
- `E {<a,b>,<c,d,w>,...}` adds edges. An optional third number sets the weight. A weight carries over to later edges in the same command that give none. The first weight is 1. After the edges are added, three lines are printed:

```
VC-EXACT: 2 4 (2)
VC-GREEDY-1: ...
VC-GREEDY-2: ...
```

- `S <a> <b>` prints the shortest path from `a` to `b` and its total weight. For the graph above it prints `1-2-3-4 3`. If there is no route it prints `No path exists.`

An `E` or `S` command given before any `V` command is an error. Errors are reported on standard error as `Error: ...`, and reading carries on. A final line that does not end in a newline is not processed.

Run it with:

```
vertexcover < graph.txt
```

## Benchmarking

The `vertexcover-benchmark` command reads `V <n>` lines and `E` lines of the form `E {<a,b>,<c,d>}`, with no spaces inside the brackets. For each edge line it does the following:

- It runs both greedy heuristics.
- It searches for an exact cover. The search starts at the size of the first greedy cover and asks for covers one vertex smaller each time, until no cover exists.
- It appends the covers and execution times in microseconds to a record file.
- It prints `VC-EXACT: ...`, then the two greedy covers, on standard output.

Each exact SAT call has a time limit. If a call runs out of time, the best cover found so far is recorded as `VC (non-optimal): ...`, and no exact line is printed.

```
vertexcover-benchmark < graphs.txt
vertexcover-benchmark --output results.txt --timeout 30 < graphs.txt
```

Options:

- `--output`: the file that records are appended to. The default is `Output/random_file.txt`. If the file cannot be opened, nothing is recorded and no error is shown.
- `--timeout`: the number of seconds allowed for each exact solve. The default is 600.

## Library use

```python
from vertexcover.matrix import Matrix

g = Matrix(3, 3)
g.set(0, 1, 1)
g.set(1, 2, 1)
print(g.vc_exact(3))        # VC-EXACT: 2 (1)
print(g.greedy_solver1())   # VC-GREEDY-1: 2 (1)
g.dijkstra(0)
print(g.path(0, 2, 2))      # 1-2-3 2
```

Methods of `Matrix` take vertex indices from 0. The strings they return number vertices from 1.

- `set` raises `GraphError` in two cases: an edge out of bounds, or a weight that is not positive. Setting an existing edge to the same weight also raises `GraphError`. Setting it to a different weight issues a warning and updates the weight.
- `greedy_solver2()` uses up the recorded edges. Call `vc_exact()` before it.

These modules are also available:

- `vertexcover.formatter` parses the input commands: `parse_command`, `parse_vertices`, `parse_edges` and `parse_shortest_path`. They raise `CommandError` on malformed input.
- `vertexcover.sat` has `Solver`, a small CNF solver over integer literals. Its methods are `new_var`, `add_clause`, `solve` and `value`.
- `vertexcover.benchmark` works on plain lists of 1-based edges. Its functions are:
  - `build_cnf`: DIMACS encoding of a cover of size k.
  - `solve_cover`.
  - `greedy_cover1` and `greedy_cover2`.
  - `edge_map`.
  - `format_cover`.
  - `append_record`.
  - `parse_vertex_count`, `parse_cnf_header`, `parse_clause` and `parse_edge_list`.

## Limits

The SAT solver is a plain DPLL search written in Python. The exact cover search is practical only for small graphs. Graphs are held in memory only: nothing saves or loads them.