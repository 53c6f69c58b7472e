"""Vertex cover (exact via SAT, and greedy) and shortest paths for small undirected graphs."""

__version__ = "0.1.0"