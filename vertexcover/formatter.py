"""Parsing and validation of the line-oriented graph commands."""

from __future__ import annotations

import re

__all__ = [
    "CommandError",
    "parse_command",
    "parse_vertices",
    "parse_edges",
    "parse_shortest_path",
]


class CommandError(ValueError):
    """Raised when an input line is not a well-formed command."""


_COMMAND = re.compile(r"^\s*(V|E|S|G)\s*")
# The ",-{" inside the class is a character range, as in the accepted grammar.
_INVALID_CHARS = re.compile(r"[^NESG0-9,-{}\(\)\s]+")
_VERTICES = re.compile(r"\s*V\s+(-?\d+)\s*")
_EDGE = re.compile(r"<\s*(-?\d+)\s*,\s*(-?\d+)\s*,?\s*(-?\d+)?\s*>+")
_EDGES = re.compile(
    r"\s*E\s+(\{\s*(<\s*(-?\d+)\s*,\s*(-?\d+)\s*,?\s*(-?\d+)?\s*>\s*,\s*)*"
    r"(\s*<\s*(-?\d+)\s*,\s*(-?\d+)\s*,?\s*(-?\d+)?\s*>)\s*\}\s*)"
)
_SHORTEST_PATH = re.compile(r"\s*S\s+(-?\d+)\s+(-?\d+)\s*")


def parse_command(line: str) -> str:
    """Return the command letter (V, E, S or G) that starts ``line``."""
    if _INVALID_CHARS.search(line):
        raise CommandError("Input contains invalid characters.")
    match = _COMMAND.search(line)
    if match is None:
        raise CommandError("Invalid command format. Must use V, E, or S.")
    return match.group(1)


def parse_vertices(line: str) -> int:
    """Return the vertex count of a ``V <int>`` command."""
    match = _VERTICES.fullmatch(line)
    if match is None:
        raise CommandError(
            "Invalid V command format. Input should take the form V <int>."
        )
    count = int(match.group(1))
    if count < 0:
        raise CommandError(
            "Invalid V command format. V should have a positive integer value."
        )
    return count


def parse_edges(line: str) -> list[tuple[int, int, int]]:
    """Return ``(v1, v2, weight)`` triples of an ``E {<a,b[,w]>, ...}`` command.

    A weight carries over to following edges that give none; it starts at 1.
    """
    if _EDGES.fullmatch(line) is None:
        raise CommandError(
            "Invalid E command format. Input should take the form "
            "E { <int>, <int>, <int> }."
        )
    edges = []
    weight = 1
    for match in _EDGE.finditer(line):
        first, second, given_weight = match.groups()
        if given_weight is not None:
            weight = int(given_weight)
        edges.append((int(first), int(second), weight))
    return edges


def parse_shortest_path(line: str) -> tuple[int, int]:
    """Return the source and target vertices of an ``S <int> <int>`` command."""
    match = _SHORTEST_PATH.fullmatch(line)
    if match is None:
        raise CommandError(
            "Invalid S command format. Input should take the form S <int> <int>."
        )
    source, target = int(match.group(1)), int(match.group(2))
    if source < 0 or target < 0:
        raise CommandError(
            "Invalid S command format. S should have a positive integer values."
        )
    if source == target:
        raise CommandError(
            "Invalid S command format. Choose two unique integer values."
        )
    return source, target