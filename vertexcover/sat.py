"""A small complete SAT solver for clauses over integer literals.

Variables are numbered from 1; literal ``v`` means variable ``v`` is true
and ``-v`` that it is false.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

__all__ = ["Solver"]


class Solver:
    """DPLL search with unit propagation over two watched literals."""

    def __init__(self) -> None:
        self._num_vars = 0
        self._clauses: list[list[int]] = []
        self._units: list[int] = []
        self._trivially_unsat = False
        self._model: list[bool | None] | None = None
        self._reset_search()

    @property
    def num_vars(self) -> int:
        """Number of variables created so far."""
        return self._num_vars

    def new_var(self) -> int:
        """Create a variable and return its (positive) literal."""
        self._num_vars += 1
        return self._num_vars

    def add_clause(self, literals: Iterable[int]) -> None:
        """Add a disjunction of literals."""
        clause = list(dict.fromkeys(literals))
        for literal in clause:
            self._check_literal(literal)
        if any(-literal in clause for literal in clause):
            return
        self._model = None
        if not clause:
            self._trivially_unsat = True
        elif len(clause) == 1:
            self._units.append(clause[0])
        else:
            self._clauses.append(clause)

    def solve(self) -> bool:
        """Search for a satisfying assignment; return whether one exists."""
        self._model = None
        if self._trivially_unsat:
            return False
        self._reset_search()
        for literal in self._units:
            current = self._literal_value(literal)
            if current is False:
                return False
            if current is None:
                self._enqueue(literal)
        for index, clause in enumerate(self._clauses):
            self._watches[clause[0]].append(index)
            self._watches[clause[1]].append(index)

        while True:
            if not self._propagate():
                if not self._backtrack():
                    return False
                continue
            var = next(
                (v for v in range(1, self._num_vars + 1) if self._assign[v] is None),
                None,
            )
            if var is None:
                self._model = list(self._assign)
                return True
            self._levels.append((len(self._trail), -var, False))
            self._enqueue(-var)

    def value(self, literal: int) -> bool:
        """Truth value of ``literal`` in the model found by the last solve."""
        self._check_literal(literal)
        if self._model is None:
            raise RuntimeError("no model available; solve() did not succeed")
        value = bool(self._model[abs(literal)])
        return value if literal > 0 else not value

    def _check_literal(self, literal: int) -> None:
        if not isinstance(literal, int) or literal == 0 or abs(literal) > self._num_vars:
            raise ValueError(f"invalid literal: {literal!r}")

    def _reset_search(self) -> None:
        self._assign: list[bool | None] = [None] * (self._num_vars + 1)
        self._trail: list[int] = []
        self._qhead = 0
        self._levels: list[tuple[int, int, bool]] = []
        self._watches: defaultdict[int, list[int]] = defaultdict(list)

    def _literal_value(self, literal: int) -> bool | None:
        value = self._assign[abs(literal)]
        if value is None:
            return None
        return value if literal > 0 else not value

    def _enqueue(self, literal: int) -> None:
        self._assign[abs(literal)] = literal > 0
        self._trail.append(literal)

    def _propagate(self) -> bool:
        while self._qhead < len(self._trail):
            false_literal = -self._trail[self._qhead]
            self._qhead += 1
            watchers = self._watches[false_literal]
            kept: list[int] = []
            conflict = False
            for position, index in enumerate(watchers):
                clause = self._clauses[index]
                if clause[0] == false_literal:
                    clause[0], clause[1] = clause[1], clause[0]
                first = clause[0]
                if self._literal_value(first) is True:
                    kept.append(index)
                    continue
                replacement = next(
                    (
                        k
                        for k in range(2, len(clause))
                        if self._literal_value(clause[k]) is not False
                    ),
                    None,
                )
                if replacement is not None:
                    clause[1], clause[replacement] = clause[replacement], clause[1]
                    self._watches[clause[1]].append(index)
                    continue
                kept.append(index)
                if self._literal_value(first) is False:
                    kept.extend(watchers[position + 1:])
                    conflict = True
                    break
                self._enqueue(first)
            self._watches[false_literal] = kept
            if conflict:
                return False
        return True

    def _undo(self, start: int) -> None:
        for literal in self._trail[start:]:
            self._assign[abs(literal)] = None
        del self._trail[start:]
        self._qhead = start

    def _backtrack(self) -> bool:
        while self._levels:
            start, literal, flipped = self._levels.pop()
            self._undo(start)
            if not flipped:
                self._levels.append((start, -literal, True))
                self._enqueue(-literal)
                return True
        return False