"""Weighted undirected graph used by the travelling-salesman solvers."""

from __future__ import annotations

import random
from collections.abc import Iterator
from pathlib import Path


class Graph:
    """Complete or partial undirected graph with integer edge costs.

    Nodes are named by strings and always listed in sorted order.
    A pair of nodes with no stored edge has cost 0.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._adjacency: dict[str, dict[str, int]] = {}
        self.number_nodes = 0
        self._rng = rng if rng is not None else random.Random()

    def _set(self, node1: str, node2: str, cost: int) -> None:
        self._adjacency.setdefault(node1, {})[node2] = cost
        self._adjacency.setdefault(node2, {})[node1] = cost

    def generate_random(self, number_nodes: int) -> None:
        """Fill the graph with nodes "0".."n-1" and random costs in 1..100."""
        self.number_nodes = number_nodes
        names = [str(index) for index in range(number_nodes)]
        for start in names:
            for end in names:
                self._set(start, end, self._rng.randint(1, 100))

    def write_random(self, number_nodes: int, path: str | Path) -> None:
        """Generate a random graph and save it to ``path``."""
        self.generate_random(number_nodes)
        self.save_file(path)

    def nodes(self) -> list[str]:
        """Return the node names in sorted order."""
        return sorted(self._adjacency)

    def cost(self, node1: str, node2: str) -> int:
        """Return the cost of the edge between two nodes, 0 if there is none."""
        return self._adjacency.get(node1, {}).get(node2, 0)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Yield every stored directed entry as (start, end, cost), sorted."""
        for start in sorted(self._adjacency):
            targets = self._adjacency[start]
            for end in sorted(targets):
                yield start, end, targets[end]

    def read_file(self, path: str | Path) -> None:
        """Load a graph: a node count, then "node node cost" triples."""
        tokens = Path(path).read_text().split()
        if not tokens:
            raise ValueError(f"{path}: missing node count")
        try:
            self.number_nodes = int(tokens[0])
        except ValueError as exc:
            raise ValueError(f"{path}: invalid node count {tokens[0]!r}") from exc

        stream = iter(tokens[1:])
        for node1, node2, raw_cost in zip(stream, stream, stream):
            try:
                cost = int(raw_cost)
            except ValueError:
                break
            self._set(node1, node2, cost)

    def save_file(self, path: str | Path) -> None:
        """Write the graph in the format read by :meth:`read_file`."""
        Path(path).write_text(f"{self.number_nodes}\n{self}")

    def __str__(self) -> str:
        return "".join(f"{start} {end} {cost}\n" for start, end, cost in self.edges())