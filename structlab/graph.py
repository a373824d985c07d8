"""Undirected graphs stored as an adjacency matrix or as adjacency sets."""

from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Sequence

from structlab.structures import Queue, Stack

_SAMPLE_EDGES = ((1, 2), (1, 3), (1, 4), (2, 4), (2, 5), (3, 6), (5, 7))


class AdjacencyMatrix:
    """An undirected graph over vertices ``0..n-1`` held as a 0/1 matrix."""

    def __init__(self) -> None:
        self._rows: List[List[int]] = []

    @staticmethod
    def _check_vertices(*vertices: int) -> None:
        for vertex in vertices:
            if vertex < 0:
                raise IndexError(f"vertex {vertex} is negative")

    def _grow(self, size: int) -> None:
        for row in self._rows:
            row.extend([0] * (size - len(row)))
        self._rows.extend([0] * size for _ in range(size - len(self._rows)))

    def insert_edge(self, source: int, target: int) -> None:
        """Connect ``source`` and ``target``, growing the matrix if needed."""
        self._check_vertices(source, target)
        largest = max(source, target)
        if largest >= len(self._rows):
            self._grow(largest + 1)
        self._rows[source][target] = self._rows[target][source] = 1

    def delete_edge(self, source: int, target: int) -> None:
        """Disconnect ``source`` and ``target``."""
        self._check_vertices(source, target)
        size = len(self._rows)
        if source >= size or target >= size:
            raise IndexError(f"edge ({source}, {target}) is outside the matrix")
        self._rows[source][target] = self._rows[target][source] = 0

    def has_edge(self, source: int, target: int) -> bool:
        """Return whether ``source`` and ``target`` are connected."""
        size = len(self._rows)
        if not (0 <= source < size and 0 <= target < size):
            return False
        return self._rows[source][target] == 1

    def __len__(self) -> int:
        return len(self._rows)

    def render(self) -> str:
        """Return the matrix as text with a numbered header and row labels."""
        indices = range(len(self._rows))
        lines = [
            "   " + "".join(f"{i} " for i in indices),
            "   " + "- " * len(self._rows),
        ]
        lines.extend(
            f"{i}| " + "".join(f"{cell} " for cell in row)
            for i, row in enumerate(self._rows)
        )
        return "".join(line + "\n" for line in lines)


class AdjacencyList:
    """An undirected graph held as a mapping from vertex to neighbour set."""

    def __init__(self) -> None:
        self._adjacent: dict[int, set[int]] = {}

    def insert_edge(self, source: int, target: int) -> None:
        """Connect ``source`` and ``target``, adding either vertex if new."""
        self._adjacent.setdefault(source, set()).add(target)
        self._adjacent.setdefault(target, set()).add(source)

    def delete_edge(self, source: int, target: int) -> None:
        """Disconnect ``source`` and ``target``; both vertices remain."""
        if source in self._adjacent:
            self._adjacent[source].discard(target)
        if target in self._adjacent:
            self._adjacent[target].discard(source)

    def delete_vertex(self, vertex: int) -> None:
        """Remove ``vertex`` and every edge that touches it."""
        for neighbours in self._adjacent.values():
            neighbours.discard(vertex)
        self._adjacent.pop(vertex, None)

    def neighbours(self, vertex: int) -> List[int]:
        """Return the neighbours of ``vertex`` in ascending order."""
        return sorted(self._adjacent.get(vertex, ()))

    def _vertices(self) -> Iterable[int]:
        return sorted(self._adjacent)

    def render(self) -> str:
        """Return one line per vertex listing its neighbours in order."""
        return "".join(
            f"{vertex}: " + "".join(f"{n} " for n in self.neighbours(vertex)) + "\n"
            for vertex in self._vertices()
        )

    def bfs(self, start: int = 1) -> List[int]:
        """Return the vertices in breadth-first order from ``start``."""
        visited = {start}
        pending: Queue[int] = Queue()
        pending.enqueue(start)
        order: List[int] = []
        while pending:
            vertex = pending.dequeue()
            order.append(vertex)
            for neighbour in self.neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.enqueue(neighbour)
        return order

    def dfs(self, start: int = 1) -> List[int]:
        """Return the vertices in depth-first order from ``start``.

        Vertices are marked when pushed, and neighbours are pushed in
        ascending order, so the largest unvisited neighbour is explored first.
        """
        visited = {start}
        pending: Stack[int] = Stack()
        pending.push(start)
        order: List[int] = []
        while pending:
            vertex = pending.pop()
            order.append(vertex)
            for neighbour in self.neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.push(neighbour)
        return order


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a sample graph and print its depth-first order."""
    parser = argparse.ArgumentParser(
        description="Print the depth-first order of a sample graph."
    )
    parser.parse_args(argv)
    graph = AdjacencyList()
    for source, target in _SAMPLE_EDGES:
        graph.insert_edge(source, target)
    print("Adjacency List:")
    print(" ".join(str(vertex) for vertex in graph.dfs(1)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())