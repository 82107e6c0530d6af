from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .exceptions import PyramidShapeError


def triangular(k: int) -> int:
    """Number of cells in the first ``k`` rows of a pyramid."""

    return k * (k + 1) // 2


class PyramidLayout:
    """Maps pyramid cells onto vertex ids.

    Vertex 0 is the source and the last id is the sink. Row ``i`` (1-based)
    column ``j`` (0-based) lives at ``1 + T(i - 1) + j``.
    """

    def __init__(self, rows: int) -> None:
        if rows < 1:
            raise PyramidShapeError(f"A pyramid needs at least one row, got {rows}")
        self.rows = rows

    @property
    def cell_count(self) -> int:
        return triangular(self.rows)

    @property
    def vertex_count(self) -> int:
        return self.cell_count + 2

    @property
    def source(self) -> int:
        return 0

    @property
    def sink(self) -> int:
        return self.vertex_count - 1

    def vertex_id(self, row: int, col: int) -> int:
        if not 1 <= row <= self.rows or not 0 <= col < row:
            raise PyramidShapeError(f"No cell at row {row}, column {col} in a {self.rows}-row pyramid")
        return 1 + triangular(row - 1) + col

    def cell_of(self, vertex: int) -> Tuple[int, int]:
        """Inverse of :meth:`vertex_id`; source and sink have no cell."""

        if not 1 <= vertex <= self.cell_count:
            raise PyramidShapeError(f"Vertex {vertex} is not a pyramid cell")
        offset = vertex - 1
        row = 1
        while triangular(row) <= offset:
            row += 1
        return row, offset - triangular(row - 1)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: int


class Graph:
    """A directed graph over integer vertex ids ``0 .. vertex_count - 1``.

    Edges live in a single arena; each vertex keeps the arena indices of
    its outgoing edges in insertion order.
    """

    def __init__(self, vertex_count: int, layout: Optional[PyramidLayout] = None) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self.layout = layout
        self._edges: List[Edge] = []
        self._adjacency: List[List[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"Vertex {vertex} out of range [0, {self.vertex_count})")

    def add_edge(self, source: int, target: int, weight: int) -> Edge:
        self._check_vertex(source)
        self._check_vertex(target)
        edge = Edge(source, target, weight)
        self._adjacency[source].append(len(self._edges))
        self._edges.append(edge)
        return edge

    def successors(self, vertex: int) -> Iterator[Edge]:
        self._check_vertex(vertex)
        return (self._edges[index] for index in self._adjacency[vertex])

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)
