"""
Pyramid to DAG construction.

Every non-prime cell receives an edge from each parent in the row above,
weighted with the negated cell value. Bottom-row cells that survive are tied
to the sink with weight 0. Prime cells get no incoming edge and are therefore
unreachable from the source.
"""

import logging
from typing import Iterable, Iterator

from .exceptions import InputExhaustedError, InvalidCellError
from .graph import Graph, PyramidLayout
from .primes import is_prime

logger = logging.getLogger(__name__)


def _next_value(values: Iterator[int], row: int, col: int) -> int:
    try:
        value = next(values)
    except StopIteration:
        raise InputExhaustedError(
            f"Input ended before row {row}, number {col + 1} was supplied"
        ) from None
    if value < 0:
        raise InvalidCellError(
            f"Row {row}, number {col + 1}: negative value {value} is not supported"
        )
    return value


def build_pyramid_graph(rows: int, values: Iterable[int]) -> Graph:
    """Build the DAG for a ``rows``-row pyramid read row-major from ``values``.

    If the top cell is prime nothing else is read: the returned graph has all
    of its vertices but no edges, and ``values`` is left positioned right after
    the first integer.
    """
    layout = PyramidLayout(rows)
    graph = Graph(layout.vertex_count, layout)
    supply = iter(values)

    top = _next_value(supply, 1, 0)
    if is_prime(top):
        logger.info(f"Top cell {top} is prime; no path can start, remaining input left unread")
        return graph

    top_id = layout.vertex_id(1, 0)
    graph.add_edge(layout.source, top_id, -top)
    if rows == 1:
        graph.add_edge(top_id, layout.sink, 0)

    pruned = 0
    for row in range(2, rows + 1):
        for col in range(row):
            value = _next_value(supply, row, col)
            if is_prime(value):
                pruned += 1
                logger.debug(f"Cutting off prime cell {value} at row {row}, column {col}")
                continue

            vertex = layout.vertex_id(row, col)
            if col > 0:
                graph.add_edge(layout.vertex_id(row - 1, col - 1), vertex, -value)
            if col < row - 1:
                graph.add_edge(layout.vertex_id(row - 1, col), vertex, -value)
            if row == rows:
                graph.add_edge(vertex, layout.sink, 0)

    logger.info(
        f"Built pyramid graph: {rows} rows, {graph.vertex_count} vertices, "
        f"{graph.edge_count} edges, {pruned} prime cells cut off"
    )
    return graph
