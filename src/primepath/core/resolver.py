"""
Maximum path sum over a negated-weight DAG.

Edge weights hold negated cell values, so relaxing for the minimum along a
topological order and flipping the sign at the end gives the maximum sum.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from math import inf
from typing import List, Optional, Sequence, Tuple, Union

from .graph import Edge, Graph
from .topo import topological_order

logger = logging.getLogger(__name__)


class ResolutionPolicy(str, Enum):
    """Which vertex's distance is reported."""

    # Highest-indexed vertex with a finite distance: the sink when any bottom
    # cell is reachable, otherwise the deepest reachable cell.
    BEST_REACHABLE_SUFFIX = "best-reachable-suffix"
    # Only the sink counts; a path must end on a non-prime bottom cell.
    STRICT_SINK = "strict-sink"

    @classmethod
    def parse(cls, raw: Union[str, "ResolutionPolicy"]) -> "ResolutionPolicy":
        if isinstance(raw, cls):
            return raw
        normalized = str(raw).strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        choices = ", ".join(policy.value for policy in cls)
        raise ValueError(f"Unknown resolution policy {raw!r} (expected one of: {choices})")


ReportBestReachableSuffix = ResolutionPolicy.BEST_REACHABLE_SUFFIX


@dataclass(frozen=True)
class PathResult:
    """Best path found by :func:`resolve`."""

    total: int
    vertex: int
    edges: Tuple[Edge, ...]

    @property
    def vertices(self) -> Tuple[int, ...]:
        if not self.edges:
            return (self.vertex,)
        return (self.edges[0].source,) + tuple(edge.target for edge in self.edges)


def resolve(
    graph: Graph,
    order: Sequence[int],
    policy: ResolutionPolicy = ResolutionPolicy.BEST_REACHABLE_SUFFIX,
) -> Optional[PathResult]:
    """Relax ``graph`` along ``order`` and report the best path sum.

    Returns ``None`` when nothing past the source is reachable (or, under
    ``STRICT_SINK``, when the sink is unreachable). That is a normal
    outcome, not an error.
    """
    if graph.vertex_count == 0:
        return None

    distance: List[float] = [inf] * graph.vertex_count
    via: List[Optional[Edge]] = [None] * graph.vertex_count
    distance[0] = 0

    for vertex in order:
        base = distance[vertex]
        if base == inf:
            continue
        for edge in graph.successors(vertex):
            candidate = base + edge.weight
            if distance[edge.target] > candidate:
                distance[edge.target] = candidate
                via[edge.target] = edge

    if policy is ResolutionPolicy.STRICT_SINK:
        candidates = [graph.vertex_count - 1] if graph.vertex_count > 1 else []
    else:
        candidates = range(graph.vertex_count - 1, 0, -1)

    for vertex in candidates:
        if distance[vertex] != inf:
            result = PathResult(
                total=-int(distance[vertex]),
                vertex=vertex,
                edges=_trace_back(via, vertex),
            )
            logger.debug(f"Resolved vertex {vertex} with total {result.total} under {policy.value}")
            return result

    logger.debug(f"No finite distance past the source under {policy.value}")
    return None


def _trace_back(via: List[Optional[Edge]], vertex: int) -> Tuple[Edge, ...]:
    path: List[Edge] = []
    edge = via[vertex]
    while edge is not None:
        path.append(edge)
        edge = via[edge.source]
    path.reverse()
    return tuple(path)


def maximum_path_sum(
    graph: Graph,
    policy: ResolutionPolicy = ResolutionPolicy.BEST_REACHABLE_SUFFIX,
) -> Optional[PathResult]:
    """Order ``graph`` afresh and resolve it."""

    return resolve(graph, topological_order(graph), policy)
