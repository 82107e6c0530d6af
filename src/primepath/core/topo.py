from __future__ import annotations

from typing import Iterator, List, Tuple

from .graph import Edge, Graph


def topological_order(graph: Graph) -> List[int]:
    """Reverse DFS finishing order over every vertex id.

    Roots are tried in id order, so the source's DFS runs first; vertices
    left unvisited by it (cut-off cells) finish later and therefore land
    ahead of it in the result. An explicit work stack replaces recursion;
    the finishing order matches the recursive formulation exactly.
    """

    visited = [False] * graph.vertex_count
    finished: List[int] = []

    for root in range(graph.vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, graph.successors(root))]
        while stack:
            vertex, pending = stack[-1]
            for edge in pending:
                if not visited[edge.target]:
                    visited[edge.target] = True
                    stack.append((edge.target, graph.successors(edge.target)))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    finished.reverse()
    return finished
