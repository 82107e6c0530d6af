"""primepath - maximum non-prime path sums through number pyramids.

The pyramid is mapped onto a DAG with a synthetic source and sink, ordered
topologically and relaxed once with negated weights, so the shortest path
over the negated graph is the best path sum over the original values.
"""

__version__ = "0.1.0"

from .core.builder import build_pyramid_graph
from .core.resolver import PathResult, ResolutionPolicy, maximum_path_sum, resolve
from .core.exceptions import PrimePathError

__all__ = [
    "build_pyramid_graph",
    "maximum_path_sum",
    "resolve",
    "PathResult",
    "ResolutionPolicy",
    "PrimePathError",
]
