"""
Core primepath components
"""

from .primes import is_prime
from .graph import Edge, Graph, PyramidLayout, triangular
from .builder import build_pyramid_graph
from .topo import topological_order
from .resolver import PathResult, ResolutionPolicy, maximum_path_sum, resolve
from .config import Config

__all__ = [
    'is_prime',
    'Edge',
    'Graph',
    'PyramidLayout',
    'triangular',
    'build_pyramid_graph',
    'topological_order',
    'PathResult',
    'ResolutionPolicy',
    'maximum_path_sum',
    'resolve',
    'Config',
]
