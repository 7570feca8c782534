"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- AdjacencyMatrixGraph: Dense boolean matrix backing
- AdjacencyListGraph: Per-node neighbor list backing
- BFSRouteFinder: Finds routes with breadth-first search
"""

from .bfs_route_finder import BFSRouteFinder
from .list_graph import AdjacencyListGraph
from .matrix_graph import AdjacencyMatrixGraph

__all__ = ["AdjacencyMatrixGraph", "AdjacencyListGraph", "BFSRouteFinder"]
