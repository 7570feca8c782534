"""Graph algorithms that run on top of any backing.

This subpackage contains breadth-first route search, two-group
scheduling, and helpers that build graphs from edge lists.
"""

from .bipartite import check_validity, find_schedule
from .factory import build_graph, create_graph, resolve_backing
from .traversal import count_self_loops, get_route, has_route, reaches_all_others

__all__ = [
    "has_route",
    "get_route",
    "count_self_loops",
    "reaches_all_others",
    "check_validity",
    "find_schedule",
    "create_graph",
    "build_graph",
    "resolve_backing",
]
