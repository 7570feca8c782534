"""Top-level package for the labgraph library.

labgraph models a labeled directed graph behind two interchangeable
backings (adjacency matrix and adjacency lists) and runs three analyses
on top of either one: reachability, shortest routes, and splitting the
nodes into two groups so that no node shares a group with a neighbor.
"""

from .adapters.graph import AdjacencyListGraph, AdjacencyMatrixGraph, BFSRouteFinder
from .adapters.scheduling import BipartiteScheduler
from .domain import (
    ConfigurationError,
    DuplicateNodeError,
    GraphBacking,
    LabGraphError,
    NodeNotFoundError,
    NoRouteFoundError,
    NoScheduleError,
    RouteResult,
    Schedule,
)
from .graph import (
    build_graph,
    check_validity,
    count_self_loops,
    create_graph,
    find_schedule,
    get_route,
    has_route,
    reaches_all_others,
)
from .ports import GraphPort, RouteFinderPort, SchedulerPort

__all__ = [
    # Backings
    "AdjacencyMatrixGraph",
    "AdjacencyListGraph",
    "GraphBacking",
    "create_graph",
    "build_graph",
    # Traversal
    "has_route",
    "get_route",
    "count_self_loops",
    "reaches_all_others",
    "BFSRouteFinder",
    "RouteResult",
    # Scheduling
    "check_validity",
    "find_schedule",
    "BipartiteScheduler",
    "Schedule",
    # Ports
    "GraphPort",
    "RouteFinderPort",
    "SchedulerPort",
    # Errors
    "LabGraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "NoScheduleError",
    "ConfigurationError",
]
