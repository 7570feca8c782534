"""Graph ports - Abstractions for graph storage, routing and scheduling.

These protocols define the contracts between the analysis algorithms
and the concrete graph backings. Algorithms only ever talk to a graph
through GraphPort, so any backing can be swapped in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, List, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult, Schedule

# A proposed split of node labels, normally exactly two sets
Proposal = Sequence[AbstractSet[str]]


class GraphPort(Protocol):
    """Port for a labeled directed graph.

    Implementations: adapters/graph/matrix_graph.py,
    adapters/graph/list_graph.py

    Nodes are identified by caller-supplied string labels. Edges are
    unweighted presence flags; an undirected edge is two directed ones.
    """

    name: str

    def add_node(self, label: str) -> None:
        """Register a new node.

        Args:
            label: Unique label for the node.

        Raises:
            DuplicateNodeError: If the label is already present.
        """
        ...

    def add_directed_edge(self, source: str, target: str) -> None:
        """Add the edge source -> target, creating missing endpoints.

        Adding an existing edge again changes nothing.
        """
        ...

    def add_undirected_edge(self, first: str, second: str) -> None:
        """Add first -> second and second -> first."""
        ...

    def neighbors(self, label: str) -> List[str]:
        """List the labels that ``label`` has a directed edge to.

        Raises:
            NodeNotFoundError: If the label is not a node.
        """
        ...

    def all_nodes(self) -> List[str]:
        """List every registered label."""
        ...

    def has_node(self, label: str) -> bool:
        """Check whether a label is a node of the graph."""
        ...

    def count_self_loops(self) -> int:
        """Count the nodes that have an edge to themselves."""
        ...

    def reaches_all_others(self, label: str) -> bool:
        """Check whether ``label`` has a direct edge to every other node.

        Raises:
            NodeNotFoundError: If the label is not a node.
        """
        ...

    def __contains__(self, label: object) -> bool: ...

    def __len__(self) -> int: ...


class RouteFinderPort(Protocol):
    """Port for route queries.

    Implementation: adapters/graph/bfs_route_finder.py
    Wraps: graph/traversal.py
    """

    def has_route(self, graph: GraphPort, source: str, target: str) -> bool:
        """Check whether target is reachable from source."""
        ...

    def get_route(self, graph: GraphPort, source: str, target: str) -> RouteResult:
        """Find a route with the fewest edges from source to target.

        Raises:
            NoRouteFoundError: If target is unreachable.
        """
        ...


class SchedulerPort(Protocol):
    """Port for two-group scheduling.

    Implementation: adapters/scheduling/bipartite_scheduler.py
    Wraps: graph/bipartite.py
    """

    def check_validity(self, graph: GraphPort, proposal: Proposal) -> bool:
        """Check a proposed split against the adjacency constraint."""
        ...

    def find_schedule(self, graph: GraphPort) -> Schedule:
        """Split every node of the graph into two valid groups.

        Raises:
            NoScheduleError: If no such split exists.
        """
        ...
