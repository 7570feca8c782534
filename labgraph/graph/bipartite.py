"""Two-group scheduling under an adjacency constraint.

A schedule puts every node in one of two groups so that each of its
neighbors lands in the other group. Building one is breadth-first
2-coloring, one connected component at a time; it succeeds iff every
component is bipartite and free of self-loops.
"""

from collections import deque
from typing import AbstractSet, Deque, Dict, List, Set

from ..domain.errors import NoScheduleError
from ..ports.graph import GraphPort, Proposal


def check_validity(graph: GraphPort, proposal: Proposal) -> bool:
    """Check a proposed split against the graph's adjacency constraint.

    Only nodes named in the proposal are inspected, so a proposal that
    leaves isolated nodes out can still be valid.

    Parameters
    ----------
    graph:
        Graph the proposal refers to.
    proposal:
        Sequence of label sets. Anything other than two sets is invalid.

    Returns
    -------
    bool
        True if the two sets are disjoint, every label is a node of the
        graph, and each node's neighbors all sit in the other set.
    """
    if len(proposal) != 2:
        return False

    first, second = proposal[0], proposal[1]
    if not first.isdisjoint(second):
        return False

    return _neighbors_within(graph, first, second) and _neighbors_within(
        graph, second, first
    )


def _neighbors_within(
    graph: GraphPort, group: AbstractSet[str], other: AbstractSet[str]
) -> bool:
    for label in group:
        if not graph.has_node(label):
            return False
        if any(neighbor not in other for neighbor in graph.neighbors(label)):
            return False
    return True


def find_schedule(graph: GraphPort) -> List[Set[str]]:
    """Split all nodes of ``graph`` into two valid groups.

    Components are colored independently, each starting its root in
    group 0, so group numbering only means something within a component.
    A component here ignores edge direction: a node is adjacent to both
    the nodes it points to and the nodes pointing to it.

    Parameters
    ----------
    graph:
        Graph to schedule.

    Returns
    -------
    list[set[str]]
        Exactly two sets. Both are empty for an empty graph.

    Raises
    ------
    NoScheduleError
        If a node and one of its neighbors must share a group.
    """
    groups: List[Set[str]] = [set(), set()]
    assigned: Dict[str, int] = {}
    predecessors = _predecessors(graph)

    for root in graph.all_nodes():
        if root in assigned:
            continue

        assigned[root] = 0
        groups[0].add(root)
        queue: Deque[str] = deque([root])

        while queue:
            current = queue.popleft()
            side = assigned[current]
            # Edges are followed both ways; the constraint holds either way.
            adjacent = [
                (neighbor, (current, neighbor)) for neighbor in graph.neighbors(current)
            ]
            adjacent += [(source, (source, current)) for source in predecessors[current]]
            for other, edge in adjacent:
                other_side = assigned.get(other)
                if other_side is None:
                    assigned[other] = 1 - side
                    groups[1 - side].add(other)
                    queue.append(other)
                elif other_side == side:
                    raise NoScheduleError(
                        f"{edge[0]} and {edge[1]} cannot be split into different groups",
                        conflict=edge,
                    )

    return groups


def _predecessors(graph: GraphPort) -> Dict[str, List[str]]:
    """Map every label to the labels that have an edge to it."""
    incoming: Dict[str, List[str]] = {label: [] for label in graph.all_nodes()}
    for label in incoming:
        for neighbor in graph.neighbors(label):
            incoming[neighbor].append(label)
    return incoming
