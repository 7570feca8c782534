"""Breadth-first traversal over any graph backing.

Every routine here uses only ``neighbors()`` and ``all_nodes()`` from
the graph, so the results never depend on which backing is in use.
"""

from collections import deque
from typing import Deque, Dict, List, Optional, Set

from ..domain.errors import NoRouteFoundError
from ..ports.graph import GraphPort


def has_route(graph: GraphPort, source: str, target: str) -> bool:
    """Check whether there is a directed path from ``source`` to ``target``.

    Nodes are marked visited when dequeued, so the frontier may briefly
    hold the same label twice.

    Parameters
    ----------
    graph:
        Graph to search.
    source:
        Label of the node to start from.
    target:
        Label of the node to reach.

    Returns
    -------
    bool
        True if ``target`` is reachable, including when it equals ``source``.
        An unknown ``target`` is simply never reached and gives False; an
        unknown ``source`` raises NodeNotFoundError from ``neighbors()``.
        ``BFSRouteFinder.has_route`` rejects both up front instead.
    """
    visited: Set[str] = set()
    frontier: Deque[str] = deque([source])

    while frontier:
        current = frontier.popleft()
        if current == target:
            return True
        if current in visited:
            continue
        visited.add(current)
        frontier.extend(graph.neighbors(current))

    return False


def get_route(graph: GraphPort, source: str, target: str) -> List[str]:
    """Compute a path with the fewest edges from ``source`` to ``target``.

    The first node to discover a label becomes its predecessor; later
    discoveries are ignored, which keeps the path minimal.

    Parameters
    ----------
    graph:
        Graph to search.
    source:
        Label of the node to start from.
    target:
        Label of the node to reach.

    Returns
    -------
    list[str]
        Labels from ``source`` to ``target`` inclusive. ``[source]`` when
        both are the same node.

    Raises
    ------
    NoRouteFoundError
        If ``target`` cannot be reached.
    """
    if source == target:
        return [source]

    previous: Dict[str, Optional[str]] = {source: None}
    frontier: Deque[str] = deque([source])

    while frontier:
        current = frontier.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in previous:
                continue
            previous[neighbor] = current
            if neighbor == target:
                return _walk_back(previous, target)
            frontier.append(neighbor)

    raise NoRouteFoundError(
        f"No route from {source} to {target}",
        source=source,
        target=target,
    )


def _walk_back(previous: Dict[str, Optional[str]], target: str) -> List[str]:
    path: List[str] = []
    current: Optional[str] = target
    while current is not None:
        path.append(current)
        current = previous[current]
    path.reverse()
    return path


def count_self_loops(graph: GraphPort) -> int:
    """Count nodes listed among their own neighbors."""
    return sum(1 for label in graph.all_nodes() if label in graph.neighbors(label))


def reaches_all_others(graph: GraphPort, label: str) -> bool:
    """Check that ``label`` has a direct edge to every other node.

    Only one hop is considered; a self-loop neither helps nor hurts.
    """
    targets = set(graph.neighbors(label))
    return all(other == label or other in targets for other in graph.all_nodes())
