"""Graph construction helpers.

This module picks a backing from configuration and builds graphs from
plain edge lists, replacing hand-written sequences of add_* calls.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple, Union

from ..adapters.graph.list_graph import AdjacencyListGraph
from ..adapters.graph.matrix_graph import AdjacencyMatrixGraph
from ..config import get_config
from ..domain.errors import ConfigurationError
from ..domain.models import GraphBacking
from ..ports.graph import GraphPort

logger = logging.getLogger(__name__)

Edge = Tuple[str, str]


def resolve_backing(backing: Union[GraphBacking, str, None]) -> GraphBacking:
    """Turn a backing name (or None for the configured default) into an enum."""
    if backing is None:
        backing = get_config().graph.default_backing
    if isinstance(backing, GraphBacking):
        return backing
    try:
        return GraphBacking(backing)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown graph backing: {backing!r}",
            setting_name="default_backing",
            expected_type=" | ".join(member.value for member in GraphBacking),
            cause=e,
        )


def create_graph(
    name: Optional[str] = None,
    backing: Union[GraphBacking, str, None] = None,
) -> GraphPort:
    """Create an empty graph.

    Args:
        name: Graph name; defaults to the configured default name.
        backing: Storage strategy; defaults to the configured backing.

    Returns:
        A new, empty graph.

    Raises:
        ConfigurationError: If the backing name is not recognised.
    """
    chosen = resolve_backing(backing)
    graph_name = name if name is not None else get_config().graph.default_name

    logger.debug(
        "Creating graph",
        extra={"graph": graph_name, "backing": chosen.value},
    )

    if chosen is GraphBacking.MATRIX:
        return AdjacencyMatrixGraph(name=graph_name)
    return AdjacencyListGraph(name=graph_name)


def build_graph(
    edges: Iterable[Edge],
    nodes: Iterable[str] = (),
    directed: bool = True,
    name: Optional[str] = None,
    backing: Union[GraphBacking, str, None] = None,
) -> GraphPort:
    """Create a graph and populate it.

    Explicit nodes are registered first, in order, so they fix the
    creation order; edge endpoints that are still missing are created
    as the edges are added.

    Args:
        edges: (source, target) pairs.
        nodes: Labels to register before any edge.
        directed: Add each pair as a directed edge if True, else undirected.
        name: Graph name.
        backing: Storage strategy.

    Returns:
        The populated graph.

    Raises:
        DuplicateNodeError: If ``nodes`` repeats a label.
        ConfigurationError: If the backing name is not recognised.
    """
    graph = create_graph(name=name, backing=backing)

    for label in nodes:
        graph.add_node(label)

    for source, target in edges:
        if directed:
            graph.add_directed_edge(source, target)
        else:
            graph.add_undirected_edge(source, target)

    logger.info(
        "Graph built",
        extra={"graph": graph.name, "nodes": len(graph), "directed": directed},
    )
    return graph
