"""Adjacency-list graph adapter.

Each node owns the list of nodes it has an edge to. Neighbor lookup
walks that list directly and duplicate edges are rejected by scanning
it, so neighbor order is edge insertion order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ...domain.errors import DuplicateNodeError, NodeNotFoundError


@dataclass(eq=False)
class _Node:
    """A vertex and its outgoing edges. Compared by identity."""

    label: str
    next_nodes: List[_Node] = field(default_factory=list, repr=False)


@dataclass
class AdjacencyListGraph:
    """Graph backed by per-node adjacency lists.

    This adapter implements GraphPort. Memory grows with the number of
    edges; edge membership costs a scan of the source node's list.

    Attributes:
        name: Graph name used in logs
    """

    name: str = "graph"

    _nodes: Dict[str, _Node] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_node(self, label: str) -> None:
        """Register a new node.

        Raises:
            DuplicateNodeError: If the label is already present.
        """
        if label in self._nodes:
            raise DuplicateNodeError(
                f"Node already exists in graph '{self.name}': {label}",
                label=label,
            )
        self._add_node_unchecked(label)

    def _add_node_unchecked(self, label: str) -> _Node:
        node = self._nodes.get(label)
        if node is None:
            node = _Node(label)
            self._nodes[label] = node
            self._logger.debug(
                "Node added",
                extra={"graph": self.name, "label": label},
            )
        return node

    def add_directed_edge(self, source: str, target: str) -> None:
        from_node = self._add_node_unchecked(source)
        to_node = self._add_node_unchecked(target)
        if to_node not in from_node.next_nodes:
            from_node.next_nodes.append(to_node)

    def add_undirected_edge(self, first: str, second: str) -> None:
        self.add_directed_edge(first, second)
        self.add_directed_edge(second, first)

    def neighbors(self, label: str) -> List[str]:
        return [node.label for node in self._require_node(label).next_nodes]

    def all_nodes(self) -> List[str]:
        return list(self._nodes)

    def has_node(self, label: str) -> bool:
        return label in self._nodes

    def count_self_loops(self) -> int:
        return sum(1 for node in self._nodes.values() if node in node.next_nodes)

    def reaches_all_others(self, label: str) -> bool:
        """Check that ``label`` has a direct edge to every other node."""
        source = self._require_node(label)
        return all(
            node is source or node in source.next_nodes
            for node in self._nodes.values()
        )

    def _require_node(self, label: str) -> _Node:
        try:
            return self._nodes[label]
        except KeyError as e:
            raise NodeNotFoundError(
                f"Node not in graph '{self.name}': {label}",
                label=label,
                cause=e,
            )

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
