"""Adjacency-matrix graph adapter.

Stores edges in a dense boolean matrix:
- Nodes get integer indices in creation order
- The matrix grows by one row and one column per new node
- Two maps translate between labels and indices

Neighbor order follows index order, i.e. node creation order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ...domain.errors import DuplicateNodeError, NodeNotFoundError


@dataclass
class AdjacencyMatrixGraph:
    """Graph backed by an adjacency matrix.

    This adapter implements GraphPort. Membership and edge tests are
    constant time; memory grows with the square of the node count.

    Attributes:
        name: Graph name used in logs
    """

    name: str = "graph"

    _matrix: List[List[bool]] = field(default_factory=list, repr=False)
    _index_of: Dict[str, int] = field(default_factory=dict, repr=False)
    _label_of: Dict[int, str] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_node(self, label: str) -> None:
        """Register a new node.

        Raises:
            DuplicateNodeError: If the label is already present.
        """
        if label in self._index_of:
            raise DuplicateNodeError(
                f"Node already exists in graph '{self.name}': {label}",
                label=label,
            )
        self._add_node_unchecked(label)

    def _add_node_unchecked(self, label: str) -> int:
        """Return the index of label, creating the node if needed."""
        index = self._index_of.get(label)
        if index is not None:
            return index

        index = len(self._matrix)
        for row in self._matrix:
            row.append(False)
        self._matrix.append([False] * (index + 1))
        self._index_of[label] = index
        self._label_of[index] = label

        self._logger.debug(
            "Node added",
            extra={"graph": self.name, "label": label, "index": index},
        )
        return index

    def add_directed_edge(self, source: str, target: str) -> None:
        row = self._add_node_unchecked(source)
        col = self._add_node_unchecked(target)
        self._matrix[row][col] = True

    def add_undirected_edge(self, first: str, second: str) -> None:
        self.add_directed_edge(first, second)
        self.add_directed_edge(second, first)

    def neighbors(self, label: str) -> List[str]:
        row = self._matrix[self._require_index(label)]
        return [self._label_of[col] for col, present in enumerate(row) if present]

    def all_nodes(self) -> List[str]:
        return [self._label_of[index] for index in range(len(self._matrix))]

    def has_node(self, label: str) -> bool:
        return label in self._index_of

    def count_self_loops(self) -> int:
        """Count the nodes with an edge to themselves (the matrix diagonal)."""
        return sum(1 for index, row in enumerate(self._matrix) if row[index])

    def reaches_all_others(self, label: str) -> bool:
        """Check that ``label`` has a direct edge to every other node."""
        row_index = self._require_index(label)
        row = self._matrix[row_index]
        return all(present or col == row_index for col, present in enumerate(row))

    def _require_index(self, label: str) -> int:
        try:
            return self._index_of[label]
        except KeyError as e:
            raise NodeNotFoundError(
                f"Node not in graph '{self.name}': {label}",
                label=label,
                cause=e,
            )

    def __contains__(self, label: object) -> bool:
        return label in self._index_of

    def __len__(self) -> int:
        return len(self._matrix)
