"""Immutable domain models for the graph analysis library.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and describe the results
handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterator, Optional


class GraphBacking(Enum):
    """Storage strategy behind a graph.

    Both backings expose the same operations and answer every query
    identically; they differ only in memory layout and neighbor order.
    """

    MATRIX = "matrix"
    ADJACENCY_LIST = "adjacency_list"


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-route query.

    Attributes:
        path: Ordered tuple of node labels from source to target (inclusive)
    """

    path: tuple[str, ...]

    def __post_init__(self) -> None:
        """Reject empty paths; a route always holds at least its source."""
        if not self.path:
            raise ValueError("A route must contain at least one node")

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def target(self) -> str:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.path) - 1


@dataclass(frozen=True, slots=True)
class Schedule:
    """A split of node labels into two disjoint groups.

    Behaves like a two-element sequence so it can be handed straight
    back to a validity check.

    Attributes:
        first: Labels assigned to group 0
        second: Labels assigned to group 1
    """

    first: frozenset[str] = frozenset()
    second: frozenset[str] = frozenset()

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> frozenset[str]:
        return (self.first, self.second)[index]

    def __iter__(self) -> Iterator[frozenset[str]]:
        yield self.first
        yield self.second

    @classmethod
    def from_groups(
        cls, first: AbstractSet[str], second: AbstractSet[str]
    ) -> Schedule:
        return cls(first=frozenset(first), second=frozenset(second))

    @property
    def size(self) -> int:
        """Total number of scheduled labels."""
        return len(self.first) + len(self.second)

    def group_of(self, label: str) -> Optional[int]:
        """Return 0 or 1 for a scheduled label, None if it is absent."""
        if label in self.first:
            return 0
        if label in self.second:
            return 1
        return None
