"""Typed domain errors for the graph analysis library.

Every failure the library reports is one of these types, so callers can
tell a duplicate label from an unreachable target or an unschedulable
graph without parsing messages.

All errors inherit from LabGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class LabGraphError(Exception):
    """Base error for the graph analysis domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateNodeError(LabGraphError):
    """A node was explicitly added with a label the graph already holds.

    Only ``add_node`` raises this; edge operations create missing
    endpoints silently.

    Attributes:
        label: The label that already exists
    """

    label: str = ""


@dataclass
class NodeNotFoundError(LabGraphError):
    """A query referenced a label that is not a node of the graph.

    Attributes:
        label: The label that was not found
    """

    label: str = ""


@dataclass
class NoRouteFoundError(LabGraphError):
    """No directed path exists between the requested nodes.

    Attributes:
        source: Label the search started from
        target: Label that could not be reached
    """

    source: str = ""
    target: str = ""


@dataclass
class NoScheduleError(LabGraphError):
    """The graph cannot be split into two groups.

    Raised when a connected component holds an odd cycle or a self-loop.

    Attributes:
        conflict: The (node, neighbor) pair found in the same group
    """

    conflict: Optional[Tuple[str, str]] = None


@dataclass
class ConfigurationError(LabGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
