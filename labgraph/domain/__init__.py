"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the library. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateNodeError,
    LabGraphError,
    NodeNotFoundError,
    NoRouteFoundError,
    NoScheduleError,
)
from .models import GraphBacking, RouteResult, Schedule

__all__ = [
    # Models
    "GraphBacking",
    "RouteResult",
    "Schedule",
    # Errors
    "LabGraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "NoScheduleError",
    "ConfigurationError",
]
