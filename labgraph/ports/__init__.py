"""Ports layer - Abstract interfaces (Protocols) for the library.

Ports define the contracts between the analysis algorithms and the
adapters that store graphs or expose the algorithms. They enable
dependency injection and make every backing testable against the
same suite.
"""

from .graph import GraphPort, Proposal, RouteFinderPort, SchedulerPort

__all__ = [
    "GraphPort",
    "Proposal",
    "RouteFinderPort",
    "SchedulerPort",
]
