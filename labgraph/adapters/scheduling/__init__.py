"""Scheduling adapters - Implementations of SchedulerPort."""

from .bipartite_scheduler import BipartiteScheduler

__all__ = ["BipartiteScheduler"]
