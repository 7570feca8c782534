"""Bipartite scheduler adapter.

Wraps the two-group scheduling functions with domain model output
(Schedule) and logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoScheduleError
from ...domain.models import Schedule
from ...graph.bipartite import check_validity, find_schedule
from ...ports.graph import GraphPort, Proposal


@dataclass
class BipartiteScheduler:
    """Scheduler that splits nodes by breadth-first 2-coloring.

    This adapter implements SchedulerPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def check_validity(self, graph: GraphPort, proposal: Proposal) -> bool:
        valid = check_validity(graph, proposal)
        self._logger.debug(
            "Schedule checked",
            extra={"graph": graph.name, "groups": len(proposal), "valid": valid},
        )
        return valid

    def find_schedule(self, graph: GraphPort) -> Schedule:
        """Split every node of the graph into two valid groups.

        Args:
            graph: The graph to schedule.

        Returns:
            Schedule covering every node of the graph.

        Raises:
            NoScheduleError: If the graph has an odd cycle or a self-loop.
        """
        self._logger.debug(
            "Finding schedule",
            extra={"graph": graph.name, "nodes": len(graph)},
        )

        try:
            first, second = find_schedule(graph)
        except NoScheduleError as e:
            self._logger.warning(
                "No schedule found",
                extra={"graph": graph.name, "conflict": e.conflict},
            )
            raise

        schedule = Schedule.from_groups(first, second)
        self._logger.info(
            "Schedule found",
            extra={
                "graph": graph.name,
                "first": len(schedule.first),
                "second": len(schedule.second),
            },
        )
        return schedule
