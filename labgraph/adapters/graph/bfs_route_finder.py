"""Breadth-first route finder adapter.

This adapter wraps the traversal functions and adds:
- Domain model output (RouteResult)
- Input validation
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import NodeNotFoundError, NoRouteFoundError
from ...domain.models import RouteResult
from ...graph.traversal import get_route, has_route
from ...ports.graph import GraphPort


@dataclass
class BFSRouteFinder:
    """Route finder using breadth-first search.

    This adapter implements RouteFinderPort. Routes have the fewest
    possible edges since the graph is unweighted.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def has_route(self, graph: GraphPort, source: str, target: str) -> bool:
        """Check whether target is reachable from source.

        Both endpoints are checked first, so an unknown target raises
        here, while the bare ``traversal.has_route`` returns False for it.

        Raises:
            NodeNotFoundError: If source or target is not in the graph.
        """
        self._validate(graph, source, target)
        found = has_route(graph, source, target)
        self._logger.debug(
            "Route check",
            extra={"source": source, "target": target, "found": found},
        )
        return found

    def get_route(self, graph: GraphPort, source: str, target: str) -> RouteResult:
        """Find a route with the fewest edges.

        Args:
            graph: The graph to search.
            source: Label to start from.
            target: Label to reach.

        Returns:
            RouteResult with the path from source to target.

        Raises:
            NodeNotFoundError: If source or target is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Finding route",
            extra={"source": source, "target": target},
        )
        self._validate(graph, source, target)

        try:
            path = get_route(graph, source, target)
        except NoRouteFoundError:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise

        result = RouteResult(path=tuple(path))
        self._logger.info(
            "Route found",
            extra={"source": source, "target": target, "hops": result.hops},
        )
        return result

    def get_route_or_none(
        self, graph: GraphPort, source: str, target: str
    ) -> Optional[RouteResult]:
        """Find a route, returning None instead of raising when there is none.

        Unknown labels still raise NodeNotFoundError.
        """
        self._validate(graph, source, target)
        try:
            return RouteResult(path=tuple(get_route(graph, source, target)))
        except NoRouteFoundError:
            return None

    def _validate(self, graph: GraphPort, source: str, target: str) -> None:
        for label in (source, target):
            if not graph.has_node(label):
                raise NodeNotFoundError(
                    f"Node not in graph '{graph.name}': {label}",
                    label=label,
                )
