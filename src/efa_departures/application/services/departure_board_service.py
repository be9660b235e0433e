"""Departure board service: query, filter and project into rows."""

import logging
from collections.abc import Set
from dataclasses import dataclass, field

from efa_departures.application.services.display_rows import departure_row, line_row
from efa_departures.application.services.result_filter import filter_departures, filter_lines
from efa_departures.domain.errors import RequestError
from efa_departures.domain.models.display_row import DisplayRow
from efa_departures.domain.models.query_result import QueryResult
from efa_departures.domain.models.request_descriptor import RequestDescriptor
from efa_departures.domain.ports.departure_monitor import DepartureMonitor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardOptions:
    """Display options that shape which rows end up on the board."""

    line_filter: Set[str] = field(default_factory=frozenset)
    platform_filter: Set[str] = field(default_factory=frozenset)
    relative: bool = False
    list_lines: bool = False


class DepartureBoardService:
    """Service for turning a departure monitor request into display rows."""

    def __init__(self, departure_monitor: DepartureMonitor) -> None:
        """Initialize with a departure monitor."""
        self._departure_monitor = departure_monitor

    async def fetch(self, request: RequestDescriptor) -> QueryResult:
        """Run the request.

        Raises:
            RequestError: If the service reported an error for the request.
        """
        result = await self._departure_monitor.query(request)
        error = result.errstr()
        if error:
            raise RequestError(error)
        logger.info(
            f"Got {len(result.departures)} departure(s) and {len(result.lines)} line(s) "
            f"for {request.place}, {request.name}"
        )
        return result

    def build_rows(self, result: QueryResult, options: BoardOptions) -> list[DisplayRow]:
        """Filter a result and project it into rows, preserving service order."""
        if options.list_lines:
            lines = filter_lines(result.lines, options.line_filter)
            return [line_row(line) for line in lines]

        departures = filter_departures(
            result.departures,
            options.line_filter,
            options.platform_filter,
            relative=options.relative,
        )
        return [departure_row(d, relative=options.relative) for d in departures]

    async def get_rows(
        self, request: RequestDescriptor, options: BoardOptions
    ) -> list[DisplayRow]:
        """Fetch a result and build its rows in one step."""
        result = await self.fetch(request)
        return self.build_rows(result, options)
