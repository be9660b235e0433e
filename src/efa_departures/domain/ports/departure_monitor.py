"""Departure monitor port."""

from typing import Protocol

from efa_departures.domain.models.query_result import QueryResult
from efa_departures.domain.models.request_descriptor import RequestDescriptor


class DepartureMonitor(Protocol):
    """Port for querying a departure monitor service."""

    async def query(self, request: RequestDescriptor) -> QueryResult:
        """Run one departure monitor request.

        Service-side problems are reported through ``QueryResult.errstr()``,
        not raised.
        """
        ...
