"""EFA implementation of the DepartureMonitor port."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from efa_departures.adapters.efa_api.errors import EfaHttpError, InvalidRequestParameter
from efa_departures.adapters.efa_api.http_client import EfaHttpClient
from efa_departures.adapters.efa_api.request_form import build_dm_form
from efa_departures.adapters.efa_api.xml_parser import parse_dm_response
from efa_departures.domain.models.query_result import QueryResult
from efa_departures.domain.models.request_descriptor import RequestDescriptor
from efa_departures.domain.ports.departure_monitor import DepartureMonitor

logger = logging.getLogger(__name__)


class EfaDepartureMonitor(DepartureMonitor):
    """Departure monitor backed by an EFA XSLT_DM_REQUEST endpoint."""

    def __init__(self, http_client: EfaHttpClient, timezone: str = "Europe/Berlin") -> None:
        """Initialize the monitor.

        Args:
            http_client: Client used to talk to the endpoint.
            timezone: Timezone of the service, used to fill in the current date/time.
        """
        self._http_client = http_client
        self._timezone = ZoneInfo(timezone)

    async def query(self, request: RequestDescriptor) -> QueryResult:
        """Run one departure monitor request against ``request.service_url``."""
        try:
            form = build_dm_form(request, datetime.now(self._timezone))
        except InvalidRequestParameter as e:
            return QueryResult(error=str(e))

        logger.debug(f"Querying {request.service_url} for {request.place}, {request.name}")
        try:
            content = await self._http_client.post_dm_request(request.service_url, form)
        except EfaHttpError as e:
            return QueryResult(error=str(e))

        return parse_dm_response(content)
