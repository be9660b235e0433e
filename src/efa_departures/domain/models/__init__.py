"""Domain models for EFA departures."""

from efa_departures.domain.models.departure import Departure
from efa_departures.domain.models.display_row import DisplayRow
from efa_departures.domain.models.line import Line
from efa_departures.domain.models.location_type import LocationType
from efa_departures.domain.models.query_result import QueryResult
from efa_departures.domain.models.request_descriptor import RequestDescriptor

__all__ = [
    "Departure",
    "DisplayRow",
    "Line",
    "LocationType",
    "QueryResult",
    "RequestDescriptor",
]
