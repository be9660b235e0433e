"""Domain layer - core models, errors and ports."""

from efa_departures.domain.errors import (
    EfaDeparturesError,
    EmptyResultError,
    RequestError,
    UsageError,
)
from efa_departures.domain.models import (
    Departure,
    DisplayRow,
    Line,
    LocationType,
    QueryResult,
    RequestDescriptor,
)
from efa_departures.domain.ports import DepartureMonitor

__all__ = [
    "Departure",
    "DepartureMonitor",
    "DisplayRow",
    "EfaDeparturesError",
    "EmptyResultError",
    "Line",
    "LocationType",
    "QueryResult",
    "RequestDescriptor",
    "RequestError",
    "UsageError",
]
