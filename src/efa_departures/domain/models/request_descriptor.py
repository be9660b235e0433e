"""Request descriptor domain model."""

from dataclasses import dataclass

from efa_departures.domain.models.location_type import LocationType


@dataclass(frozen=True)
class RequestDescriptor:
    """Validated parameters of a single departure monitor request."""

    place: str
    name: str
    service_url: str
    location_type: LocationType | None = None  # None lets the service pick its default (stop)
    date: str | None = None  # day.month[.year], passed through unvalidated
    time: str | None = None  # hh:mm, passed through unvalidated
