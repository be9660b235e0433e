"""Query result domain model."""

from dataclasses import dataclass, field

from efa_departures.domain.models.departure import Departure
from efa_departures.domain.models.line import Line


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one departure monitor request.

    A request that the service rejected carries an ``error`` message and no
    lines or departures.
    """

    error: str | None = None
    lines: list[Line] = field(default_factory=list)
    departures: list[Departure] = field(default_factory=list)

    def errstr(self) -> str | None:
        """Return the request-level error message, if any."""
        return self.error
