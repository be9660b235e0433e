"""Turn command line arguments into a departure monitor request."""

import logging
import re
from collections.abc import Iterable, Sequence

from efa_departures.domain.errors import UsageError
from efa_departures.domain.models.location_type import LocationType
from efa_departures.domain.models.request_descriptor import RequestDescriptor

logger = logging.getLogger(__name__)

_TYPE_PREFIX = re.compile(r"^(?P<type>address|poi|stop):")


def split_location_type(name: str) -> tuple[str, LocationType | None]:
    """Strip an optional ``address:``, ``poi:`` or ``stop:`` prefix from a name.

    Returns the remaining name and the location type the prefix selected, or
    ``None`` when the name carries no recognised prefix.
    """
    match = _TYPE_PREFIX.match(name)
    if not match:
        return name, None
    return name[match.end() :], LocationType(match.group("type"))


def split_filter_values(values: Iterable[str] | None) -> frozenset[str]:
    """Flatten repeated option values and comma-separated lists into one set.

    ``["18,RE1", "U79"]`` becomes ``{"18", "RE1", "U79"}``. Empty items are
    dropped, so an empty result means "no filtering".
    """
    if not values:
        return frozenset()
    return frozenset(item for value in values for item in value.split(",") if item)


class QueryParameterResolver:
    """Builds a RequestDescriptor from raw command line values."""

    def __init__(self, default_service_url: str) -> None:
        """Initialize with the endpoint used when no URL override is given."""
        self._default_service_url = default_service_url

    def resolve(
        self,
        positional: Sequence[str],
        date: str | None = None,
        time: str | None = None,
        service_url: str | None = None,
    ) -> RequestDescriptor:
        """Resolve ``<city> [<type>:]<name>`` plus options into a request.

        Args:
            positional: The positional arguments; exactly two are required.
            date: Optional date override, passed through unvalidated.
            time: Optional time override, passed through unvalidated.
            service_url: Optional endpoint override.

        Raises:
            UsageError: Unless exactly two non-empty positional arguments are given.
        """
        if len(positional) != 2:
            raise UsageError(f"expected 2 positional arguments, got {len(positional)}")

        place, raw_name = positional
        name, location_type = split_location_type(raw_name)
        if not place or not name:
            raise UsageError("city and name must not be empty")

        request = RequestDescriptor(
            place=place,
            name=name,
            service_url=service_url or self._default_service_url,
            location_type=location_type,
            date=date,
            time=time,
        )
        logger.debug(f"Resolved request: {request}")
        return request
