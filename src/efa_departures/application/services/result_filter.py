"""Line and platform filtering of departure monitor results."""

import logging
from collections.abc import Iterable, Set

from efa_departures.domain.models.departure import Departure
from efa_departures.domain.models.line import Line

logger = logging.getLogger(__name__)

DB_PLATFORM_SUFFIX = " (DB)"


def effective_platform(departure: Departure) -> str:
    """Platform as displayed and matched, with the national rail suffix if flagged."""
    if departure.platform_is_db:
        return departure.platform + DB_PLATFORM_SUFFIX
    return departure.platform


def _matches(value: str, allowed: Set[str]) -> bool:
    """Exact membership test; an empty set allows everything."""
    return not allowed or value in allowed


def filter_lines(lines: Iterable[Line], line_filter: Set[str]) -> list[Line]:
    """Keep the lines whose name is in ``line_filter`` (all lines if it is empty)."""
    return [line for line in lines if _matches(line.name, line_filter)]


def filter_departures(
    departures: Iterable[Departure],
    line_filter: Set[str],
    platform_filter: Set[str],
    relative: bool = False,
) -> list[Departure]:
    """Keep departures matching both the line and the platform filter.

    Platforms are compared in their displayed form, so a national rail
    platform 1 only matches the filter value ``"1 (DB)"``.

    In relative mode cancelled departures are dropped, since a countdown to a
    departure that will not happen is meaningless. In absolute mode they are
    kept and marked as cancelled when displayed.
    """
    result = []
    for departure in departures:
        if not _matches(departure.line, line_filter):
            continue
        if not _matches(effective_platform(departure), platform_filter):
            continue
        if relative and departure.is_cancelled:
            logger.debug(f"Dropping cancelled {departure.line} at {departure.time}")
            continue
        result.append(departure)
    return result
