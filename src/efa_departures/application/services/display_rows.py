"""Projection of lines and departures into table rows."""

from efa_departures.application.services.result_filter import effective_platform
from efa_departures.domain.models.departure import Departure
from efa_departures.domain.models.display_row import DisplayRow
from efa_departures.domain.models.line import Line


def format_departure_time(departure: Departure, relative: bool = False) -> str:
    """Format the time column of a departure.

    Relative mode shows the countdown (``" 5 min"``). Absolute mode shows the
    time, followed by ``CANCELED`` or the delay in minutes (``"09:40 (+4)"``).
    """
    if relative:
        return f"{departure.countdown:2d} min"
    if departure.is_cancelled:
        return f"{departure.time} CANCELED"
    if departure.delay > 0:
        return f"{departure.time} (+{departure.delay})"
    return departure.time


def departure_row(departure: Departure, relative: bool = False) -> DisplayRow:
    return DisplayRow.of(
        format_departure_time(departure, relative),
        effective_platform(departure),
        departure.line,
        departure.destination,
        annotation=departure.info,
    )


def line_row(line: Line) -> DisplayRow:
    return DisplayRow.of(line.type, line.name, line.direction or "", line.route or "")
