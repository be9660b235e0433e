"""Build the form of a departure monitor request."""

import re
from datetime import datetime

from efa_departures.adapters.efa_api.constants import DEFAULT_LOCATION_TYPE, DM_FORM_DEFAULTS
from efa_departures.adapters.efa_api.errors import InvalidRequestParameter
from efa_departures.domain.models.request_descriptor import RequestDescriptor

_DATE_PATTERN = re.compile(r"(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.?(?P<year>\d{4})?")
_TIME_PATTERN = re.compile(r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2})")


def _split_date(date: str, now: datetime) -> tuple[str, str, str]:
    """Split ``dd.mm[.yyyy]``; the year defaults to the current one."""
    match = _DATE_PATTERN.fullmatch(date.strip())
    if not match:
        raise InvalidRequestParameter(f"invalid date '{date}', expected dd.mm[.yyyy]")
    year = match.group("year") or str(now.year)
    return match.group("day"), match.group("month"), year


def _split_time(time: str) -> tuple[str, str]:
    match = _TIME_PATTERN.fullmatch(time.strip())
    if not match:
        raise InvalidRequestParameter(f"invalid time '{time}', expected hh:mm")
    return match.group("hour"), match.group("minute")


def build_dm_form(request: RequestDescriptor, now: datetime) -> dict[str, str]:
    """Build the form fields of an XSLT_DM_REQUEST.

    Args:
        request: The resolved request.
        now: Current time in the service's timezone, used for missing date/time parts.

    Raises:
        InvalidRequestParameter: If date or time are malformed.
    """
    day, month, year = str(now.day), str(now.month), str(now.year)
    hour, minute = str(now.hour), str(now.minute)

    if request.date:
        day, month, year = _split_date(request.date, now)
    if request.time and request.time != "now":
        hour, minute = _split_time(request.time)

    form = dict(DM_FORM_DEFAULTS)
    form.update(
        {
            "itdDateDay": day,
            "itdDateMonth": month,
            "itdDateYear": year,
            "itdTimeHour": hour,
            "itdTimeMinute": minute,
            "name_dm": request.name,
            "place_dm": request.place,
            "type_dm": (
                request.location_type.value if request.location_type else DEFAULT_LOCATION_TYPE
            ),
        }
    )
    return form
