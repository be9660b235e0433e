"""Parser for EFA departure monitor XML responses."""

import logging
import re
import xml.etree.ElementTree as ET

from efa_departures.adapters.efa_api.constants import (
    CANCELLED_DELAY,
    ODV_STATE_LIST,
    ODV_STATE_NOT_IDENTIFIED,
)
from efa_departures.domain.models.departure import Departure
from efa_departures.domain.models.line import Line
from efa_departures.domain.models.query_result import QueryResult

logger = logging.getLogger(__name__)

# "Gleis 5" is a national rail track, "Bstg. 2" / "Bussteig 2" a local platform
_DB_PLATFORM = re.compile(r"^Gleis\s*(?P<platform>\S+)")
_LOCAL_PLATFORM = re.compile(r"^(?:Bstg\.|Bussteig)\s*(?P<platform>\S+)")


def _text(element: ET.Element | None) -> str:
    """Full text content of an element, including its children."""
    if element is None:
        return ""
    return "".join(element.itertext())


def _int_attribute(element: ET.Element, name: str, default: int = 0) -> int:
    value = element.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {element.tag}@{name}: '{value}'")
        return default


def _format_date(itd_date: ET.Element) -> str:
    return "{:02d}.{:02d}.{}".format(
        _int_attribute(itd_date, "day"),
        _int_attribute(itd_date, "month"),
        _int_attribute(itd_date, "year"),
    )


def _format_time(itd_time: ET.Element) -> str:
    return "{:02d}:{:02d}".format(
        _int_attribute(itd_time, "hour"),
        _int_attribute(itd_time, "minute"),
    )


def _candidate_names(odv_part: ET.Element, elem_tag: str) -> list[str]:
    return [_text(elem) for elem in odv_part.findall(elem_tag)]


def check_for_errors(root: ET.Element) -> str | None:
    """Return the request-level error of a response, if there is one.

    The place is checked before the name: an ambiguous or unknown place makes
    the name state meaningless.
    """
    odv_place = root.find(".//itdOdv/itdOdvPlace")
    odv_name = root.find(".//itdOdv/itdOdvName")

    if odv_place is not None and odv_name is not None:
        place_state = odv_place.get("state", "")
        name_state = odv_name.get("state", "")

        if place_state == ODV_STATE_LIST:
            candidates = _candidate_names(odv_place, "odvPlaceElem")
            return " ".join(["ambiguous place parameter", *candidates])
        if place_state == ODV_STATE_NOT_IDENTIFIED:
            return "invalid place parameter"
        if name_state == ODV_STATE_LIST:
            candidates = _candidate_names(odv_name, "odvNameElem")
            return " ".join(["ambiguous name parameter", *candidates])
        if name_state == ODV_STATE_NOT_IDENTIFIED:
            return "invalid name parameter"
    else:
        logger.warning("Response has no itdOdvPlace/itdOdvName, skipping ambiguity check")

    messages = [
        _text(message) for message in root.iter("itdMessage") if message.get("type") == "error"
    ]
    if messages:
        return "; ".join(messages)
    return None


def _parse_platform(itd_departure: ET.Element) -> tuple[str, bool]:
    """Platform number and whether it belongs to national rail."""
    platform = itd_departure.get("platform", "")
    platform_name = itd_departure.get("platformName", "")

    db_match = _DB_PLATFORM.match(platform_name)
    if db_match:
        return db_match.group("platform"), True
    if itd_departure.get("pointType") == "Gleis":
        return platform or platform_name, True

    local_match = _LOCAL_PLATFORM.match(platform_name)
    if local_match:
        return local_match.group("platform"), False
    return platform or platform_name, False


def parse_departure(itd_departure: ET.Element) -> Departure | None:
    """Build a Departure from an ``itdDeparture`` element.

    Returns None for elements lacking date, time or serving line.
    """
    itd_date = itd_departure.find("itdDateTime/itdDate")
    itd_time = itd_departure.find("itdDateTime/itdTime")
    serving_line = itd_departure.find("itdServingLine")
    if itd_date is None or itd_time is None or serving_line is None:
        logger.warning("Skipping itdDeparture with insufficient data")
        return None

    rt_time = itd_departure.find("itdRTDateTime/itdTime")
    no_train = serving_line.find("itdNoTrain")
    if no_train is None:
        no_train = itd_departure.find("itdNoTrain")

    delay = 0
    line_type = ""
    info = ""
    if no_train is not None:
        delay = _int_attribute(no_train, "delay")
        line_type = no_train.get("name", "")
        info = _text(no_train)

    is_cancelled = delay == CANCELLED_DELAY
    if is_cancelled:
        delay = 0

    platform, platform_is_db = _parse_platform(itd_departure)

    return Departure(
        time=_format_time(itd_time),
        platform=platform,
        platform_is_db=platform_is_db,
        line=serving_line.get("number") or serving_line.get("symbol", ""),
        destination=serving_line.get("direction", ""),
        info=info,
        delay=delay,
        is_cancelled=is_cancelled,
        countdown=_int_attribute(itd_departure, "countdown"),
        realtime_time=_format_time(rt_time) if rt_time is not None else None,
        date=_format_date(itd_date),
        line_type=line_type,
    )


def parse_line(itd_serving_line: ET.Element) -> Line | None:
    """Build a Line from an ``itdServingLines/itdServingLine`` element."""
    no_train = itd_serving_line.find("itdNoTrain")
    route = itd_serving_line.find("itdRouteDescText")
    if no_train is None or route is None:
        logger.warning("Skipping itdServingLine with insufficient data")
        return None

    return Line(
        type=no_train.get("name", ""),
        name=itd_serving_line.get("number", ""),
        direction=itd_serving_line.get("direction"),
        route=_text(route),
    )


def parse_dm_response(content: bytes | str) -> QueryResult:
    """Parse a departure monitor response into a QueryResult.

    Malformed XML and service-reported problems both end up in
    ``QueryResult.error``.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        logger.warning(f"Could not parse EFA response: {e}")
        return QueryResult(error=f"invalid XML response: {e}")

    error = check_for_errors(root)
    if error:
        return QueryResult(error=error)

    departures = [
        departure
        for departure in map(parse_departure, root.iterfind(".//itdDepartureList/itdDeparture"))
        if departure is not None
    ]
    lines = [
        line
        for line in map(parse_line, root.iterfind(".//itdServingLines/itdServingLine"))
        if line is not None
    ]
    logger.debug(f"Parsed {len(departures)} departure(s) and {len(lines)} line(s)")
    return QueryResult(lines=lines, departures=departures)
