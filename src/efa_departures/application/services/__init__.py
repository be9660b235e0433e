"""Application services (use cases) for the departure monitor."""

from efa_departures.application.services.departure_board_service import (
    BoardOptions,
    DepartureBoardService,
)
from efa_departures.application.services.display_rows import (
    departure_row,
    format_departure_time,
    line_row,
)
from efa_departures.application.services.query_resolver import (
    QueryParameterResolver,
    split_filter_values,
    split_location_type,
)
from efa_departures.application.services.result_filter import (
    effective_platform,
    filter_departures,
    filter_lines,
)

__all__ = [
    "BoardOptions",
    "DepartureBoardService",
    "QueryParameterResolver",
    "departure_row",
    "effective_platform",
    "filter_departures",
    "filter_lines",
    "format_departure_time",
    "line_row",
    "split_filter_values",
    "split_location_type",
]
