"""Departure domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Departure:
    """Represents a single departure as reported by the EFA service.

    Times are kept as the ``HH:MM`` strings the service reports. ``time`` is
    the scheduled time; the realtime value, if the service has one, is in
    ``realtime_time`` and ``delay`` holds the difference in minutes.
    """

    time: str
    platform: str
    platform_is_db: bool
    line: str
    destination: str
    info: str = ""
    delay: int = 0  # minutes, 0 = on time
    is_cancelled: bool = False
    countdown: int = 0  # minutes until departure
    realtime_time: str | None = None
    date: str | None = None  # dd.mm.yyyy
    line_type: str = ""  # e.g. "S-Bahn", "Bus"
