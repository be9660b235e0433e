"""Line domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A line serving the requested location."""

    type: str
    name: str
    direction: str | None = None
    route: str | None = None
