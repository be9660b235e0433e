"""Location type domain model."""

from enum import Enum


class LocationType(str, Enum):
    """Kind of location a departure monitor request refers to.

    The value is what the EFA service expects as ``type_dm``.
    """

    STOP = "stop"
    ADDRESS = "address"
    POINT_OF_INTEREST = "poi"
