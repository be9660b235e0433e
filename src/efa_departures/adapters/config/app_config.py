"""12-factor configuration adapter using environment variables."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from efa_departures import __version__

DEFAULT_EFA_URL = "https://efa.vrr.de/vrr/XSLT_DM_REQUEST"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every field can be set through an ``EFA_``-prefixed environment variable
    or a ``.env`` file, e.g. ``EFA_URL`` or ``EFA_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EFA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # EFA service configuration
    url: str = Field(
        default=DEFAULT_EFA_URL,
        description="Departure monitor endpoint (XSLT_DM_REQUEST) of the EFA instance",
    )
    user_agent: str = Field(
        default=f"efa-departures/{__version__}",
        description="User-Agent header sent with every request",
    )
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone of the EFA instance (IANA name), used for the default date and time",
    )

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Log level for stderr diagnostics")
    log_requests: bool = Field(
        default=False,
        description="Log outgoing EFA requests at INFO level (read by the request logger)",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the endpoint is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be one of the logging level names, got '{v}'")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, lowered to INFO when request logging is on."""
        level = logging.getLevelNamesMapping()[self.log_level]
        if self.log_requests:
            return min(level, logging.INFO)
        return level
