"""Configuration adapters."""

from efa_departures.adapters.config.app_config import DEFAULT_EFA_URL, AppConfig

__all__ = ["DEFAULT_EFA_URL", "AppConfig"]
