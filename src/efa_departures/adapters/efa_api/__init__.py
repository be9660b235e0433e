"""EFA (Elektronische Fahrplanauskunft) adapter."""

from efa_departures.adapters.efa_api.efa_departure_monitor import EfaDepartureMonitor
from efa_departures.adapters.efa_api.http_client import EfaHttpClient

__all__ = ["EfaDepartureMonitor", "EfaHttpClient"]
