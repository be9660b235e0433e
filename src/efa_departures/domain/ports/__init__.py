"""Ports (interfaces) for the ports-and-adapters architecture."""

from efa_departures.domain.ports.departure_monitor import DepartureMonitor

__all__ = ["DepartureMonitor"]
