"""Terminal output adapters."""

from efa_departures.adapters.terminal.table_renderer import TableRenderer

__all__ = ["TableRenderer"]
