"""Contracts (protocols) implemented by adapters."""

from efa_departures.domain.contracts.row_renderer import RowRendererProtocol

__all__ = ["RowRendererProtocol"]
