"""Protocol for rendering display rows."""

from collections.abc import Sequence
from typing import Protocol

from efa_departures.domain.models.display_row import DisplayRow


class RowRendererProtocol(Protocol):
    """Protocol for turning display rows into printable text."""

    def render(self, rows: Sequence[DisplayRow]) -> str:
        """Render rows as text.

        Args:
            rows: The rows to render, in output order.

        Returns:
            The rendered text, newline-terminated.

        Raises:
            EmptyResultError: If there are no rows.
        """
        ...
