"""Plain text table renderer for terminal output."""

import re
from collections.abc import Sequence

from efa_departures.domain.contracts.row_renderer import RowRendererProtocol
from efa_departures.domain.errors import EmptyResultError
from efa_departures.domain.models.display_row import DISPLAY_FIELD_COUNT, DisplayRow

COLUMN_SEPARATOR = "  "
ANNOTATION_PREFIX = "# "

_LINE_BREAKS = re.compile(r"[\n\r]+")


class TableRenderer(RowRendererProtocol):
    """Renders rows as left-aligned columns separated by two spaces.

    Widths are measured in code points, so ``"Düsseldorf Hbf"`` takes 14
    columns regardless of the output encoding.
    """

    def render(self, rows: Sequence[DisplayRow]) -> str:
        """Render rows, preceding annotated rows with a ``# `` comment block."""
        if not rows:
            raise EmptyResultError()

        widths = self.column_widths(rows)
        output: list[str] = []
        for row in rows:
            if row.annotation:
                output.append("")
                output.extend(
                    ANNOTATION_PREFIX + line
                    for line in self.normalize_annotation(row.annotation).split("\n")
                )
            output.append(self.format_fields(row, widths))
        return "\n".join(output) + "\n"

    @staticmethod
    def column_widths(rows: Sequence[DisplayRow]) -> list[int]:
        """Maximum length of each primary field across all rows."""
        return [max(len(row.fields[i]) for row in rows) for i in range(DISPLAY_FIELD_COUNT)]

    @staticmethod
    def normalize_annotation(annotation: str) -> str:
        """Collapse runs of line breaks into a single space.

        A trailing break collapses too, leaving a trailing space.
        """
        return _LINE_BREAKS.sub(" ", annotation)

    @staticmethod
    def format_fields(row: DisplayRow, widths: Sequence[int]) -> str:
        """Pad every field to its column width, the last one included."""
        return COLUMN_SEPARATOR.join(
            value.ljust(width) for value, width in zip(row.fields, widths, strict=True)
        )
