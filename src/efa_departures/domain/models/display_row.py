"""Display row model shared by line and departure output."""

from dataclasses import dataclass

DISPLAY_FIELD_COUNT = 4


@dataclass(frozen=True)
class DisplayRow:
    """One row of the output table.

    Holds exactly four primary fields and an optional annotation that is
    printed as a comment block above the row.
    """

    fields: tuple[str, str, str, str]
    annotation: str = ""

    def __post_init__(self) -> None:
        if len(self.fields) != DISPLAY_FIELD_COUNT:
            raise ValueError(
                f"DisplayRow needs exactly {DISPLAY_FIELD_COUNT} fields, got {len(self.fields)}"
            )

    @classmethod
    def of(
        cls, first: str, second: str, third: str, fourth: str, annotation: str = ""
    ) -> "DisplayRow":
        """Build a row from four field values."""
        return cls(fields=(first, second, third, fourth), annotation=annotation)
