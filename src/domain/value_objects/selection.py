from dataclasses import dataclass
from typing import Optional

from .line_range import LineRange
from ..exceptions.domain_exceptions import InvalidSelectionError


def line_number_at(text: str, offset: int) -> int:
    """Return the 1-based line containing a character offset of ``text``.

    Offsets past the end of the text resolve to the last line.
    """
    offset = max(0, min(offset, len(text)))
    return text.count("\n", 0, offset) + 1


@dataclass(frozen=True)
class Selection:
    """Immutable editor selection expressed as character offsets."""

    start_offset: int
    end_offset: int

    def __post_init__(self) -> None:
        if self.start_offset < 0 or self.end_offset < 0:
            raise InvalidSelectionError(
                f"Selection offsets must be non-negative: "
                f"{self.start_offset}-{self.end_offset}"
            )
        if self.end_offset < self.start_offset:
            raise InvalidSelectionError(
                f"Selection end {self.end_offset} is before start {self.start_offset}"
            )

    @property
    def is_empty(self) -> bool:
        return self.start_offset == self.end_offset

    def selected_text(self, document: str) -> str:
        return document[self.start_offset : self.end_offset]

    def line_range(self, document: str) -> Optional[LineRange]:
        """Lines covered by the selection, or None when nothing visible is selected.

        A whitespace-only selection counts as no selection.
        """
        if self.is_empty or self.selected_text(document).strip() == "":
            return None

        return LineRange(
            start=line_number_at(document, self.start_offset),
            end=line_number_at(document, self.end_offset),
        )
