from dataclasses import dataclass
from typing import Optional

from .file_path import FilePath
from .line_range import LineRange
from .selection import Selection


@dataclass(frozen=True)
class PathReference:
    """Immutable ``@path`` reference, optionally anchored to a line range."""

    file_path: FilePath
    line_range: Optional[LineRange] = None

    PREFIX = "@"

    @classmethod
    def from_selection(
        cls,
        file_path: FilePath,
        document: str,
        selection: Optional[Selection] = None,
    ) -> "PathReference":
        """Build a reference for a file and the current selection, if any."""
        line_range = selection.line_range(document) if selection else None
        return cls(file_path=file_path, line_range=line_range)

    def format(self) -> str:
        if self.line_range is None:
            return f"{self.PREFIX}{self.file_path}"
        return f"{self.PREFIX}{self.file_path}{self.line_range.suffix}"

    def __str__(self) -> str:
        return self.format()
