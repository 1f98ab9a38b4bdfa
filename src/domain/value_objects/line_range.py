from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidLineRangeError


@dataclass(frozen=True)
class LineRange:
    """Immutable, inclusive range of 1-based line numbers."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise InvalidLineRangeError(f"Line numbers start at 1, got {self.start}")
        if self.end < self.start:
            raise InvalidLineRangeError(
                f"Line range end {self.end} is before start {self.start}"
            )

    @property
    def is_single_line(self) -> bool:
        return self.start == self.end

    @property
    def suffix(self) -> str:
        """Anchor appended to a path, ``#L3`` or ``#L3-7``."""
        if self.is_single_line:
            return f"#L{self.start}"
        return f"#L{self.start}-{self.end}"

    def __str__(self) -> str:
        return self.suffix
