from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidSessionIdError


@dataclass(frozen=True)
class SessionId:
    """Immutable value object identifying a transcript by its file name stem."""

    value: str

    TRANSCRIPT_SUFFIX = ".jsonl"

    def __post_init__(self) -> None:
        if not self.value or self.value.strip() == "":
            raise InvalidSessionIdError("Session ID cannot be empty")

        # The ID is used as a file name prefix, never as a path
        if "/" in self.value or "\\" in self.value or ".." in self.value:
            raise InvalidSessionIdError(f"Invalid session ID format: {self.value}")

    @classmethod
    def from_filename(cls, filename: str) -> "SessionId":
        """Derive the session ID from a transcript file name."""
        stem = filename
        if stem.endswith(cls.TRANSCRIPT_SUFFIX):
            stem = stem[: -len(cls.TRANSCRIPT_SUFFIX)]
        return cls(value=stem)

    def matches_filename(self, filename: str) -> bool:
        """Check whether a transcript file belongs to this session."""
        return filename.startswith(self.value) and filename.endswith(
            self.TRANSCRIPT_SUFFIX
        )

    def __str__(self) -> str:
        return self.value
