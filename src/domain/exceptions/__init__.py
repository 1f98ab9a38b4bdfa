from .domain_exceptions import (
    DomainError,
    InvalidSessionIdError,
    InvalidFilePathError,
    InvalidLineRangeError,
    InvalidSelectionError,
    SessionNotFoundError,
    SessionDirectoryError,
    DocumentUnavailableError,
    ClipboardUnavailableError,
)

__all__ = [
    "DomainError",
    "InvalidSessionIdError",
    "InvalidFilePathError",
    "InvalidLineRangeError",
    "InvalidSelectionError",
    "SessionNotFoundError",
    "SessionDirectoryError",
    "DocumentUnavailableError",
    "ClipboardUnavailableError",
]
