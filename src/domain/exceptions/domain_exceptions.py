class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class InvalidSessionIdError(DomainError):
    """Raised when a session ID is empty or could escape the sessions directory."""

    pass


class InvalidFilePathError(DomainError):
    """Raised when a file path is invalid or potentially dangerous."""

    pass


class InvalidLineRangeError(DomainError):
    """Raised when a line range is not a 1-based, ordered pair of lines."""

    pass


class InvalidSelectionError(DomainError):
    """Raised when an editor selection has negative or reversed offsets."""

    pass


class SessionNotFoundError(DomainError):
    """Raised when no transcript file matches a session ID."""

    pass


class SessionDirectoryError(DomainError):
    """Raised when the sessions directory cannot be scanned."""

    pass


class DocumentUnavailableError(DomainError):
    """Raised when the document behind a selection cannot be read."""

    pass


class ClipboardUnavailableError(DomainError):
    """Raised when the system clipboard cannot be written."""

    pass
