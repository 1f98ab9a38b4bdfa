from dataclasses import dataclass
from typing import Optional

from .session_info import SessionInfo
from .session_record import RecordType, SessionMeta, SessionRecord, UserMessage
from ..value_objects.timestamp import to_epoch_millis

DEFAULT_TITLE_MAX_LENGTH = 45
TITLE_ELLIPSIS = "..."


def make_title(message: str, max_length: int = DEFAULT_TITLE_MAX_LENGTH) -> Optional[str]:
    """Single-line title from a user message, truncated with an ellipsis."""
    if not message:
        return None
    text = message.replace("\n", " ").strip()
    if len(text) > max_length:
        text = text[:max_length] + TITLE_ELLIPSIS
    return text


@dataclass
class SessionSummary:
    """Accumulates a SessionInfo while a transcript is read line by line."""

    session_id: str
    title_max_length: int = DEFAULT_TITLE_MAX_LENGTH
    title: Optional[str] = None
    message_count: int = 0
    first_timestamp: int = 0
    last_timestamp: int = 0
    cwd: Optional[str] = None

    def add_record(self, record: SessionRecord) -> None:
        kind = record.kind
        payload = record.decode()

        if isinstance(payload, SessionMeta):
            if self.cwd is None and payload.cwd is not None:
                self.cwd = payload.cwd
            if payload.timestamp is not None:
                started = to_epoch_millis(payload.timestamp)
                self.first_timestamp = started
                self.last_timestamp = max(self.last_timestamp, started)

        if kind is RecordType.RESPONSE_ITEM:
            self.message_count += 1

        if record.timestamp is not None:
            self.last_timestamp = max(
                self.last_timestamp, to_epoch_millis(record.timestamp)
            )

        # Auto-generate title from first user message
        if self.title is None and isinstance(payload, UserMessage):
            self.title = make_title(payload.message, self.title_max_length)

    def to_info(self) -> SessionInfo:
        return SessionInfo(
            session_id=self.session_id,
            title=self.title,
            message_count=self.message_count,
            first_timestamp=self.first_timestamp,
            last_timestamp=self.last_timestamp,
            cwd=self.cwd,
        )
