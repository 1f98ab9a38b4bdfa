from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionInfo:
    """Summary of one recorded Codex session."""

    session_id: str
    title: Optional[str]
    message_count: int = 0
    first_timestamp: int = 0
    last_timestamp: int = 0
    cwd: Optional[str] = None

    @property
    def is_listable(self) -> bool:
        """Only titled sessions with at least one response item are listed."""
        return bool(self.title) and self.message_count >= 1
