from abc import ABC, abstractmethod
from typing import List

from ..entities.session_info import SessionInfo
from ..entities.session_record import SessionRecord
from ..value_objects.session_id import SessionId


class ISessionRepository(ABC):
    """Abstract repository interface for recorded Codex sessions."""

    @abstractmethod
    async def list_sessions(self) -> List[SessionInfo]:
        """Summarize every readable transcript, in scan order.

        Raises:
            SessionDirectoryError: If the sessions directory cannot be walked
        """
        pass

    @abstractmethod
    async def get_records(self, session_id: SessionId) -> List[SessionRecord]:
        """Read all records of one session in file order.

        Raises:
            SessionNotFoundError: If no transcript name starts with the ID
        """
        pass
