import logging
from dataclasses import dataclass

from src.domain.repositories.i_session_repository import ISessionRepository
from src.domain.services.session_parser import sort_sessions
from src.application.dtos.session_dtos import SessionListResponse

logger = logging.getLogger(__name__)


@dataclass
class ListSessionsUseCase:
    """Use case for listing every recorded Codex session."""

    session_repository: ISessionRepository

    async def execute(self) -> SessionListResponse:
        """List sessions newest first.

        1. Summarize every transcript
        2. Drop sessions without a title or without response items
        3. Sort by last activity, descending

        Never raises: failures come back as an envelope with success=False.
        """
        try:
            summaries = await self.session_repository.list_sessions()
            sessions = sort_sessions(s for s in summaries if s.is_listable)
        except Exception as e:
            logger.error("Failed to read Codex sessions: %s", e, exc_info=True)
            return SessionListResponse.failure(f"Failed to read Codex sessions: {e}")

        logger.info("Loaded %d valid Codex sessions", len(sessions))
        return SessionListResponse.ok(sessions)

    async def execute_json(self) -> str:
        response = await self.execute()
        return response.to_json()
