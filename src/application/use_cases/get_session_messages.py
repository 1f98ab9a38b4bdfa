import logging
from dataclasses import dataclass
from typing import List

from src.domain.repositories.i_session_repository import ISessionRepository
from src.domain.services.session_parser import rewrite_read_command
from src.domain.value_objects.session_id import SessionId
from src.domain.exceptions.domain_exceptions import (
    InvalidSessionIdError,
    SessionNotFoundError,
)
from src.application.dtos.record_dtos import SessionRecordDTO, records_to_json

logger = logging.getLogger(__name__)


@dataclass
class GetSessionMessagesUseCase:
    """Use case for retrieving the full record stream of one session."""

    session_repository: ISessionRepository

    async def execute(self, session_id: str) -> List[SessionRecordDTO]:
        """Get every record of a session in file order.

        Read-only shell commands are relabeled as ``read`` tool calls.
        An unknown or malformed session ID yields an empty list.

        Args:
            session_id: Full session ID or a prefix of the transcript name
        """
        try:
            sid = SessionId(session_id)
            records = await self.session_repository.get_records(sid)
        except (InvalidSessionIdError, SessionNotFoundError) as e:
            logger.warning("Session file not found for %r: %s", session_id, e)
            return []
        except Exception as e:
            logger.error(
                "Failed to read session messages for %r: %s",
                session_id,
                e,
                exc_info=True,
            )
            return []

        return [
            SessionRecordDTO.from_entity(rewrite_read_command(record))
            for record in records
        ]

    async def execute_json(self, session_id: str) -> str:
        return records_to_json(await self.execute(session_id))
