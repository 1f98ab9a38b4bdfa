"""
Session Router - Endpoints for browsing recorded Codex sessions.
"""

from typing import List

from fastapi import APIRouter

from src.application.dtos.record_dtos import SessionRecordDTO
from src.application.dtos.session_dtos import SessionListResponse
from src.presentation.api.dependencies import (
    GetSessionMessagesUseCaseDep,
    ListSessionsUseCaseDep,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get(
    "",
    response_model=SessionListResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="List sessions",
    description="Summarize every recorded Codex session, most recent first.",
)
async def list_sessions(use_case: ListSessionsUseCaseDep):
    """List all sessions.

    Failures are reported in the envelope (``success: false``), not as an
    HTTP error.
    """
    return await use_case.execute()


@router.get(
    "/{session_id}/messages",
    response_model=List[SessionRecordDTO],
    response_model_exclude_none=True,
    summary="Get session messages",
    description="Retrieve every record of a session in file order.",
)
async def get_session_messages(
    session_id: str,
    use_case: GetSessionMessagesUseCaseDep,
):
    """Get the records of a session; unknown sessions yield an empty list."""
    return await use_case.execute(session_id)
