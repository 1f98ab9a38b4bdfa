from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Optional

from src.domain.entities.session_info import SessionInfo


class SessionInfoDTO(BaseModel):
    """DTO representing one recorded Codex session."""

    session_id: str
    title: Optional[str] = None
    message_count: int
    last_timestamp: int
    first_timestamp: int
    cwd: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "sessionId": "rollout-2025-01-15T10-30-00-0a1b2c3d",
                "title": "Refactor the settings loader to use pydant...",
                "messageCount": 12,
                "lastTimestamp": 1736937300000,
                "firstTimestamp": 1736937000000,
                "cwd": "/home/dev/project",
            }
        },
    }

    @classmethod
    def from_entity(cls, session: SessionInfo) -> "SessionInfoDTO":
        return cls(
            session_id=session.session_id,
            title=session.title,
            message_count=session.message_count,
            last_timestamp=session.last_timestamp,
            first_timestamp=session.first_timestamp,
            cwd=session.cwd,
        )


class SessionListResponse(BaseModel):
    """Envelope for the session list; ``error`` is set only when success is false."""

    success: bool
    sessions: Optional[List[SessionInfoDTO]] = None
    total: Optional[int] = None  # Sum of messageCount across sessions
    session_count: Optional[int] = None
    error: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @classmethod
    def ok(cls, sessions: List[SessionInfo]) -> "SessionListResponse":
        dtos = [SessionInfoDTO.from_entity(s) for s in sessions]
        return cls(
            success=True,
            sessions=dtos,
            total=sum(s.message_count for s in dtos),
            session_count=len(dtos),
        )

    @classmethod
    def failure(cls, error: str) -> "SessionListResponse":
        return cls(success=False, error=error)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
