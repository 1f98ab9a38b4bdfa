from pydantic import BaseModel, TypeAdapter
from typing import List, Optional

from src.domain.entities.session_record import SessionRecord


class SessionRecordDTO(BaseModel):
    """DTO representing one transcript line, payload passed through untouched."""

    timestamp: Optional[str] = None
    type: Optional[str] = None
    payload: Optional[dict] = None

    class Config:
        json_schema_extra = {
            "example": {
                "timestamp": "2025-01-15T10:31:02.120Z",
                "type": "response_item",
                "payload": {
                    "type": "function_call",
                    "name": "read",
                    "arguments": '{"command": "cat src/main.py"}',
                },
            }
        }

    @classmethod
    def from_entity(cls, record: SessionRecord) -> "SessionRecordDTO":
        return cls(timestamp=record.timestamp, type=record.type, payload=record.payload)


SessionRecordList = TypeAdapter(List[SessionRecordDTO])


def records_to_json(records: List[SessionRecordDTO]) -> str:
    return SessionRecordList.dump_json(records, exclude_none=True).decode("utf-8")
