import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class RecordType(Enum):
    SESSION_META = "session_meta"
    RESPONSE_ITEM = "response_item"
    EVENT_MSG = "event_msg"
    TURN_CONTEXT = "turn_context"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "RecordType":
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SessionMeta:
    """Payload of a ``session_meta`` record."""

    cwd: Optional[str] = None
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class UserMessage:
    """Payload of an ``event_msg`` record authored by the user."""

    message: str


@dataclass(frozen=True)
class FunctionCall:
    """Payload of a ``response_item`` record invoking a tool."""

    name: str
    arguments: Optional[str] = None

    def decoded_arguments(self) -> Optional[dict]:
        """Arguments are a JSON document embedded in a string."""
        if not isinstance(self.arguments, str):
            return None
        try:
            decoded = json.loads(self.arguments)
        except (json.JSONDecodeError, TypeError):
            return None
        return decoded if isinstance(decoded, dict) else None

    @property
    def command(self) -> Optional[str]:
        arguments = self.decoded_arguments()
        if arguments is None:
            return None
        command = arguments.get("command")
        return command if isinstance(command, str) else None


@dataclass(frozen=True)
class UnknownPayload:
    """Any payload shape the reader does not interpret."""

    pass


RecordPayload = Union[SessionMeta, UserMessage, FunctionCall, UnknownPayload]


def _string_field(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    return value if isinstance(value, str) else None


@dataclass
class SessionRecord:
    """One line of a Codex session transcript.

    ``type`` keeps the raw tag so unknown record types survive serialization;
    ``kind`` is the closed set the reader understands.
    """

    type: Optional[str] = None
    timestamp: Optional[str] = None
    payload: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["SessionRecord"]:
        """Build a record from a decoded JSON line; None if it is not an object."""
        if not isinstance(data, dict):
            return None
        record_type = data.get("type")
        timestamp = data.get("timestamp")
        payload = data.get("payload")
        return cls(
            type=record_type if isinstance(record_type, str) else None,
            timestamp=timestamp if isinstance(timestamp, str) else None,
            payload=payload if isinstance(payload, dict) else None,
        )

    @property
    def kind(self) -> RecordType:
        return RecordType.from_tag(self.type)

    def decode(self) -> RecordPayload:
        """Decode the payload into the variant matching the record kind."""
        payload = self.payload
        if payload is None:
            return UnknownPayload()

        kind = self.kind
        if kind is RecordType.SESSION_META:
            return SessionMeta(
                cwd=_string_field(payload, "cwd"),
                timestamp=_string_field(payload, "timestamp"),
            )

        if kind is RecordType.EVENT_MSG and payload.get("type") == "user_message":
            message = _string_field(payload, "message")
            if message is not None:
                return UserMessage(message=message)

        if kind is RecordType.RESPONSE_ITEM and payload.get("type") == "function_call":
            name = _string_field(payload, "name")
            if name is not None:
                return FunctionCall(
                    name=name, arguments=_string_field(payload, "arguments")
                )

        return UnknownPayload()

    def rename_tool(self, name: str) -> None:
        """Relabel the tool invoked by a function call record in place."""
        if self.payload is not None:
            self.payload["name"] = name

    def to_dict(self) -> dict:
        data: dict = {}
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        if self.type is not None:
            data["type"] = self.type
        if self.payload is not None:
            data["payload"] = self.payload
        return data
