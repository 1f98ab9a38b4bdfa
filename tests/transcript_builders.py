"""
Builders for Codex transcript lines used across the test suite.
"""

import json
from typing import List


def session_meta_line(
    cwd: str = "/home/dev/project",
    timestamp: str = "2025-01-15T10:30:00.000Z",
) -> dict:
    return {
        "timestamp": timestamp,
        "type": "session_meta",
        "payload": {"id": "0a1b2c3d", "cwd": cwd, "timestamp": timestamp},
    }


def user_message_line(message: str, timestamp: str = "2025-01-15T10:30:05.000Z") -> dict:
    return {
        "timestamp": timestamp,
        "type": "event_msg",
        "payload": {"type": "user_message", "message": message},
    }


def response_item_line(
    text: str = "Done.", timestamp: str = "2025-01-15T10:30:10.000Z"
) -> dict:
    return {
        "timestamp": timestamp,
        "type": "response_item",
        "payload": {
            "type": "message",
            "role": "assistant",
            "content": [{"type": "output_text", "text": text}],
        },
    }


def shell_call_line(command: str, timestamp: str = "2025-01-15T10:30:20.000Z") -> dict:
    return {
        "timestamp": timestamp,
        "type": "response_item",
        "payload": {
            "type": "function_call",
            "name": "shell_command",
            "arguments": json.dumps({"command": command}),
            "call_id": "call_1",
        },
    }


def to_jsonl(lines: List[dict]) -> str:
    return "".join(json.dumps(line) + "\n" for line in lines)
