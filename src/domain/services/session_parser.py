"""
Pure parsing of Codex session transcripts.

Every function here works on already-read lines, so the same code backs the
directory scan and single-session retrieval, and can be tested without a
filesystem.
"""

import json
import logging
import re
from typing import Iterable, List, Optional

from src.domain.entities.session_info import SessionInfo
from src.domain.entities.session_record import FunctionCall, SessionRecord
from src.domain.entities.session_summary import DEFAULT_TITLE_MAX_LENGTH, SessionSummary

logger = logging.getLogger(__name__)

SHELL_COMMAND_TOOL = "shell_command"
READ_TOOL = "read"

# Matched against the whole command; "." stops at newlines, so a chained
# multi-line script never qualifies.
FILE_VIEWING_COMMAND = re.compile(r"(pwd|ls|cat|head|tail|tree|file|stat)\b.*")
SED_PRINT_COMMAND = re.compile(r"sed\s+-n\s+.*")


def parse_record_line(line: str) -> Optional[SessionRecord]:
    """Decode one transcript line; None for blank or malformed lines."""
    stripped = line.strip()
    if not stripped:
        return None

    try:
        data = json.loads(stripped)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; oversized ints and deep nesting are not
        logger.debug("Skipping malformed transcript line: %s", e)
        return None

    record = SessionRecord.from_dict(data)
    if record is None:
        logger.debug("Skipping transcript line that is not a JSON object")
    return record


def parse_records(lines: Iterable[str]) -> List[SessionRecord]:
    records = []
    for line in lines:
        record = parse_record_line(line)
        if record is not None:
            records.append(record)
    return records


def summarize_session(
    session_id: str,
    lines: Iterable[str],
    title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
) -> SessionInfo:
    """Fold the lines of one transcript into a SessionInfo."""
    summary = SessionSummary(session_id=session_id, title_max_length=title_max_length)
    for line in lines:
        record = parse_record_line(line)
        if record is not None:
            summary.add_record(record)
    return summary.to_info()


def sort_sessions(sessions: Iterable[SessionInfo]) -> List[SessionInfo]:
    """Most recently active first; ties keep their scan order."""
    return sorted(sessions, key=lambda s: s.last_timestamp, reverse=True)


def is_file_viewing_command(command: Optional[str]) -> bool:
    """Shell commands that only inspect files or directories."""
    if not command:
        return False
    trimmed = command.strip()
    return bool(
        FILE_VIEWING_COMMAND.fullmatch(trimmed)
        or SED_PRINT_COMMAND.fullmatch(trimmed)
    )


def rewrite_read_command(record: SessionRecord) -> SessionRecord:
    """Relabel read-only shell invocations as the ``read`` tool, in place."""
    call = record.decode()
    if not isinstance(call, FunctionCall) or call.name != SHELL_COMMAND_TOOL:
        return record

    command = call.command
    if is_file_viewing_command(command):
        record.rename_tool(READ_TOOL)
        logger.debug("Relabeled shell_command as read: %s", command)
    return record
