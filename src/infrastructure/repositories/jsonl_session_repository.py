import asyncio
import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from src.domain.entities.session_info import SessionInfo
from src.domain.entities.session_record import SessionRecord
from src.domain.entities.session_summary import DEFAULT_TITLE_MAX_LENGTH
from src.domain.exceptions.domain_exceptions import (
    SessionDirectoryError,
    SessionNotFoundError,
)
from src.domain.repositories.i_session_repository import ISessionRepository
from src.domain.services.session_parser import parse_records, summarize_session
from src.domain.value_objects.session_id import SessionId

logger = logging.getLogger(__name__)


class JsonlSessionRepository(ISessionRepository):
    """Reads Codex session transcripts from a directory of JSON-lines files.

    Every call rescans the directory; nothing is cached between calls.
    """

    def __init__(
        self,
        sessions_dir: str | Path,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
    ):
        self._sessions_dir = Path(sessions_dir)
        self._title_max_length = title_max_length

    async def list_sessions(self) -> List[SessionInfo]:
        """Summarize every transcript under the sessions directory."""
        # Scan in thread pool to not block
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._list_sessions_sync)

    async def get_records(self, session_id: SessionId) -> List[SessionRecord]:
        """Read all records of the first transcript matching the session ID."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._get_records_sync, session_id)

    def _list_sessions_sync(self) -> List[SessionInfo]:
        if not self._sessions_dir.is_dir():
            logger.info("Codex sessions directory not found: %s", self._sessions_dir)
            return []

        files = [path for path in self._transcript_files() if self._is_non_empty(path)]
        logger.info("Found %d Codex session files", len(files))

        sessions = []
        for path in files:
            try:
                sessions.append(self._summarize_file(path))
            except Exception as e:
                # One unreadable transcript must not hide the others
                logger.warning("Failed to parse session file %s: %s", path, e)
        return sessions

    def _get_records_sync(self, session_id: SessionId) -> List[SessionRecord]:
        path = self._find_session_file(session_id)
        if path is None:
            raise SessionNotFoundError(f"Session {session_id} not found")

        with open(path, encoding="utf-8") as file:
            return parse_records(file)

    def _summarize_file(self, path: Path) -> SessionInfo:
        session_id = SessionId.from_filename(path.name)
        with open(path, encoding="utf-8") as file:
            return summarize_session(
                str(session_id), file, title_max_length=self._title_max_length
            )

    def _find_session_file(self, session_id: SessionId) -> Optional[Path]:
        if not self._sessions_dir.is_dir():
            return None

        for path in self._transcript_files():
            if session_id.matches_filename(path.name):
                return path
        return None

    def _transcript_files(self) -> Iterator[Path]:
        """Yield ``*.jsonl`` files at any depth, in a stable order."""
        root = self._sessions_dir

        def on_error(error: OSError) -> None:
            if error.filename is not None and Path(error.filename) == root:
                raise SessionDirectoryError(
                    f"Cannot read sessions directory {root}: {error}"
                ) from error
            logger.warning("Skipping unreadable directory: %s", error)

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if name.endswith(SessionId.TRANSCRIPT_SUFFIX) and path.is_file():
                    yield path

    @staticmethod
    def _is_non_empty(path: Path) -> bool:
        try:
            return path.stat().st_size > 0
        except OSError:
            return False
