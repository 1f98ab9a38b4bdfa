"""
Shared pytest fixtures for all tests.
"""

import pytest
from pathlib import Path
from typing import Callable, List
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities.session_info import SessionInfo
from src.domain.entities.session_record import SessionRecord
from src.domain.repositories.i_session_repository import ISessionRepository
from src.domain.value_objects.file_path import FilePath
from src.domain.value_objects.session_id import SessionId
from src.application.interfaces.i_clipboard_service import IClipboardService
from src.application.interfaces.i_workspace_service import IWorkspaceService

from transcript_builders import (
    response_item_line,
    session_meta_line,
    shell_call_line,
    to_jsonl,
    user_message_line,
)


# ============================================================================
# Transcript Fixtures
# ============================================================================


@pytest.fixture
def write_transcript(tmp_path: Path) -> Callable[..., Path]:
    """Write a transcript under ``tmp_path/sessions`` and return its path."""
    sessions_dir = tmp_path / "sessions"

    def _write(name: str, lines: List[dict], subdir: str = "2025/01/15") -> Path:
        target_dir = sessions_dir / subdir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(to_jsonl(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sessions_dir(tmp_path: Path) -> Path:
    return tmp_path / "sessions"


# ============================================================================
# Value Object Fixtures
# ============================================================================


@pytest.fixture
def test_session_id() -> SessionId:
    return SessionId("rollout-2025-01-15T10-30-00-0a1b2c3d")


@pytest.fixture
def test_file_path() -> FilePath:
    return FilePath("project/src/main.py")


@pytest.fixture
def sample_document() -> str:
    return "".join(f"line {n}\n" for n in range(1, 11))


# ============================================================================
# Entity Fixtures
# ============================================================================


@pytest.fixture
def test_session_info() -> SessionInfo:
    return SessionInfo(
        session_id="rollout-2025-01-15T10-30-00-0a1b2c3d",
        title="Fix the flaky login test",
        message_count=4,
        first_timestamp=1736937000000,
        last_timestamp=1736937300000,
        cwd="/home/dev/project",
    )


@pytest.fixture
def sample_records() -> List[SessionRecord]:
    return [
        SessionRecord.from_dict(session_meta_line()),
        SessionRecord.from_dict(user_message_line("Show me the config")),
        SessionRecord.from_dict(shell_call_line("cat config.toml")),
        SessionRecord.from_dict(shell_call_line("rm config.toml")),
        SessionRecord.from_dict(response_item_line()),
    ]


# ============================================================================
# Mock Repository / Service Fixtures
# ============================================================================


@pytest.fixture
def mock_session_repository() -> AsyncMock:
    """Mock ISessionRepository."""
    mock = AsyncMock(spec=ISessionRepository)
    mock.list_sessions.return_value = []
    mock.get_records.return_value = []
    return mock


@pytest.fixture
def mock_clipboard_service() -> MagicMock:
    """Mock IClipboardService."""
    mock = MagicMock(spec=IClipboardService)
    mock.copy.return_value = None
    return mock


@pytest.fixture
def mock_workspace_service(sample_document: str) -> AsyncMock:
    """Mock IWorkspaceService."""
    mock = AsyncMock(spec=IWorkspaceService)
    mock.read_document.return_value = sample_document
    mock.project_name = MagicMock(return_value="project")
    return mock


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
