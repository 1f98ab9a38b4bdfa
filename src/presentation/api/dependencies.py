"""
Dependency Injection Configuration.

This module wires together all the concrete implementations
following Clean Architecture principles.
"""

from typing import Annotated

from fastapi import Depends

from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.clipboard.pyperclip_clipboard import PyperclipClipboardService
from src.infrastructure.repositories.jsonl_session_repository import (
    JsonlSessionRepository,
)
from src.infrastructure.workspace.local_workspace import LocalWorkspaceService

from src.application.interfaces.i_clipboard_service import IClipboardService
from src.application.interfaces.i_workspace_service import IWorkspaceService
from src.domain.repositories.i_session_repository import ISessionRepository

from src.application.use_cases.list_sessions import ListSessionsUseCase
from src.application.use_cases.get_session_messages import GetSessionMessagesUseCase
from src.application.use_cases.copy_path_reference import CopyPathReferenceUseCase


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Clipboard
def get_clipboard_service() -> IClipboardService:
    return PyperclipClipboardService()


ClipboardServiceDep = Annotated[IClipboardService, Depends(get_clipboard_service)]


# Workspace
def get_workspace_service() -> IWorkspaceService:
    return LocalWorkspaceService()


WorkspaceServiceDep = Annotated[IWorkspaceService, Depends(get_workspace_service)]


# Repositories
def get_session_repository(settings: SettingsDep) -> ISessionRepository:
    return JsonlSessionRepository(
        sessions_dir=settings.codex_sessions_dir,
        title_max_length=settings.session_title_max_length,
    )


SessionRepositoryDep = Annotated[ISessionRepository, Depends(get_session_repository)]


# Use Cases
def get_list_sessions_use_case(
    session_repository: SessionRepositoryDep,
) -> ListSessionsUseCase:
    return ListSessionsUseCase(session_repository=session_repository)


ListSessionsUseCaseDep = Annotated[
    ListSessionsUseCase, Depends(get_list_sessions_use_case)
]


def get_session_messages_use_case(
    session_repository: SessionRepositoryDep,
) -> GetSessionMessagesUseCase:
    return GetSessionMessagesUseCase(session_repository=session_repository)


GetSessionMessagesUseCaseDep = Annotated[
    GetSessionMessagesUseCase, Depends(get_session_messages_use_case)
]


def get_copy_path_reference_use_case(
    workspace_service: WorkspaceServiceDep,
    clipboard_service: ClipboardServiceDep,
    settings: SettingsDep,
) -> CopyPathReferenceUseCase:
    return CopyPathReferenceUseCase(
        workspace_service=workspace_service,
        clipboard_service=clipboard_service,
        include_project_name=settings.path_reference_include_project_name,
        clipboard_enabled=settings.clipboard_enabled,
    )


CopyPathReferenceUseCaseDep = Annotated[
    CopyPathReferenceUseCase, Depends(get_copy_path_reference_use_case)
]
