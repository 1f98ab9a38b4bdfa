from .copy_path_reference import CopyPathReferenceUseCase
from .get_session_messages import GetSessionMessagesUseCase
from .list_sessions import ListSessionsUseCase

__all__ = [
    "CopyPathReferenceUseCase",
    "GetSessionMessagesUseCase",
    "ListSessionsUseCase",
]
