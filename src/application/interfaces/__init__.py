from .i_clipboard_service import IClipboardService
from .i_workspace_service import IWorkspaceService

__all__ = [
    "IClipboardService",
    "IWorkspaceService",
]
