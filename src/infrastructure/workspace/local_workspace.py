import asyncio
from pathlib import Path

from src.application.interfaces.i_workspace_service import IWorkspaceService
from src.domain.exceptions.domain_exceptions import DocumentUnavailableError


class LocalWorkspaceService(IWorkspaceService):
    """Workspace backed by the local filesystem."""

    async def read_document(self, project_root: str, file_path: str) -> str:
        """Read a document, resolving relative paths against the project root."""
        full_path = Path(file_path)
        if not full_path.is_absolute():
            full_path = Path(project_root) / full_path

        # Read in thread pool
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(
                None, lambda: full_path.read_text(encoding="utf-8", errors="replace")
            )
        except OSError as e:
            raise DocumentUnavailableError(f"Cannot read {full_path}: {e}") from e

    def project_name(self, project_root: str) -> str:
        return Path(project_root).name
