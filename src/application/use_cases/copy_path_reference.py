import logging
from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.file_path import FilePath
from src.domain.value_objects.path_reference import PathReference
from src.domain.value_objects.selection import Selection
from src.domain.exceptions.domain_exceptions import (
    ClipboardUnavailableError,
    DocumentUnavailableError,
)
from src.application.dtos.path_reference_dtos import (
    PathReferenceRequest,
    PathReferenceResponse,
)
from src.application.interfaces.i_clipboard_service import IClipboardService
from src.application.interfaces.i_workspace_service import IWorkspaceService

logger = logging.getLogger(__name__)


@dataclass
class CopyPathReferenceUseCase:
    """Use case for copying an ``@path#Lx-y`` reference of the editor state."""

    workspace_service: IWorkspaceService
    clipboard_service: IClipboardService
    include_project_name: bool = True
    clipboard_enabled: bool = True

    async def execute(self, request: PathReferenceRequest) -> PathReferenceResponse:
        """Format a path reference and copy it to the clipboard.

        1. Resolve the project-relative path and, for a selection, the
           document text (read in a worker thread)
        2. Compute the 1-based line range of the selection
        3. Write the reference to the clipboard on the calling thread

        Unreadable documents and clipboard failures are logged and reported
        through the response; they never raise.

        Raises:
            InvalidFilePathError: If the file path is empty or escapes the project
            InvalidSelectionError: If the selection offsets are reversed
        """
        reference = await self._resolve(request)
        if reference is None:
            return PathReferenceResponse()

        formatted = reference.format()
        if not (request.copy_to_clipboard and self.clipboard_enabled):
            return PathReferenceResponse(reference=formatted)

        try:
            self.clipboard_service.copy(formatted)
        except ClipboardUnavailableError as e:
            logger.warning("Failed to copy to clipboard: %s", e)
            return PathReferenceResponse(reference=formatted)

        logger.info("Copied to clipboard: %s", formatted)
        return PathReferenceResponse(reference=formatted, copied=True)

    async def _resolve(self, request: PathReferenceRequest) -> Optional[PathReference]:
        project_name = None
        if self.include_project_name:
            project_name = request.project_name or self.workspace_service.project_name(
                request.project_root
            )

        file_path = FilePath.relative_to_project(
            request.project_root, request.file_path, project_name
        )

        if not request.has_selection:
            return PathReference(file_path=file_path)

        selection = Selection(
            start_offset=request.selection_start,
            end_offset=request.selection_end,
        )
        if selection.is_empty:
            return PathReference(file_path=file_path)

        document = request.document_text
        if document is None:
            try:
                document = await self.workspace_service.read_document(
                    request.project_root, request.file_path
                )
            except DocumentUnavailableError as e:
                logger.warning("Cannot resolve current file: %s", e)
                return None

        return PathReference.from_selection(file_path, document, selection)
