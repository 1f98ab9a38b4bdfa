from abc import ABC, abstractmethod


class IWorkspaceService(ABC):
    """Interface for the host workspace: project layout and open documents."""

    @abstractmethod
    async def read_document(self, project_root: str, file_path: str) -> str:
        """Read the text of a document the selection offsets refer to.

        Raises:
            DocumentUnavailableError: If the document cannot be read
        """
        pass

    @abstractmethod
    def project_name(self, project_root: str) -> str:
        """Display name of the project rooted at ``project_root``."""
        pass
