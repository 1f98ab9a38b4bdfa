from abc import ABC, abstractmethod


class IClipboardService(ABC):
    """Interface for writing text to the system clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Replace the clipboard contents.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is usable
        """
        pass
