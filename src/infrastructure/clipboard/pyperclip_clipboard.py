import pyperclip

from src.application.interfaces.i_clipboard_service import IClipboardService
from src.domain.exceptions.domain_exceptions import ClipboardUnavailableError


class PyperclipClipboardService(IClipboardService):
    """System clipboard access through pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"Clipboard unavailable: {e}") from e
