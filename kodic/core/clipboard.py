"""System clipboard access"""

import pyperclip

from ..exceptions import ClipboardError
from .interfaces import ClipboardReaderInterface


class ClipboardReader(ClipboardReaderInterface):
    """Reads the text clipboard through pyperclip. Never writes to it."""

    def read(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            raise ClipboardError(e) from e
