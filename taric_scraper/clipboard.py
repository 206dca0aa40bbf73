"""
Clipboard access for the formatted SQL.
Uses pyperclip for cross-platform support.
"""
import pyperclip


class ClipboardError(RuntimeError):
    pass


def copy_to_clipboard(text: str) -> None:
    """
    Copy the given text to the system clipboard.
    Raises ClipboardError if no copy mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Failed to copy to clipboard: {e}") from e
