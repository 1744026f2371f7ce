"""
Desktop collaborators: notifications and the clipboard.

All of these are best-effort and never raise.
"""

import subprocess
import sys

try:
    import pyperclip
    HAS_CLIPBOARD = True
except ImportError:
    HAS_CLIPBOARD = False

from .config import Config


def notify(config: Config, message: str, urgency: str = "normal") -> None:
    """Fire-and-forget desktop notification."""
    try:
        subprocess.Popen(
            [config.notify_command, "-a", config.app_name, "-u", urgency, config.app_name, message],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, ValueError):
        pass


def read_clipboard(selection: bool = False) -> str:
    """Return the clipboard (or primary selection) contents, or "" if unavailable."""
    if not HAS_CLIPBOARD:
        print("Warning: pyperclip not installed. Cannot read clipboard.", file=sys.stderr)
        return ""

    try:
        if selection:
            _, paste = pyperclip.determine_clipboard()
            text = paste(primary=True)
        else:
            text = pyperclip.paste()
    except (pyperclip.PyperclipException, TypeError) as e:
        print(f"Warning: Failed to read clipboard: {e}", file=sys.stderr)
        return ""
    return text or ""


def write_clipboard(text: str, selection: bool = False) -> bool:
    """Copy text to the clipboard (or primary selection)."""
    if not HAS_CLIPBOARD:
        print("Warning: pyperclip not installed. Cannot copy to clipboard.", file=sys.stderr)
        return False

    try:
        if selection:
            # only the X11/Wayland backends take `primary`; others raise TypeError
            copy, _ = pyperclip.determine_clipboard()
            copy(text, primary=True)
        else:
            pyperclip.copy(text)
        return True
    except (pyperclip.PyperclipException, TypeError) as e:
        print(f"Warning: Failed to copy to clipboard: {e}", file=sys.stderr)
        return False
