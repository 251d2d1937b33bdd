"""Clipboard writers for copying the rendered tree.

The CLI never talks to the clipboard directly; it is handed a ClipboardWriter.
PyperclipWriter uses whatever copy mechanism pyperclip finds on the platform,
while CommandClipboardWriter pipes the text into a user-named command such as
``pbcopy``, ``clip`` or ``xclip -selection clipboard``.
"""

import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import List, Sequence, Union

import pyperclip

from directree.exceptions import ClipboardError


def clipboard_text(text: str) -> str:
    """Make text safe for a text-only clipboard.

    Undecodable file names reach us as lone surrogates, which the platform clipboard
    cannot hold; each undecodable byte becomes U+FFFD instead.
    """
    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


class ClipboardWriter(ABC):
    """Interface for a capability that places text on the system clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copy text to the clipboard.

        Args:
            text: The text to copy.

        Raises:
            ClipboardError: If the text could not be copied.
        """
        pass


class PyperclipWriter(ClipboardWriter):
    """Clipboard writer backed by pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(clipboard_text(text))
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Cannot copy to clipboard: {e}") from e


class CommandClipboardWriter(ClipboardWriter):
    """Clipboard writer that pipes text into an external command's standard input.

    Attributes:
        command (List[str]): The command and its arguments.

    Example:
        >>> CommandClipboardWriter("xclip -selection clipboard").command
        ['xclip', '-selection', 'clipboard']
    """

    def __init__(self, command: Union[str, Sequence[str]]) -> None:
        """Initialize the writer.

        Args:
            command: Either a shell-style command string, split with shlex, or an
                already split argument sequence.

        Raises:
            ValueError: If the command is empty.
        """
        self.command: List[str] = shlex.split(command) if isinstance(command, str) else list(command)
        if not self.command:
            raise ValueError("Clipboard command must not be empty")

    def copy(self, text: str) -> None:
        try:
            payload = text.encode("utf-8", errors="surrogateescape")
            subprocess.run(self.command, input=payload, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise ClipboardError(f"Clipboard command not found: {self.command[0]}") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            detail = f": {stderr}" if stderr else ""
            message = f"Clipboard command {self.command[0]} exited with status {e.returncode}{detail}"
            raise ClipboardError(message) from e
        except OSError as e:
            raise ClipboardError(f"Cannot run clipboard command {self.command[0]}: {e}") from e
