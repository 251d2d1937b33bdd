"""Safe output writing utilities for the directree CLI.

This module provides a writing interface for standard output and the
output file that stops cleanly when the process is interrupted.
"""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from directree.cli.interrupts import interrupt_monitor
from directree.types import PathType


class SafeWriter:
    """Signal-aware writer for a file descriptor or a file path.

    Text is encoded as UTF-8 and written straight to the descriptor, so nothing is
    held in a Python-level buffer when the process is interrupted. A path is
    opened (and truncated) on construction and closed when the writer closes; a
    descriptor passed in is never closed by the writer.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, PathType]) -> None:
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to open for writing.

        Raises:
            TypeError: If file is neither a descriptor nor a path.
            OSError: If the path cannot be opened for writing.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data unless an interrupting signal has been received.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if interrupt_monitor.interrupted():
            raise BrokenPipeError()

        # Undecodable file names arrive as lone surrogates; surrogateescape restores their original bytes
        payload = data.encode("utf-8", errors="surrogateescape")
        try:
            # os.write may write fewer bytes than requested
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each string as it is produced, so an interrupt stops the producer at the next string."""
        for line in lines:
            self.write(line)

    def close(self) -> None:
        """Close the file if it was opened by this writer.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority over a close error."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
