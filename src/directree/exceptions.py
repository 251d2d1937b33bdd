class OutputSinkError(Exception):
    """
    Base exception for failures while delivering the rendered tree to an output sink.

    Traversal errors never produce this exception; unreadable directories are simply
    rendered without children. Output sinks, on the other hand, must either succeed
    or stop the program.

    Example:
        >>> error = OutputSinkError("sink failed")
        >>> str(error)
        'sink failed'
    """

    pass


class OutputFileError(OutputSinkError):
    """
    Exception raised when the rendered tree cannot be written to the output file.

    Attributes:
        file_path (str): Path of the output file that could not be written.

    Example:
        >>> error = OutputFileError("/read-only/tree.txt", "Permission denied")
        >>> str(error)
        'Cannot write output file /read-only/tree.txt: Permission denied'
    """

    def __init__(self, file_path: str, reason: str) -> None:
        """
        Initialize the exception with the output path and the underlying reason.

        Args:
            file_path (str): Path of the output file.
            reason (str): Description of the underlying failure.
        """
        self.file_path = file_path
        super().__init__(f"Cannot write output file {file_path}: {reason}")


class ClipboardError(OutputSinkError):
    """
    Exception raised when the rendered tree cannot be copied to the clipboard.

    This covers a missing clipboard utility, a clipboard command exiting with a
    non-zero status, and pyperclip failing to find a copy mechanism.

    Example:
        >>> error = ClipboardError("clipboard command not found: clip")
        >>> str(error)
        'clipboard command not found: clip'
    """

    pass
