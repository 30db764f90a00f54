"""Exceptions raised by the PDF stage."""

from pathlib import Path
from typing import Optional


class PdfStageError(Exception):
    """Base class for all PDF stage failures."""


class MissingInputError(PdfStageError, FileNotFoundError):
    """
    Raised when the rendered HTML for a build is not on disk.

    Raised before the PDF tool is launched.

    Attributes:
        path: The HTML path that was looked for
        build_type: Build type whose HTML was expected
    """

    def __init__(self, path: Path, build_type: Optional[str] = None):
        self.path = Path(path)
        self.build_type = build_type

        message = f"PDF stage failed because no HTML was found at {self.path}"
        if build_type:
            message += f" (build type: {build_type})"

        super().__init__(message)


class PdfGenerationError(PdfStageError):
    """
    Raised when the PDF tool exits non-zero or cannot be launched.

    Attributes:
        message: Error description
        command: Command line that was executed
        returncode: Exit status of the tool (None if it never started)
        original_error: The underlying subprocess or OS error
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        returncode: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.command = command
        self.returncode = returncode
        self.original_error = original_error

        parts = [message]

        if command:
            parts.append(f"Command: {command}")

        if returncode is not None:
            parts.append(f"Exit status: {returncode}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
