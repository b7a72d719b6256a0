"""
rotate errors

Everything the file layer can fail on. The rotator itself is total over
finite byte sequences and raises none of these.
"""

from __future__ import annotations

from typing import Optional


class RotateError(Exception):
    """Base class for failures of a rotate invocation."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class UsageError(RotateError):
    """The request is invalid before any file has been touched."""


class FileAccessError(RotateError):
    """A file could not be opened."""


class InputFileError(FileAccessError):
    pass


class OutputFileError(FileAccessError):
    pass


class IntegrityError(RotateError):
    """The output does not have the same size as the input."""

    def __init__(self, input_size: int, output_size: int, path: Optional[str] = None) -> None:
        super().__init__(
            f"Processing failed, output file is wrong size "
            f"({output_size} bytes, expected {input_size})",
            path,
        )
        self.input_size = input_size
        self.output_size = output_size
