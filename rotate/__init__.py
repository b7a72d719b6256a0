"""
rotate - whole-file single-bit rotation

The input is one bit stream, most significant bit of the first byte through
least significant bit of the last byte. Rotating left moves every bit one
place toward the start and wraps the first bit to the end; rotating right
does the opposite.

core   - Direction, the in-memory rotator, ByteSequence
stream - bounded-memory rotation between file objects
files  - path-level rotation with size verification
"""

__version__ = "1.0.0"

from rotate.core import Direction, ByteSequence, rotate, rotate_left, rotate_right
from rotate.stream import StreamRotator, rotate_stream, DEFAULT_CHUNK_SIZE
from rotate.files import RotationResult, rotate_file
from rotate.errors import (
    RotateError,
    UsageError,
    FileAccessError,
    InputFileError,
    OutputFileError,
    IntegrityError,
)

__all__ = [
    "Direction",
    "ByteSequence",
    "rotate",
    "rotate_left",
    "rotate_right",
    "StreamRotator",
    "rotate_stream",
    "DEFAULT_CHUNK_SIZE",
    "RotationResult",
    "rotate_file",
    "RotateError",
    "UsageError",
    "FileAccessError",
    "InputFileError",
    "OutputFileError",
    "IntegrityError",
]
