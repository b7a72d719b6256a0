"""
rotate Files: rotate one file into another

Each call:
1. Validates the request (input and output must be different files)
2. Opens the input, then the output (truncating it)
3. Rotates the input into the output, streaming unless asked to buffer
4. Checks that the output ended up the same size as the input
5. Returns the result

Every failure is terminal. A partially written output is left in place.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from rotate.core import Direction, rotate
from rotate.errors import InputFileError, IntegrityError, OutputFileError, UsageError
from rotate.stream import DEFAULT_CHUNK_SIZE, rotate_stream

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class RotationResult:
    """The outcome of a rotate_file() call."""
    direction: Direction
    input_path: str
    output_path: str
    input_size: int
    output_size: int
    # "stream", "buffered", or "empty" when there was nothing to rotate
    mode: str

    def __repr__(self) -> str:
        return (
            f"<RotationResult: {self.direction} {self.input_size}B "
            f"{self.input_path} → {self.output_path} [{self.mode}]>"
        )


def same_file(a: PathLike, b: PathLike) -> bool:
    """Whether two paths name the same file, existing or not."""
    if os.fspath(a) == os.fspath(b):
        return True
    if os.path.exists(a) and os.path.exists(b):
        return os.path.samefile(a, b)
    return Path(a).resolve() == Path(b).resolve()


def _regular_size(path: str, fallback: int) -> int:
    """On-disk size of a regular file; pipes and devices report fallback."""
    st = os.stat(path)
    if stat.S_ISREG(st.st_mode):
        return st.st_size
    return fallback


def rotate_file(
    input_path: PathLike,
    output_path: PathLike,
    direction: Direction,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    buffered: bool = False,
) -> RotationResult:
    """Write output_path as the contents of input_path rotated by one bit.

    Regular files are checked against their on-disk sizes afterwards. Pipes
    and character devices have no size, so they are checked against the
    number of bytes the rotator wrote.

    Raises:
        UsageError: input and output are the same file
        InputFileError: input cannot be opened for reading
        OutputFileError: output cannot be opened for writing
        IntegrityError: output size differs from input size afterwards
    """
    in_name = os.fspath(input_path)
    out_name = os.fspath(output_path)

    if same_file(in_name, out_name):
        raise UsageError(
            "There is no support for reading and writing the same file", in_name
        )

    try:
        src = open(in_name, "rb")
    except OSError as e:
        raise InputFileError(
            f"Input file could not be opened: {e.strerror or e}", in_name
        ) from e

    with src:
        try:
            dst = open(out_name, "wb")
        except OSError as e:
            raise OutputFileError(
                f"Output file could not be opened: {e.strerror or e}", out_name
            ) from e

        with dst:
            st = os.fstat(src.fileno())
            if stat.S_ISREG(st.st_mode) and st.st_size == 0:
                log.debug("%s is empty, nothing to rotate", in_name)
                written = 0
            elif buffered:
                written = dst.write(rotate(src.read(), direction))
            else:
                written = rotate_stream(src, dst, direction, chunk_size)

    if written == 0:
        mode = "empty"
    else:
        mode = "buffered" if buffered else "stream"

    input_size = _regular_size(in_name, written)
    output_size = _regular_size(out_name, written)
    log.debug("%s: %d bytes in, %d bytes out", out_name, input_size, output_size)

    if input_size != output_size:
        raise IntegrityError(input_size, output_size, out_name)

    return RotationResult(
        direction=direction,
        input_path=in_name,
        output_path=out_name,
        input_size=input_size,
        output_size=output_size,
        mode=mode,
    )
