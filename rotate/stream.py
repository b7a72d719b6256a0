"""
rotate Stream: bounded-memory rotation between binary file objects

Memory use is one chunk plus one held-back byte, independent of the input
size.

Left rotation needs the top bit of the byte after the one being emitted,
so the last byte of every chunk is held back until the next chunk arrives.
The very first byte read supplies the wrap bit, so no pre-pass is needed.

Right rotation carries the low bit of the previous byte forward. The wrap
bit is the low bit of the final byte, fetched by seeking to the end before
the main pass. Sources that cannot seek are buffered whole instead.

Usage:
    with open("in.bin", "rb") as src, open("out.bin", "wb") as dst:
        rotate_stream(src, dst, Direction.RIGHT)
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from rotate.core import Direction, lsb, msb, rotate

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def left_block(block: bytes, next_bit: int) -> bytes:
    """Rotate a block left as if it were followed by a byte with MSB next_bit."""
    width = len(block) * 8
    value = int.from_bytes(block, "big")
    value = ((value << 1) & ((1 << width) - 1)) | next_bit
    return value.to_bytes(len(block), "big")


def right_block(block: bytes, carry_bit: int) -> bytes:
    """Rotate a block right as if it were preceded by a byte with LSB carry_bit."""
    width = len(block) * 8
    value = int.from_bytes(block, "big")
    value = (carry_bit << (width - 1)) | (value >> 1)
    return value.to_bytes(len(block), "big")


def _seekable(stream: BinaryIO) -> bool:
    seekable = getattr(stream, "seekable", None)
    return bool(seekable and seekable())


class StreamRotator:
    """Rotate everything from a source's current position to its end.

    Output is byte-identical to rotate.core.rotate() for any chunk size.
    """

    def __init__(self, direction: Direction, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, not {type(direction).__name__}")
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")
        self.direction = direction
        self.chunk_size = chunk_size

    def run(self, src: BinaryIO, dst: BinaryIO) -> int:
        """Rotate src into dst. Returns the number of bytes written."""
        if self.direction is Direction.LEFT:
            written = self._run_left(src, dst)
        else:
            written = self._run_right(src, dst)
        log.debug("rotated %d bytes %s", written, self.direction)
        return written

    def _run_left(self, src: BinaryIO, dst: BinaryIO) -> int:
        pending = src.read(self.chunk_size)
        if not pending:
            return 0

        wrap_bit = msb(pending[0])
        log.debug("left wrap bit: %d", wrap_bit)

        written = 0
        while True:
            chunk = src.read(self.chunk_size)
            if not chunk:
                break
            out = left_block(pending, msb(chunk[0]))
            dst.write(out)
            written += len(out)
            pending = chunk

        out = left_block(pending, wrap_bit)
        dst.write(out)
        return written + len(out)

    def _run_right(self, src: BinaryIO, dst: BinaryIO) -> int:
        if not _seekable(src):
            log.debug("source is not seekable, buffering input for right rotation")
            out = rotate(src.read(), Direction.RIGHT)
            dst.write(out)
            return len(out)

        start = src.tell()
        end = src.seek(0, io.SEEK_END)
        if end <= start:
            src.seek(start)
            return 0

        src.seek(end - 1)
        carry_bit = lsb(src.read(1)[0])
        src.seek(start)
        log.debug("right wrap bit: %d (%d bytes from offset %d)", carry_bit, end - start, start)

        written = 0
        while True:
            chunk = src.read(self.chunk_size)
            if not chunk:
                break
            out = right_block(chunk, carry_bit)
            dst.write(out)
            written += len(out)
            carry_bit = lsb(chunk[-1])
        return written


def rotate_stream(
    src: BinaryIO,
    dst: BinaryIO,
    direction: Direction,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Rotate src into dst by one bit. Returns the number of bytes written."""
    return StreamRotator(direction, chunk_size).run(src, dst)
