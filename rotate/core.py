"""
rotate Core: Direction, the bit rotator, and ByteSequence

The whole input is treated as one contiguous bit sequence, from the most
significant bit of the first byte to the least significant bit of the last
byte. Rotating it by one bit moves every bit one position and wraps the bit
that falls off one end around to the other end.

This module holds the in-memory rotator: the input is kept whole and indexed
freely. For bounded-memory streaming over file objects see rotate.stream.

Usage:
    rotate(b"\\xb2", Direction.LEFT)      # b"\\x65"

    seq = ByteSequence.load("firmware.bin")
    back = seq.rotated(Direction.LEFT).rotated(Direction.RIGHT)
    assert back.data == seq.data
"""

from __future__ import annotations

import hashlib
from enum import Enum
from pathlib import Path
from typing import Union

MSB = 0x80
LSB = 0x01


class Direction(Enum):
    """Which way the bit stream is rotated."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, token: str) -> Direction:
        """Parse a direction token. Only 'left' and 'right' are accepted."""
        for member in cls:
            if member.value == token:
                return member
        raise ValueError(
            f"Invalid direction '{token}'. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )

    @property
    def inverse(self) -> Direction:
        return Direction.RIGHT if self is Direction.LEFT else Direction.LEFT

    def __str__(self) -> str:
        return self.value


def msb(byte: int) -> int:
    """The most significant bit of a byte, as 0 or 1."""
    return (byte & MSB) >> 7


def lsb(byte: int) -> int:
    """The least significant bit of a byte, as 0 or 1."""
    return byte & LSB


def shift_in_low(byte: int, carry: int) -> int:
    """Drop the byte's top bit, shift up one and place carry in the LSB."""
    return ((byte << 1) & 0xFE) | carry


def shift_in_high(byte: int, carry: int) -> int:
    """Drop the byte's low bit, shift down one and place carry in the MSB."""
    return (carry << 7) | (byte >> 1)


def rotate_left(data: bytes) -> bytes:
    """Rotate the bit stream one position toward lower indices.

    Each output byte is the low 7 bits of its input byte followed by the
    top bit of the next input byte. The last byte takes the top bit of the
    first byte.
    """
    n = len(data)
    if n == 0:
        return b""

    wrap_bit = msb(data[0])
    out = bytearray(n)
    for i in range(n):
        next_bit = msb(data[i + 1]) if i + 1 < n else wrap_bit
        out[i] = shift_in_low(data[i], next_bit)
    return bytes(out)


def rotate_right(data: bytes) -> bytes:
    """Rotate the bit stream one position toward higher indices.

    Each output byte is the low bit of the previous input byte followed by
    the high 7 bits of its own input byte. The first byte takes the low bit
    of the last byte.
    """
    n = len(data)
    if n == 0:
        return b""

    carry_bit = lsb(data[n - 1])
    out = bytearray(n)
    for i in range(n):
        out[i] = shift_in_high(data[i], carry_bit)
        carry_bit = lsb(data[i])
    return bytes(out)


def rotate(data: Union[bytes, bytearray, memoryview], direction: Direction) -> bytes:
    """Rotate a whole byte sequence by one bit.

    Pure function: the argument is never modified and the result always has
    the same length as the input.
    """
    if not isinstance(direction, Direction):
        raise TypeError(f"direction must be a Direction, not {type(direction).__name__}")
    if direction is Direction.LEFT:
        return rotate_left(data)
    return rotate_right(data)


class ByteSequence:
    """A byte sequence plus where it came from and how it was rotated.

    Immutable: rotated() returns a new ByteSequence and records the step.

        seq = ByteSequence.load("in.bin")
        seq.rotated(Direction.LEFT).emit("out.bin")
    """

    def __init__(
        self,
        data: bytes,
        origin: str = "<bytes>",
        history: tuple[Direction, ...] = (),
    ) -> None:
        self._data = bytes(data)
        self._origin = origin
        self._history = history

    @classmethod
    def load(cls, source: Union[str, bytes, Path]) -> ByteSequence:
        """Load from raw bytes or a file path."""
        if isinstance(source, bytes):
            return cls(source)
        if isinstance(source, (str, Path)):
            path = Path(source)
            return cls(path.read_bytes(), origin=str(path))
        raise TypeError(f"Cannot load from {type(source)}")

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def history(self) -> tuple[Direction, ...]:
        """Directions applied since load, oldest first."""
        return self._history

    @property
    def bit_length(self) -> int:
        return len(self._data) * 8

    @property
    def hash(self) -> str:
        """SHA-256 of current bytes."""
        return hashlib.sha256(self._data).hexdigest()

    def rotated(self, direction: Direction) -> ByteSequence:
        return ByteSequence(
            data=rotate(self._data, direction),
            origin=self._origin,
            history=self._history + (direction,),
        )

    def emit(self, path: Union[str, Path]) -> None:
        """Write current bytes to a file."""
        Path(path).write_bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteSequence):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        steps = " → ".join(str(d) for d in self._history)
        steps_str = f" | {steps}" if steps else ""
        return f"<ByteSequence: {len(self._data)} bytes from {self._origin}{steps_str}>"
