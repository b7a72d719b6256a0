"""
rotate Core Test Suite

1. Fixed vectors for one and two byte inputs
2. Empty input
3. Length preservation and inverse rotation
4. A full cycle of 8N rotations is the identity
5. Purity: determinism, no mutation of the argument
6. Direction parsing
7. ByteSequence
"""

import random

import pytest

from rotate import ByteSequence, Direction, rotate
from rotate.core import lsb, msb, rotate_left, rotate_right


def sample_inputs():
    rng = random.Random(0xB17)
    yield b"\x00"
    yield b"\xff"
    yield b"\x80\x01"
    yield bytes(range(256))
    for n in (1, 2, 3, 7, 64, 257):
        yield bytes(rng.getrandbits(8) for _ in range(n))


def as_bits(data: bytes) -> str:
    return "".join(f"{b:08b}" for b in data)


# ============================================================================
# 1. Fixed vectors
# ============================================================================

def test_single_byte_left_wraps_own_msb():
    assert rotate(bytes([0b10110010]), Direction.LEFT) == bytes([0b01100101])


def test_single_byte_right_wraps_own_lsb():
    assert rotate(bytes([0b10110010]), Direction.RIGHT) == bytes([0b01011001])


def test_two_bytes_left():
    data = bytes([0b10000000, 0b00000001])
    assert rotate(data, Direction.LEFT) == bytes([0b00000000, 0b00000011])


def test_two_bytes_right():
    data = bytes([0b10000000, 0b00000001])
    assert rotate(data, Direction.RIGHT) == bytes([0b11000000, 0b00000000])


def test_matches_bit_string_rotation():
    for data in sample_inputs():
        bits = as_bits(data)
        assert as_bits(rotate(data, Direction.LEFT)) == bits[1:] + bits[0]
        assert as_bits(rotate(data, Direction.RIGHT)) == bits[-1] + bits[:-1]


def test_bit_helpers():
    assert msb(0x80) == 1
    assert msb(0x7F) == 0
    assert lsb(0x01) == 1
    assert lsb(0xFE) == 0
    # 0xA0 covers bits 7 and 5; only bit 7 counts
    assert msb(0x20) == 0


# ============================================================================
# 2. Empty input
# ============================================================================

@pytest.mark.parametrize("direction", list(Direction))
def test_empty_input(direction):
    assert rotate(b"", direction) == b""


def test_empty_input_helpers():
    assert rotate_left(b"") == b""
    assert rotate_right(b"") == b""


# ============================================================================
# 3. Length and inverse
# ============================================================================

@pytest.mark.parametrize("direction", list(Direction))
def test_length_preserved(direction):
    for data in sample_inputs():
        assert len(rotate(data, direction)) == len(data)


def test_left_then_right_restores():
    for data in sample_inputs():
        assert rotate(rotate(data, Direction.LEFT), Direction.RIGHT) == data


def test_right_then_left_restores():
    for data in sample_inputs():
        assert rotate(rotate(data, Direction.RIGHT), Direction.LEFT) == data


# ============================================================================
# 4. Full cycle
# ============================================================================

@pytest.mark.parametrize("direction", list(Direction))
def test_full_cycle_is_identity(direction):
    data = b"\x12\x34\xf0"
    out = data
    for _ in range(len(data) * 8):
        out = rotate(out, direction)
    assert out == data


def test_partial_cycle_is_not_identity():
    data = b"\x12\x34\xf0"
    out = data
    for _ in range(len(data) * 8 - 1):
        out = rotate(out, Direction.LEFT)
    assert out != data


# ============================================================================
# 5. Purity
# ============================================================================

def test_deterministic():
    data = bytes(range(200))
    assert rotate(data, Direction.LEFT) == rotate(data, Direction.LEFT)
    assert rotate(data, Direction.RIGHT) == rotate(data, Direction.RIGHT)


def test_does_not_mutate_input():
    data = bytearray(b"\xde\xad\xbe\xef")
    rotate(data, Direction.LEFT)
    rotate(memoryview(data), Direction.RIGHT)
    assert data == bytearray(b"\xde\xad\xbe\xef")


def test_returns_bytes_for_bytearray_input():
    out = rotate(bytearray(b"\x01\x02"), Direction.LEFT)
    assert isinstance(out, bytes)


def test_rejects_non_direction():
    with pytest.raises(TypeError):
        rotate(b"\x01", "left")


# ============================================================================
# 6. Direction
# ============================================================================

def test_direction_parse():
    assert Direction.parse("left") is Direction.LEFT
    assert Direction.parse("right") is Direction.RIGHT


@pytest.mark.parametrize("token", ["LEFT", "Right", "l", "", "leftt", "up"])
def test_direction_parse_rejects(token):
    with pytest.raises(ValueError):
        Direction.parse(token)


def test_direction_inverse():
    assert Direction.LEFT.inverse is Direction.RIGHT
    assert Direction.RIGHT.inverse is Direction.LEFT
    assert str(Direction.LEFT) == "left"


# ============================================================================
# 7. ByteSequence
# ============================================================================

def test_byte_sequence_rotated_records_history():
    seq = ByteSequence(b"\xb2")
    out = seq.rotated(Direction.LEFT).rotated(Direction.LEFT)
    assert out.history == (Direction.LEFT, Direction.LEFT)
    assert seq.history == ()
    assert seq.data == b"\xb2"
    assert out.data == rotate(rotate(b"\xb2", Direction.LEFT), Direction.LEFT)


def test_byte_sequence_inverse_equality():
    seq = ByteSequence(bytes(range(16)))
    back = seq.rotated(Direction.RIGHT).rotated(Direction.RIGHT.inverse)
    assert back == seq
    assert back.hash == seq.hash
    assert len(back) == 16
    assert back.bit_length == 128


def test_byte_sequence_load_and_emit(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"\x80\x01")
    seq = ByteSequence.load(src)
    assert seq.origin == str(src)
    assert "2 bytes" in repr(seq)

    out = tmp_path / "out.bin"
    seq.rotated(Direction.LEFT).emit(out)
    assert out.read_bytes() == b"\x00\x03"


def test_byte_sequence_load_rejects_other_types():
    with pytest.raises(TypeError):
        ByteSequence.load(42)
