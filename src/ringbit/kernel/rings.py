"""
Kernel Component: Ring Assembler

Lays 64 encoded segments (4 bits each) into 16 rings of 16 bits.

Placement rule, for ring in 0..15 and off in 0..15:
  pos        = ring*16 + off
  segment    = encoded[pos // 4]          (4 segments per ring, in order)
  source bit = 3 - (pos % 4)              (nibbles read MSB first)
  target bit = 15 - ((off + ring) % 16)   (bit 15 = angular position 0)

Ring r is therefore the concatenation of segments 4r..4r+3 rotated
right (clockwise) by r positions. Every source bit is read exactly once.
"""

from typing import Iterator, NamedTuple, Sequence

from ..core.registry import BITS_PER_SEGMENT, RING_COUNT, RING_WIDTH, SEGMENT_COUNT


class BitPlacement(NamedTuple):
    ring: int
    off: int
    pos: int         # flattened source position, 0..255
    segment: int     # index into the encoded sequence
    source_bit: int  # bit index inside the segment nibble
    target_bit: int  # bit index inside the ring value


def bit_placements() -> Iterator[BitPlacement]:
    """Walk the (ring, off) space in assembly order."""
    for ring in range(RING_COUNT):
        for off in range(RING_WIDTH):
            pos = ring * RING_WIDTH + off
            yield BitPlacement(
                ring=ring,
                off=off,
                pos=pos,
                segment=pos // BITS_PER_SEGMENT,
                source_bit=(BITS_PER_SEGMENT - 1) - (pos % BITS_PER_SEGMENT),
                target_bit=(RING_WIDTH - 1) - ((off + ring) % RING_WIDTH),
            )


def assemble_rings(encoded: Sequence[int]) -> tuple[int, ...]:
    """
    Build the 16 ring values from 64 encoded segments.

    Args:
        encoded: 64 codes in 0..15.

    Returns:
        tuple[int, ...]: 16 ring values, each in 0..0xFFFF.

    Raises:
        InputLengthMismatch: If encoded does not hold exactly 64 codes.
    """
    if len(encoded) != SEGMENT_COUNT:
        raise InputLengthMismatch("encoded segments", SEGMENT_COUNT, len(encoded))

    rings = [0] * RING_COUNT
    for p in bit_placements():
        bit = (encoded[p.segment] >> p.source_bit) & 0x1
        rings[p.ring] |= bit << p.target_bit

    return tuple(rings)


def disassemble_rings(rings: Sequence[int]) -> list[int]:
    """
    Recover the 64 encoded segments from 16 ring values.

    Raises:
        InputLengthMismatch: If rings does not hold exactly 16 values.
    """
    if len(rings) != RING_COUNT:
        raise InputLengthMismatch("rings", RING_COUNT, len(rings))

    encoded = [0] * SEGMENT_COUNT
    for p in bit_placements():
        bit = (rings[p.ring] >> p.target_bit) & 0x1
        encoded[p.segment] |= bit << p.source_bit

    return encoded


def rotate_right(value: int, steps: int, width: int = RING_WIDTH) -> int:
    """
    Rotate a width-bit value right (clockwise) by steps positions.

    Public utility for consumers of candidate rings: ring r equals
    rotate_right(unrotated block r, r), so rotate_right(ring, -r) undoes
    the stagger. assemble_rings places bits directly and does not call it.
    """
    steps %= width
    mask = (1 << width) - 1
    value &= mask
    return ((value >> steps) | (value << (width - steps))) & mask


class InputLengthMismatch(Exception):
    """Raised when a sequence does not have the fixed length the ring layout needs."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} {what}, got {actual}")
