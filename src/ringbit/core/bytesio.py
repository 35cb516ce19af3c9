"""
Core Component: Byte Serialization (Big-Endian)

Stable, deterministic byte serialization for ring values and segment
sequences. These streams are what gets hashed into receipts.

Bit mapping (frozen):
  - Each ring is one uint16, big-endian: bit 15 is angular position 0
  - Rings are serialized in ring order (innermost first)
  - Each segment is one byte: high nibble = color index, low nibble = width index
"""

from typing import Sequence, Tuple

from .registry import param_registry


def serialize_rings_be(rings: Sequence[int]) -> bytes:
    """
    Encode ring values as a deterministic byte stream for hashing.

    Format (exact):
      - 4 ASCII bytes tag: b"RNG1"
      - 2 bytes N (uint16, big-endian): number of rings
      - N × 2 bytes: each ring as uint16, big-endian

    Args:
        rings: Ring values (each must fit in 16 bits).

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If a ring is negative or wider than 16 bits.
    """
    if len(rings) > 65535:
        raise SerializationError(f"Too many rings: {len(rings)} > 65535")

    stream = bytearray(b"RNG1")
    stream.extend(len(rings).to_bytes(2, byteorder='big'))

    for i, ring in enumerate(rings):
        if ring < 0 or ring > 0xFFFF:
            raise SerializationError(f"Ring {i} out of uint16 range: {ring}")
        stream.extend(ring.to_bytes(2, byteorder='big'))

    return bytes(stream)


def serialize_segments(segments: Sequence[Tuple[str, str]]) -> bytes:
    """
    Encode a segment sequence as a deterministic byte stream.

    Format (exact):
      - 4 ASCII bytes tag: b"SEG1"
      - 2 bytes N (uint16, big-endian): number of segments
      - N bytes: (color_index << 4) | width_index, indices taken from
        the registry alphabets

    Args:
        segments: Sequence of (color, width) symbol pairs.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If a symbol is not in its alphabet.
    """
    registry = param_registry()
    colors = registry["color_alphabet"]
    widths = registry["width_alphabet"]

    if len(segments) > 65535:
        raise SerializationError(f"Too many segments: {len(segments)} > 65535")

    stream = bytearray(b"SEG1")
    stream.extend(len(segments).to_bytes(2, byteorder='big'))

    for i, (color, width) in enumerate(segments):
        if color not in colors:
            raise SerializationError(f"Segment {i}: color {color!r} not in alphabet")
        if width not in widths:
            raise SerializationError(f"Segment {i}: width {width!r} not in alphabet")
        stream.append((colors.index(color) << 4) | widths.index(width))

    return bytes(stream)


def ring_to_bits(ring: int, width: int = 16) -> list[int]:
    """
    Unpack a ring into its bits, leftmost (most significant) first.

    Args:
        ring: Ring value.
        width: Number of bits in the ring.

    Returns:
        list[int]: `width` entries of 0/1; index i is angular position i.
    """
    return [(ring >> (width - 1 - i)) & 1 for i in range(width)]


class SerializationError(Exception):
    """Raised when serialization encounters out-of-range values or symbols."""
    pass
