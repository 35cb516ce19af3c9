"""
Kernel Component: Segment Encoder

Segments (color, width) -> 4-bit codes under a (color-perm, width-perm,
ordering) triple, and the inverse.

Ordering flag (frozen in the registry):
  0 color-major: code = (color_code << 2) | width_code
  1 width-major: code = (width_code << 2) | color_code
"""

from typing import NamedTuple, Sequence

from ..core.registry import COLOR_MAJOR, WIDTH_MAJOR
from .permutations import Permutation, invert_permutation


class Segment(NamedTuple):
    """One stroke of the image: its color symbol and width symbol."""
    color: str
    width: str


def encode_segments(
    segments: Sequence[Segment],
    color_perm: Permutation,
    width_perm: Permutation,
    ordering: int
) -> list[int]:
    """
    Encode every segment into a 4-bit code.

    Args:
        segments: Ordered (color, width) pairs.
        color_perm: Color symbol -> 2-bit code.
        width_perm: Width symbol -> 2-bit code.
        ordering: COLOR_MAJOR (0) or WIDTH_MAJOR (1).

    Returns:
        list[int]: One code in 0..15 per segment, same order and length.

    Raises:
        UnknownSymbol: If a segment symbol is missing from its permutation.
        ValueError: If ordering is not 0 or 1.
    """
    if ordering not in (COLOR_MAJOR, WIDTH_MAJOR):
        raise ValueError(f"Ordering must be 0 or 1, got {ordering}")

    encoded = []
    for index, (color, width) in enumerate(segments):
        try:
            c = color_perm[color]
        except KeyError:
            raise UnknownSymbol("color", color, index) from None
        try:
            w = width_perm[width]
        except KeyError:
            raise UnknownSymbol("width", width, index) from None

        if ordering == COLOR_MAJOR:
            encoded.append(c << 2 | w)
        else:
            encoded.append(w << 2 | c)

    return encoded


def decode_segments(
    encoded: Sequence[int],
    color_perm: Permutation,
    width_perm: Permutation,
    ordering: int
) -> list[Segment]:
    """
    Invert encode_segments: split each code into its 2-bit halves and
    map them back through the inverse permutations.

    Raises:
        ValueError: If ordering is not 0 or 1, or a code is outside 0..15.
    """
    if ordering not in (COLOR_MAJOR, WIDTH_MAJOR):
        raise ValueError(f"Ordering must be 0 or 1, got {ordering}")

    colors = invert_permutation(color_perm)
    widths = invert_permutation(width_perm)

    segments = []
    for index, code in enumerate(encoded):
        if code < 0 or code > 0xF:
            raise ValueError(f"Code at {index} is not a nibble: {code}")
        high, low = code >> 2, code & 0x3
        if ordering == COLOR_MAJOR:
            segments.append(Segment(colors[high], widths[low]))
        else:
            segments.append(Segment(colors[low], widths[high]))

    return segments


class UnknownSymbol(Exception):
    """Raised when a segment references a symbol outside its alphabet."""

    def __init__(self, field: str, symbol: str, index: int):
        self.field = field
        self.symbol = symbol
        self.index = index
        super().__init__(f"Unknown {field} symbol {symbol!r} at segment {index}")
