"""
Kernel: pure bit-assembly operations.

Components:
  - permutations: the 24 symbol -> code bijections (canonical order)
  - encoder: segments <-> 4-bit codes
  - rings: codes -> 16 rotated 16-bit rings (and back)
  - evaluate: zero/one counts, Candidate record
"""

from .permutations import (
    Permutation,
    permutation_orders,
    generate_permutations,
    invert_permutation,
    permutation_order
)
from .encoder import (
    Segment,
    encode_segments,
    decode_segments,
    UnknownSymbol
)
from .rings import (
    BitPlacement,
    bit_placements,
    assemble_rings,
    disassemble_rings,
    rotate_right,
    InputLengthMismatch
)
from .evaluate import (
    Candidate,
    count_zeros,
    ring_bits,
    evaluate_candidate
)

__all__ = [
    # Permutations
    "Permutation",
    "permutation_orders",
    "generate_permutations",
    "invert_permutation",
    "permutation_order",

    # Encoder
    "Segment",
    "encode_segments",
    "decode_segments",
    "UnknownSymbol",

    # Rings
    "BitPlacement",
    "bit_placements",
    "assemble_rings",
    "disassemble_rings",
    "rotate_right",
    "InputLengthMismatch",

    # Evaluate
    "Candidate",
    "count_zeros",
    "ring_bits",
    "evaluate_candidate",
]
