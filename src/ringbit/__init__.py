"""
Ring Matrix Bit-Assembly Engine

Deterministic enumeration of every (ordering, color permutation, width
permutation) encoding of a 64-segment ring image into candidate 16×16
bit matrices.
"""

__version__ = "1.0.0"

from .kernel import (
    Segment,
    Candidate,
    generate_permutations,
    encode_segments,
    assemble_rings,
    evaluate_candidate,
    UnknownSymbol,
    InputLengthMismatch
)
from .driver import parameter_space, enumerate_candidates, enumeration_receipts

__all__ = [
    "Segment",
    "Candidate",
    "generate_permutations",
    "encode_segments",
    "assemble_rings",
    "evaluate_candidate",
    "UnknownSymbol",
    "InputLengthMismatch",
    "parameter_space",
    "enumerate_candidates",
    "enumeration_receipts",
]
