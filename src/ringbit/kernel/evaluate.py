"""
Kernel Component: Candidate Evaluator

Zero/one statistics over a ring set and the immutable Candidate record.
"""

from typing import NamedTuple, Sequence

from ..core.bytesio import ring_to_bits
from ..core.registry import RING_WIDTH, TOTAL_BITS


class Candidate(NamedTuple):
    """One point of the enumeration: parameters, rings and bit counts."""
    ordering: int
    color_index: int
    width_index: int
    rings: tuple[int, ...]
    zeros: int
    ones: int

    @property
    def params(self) -> tuple[int, int, int]:
        return (self.ordering, self.color_index, self.width_index)


def count_zeros(rings: Sequence[int]) -> int:
    """
    Count zero bits over the 16-bit binary text of every ring.

    Each ring is rendered as exactly 16 digits, so leading zeros count.
    """
    return sum(format(ring, f"0{RING_WIDTH}b").count("0") for ring in rings)


def ring_bits(rings: Sequence[int]) -> list[list[int]]:
    """Rings as a 16×16 matrix of 0/1, row = ring, column = angular position."""
    return [ring_to_bits(ring, RING_WIDTH) for ring in rings]


def evaluate_candidate(
    rings: Sequence[int],
    ordering: int,
    color_index: int,
    width_index: int
) -> Candidate:
    """Package rings and parameters with their zero/one counts."""
    zeros = count_zeros(rings)
    return Candidate(
        ordering=ordering,
        color_index=color_index,
        width_index=width_index,
        rings=tuple(rings),
        zeros=zeros,
        ones=TOTAL_BITS - zeros,
    )
