"""
Core foundation: parameter registry, hashing, serialization, receipts.
"""

from .registry import (
    param_registry,
    RegistryError,
    SEGMENT_COUNT,
    RING_COUNT,
    RING_WIDTH,
    BITS_PER_SEGMENT,
    TOTAL_BITS,
    COLOR_MAJOR,
    WIDTH_MAJOR,
)
from .hashing import blake3_hash
from .bytesio import (
    serialize_rings_be,
    serialize_segments,
    ring_to_bits,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",
    "SEGMENT_COUNT",
    "RING_COUNT",
    "RING_WIDTH",
    "BITS_PER_SEGMENT",
    "TOTAL_BITS",
    "COLOR_MAJOR",
    "WIDTH_MAJOR",

    # Hashing
    "blake3_hash",

    # Serialization
    "serialize_rings_be",
    "serialize_segments",
    "ring_to_bits",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
