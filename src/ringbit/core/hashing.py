"""
Core Component: BLAKE3 Hashing

Deterministic hash function for receipts, ring serialization and
segment fingerprints. No seeding, no randomness, no timestamps.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Args:
        data: Raw bytes to hash.

    Returns:
        str: Lowercase hexadecimal digest (64 characters for BLAKE3-256).
    """
    hasher = blake3.blake3()
    hasher.update(data)
    return hasher.hexdigest()
