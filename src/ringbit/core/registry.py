"""
Core Component: Parameter Registry

Frozen constants for the ring assembly engine.
Alphabets, ring geometry, nibble orderings, the canonical permutation
order and the style tables used to read segments out of the image.

No randomness, no environment leakage, no optionals.
"""

# Geometry: 16 rings of 4 segments, 4 bits per segment.
# The registry below reports these same values.
SEGMENT_COUNT = 64
RING_COUNT = 16
RING_WIDTH = 16
BITS_PER_SEGMENT = 4
TOTAL_BITS = RING_COUNT * RING_WIDTH

COLOR_MAJOR = 0
WIDTH_MAJOR = 1


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the engine.

    Keys and values are JSON-serializable primitives or lists.
    The registry is hashed into every section receipt to bind a run
    to the exact constants it used.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "version": "1.0",
        "endianness": "BE",  # ring bit 15 is angular position 0

        # Symbol alphabets (opaque labels, exactly 4 each)
        "color_alphabet": ["A", "B", "C", "D"],
        "width_alphabet": ["A", "B", "C", "D"],

        "segment_count": SEGMENT_COUNT,
        "ring_count": RING_COUNT,
        "ring_width": RING_WIDTH,
        "bits_per_segment": BITS_PER_SEGMENT,

        # Nibble orderings, indexed by the ordering flag
        "orderings": ["color-major", "width-major"],

        # Each ring is rotated one more angular step than the previous one
        "rotation": "clockwise+1",

        # Canonical permutation order: letter i is the symbol given code i
        "permutation_order": [
            "ABCD", "BACD", "CABD", "ACBD", "BCAD", "CBAD",
            "CBDA", "BCDA", "DCBA", "CDBA", "BDCA", "DBCA",
            "DACB", "ADCB", "CDAB", "DCAB", "ACDB", "CADB",
            "BADC", "ABDC", "DBAC", "BDAC", "ADBC", "DABC",
        ],

        # Stroke style values found in the image
        "color_styles": {
            "rgb(51, 85, 51)": "A",
            "rgb(68, 102, 136)": "B",
            "rgb(102, 136, 68)": "C",
            "rgb(136, 68, 102)": "D",
        },
        "width_styles": {
            "5": "A",
            "10": "B",
            "15": "C",
            "20": "D",
        },

        # Hashing
        "hash_algo": "BLAKE3",

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "RINGS": "RNG1",
            "SEGMENTS": "SEG1",
        },
    }

    required_keys = {
        "version", "endianness", "color_alphabet", "width_alphabet",
        "segment_count", "ring_count", "ring_width", "bits_per_segment",
        "orderings", "rotation", "permutation_order", "color_styles",
        "width_styles", "hash_algo", "byte_frame_tags",
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
