#!/usr/bin/env python3
"""
Segment Encoder Tests

Verifies:
  - color-major / width-major nibble layout
  - UnknownSymbol on symbols outside the permutation
  - Losslessness: decode(encode(x)) == x for every (ordering, color, width) triple
"""

import pytest

from ringbit.kernel import (
    Segment,
    generate_permutations,
    encode_segments,
    decode_segments,
    UnknownSymbol
)


def all_pairs_segments():
    """64 segments cycling through all 16 (color, width) pairs."""
    return [Segment(c, w) for c in "ABCD" for w in "ABCD"] * 4


def test_color_major_layout():
    perms = generate_permutations()
    identity = perms[0]  # A0 B1 C2 D3

    encoded = encode_segments([Segment("C", "B"), Segment("D", "A")], identity, identity, 0)

    assert encoded == [0b1001, 0b1100]


def test_width_major_layout():
    perms = generate_permutations()
    identity = perms[0]

    encoded = encode_segments([Segment("C", "B"), Segment("D", "A")], identity, identity, 1)

    assert encoded == [0b0110, 0b0011]


def test_distinct_permutations_per_property():
    perms = generate_permutations()
    color_perm = perms[2]   # A1 B2 C0 D3
    width_perm = perms[8]   # A3 B2 C1 D0

    encoded = encode_segments([Segment("A", "A")], color_perm, width_perm, 0)

    assert encoded == [(1 << 2) | 3]


def test_output_length_matches_input():
    perms = generate_permutations()
    segments = all_pairs_segments()

    encoded = encode_segments(segments, perms[5], perms[17], 1)

    assert len(encoded) == len(segments) == 64
    assert all(0 <= code <= 15 for code in encoded)


def test_unknown_color_symbol():
    perms = generate_permutations()
    segments = [Segment("A", "A"), Segment("E", "B")]

    with pytest.raises(UnknownSymbol) as exc_info:
        encode_segments(segments, perms[0], perms[0], 0)

    err = exc_info.value
    assert err.field == "color"
    assert err.symbol == "E"
    assert err.index == 1


def test_unknown_width_symbol():
    perms = generate_permutations()

    with pytest.raises(UnknownSymbol) as exc_info:
        encode_segments([Segment("A", "U")], perms[0], perms[0], 1)

    assert exc_info.value.field == "width"
    assert exc_info.value.index == 0


def test_invalid_ordering():
    perms = generate_permutations()

    with pytest.raises(ValueError):
        encode_segments([Segment("A", "A")], perms[0], perms[0], 2)
    with pytest.raises(ValueError):
        decode_segments([0], perms[0], perms[0], -1)


def test_encoding_is_lossless():
    """Round trip over every point of the parameter space."""
    perms = generate_permutations()
    segments = all_pairs_segments()

    for ordering in (0, 1):
        for cp in perms:
            for wp in perms:
                encoded = encode_segments(segments, cp, wp, ordering)
                assert decode_segments(encoded, cp, wp, ordering) == segments


def test_encoding_is_injective_per_triple():
    """The 16 distinct pairs map to the 16 distinct nibbles."""
    perms = generate_permutations()
    pairs = [Segment(c, w) for c in "ABCD" for w in "ABCD"]

    for ordering in (0, 1):
        encoded = encode_segments(pairs, perms[13], perms[20], ordering)
        assert sorted(encoded) == list(range(16))


def test_decode_rejects_wide_codes():
    perms = generate_permutations()

    with pytest.raises(ValueError):
        decode_segments([16], perms[0], perms[0], 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
