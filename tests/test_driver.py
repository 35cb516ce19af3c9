#!/usr/bin/env python3
"""
Enumeration Driver Tests

Verifies:
  - Parameter space: 1152 points, ordering outer / color middle / width inner
  - Cardinality and uniqueness of emitted candidates
  - Concrete scenarios (all AA, all AB)
  - Sink receives candidates in enumeration order
  - Pooled enumeration matches sequential output
  - Errors abort the run
  - Enumeration receipts are deterministic
"""

import pytest

from ringbit.core import assert_double_run_equal
from ringbit.driver import (
    parameter_space,
    evaluate_params,
    enumerate_candidates,
    enumeration_receipts
)
from ringbit.kernel import (
    Segment,
    generate_permutations,
    UnknownSymbol,
    InputLengthMismatch
)


PERMS = generate_permutations()


def all_pairs_segments():
    return [Segment(c, w) for c in "ABCD" for w in "ABCD"] * 4


def test_parameter_space_order():
    space = list(parameter_space())

    assert len(space) == 1152
    assert len(set(space)) == 1152
    assert space[0] == (0, 0, 0)
    assert space[1] == (0, 0, 1)
    assert space[24] == (0, 1, 0)
    assert space[576] == (1, 0, 0)
    assert space[-1] == (1, 23, 23)
    assert space == sorted(space)


def test_cardinality_and_uniqueness():
    candidates = enumerate_candidates(all_pairs_segments(), PERMS, PERMS)

    assert len(candidates) == 1152
    params = [c.params for c in candidates]
    assert len(set(params)) == 1152
    assert params == list(parameter_space())


def test_all_aa_segments_are_zero():
    segments = [Segment("A", "A")] * 64

    candidates = enumerate_candidates(segments, PERMS, PERMS)

    # perms[0] maps A -> 0
    c = candidates[0]
    assert c.params == (0, 0, 0)
    assert c.rings == (0x0000,) * 16
    assert c.zeros == 256
    assert c.ones == 0


def test_all_ab_segments_color_major():
    segments = [Segment("A", "B")] * 64

    # perms[0]: A -> 0 for color, B -> 1 for width; code 0b0001 everywhere
    c = evaluate_params(segments, PERMS, PERMS, (0, 0, 0))

    assert c.rings[0] == 0x1111
    assert c.rings[1] == 0x8888  # rotated one step clockwise
    for ring in c.rings:
        assert format(ring, "016b").count("0") == 12
    assert c.zeros == 192
    assert c.ones == 64


def test_sink_receives_in_order():
    received = []

    candidates = enumerate_candidates(all_pairs_segments(), PERMS, PERMS, sink=received.append)

    assert received == candidates


def test_pooled_matches_sequential():
    segments = all_pairs_segments()

    sequential = enumerate_candidates(segments, PERMS, PERMS)
    pooled = enumerate_candidates(segments, PERMS, PERMS, workers=2)

    assert pooled == sequential


def test_length_mismatch_aborts():
    received = []

    with pytest.raises(InputLengthMismatch):
        enumerate_candidates([Segment("A", "A")] * 63, PERMS, PERMS, sink=received.append)

    assert received == []


def test_unknown_symbol_aborts():
    segments = all_pairs_segments()
    segments[40] = Segment("A", "X")
    received = []

    with pytest.raises(UnknownSymbol) as exc_info:
        enumerate_candidates(segments, PERMS, PERMS, sink=received.append)

    assert exc_info.value.index == 40
    assert received == []


def test_sink_streams_before_failure():
    """Sequential sink sees each candidate as soon as it is evaluated."""
    segments = [Segment("A", "D")] * 64
    # Last width table has no "D": the first failure is at (0, 0, 23)
    width_perms = list(PERMS[:23]) + [{"A": 0, "B": 1, "C": 2, "Z": 3}]
    received = []

    with pytest.raises(UnknownSymbol):
        enumerate_candidates(segments, PERMS, width_perms, sink=received.append)

    assert [c.params for c in received] == [(0, 0, wi) for wi in range(23)]


def test_accepts_plain_tuples():
    segments = [("B", "C")] * 64

    candidates = enumerate_candidates(segments, PERMS, PERMS)

    assert len(candidates) == 1152


def test_enumeration_receipts():
    segments = all_pairs_segments()

    def build():
        return enumeration_receipts(segments, enumerate_candidates(segments, PERMS, PERMS))

    digest = assert_double_run_equal(build)
    payload = digest["payload"]

    assert payload["segments.count"] == 64
    assert payload["candidates.count"] == 1152
    assert payload["params.first"] == [0, 0, 0]
    assert payload["params.last"] == [1, 23, 23]
    # Every nibble 0..15 appears 4 times under any bijective encoding: 4 × 32 zeros
    assert payload["zeros.min"] == payload["zeros.max"] == 128


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
