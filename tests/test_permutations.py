#!/usr/bin/env python3
"""
Symbol Permutation Tests

Verifies:
  - Canonical order matches the frozen registry table
  - Every permutation is a total bijection onto {0,1,2,3}
  - 24 distinct permutations covering all 4! orderings
  - Inversion and read-only mappings
"""

from itertools import permutations

import pytest

from ringbit.core import param_registry, RegistryError
from ringbit.kernel import (
    permutation_orders,
    generate_permutations,
    invert_permutation,
    permutation_order
)


def test_canonical_order_matches_registry():
    orders = permutation_orders(["A", "B", "C", "D"])

    assert orders == param_registry()["permutation_order"]
    assert orders[:6] == ["ABCD", "BACD", "CABD", "ACBD", "BCAD", "CBAD"]
    assert orders[6] == "CBDA"
    assert orders[-1] == "DABC"


def test_every_permutation_is_bijection():
    perms = generate_permutations()

    assert len(perms) == 24
    for perm in perms:
        assert set(perm.keys()) == {"A", "B", "C", "D"}
        assert sorted(perm.values()) == [0, 1, 2, 3]


def test_permutations_distinct_and_complete():
    orders = [permutation_order(p) for p in generate_permutations()]

    assert len(set(orders)) == 24
    assert set(orders) == {"".join(p) for p in permutations("ABCD")}


def test_permutation_by_index():
    perms = generate_permutations()

    assert dict(perms[0]) == {"A": 0, "B": 1, "C": 2, "D": 3}
    # "CABD": C->0, A->1, B->2, D->3
    assert dict(perms[2]) == {"A": 1, "B": 2, "C": 0, "D": 3}
    # "DCBA"
    assert dict(perms[8]) == {"A": 3, "B": 2, "C": 1, "D": 0}


def test_generation_is_stable():
    assert [dict(p) for p in generate_permutations()] == [dict(p) for p in generate_permutations()]


def test_permutations_are_read_only():
    perm = generate_permutations()[0]

    with pytest.raises(TypeError):
        perm["A"] = 3


def test_registry_order_drift_detected(monkeypatch):
    """A registry table that disagrees with the generator is rejected."""
    import ringbit.kernel.permutations as perm_module

    drifted = param_registry()
    table = drifted["permutation_order"]
    table[0], table[1] = table[1], table[0]
    monkeypatch.setattr(perm_module, "param_registry", lambda: drifted)

    with pytest.raises(RegistryError):
        generate_permutations()


def test_custom_alphabet():
    perms = generate_permutations(["w", "x", "y", "z"])

    assert dict(perms[0]) == {"w": 0, "x": 1, "y": 2, "z": 3}
    assert permutation_order(perms[1]) == "xwyz"


def test_invalid_alphabet():
    with pytest.raises(ValueError):
        permutation_orders(["A", "B", "C"])
    with pytest.raises(ValueError):
        permutation_orders(["A", "A", "B", "C"])


def test_invert_permutation():
    perm = generate_permutations()[2]

    assert invert_permutation(perm) == ("C", "A", "B", "D")

    with pytest.raises(ValueError):
        invert_permutation({"A": 0, "B": 0, "C": 2, "D": 3})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
