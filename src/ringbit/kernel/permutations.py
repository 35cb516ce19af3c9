"""
Kernel Component: Symbol Permutations

Every bijection from a 4-symbol alphabet onto the 2-bit codes {0,1,2,3}.

Permutation representation:
  - Read-only mapping symbol -> code (types.MappingProxyType)
  - Listing the symbols by ascending code gives the permutation's "order"
    string, e.g. "CABD" means C->0, A->1, B->2, D->3

The canonical ordering is a Heap-style swap sequence: odd levels always
swap the first element with the last, even levels swap the last element
with positions k-2, k-3, ..., 0 in turn. Candidate indices refer to
positions in this sequence, so it must never change.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from ..core.registry import param_registry, RegistryError

Permutation = Mapping[str, int]


def permutation_orders(alphabet: Sequence[str]) -> list[str]:
    """
    List every ordering of the alphabet in canonical sequence.

    Args:
        alphabet: Exactly 4 distinct symbols.

    Returns:
        list[str]: 24 order strings (one symbol per code, code 0 first).

    Raises:
        ValueError: If the alphabet does not hold exactly 4 distinct symbols.
    """
    if len(alphabet) != 4 or len(set(alphabet)) != 4:
        raise ValueError(f"Alphabet must hold exactly 4 distinct symbols, got {list(alphabet)}")

    a = list(alphabet)
    orders = []

    def generate(k: int) -> None:
        if k == 1:
            orders.append("".join(a))
            return

        generate(k - 1)
        for i in range(k - 1):
            j = k - 2 - i if k % 2 == 0 else 0
            a[j], a[k - 1] = a[k - 1], a[j]
            generate(k - 1)

    generate(len(a))
    return orders


def generate_permutations(alphabet: Sequence[str] | None = None) -> Tuple[Permutation, ...]:
    """
    Build the 24 symbol -> code permutations in canonical order.

    Args:
        alphabet: 4 distinct symbols. Defaults to the registry color alphabet.

    Returns:
        tuple of read-only mappings, index = permutation index.

    Raises:
        RegistryError: If a registry alphabet does not yield the frozen
            registry permutation_order table.
    """
    registry = param_registry()
    if alphabet is None:
        alphabet = registry["color_alphabet"]

    orders = permutation_orders(alphabet)

    registry_alphabets = (registry["color_alphabet"], registry["width_alphabet"])
    if list(alphabet) in registry_alphabets and orders != registry["permutation_order"]:
        raise RegistryError(
            "Generated permutation order differs from registry permutation_order"
        )

    return tuple(
        MappingProxyType({symbol: code for code, symbol in enumerate(order)})
        for order in orders
    )


def invert_permutation(perm: Permutation) -> Tuple[str, ...]:
    """
    Return the symbols indexed by code (code -> symbol).

    Raises:
        ValueError: If perm is not a bijection onto {0,1,2,3}.
    """
    if sorted(perm.values()) != [0, 1, 2, 3]:
        raise ValueError(f"Not a bijection onto codes 0-3: {dict(perm)}")

    inverse = [""] * 4
    for symbol, code in perm.items():
        inverse[code] = symbol
    return tuple(inverse)


def permutation_order(perm: Permutation) -> str:
    """Order string of a permutation, e.g. "CABD"."""
    return "".join(invert_permutation(perm))
