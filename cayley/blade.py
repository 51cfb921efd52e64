# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Basis-blade product for algebras of arbitrary signature.

Blades are indexed by bitmasks over the generators: index 0 is the scalar,
``1 << g`` is generator g, and e.g. ``0b011`` is e1 e2. The product of two
blades is either zero (a null generator meets itself) or a signed blade:

    e_I * e_J = sign(I, J) * e_{I xor J}

The sign is the parity of three independent contributions:

    - signature: one flip per negative generator shared by I and J;
    - reversal: the reversion sign of J, (-1)^(k(k-1)/2) with k = |J|;
    - interleaving: the transpositions that merge I with J written in
      reverse order.

Reading J backwards makes its internal reordering cancel the reversal
term, so the total equals the usual inversion count of I against J.
"""

from typing import Optional, Tuple

from cayley.signature import Signature
from cayley.validation import check_blade


def popcount(x: int) -> int:
    """Number of set bits."""
    return bin(x).count("1")


def grade(blade: int) -> int:
    """Number of generators in a blade."""
    return popcount(blade)


def reverse_sign(blade: int) -> int:
    """Sign picked up by a blade under reversion: (-1)^(k(k-1)/2)."""
    return -1 if popcount(blade) & 2 else 1


def blade_name(blade: int) -> str:
    """Readable label with 1-based generators: 0 -> '1', 0b101 -> 'e13'."""
    if blade == 0:
        return "1"
    digits = []
    g = 0
    while blade:
        if blade & 1:
            digits.append(str(g + 1))
        blade >>= 1
        g += 1
    sep = "" if len(digits) < 10 else "_"
    return "e" + sep.join(digits)


def signature_parity(signature: Signature, i: int, j: int) -> int:
    """1 if an odd number of negative generators is shared by both blades."""
    return popcount(i & j & signature.neg_mask) & 1


def reversal_parity(j: int) -> int:
    """1 if reversing blade j flips its sign."""
    return 1 if popcount(j) & 2 else 0


def interleave_parity(i: int, j: int) -> int:
    """Transposition parity of merging i with j written in reverse order.

    Walks j's generators lowest first. Each one moves left past the bits
    of both operands above it, then cancels against its twin in i (if
    any). Once i runs out, the r generators left in j only reorder among
    themselves, which takes C(r, 2) transpositions.
    """
    parity = 0
    while i and j:
        low = j & -j
        above = ~((low << 1) - 1)
        parity ^= popcount(i & above) + popcount(j & above)
        i &= ~low
        j &= ~low
    parity ^= popcount(j) >> 1
    return parity & 1


def blade_product(signature: Signature, i: int, j: int) -> Optional[Tuple[int, int]]:
    """Multiplies two basis blades.

    Args:
        signature (Signature): Generator counts of the algebra.
        i (int): Left blade index.
        j (int): Right blade index.

    Returns:
        ``None`` when the product vanishes (a shared null generator),
        otherwise ``(sign, blade)`` with ``sign`` in {+1, -1}.
    """
    check_blade(i, signature, "blade_product(i)")
    check_blade(j, signature, "blade_product(j)")

    if i & j & signature.null_mask:
        return None

    parity = (
        signature_parity(signature, i, j)
        ^ reversal_parity(j)
        ^ interleave_parity(i, j)
    )
    return (-1 if parity else 1), i ^ j
