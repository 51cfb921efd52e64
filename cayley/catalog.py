# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Named algebras.

Each helper picks the doubling signs of a well-known algebra; ``base`` is
the scalar ring (``float`` by default, ``int`` or ``Fraction`` for exact
arithmetic).
"""

from cayley.algebra import CliffordAlgebra
from cayley.doubling import cayley_dickson, double
from cayley.opaque import opaque
from cayley.sign import GeneratorSign

NEGATIVE = GeneratorSign.NEGATIVE
POSITIVE = GeneratorSign.POSITIVE
NULL = GeneratorSign.NULL


def complex_numbers(base=float):
    """a + b i, i^2 = -1."""
    return double(base, NEGATIVE)


def split_complex_numbers(base=float):
    """a + b j, j^2 = +1."""
    return double(base, POSITIVE)


def dual_numbers(base=float):
    """a + b eps, eps^2 = 0."""
    return double(base, NULL)


def quaternions(base=float):
    return cayley_dickson(base, 2, NEGATIVE)


def split_quaternions(base=float):
    """i^2 = -1, j^2 = +1, k^2 = +1."""
    return cayley_dickson(base, 2, [NEGATIVE, POSITIVE])


def octonions(base=float):
    return cayley_dickson(base, 3, NEGATIVE)


def sedenions(base=float):
    return cayley_dickson(base, 4, NEGATIVE)


def dual_quaternions(base=float):
    """q + eps p with quaternions q, p; outer conjugation leaves q alone."""
    return double(opaque(quaternions(base)), NULL)


def clifford(total: int, negative: int = 0, positive: int = 0, device='cpu') -> CliffordAlgebra:
    """Flat multivector algebra with the given generator counts."""
    return CliffordAlgebra(total, negative, positive, device=device)


ALGEBRAS = {
    "complex": complex_numbers,
    "split_complex": split_complex_numbers,
    "dual": dual_numbers,
    "quaternion": quaternions,
    "split_quaternion": split_quaternions,
    "octonion": octonions,
    "sedenion": sedenions,
    "dual_quaternion": dual_quaternions,
}
