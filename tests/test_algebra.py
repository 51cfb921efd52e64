# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import itertools
import unittest
from fractions import Fraction

import pytest
import torch

from cayley.algebra import CliffordAlgebra
from cayley.blade import blade_product
from cayley.catalog import octonions
from cayley.doubling import cayley_dickson
from cayley.multivector import Multivector
from cayley.signature import Signature


class TestCliffordAlgebra(unittest.TestCase):
    def setUp(self):
        self.device = 'cpu'

    def test_euclidean_3d_cayley(self):
        # e1*e1 = -1, e1*e2 = e12, e2*e1 = -e12
        alg = CliffordAlgebra(3, negative=3, device=self.device)

        self.assertEqual(alg.cayley_indices[1, 2].item(), 3)
        self.assertEqual(alg.cayley_signs[1, 2].item(), 1.0)
        self.assertEqual(alg.cayley_indices[2, 1].item(), 3)
        self.assertEqual(alg.cayley_signs[2, 1].item(), -1.0)
        self.assertEqual(alg.cayley_indices[1, 1].item(), 0)
        self.assertEqual(alg.cayley_signs[1, 1].item(), -1.0)

    def test_geometric_product_simple(self):
        alg = CliffordAlgebra(2, positive=2, device=self.device)

        # A = 2*e1
        A = torch.zeros(1, 4)
        A[0, 1] = 2.0

        # B = 3*e2
        B = torch.zeros(1, 4)
        B[0, 2] = 3.0

        # C = A*B = 6*e12
        C = alg.geometric_product(A, B)
        self.assertEqual(C[0, 3].item(), 6.0)
        self.assertEqual(C[0, 0].item(), 0.0)

    def test_null_table_entries_are_zero(self):
        alg = CliffordAlgebra(2, negative=1, device=self.device)
        self.assertEqual(alg.cayley_signs[2, 2].item(), 0.0)
        self.assertEqual(alg.cayley_signs[3, 2].item(), 0.0)
        self.assertEqual(alg.cayley_signs[1, 1].item(), -1.0)

    def test_tables_are_cached(self):
        a = CliffordAlgebra(3, 1, 1, device=self.device)
        b = CliffordAlgebra(Signature(3, 1, 1), device=self.device)
        self.assertIs(a.cayley_signs, b.cayley_signs)

    def test_invalid_signature(self):
        with self.assertRaises(ValueError):
            CliffordAlgebra(2, 3)
        with self.assertRaises(AssertionError):
            CliffordAlgebra(13)

    def test_from_pqr(self):
        alg = CliffordAlgebra.from_pqr(3, 1, 1)
        self.assertEqual(alg.signature, Signature(5, 1, 3))
        self.assertEqual(alg.num_grades, 6)


SIGNATURES = [
    Signature(2, 2, 0),
    Signature(3, 3, 0),
    Signature(3, 0, 3),
    Signature(3, 1, 1),
    Signature(4, 1, 2),
    Signature(4, 0, 0),
]


@pytest.mark.parametrize("signature", SIGNATURES, ids=str)
def test_tensor_table_matches_blade_product(signature):
    alg = CliffordAlgebra(signature)
    for i, j in itertools.product(range(alg.dim), repeat=2):
        entry = blade_product(signature, i, j)
        assert alg.cayley_indices[i, j].item() == i ^ j
        expected = 0.0 if entry is None else float(entry[0])
        assert alg.cayley_signs[i, j].item() == expected, (i, j)


@pytest.mark.parametrize("signature", SIGNATURES, ids=str)
def test_geometric_product_matches_generic_multiply(signature):
    alg = CliffordAlgebra(signature)
    torch.manual_seed(0)
    A = torch.randn(alg.dim, dtype=torch.float64)
    B = torch.randn(alg.dim, dtype=torch.float64)
    expected = torch.tensor(alg.multiply(A.tolist(), B.tolist()), dtype=torch.float64)
    assert torch.allclose(alg.geometric_product(A, B), expected, atol=1e-12)


def test_geometric_product_batched():
    alg = CliffordAlgebra(3, 3)
    torch.manual_seed(1)
    A = torch.randn(5, 2, alg.dim)
    B = torch.randn(5, 2, alg.dim)
    out = alg.geometric_product(A, B)
    assert out.shape == (5, 2, alg.dim)
    single = alg.geometric_product(A[3, 1], B[3, 1])
    assert torch.allclose(out[3, 1], single, atol=1e-6)


@pytest.mark.parametrize("signature", [Signature(3, 3, 0), Signature(3, 1, 1), Signature(3, 0, 1)], ids=str)
def test_blade_algebra_is_associative(signature):
    alg = CliffordAlgebra(signature)
    units = [Multivector.basis(alg, b, int) for b in range(alg.dim)]
    for a, b, c in itertools.product(units, repeat=3):
        assert (a * b) * c == a * (b * c)


def test_multiply_over_fractions():
    alg = CliffordAlgebra(2, 2)
    a = [Fraction(1, 2), Fraction(1), Fraction(0), Fraction(-1, 3)]
    b = [Fraction(2), Fraction(0), Fraction(1, 4), Fraction(0)]
    # (1/2 + e1 - 1/3 e12)(2 + 1/4 e2)
    assert alg.multiply(a, b) == (
        Fraction(1), Fraction(2) + Fraction(1, 12), Fraction(1, 8), Fraction(1, 4) - Fraction(2, 3),
    )


def test_multiply_checks_lengths():
    alg = CliffordAlgebra(2, 2)
    with pytest.raises(AssertionError):
        alg.multiply([1, 2, 3], [1, 0, 0, 0])


def test_grade_projection_and_reverse():
    alg = CliffordAlgebra(3, 3)
    mv = torch.arange(1.0, 9.0)
    bivector = alg.grade_projection(mv, 2)
    assert bivector.tolist() == [0, 0, 0, 4, 0, 6, 7, 0]
    rev = alg.reverse(mv)
    assert rev.tolist() == [1, 2, 3, -4, 5, -6, -7, -8]


def test_tensor_helpers_follow_blade_grades():
    alg = CliffordAlgebra(4, 1, 2)
    torch.manual_seed(2)
    mv = torch.randn(3, alg.dim, dtype=torch.float64)
    total = sum(alg.grade_projection(mv, k) for k in range(alg.num_grades))
    assert torch.equal(total, mv)
    assert torch.equal(alg.reverse(alg.reverse(mv)), mv)
    with pytest.raises(AssertionError):
        alg.reverse(torch.zeros(3, 8))
    with pytest.raises(AssertionError):
        alg.embed_vector(torch.zeros(2, 3))


def test_embed_vector():
    alg = CliffordAlgebra(3, 3)
    mv = alg.embed_vector(torch.tensor([[1.0, 2.0, 3.0]]))
    assert mv.tolist() == [[0, 1, 2, 0, 3, 0, 0, 0]]


# ── Doubling against blade algebra ────────────────────────────────────

CROSS_CHECKS = [
    (["negative"], Signature(1, 1, 0)),
    (["positive"], Signature(1, 0, 1)),
    (["null"], Signature(1, 0, 0)),
    (["negative", "negative"], Signature(2, 2, 0)),
    (["negative", "positive"], Signature(2, 1, 1)),
    (["negative", "null"], Signature(2, 1, 0)),
    (["positive", "positive"], Signature(2, 0, 2)),
    (["positive", "null"], Signature(2, 0, 1)),
    (["null", "null"], Signature(2, 0, 0)),
]


@pytest.mark.parametrize("signs, signature", CROSS_CHECKS)
def test_doubling_matches_blade_algebra(signs, signature):
    """Level k of the tower plays generator k; units flatten to blade order."""
    T = cayley_dickson(int, len(signs), signs)
    alg = CliffordAlgebra(signature)
    for a, b in itertools.product(range(T.dimension), repeat=2):
        doubled = (T.basis(a) * T.basis(b)).coefficients()
        flat = (Multivector.basis(alg, a, int) * Multivector.basis(alg, b, int)).coefficients
        assert doubled == list(flat), (a, b)


def test_octonions_differ_from_associative_blade_algebra():
    O = octonions(int)
    alg = CliffordAlgebra(3, 3)
    mismatches = [
        (a, b) for a, b in itertools.product(range(8), repeat=2)
        if (O.basis(a) * O.basis(b)).coefficients()
        != list((Multivector.basis(alg, a, int) * Multivector.basis(alg, b, int)).coefficients)
    ]
    assert mismatches


if __name__ == '__main__':
    unittest.main()
