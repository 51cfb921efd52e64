# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Tests for generator signs and the base-ring helpers they rely on."""

from decimal import Decimal
from fractions import Fraction

import pytest
import torch

from cayley.catalog import complex_numbers, quaternions
from cayley.ring import conjugate, equal, lift_into, null_image, one_of, resolve_ring, zero_of
from cayley.sign import GeneratorSign

NEG, POS, NULL = GeneratorSign.NEGATIVE, GeneratorSign.POSITIVE, GeneratorSign.NULL


# ── apply ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("x", [3, -7, 2.5, Fraction(3, 4), Decimal("1.5")])
def test_negative_negates(x):
    assert NEG.apply(x) == -x


@pytest.mark.parametrize("x", [3, -7, 2.5, Fraction(3, 4)])
def test_positive_is_identity(x):
    assert POS.apply(x) == x


@pytest.mark.parametrize("x", [3, 2.5, Fraction(3, 4), Decimal("1.5")])
def test_null_gives_zero_of_same_type(x):
    z = NULL.apply(x)
    assert z == 0
    assert type(z) is type(x)


def test_null_on_tensor():
    x = torch.tensor([1.0, -2.0, 3.0])
    assert torch.equal(NULL.apply(x), torch.zeros(3))


def test_null_on_pairs_is_componentwise():
    C = complex_numbers(int)
    Q = quaternions(int)
    assert NULL.apply(C(1, 2)) == C(0, 0)
    q = Q.from_coefficients([1, 2, 3, 4])
    assert NULL.apply(q) == Q.zero()


def test_negative_on_pairs():
    C = complex_numbers(int)
    assert NEG.apply(C(1, -2)) == C(-1, 2)


def test_squares():
    assert [NEG.square, POS.square, NULL.square] == [-1, 1, 0]


# ── parse ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("negative", NEG), ("NEGATIVE", NEG), ("-", NEG), ("-1", NEG), (-1, NEG),
    ("positive", POS), ("+", POS), ("split", POS), (1, POS),
    ("null", NULL), ("0", NULL), ("dual", NULL), (0, NULL),
    (POS, POS),
])
def test_parse(text, expected):
    assert GeneratorSign.parse(text) is expected


@pytest.mark.parametrize("bad", ["imaginary", "", 2, 5])
def test_parse_rejects_unknown(bad):
    with pytest.raises(ValueError):
        GeneratorSign.parse(bad)


# ── ring helpers ──────────────────────────────────────────────────────

def test_real_numbers_are_self_conjugate():
    assert conjugate(3) == 3
    assert conjugate(Fraction(1, 3)) == Fraction(1, 3)
    assert conjugate(torch.tensor(2.0)).item() == 2.0


def test_builtin_complex_uses_its_own_conjugate():
    assert conjugate(1 + 2j) == 1 - 2j


def test_null_image_unknown_type():
    with pytest.raises(TypeError):
        null_image("text")


def test_resolve_ring():
    assert resolve_ring("int") is int
    assert resolve_ring("Fraction") is Fraction
    assert resolve_ring(float) is float
    with pytest.raises(ValueError):
        resolve_ring("quaternion")


def test_tensor_ring_identities():
    assert torch.equal(one_of(torch.Tensor), torch.tensor(1.0))
    assert torch.equal(zero_of(torch.Tensor), torch.tensor(0.0))
    assert torch.equal(lift_into(torch.Tensor, 3), torch.tensor(3))


def test_equal_handles_tensors():
    assert equal(torch.tensor([1.0, 2.0]), torch.tensor([1.0, 2.0]))
    assert not equal(torch.tensor([1.0, 2.0]), torch.tensor([1.0, 3.0]))
    assert equal(torch.tensor(2.0), 2.0)
    assert equal(Fraction(1, 2), 0.5)


@pytest.mark.parametrize("ring, value", [(int, 0.5), (int, Fraction(7, 2)), (int, 1.000001)])
def test_lift_into_rejects_lossy_conversion(ring, value):
    with pytest.raises(TypeError):
        lift_into(ring, value)


def test_lift_into_keeps_exact_values():
    assert lift_into(int, 4.0) == 4
    assert type(lift_into(int, 4.0)) is int
    assert lift_into(Fraction, 0.25) == Fraction(1, 4)
    assert lift_into(Decimal, 3) == Decimal(3)
