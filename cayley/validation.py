# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Lightweight input validation for blades and coefficient storage.

All checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable even without the -O flag.
"""

import torch

VALIDATE = True


def check_blade(blade: int, signature, name: str = "blade") -> None:
    """Assert *blade* is a basis-blade index of *signature*."""
    if not VALIDATE:
        return
    assert isinstance(blade, int), (
        f"{name}: expected an int blade index, got {type(blade).__name__}"
    )
    assert 0 <= blade < signature.dim, (
        f"{name}: blade {blade} out of range [0, {signature.dim}) for {signature}"
    )


def check_coefficients(coefficients, algebra, name: str = "x") -> None:
    """Assert *coefficients* has one entry per blade of *algebra*."""
    if not VALIDATE:
        return
    assert len(coefficients) == algebra.dim, (
        f"{name}: expected {algebra.dim} coefficients (algebra dim), "
        f"got {len(coefficients)}"
    )


def check_multivector(x: torch.Tensor, algebra, name: str = "x") -> None:
    """Assert *x* looks like a batched multivector tensor for *algebra*.

    Checks ``x.ndim >= 1`` and ``x.shape[-1] == algebra.dim``.
    """
    if not VALIDATE:
        return
    assert x.ndim >= 1, (
        f"{name}: expected ndim >= 1, got shape {tuple(x.shape)}"
    )
    assert x.shape[-1] == algebra.dim, (
        f"{name}: last dim should be {algebra.dim} (algebra dim), "
        f"got {x.shape[-1]} (shape {tuple(x.shape)})"
    )
