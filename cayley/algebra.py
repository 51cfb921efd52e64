# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import torch

from log import get_logger
from cayley.blade import blade_product, popcount, reverse_sign
from cayley.signature import Signature
from cayley.validation import check_coefficients, check_multivector

logger = get_logger(__name__)


def _bit_count(t: torch.Tensor, n: int) -> torch.Tensor:
    """Popcount of every entry of an integer tensor with at most n bits."""
    count = torch.zeros_like(t)
    temp = t
    for _ in range(n):
        count += temp & 1
        temp = temp >> 1
    return count


class CliffordAlgebra:
    """Dense multivector algebra of arbitrary signature.

    Two product paths share one sign rule (:func:`cayley.blade.blade_product`):

    - :meth:`multiply` works on plain coefficient sequences over any ring
      (ints, fractions, nested pairs...).
    - :meth:`geometric_product` works on batched float tensors ``[..., dim]``
      through a cached Cayley table.

    Attributes:
        signature (Signature): Generator counts.
        n (int): Total generators.
        dim (int): Total basis blades (2^n).
        device (str): Device of the cached tensor tables.
    """
    _CACHED_TABLES = {}

    def __init__(self, total, negative: int = 0, positive: int = 0, device='cpu'):
        """Initialize the algebra and cache the Cayley table.

        Args:
            total (int | Signature): Total generators, or a full signature.
            negative (int, optional): Generators squaring to -1. Defaults to 0.
            positive (int, optional): Generators squaring to +1. Defaults to 0.
            device (str, optional): Device for the tensor tables. Defaults to 'cpu'.
        """
        if isinstance(total, Signature):
            signature = total
        else:
            signature = Signature(total, negative, positive)
        assert signature.total <= 12, f"total must be <= 12, got {signature.total}"

        self.signature = signature
        self.n = signature.total
        self.dim = signature.dim
        self.device = device
        self._products = None

        cache_key = (signature, str(device))
        if cache_key not in CliffordAlgebra._CACHED_TABLES:
            CliffordAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()
            logger.debug("Built Cayley table for %s on %s", signature, device)

        (
            self.cayley_indices,
            self.cayley_signs,
            self.gp_signs,
            self.grade_masks,
            self.rev_signs,
        ) = CliffordAlgebra._CACHED_TABLES[cache_key]

    @classmethod
    def from_pqr(cls, p: int, q: int = 0, r: int = 0, device='cpu') -> "CliffordAlgebra":
        """``Cl(p, q, r)`` with p positive, q negative and r null generators."""
        return cls(Signature.from_pqr(p, q, r), device=device)

    @property
    def num_grades(self) -> int:
        """Counts the number of grades (n + 1)."""
        return self.n + 1

    def __repr__(self):
        return f"CliffordAlgebra({self.signature})"

    # ------------------------------------------------------------------
    # Generic-ring path
    # ------------------------------------------------------------------

    def product(self, i: int, j: int):
        """Blade product ``e_i * e_j``: ``None`` or ``(sign, blade)``."""
        return blade_product(self.signature, i, j)

    @property
    def products(self):
        """``products[i][j]`` = :meth:`product` ``(i, j)``, built on first use."""
        if self._products is None:
            self._products = [
                [blade_product(self.signature, i, j) for j in range(self.dim)]
                for i in range(self.dim)
            ]
        return self._products

    def multiply(self, a, b) -> tuple:
        """Geometric product of two coefficient sequences over any ring.

        The result is seeded with ``a`` scaled by the scalar part of ``b``;
        every other blade pair adds or subtracts ``a[i] * b[j]`` into its
        product blade, and annihilated pairs contribute nothing.

        Args:
            a: Left coefficients, one per blade.
            b: Right coefficients, one per blade.

        Returns:
            tuple: Product coefficients.
        """
        check_coefficients(a, self, "multiply(a)")
        check_coefficients(b, self, "multiply(b)")

        b0 = b[0]
        result = [x * b0 for x in a]
        products = self.products
        for j in range(1, self.dim):
            bj = b[j]
            for i in range(self.dim):
                entry = products[i][j]
                if entry is None:
                    continue
                sign, k = entry
                term = a[i] * bj
                result[k] = result[k] + term if sign > 0 else result[k] - term
        return tuple(result)

    # ------------------------------------------------------------------
    # Tensor path
    # ------------------------------------------------------------------

    def _generate_cayley_table(self):
        """Precompute the Cayley table, grade masks, and reversion signs."""
        indices = torch.arange(self.dim, device=self.device)

        # Result index = A XOR B
        cayley_indices = indices.unsqueeze(1) ^ indices.unsqueeze(0)
        cayley_signs = self._compute_signs(indices)

        # Precompute signs for geometric_product accumulation
        gp_signs = torch.gather(cayley_signs, 1, cayley_indices)

        blades = range(self.dim)
        grade_of = torch.tensor([popcount(i) for i in blades], device=self.device)
        grade_masks = [grade_of == k for k in range(self.n + 1)]
        rev_signs = torch.tensor([float(reverse_sign(i)) for i in blades],
                                 dtype=cayley_signs.dtype, device=self.device)

        return cayley_indices, cayley_signs, gp_signs, grade_masks, rev_signs

    def _compute_signs(self, indices: torch.Tensor) -> torch.Tensor:
        """Vectorised blade signs for every (row, col) blade pair.

        Same three parities as :func:`cayley.blade.blade_product`:

        - signature: shared negative generators;
        - reversal: grade of the right blade mod 4 >= 2;
        - interleaving: for each generator of the right blade, the bits of
          both blades above it.

        Annihilated pairs (a shared null generator) get sign 0.

        Args:
            indices (torch.Tensor): Basis indices.

        Returns:
            torch.Tensor: Sign matrix [dim, dim] in {-1, 0, +1}.
        """
        n = self.n
        A = indices.unsqueeze(1)  # Row
        B = indices.unsqueeze(0)  # Col

        swap_counts = torch.zeros((self.dim, self.dim), dtype=torch.long, device=self.device)
        for g in range(n):
            b_g = (B >> g) & 1
            above = (self.dim - 1) ^ ((1 << (g + 1)) - 1)
            swap_counts += b_g * (_bit_count(A & above, n) + _bit_count(B & above, n))

        reversal = (_bit_count(B, n) >> 1) & 1

        intersection = A & B
        neg_cnt = _bit_count(intersection & self.signature.neg_mask, n)

        parity = (swap_counts + reversal + neg_cnt) & 1
        signs = 1 - 2 * parity

        if self.signature.null:
            has_null = (intersection & self.signature.null_mask) != 0
            signs = signs * (~has_null).to(signs.dtype)

        return signs.to(dtype=torch.float32)

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the Geometric Product.

        Uses vectorized gather + broadcast multiply + sum. No Python loops.

        Args:
            A (torch.Tensor): Left operand [..., Dim].
            B (torch.Tensor): Right operand [..., Dim].

        Returns:
            torch.Tensor: The product AB [..., Dim].
        """
        check_multivector(A, self, "geometric_product(A)")
        check_multivector(B, self, "geometric_product(B)")

        idx = self.cayley_indices  # [D, D]
        if idx.device != A.device:
            self.ensure_device(A.device)
            idx = self.cayley_indices

        # B_gathered[..., i, k] = B[..., i ^ k]
        B_gathered = B[..., idx]  # [..., D, D]
        signs = self.gp_signs.to(dtype=A.dtype)

        # result[..., k] = sum_i A[..., i] * B[..., i ^ k] * sign(e_i e_{i^k})
        return (A.unsqueeze(-1) * B_gathered * signs).sum(dim=-2)

    def ensure_device(self, device) -> None:
        """Move cached tables to the given device if not already there."""
        if self.cayley_indices.device == device:
            return
        self.cayley_indices = self.cayley_indices.to(device)
        self.cayley_signs = self.cayley_signs.to(device)
        self.gp_signs = self.gp_signs.to(device)
        self.grade_masks = [m.to(device) for m in self.grade_masks]
        self.rev_signs = self.rev_signs.to(device)

    def embed_vector(self, vectors: torch.Tensor) -> torch.Tensor:
        """Scatters ``[..., n]`` generator components onto the blades ``1 << g``."""
        assert vectors.shape[-1] == self.n, (
            f"embed_vector: expected {self.n} components, got {vectors.shape[-1]}"
        )
        mv = vectors.new_zeros(*vectors.shape[:-1], self.dim)
        mv[..., [1 << g for g in range(self.n)]] = vectors
        return mv

    def grade_projection(self, mv: torch.Tensor, grade: int) -> torch.Tensor:
        """Zeroes every blade whose grade is not ``grade``."""
        check_multivector(mv, self, "grade_projection")
        self.ensure_device(mv.device)
        return torch.where(self.grade_masks[grade], mv, torch.zeros_like(mv))

    def reverse(self, mv: torch.Tensor) -> torch.Tensor:
        """Reversion: blade ``i`` scaled by :func:`cayley.blade.reverse_sign`."""
        check_multivector(mv, self, "reverse")
        self.ensure_device(mv.device)
        return mv * self.rev_signs.to(dtype=mv.dtype)
