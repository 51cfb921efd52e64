# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Multivector Container Class.

Dense, immutable storage of one coefficient per basis blade, with operator
overloading (e.g., A * B for geometric product). Coefficients may live in
any ring; the tensor helpers convert to and from the batched kernel.
"""

import torch

from cayley.algebra import CliffordAlgebra
from cayley.blade import blade_name, grade, reverse_sign
from cayley.display import format_terms
from cayley.ring import equal, null_image, one_of, zero_of
from cayley.validation import check_blade, check_coefficients


class Multivector:
    """Object-oriented wrapper for multivector coefficients.

    Allows natural mathematical syntax like A * B, A + B, ~A.

    Attributes:
        algebra (CliffordAlgebra): The underlying algebra kernel.
        coefficients (tuple): One ring value per blade index.
    """

    __slots__ = ("algebra", "coefficients")

    def __init__(self, algebra: CliffordAlgebra, coefficients):
        """Initializes a Multivector.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            coefficients: Sequence of 2^n ring values indexed by blade.
        """
        coefficients = tuple(coefficients)
        check_coefficients(coefficients, algebra, "Multivector")
        self.algebra = algebra
        self.coefficients = coefficients

    @classmethod
    def zero(cls, algebra: CliffordAlgebra, ring=float):
        return cls(algebra, [zero_of(ring)] * algebra.dim)

    @classmethod
    def one(cls, algebra: CliffordAlgebra, ring=float):
        return cls.basis(algebra, 0, ring)

    @classmethod
    def basis(cls, algebra: CliffordAlgebra, blade: int, ring=float):
        """Unit blade ``e_blade``."""
        check_blade(blade, algebra.signature, "Multivector.basis")
        one, zero = one_of(ring), zero_of(ring)
        return cls(algebra, [one if i == blade else zero for i in range(algebra.dim)])

    @classmethod
    def from_vector(cls, algebra: CliffordAlgebra, components, ring=float):
        """Creates a grade-1 Multivector from one component per generator.

        e1 is index 1 (1<<0), e2 is index 2 (1<<1), etc.
        """
        components = list(components)
        assert len(components) == algebra.n, (
            f"from_vector: expected {algebra.n} components, got {len(components)}"
        )
        coefficients = [zero_of(ring)] * algebra.dim
        for g, value in enumerate(components):
            coefficients[1 << g] = value
        return cls(algebra, coefficients)

    @classmethod
    def from_tensor(cls, algebra: CliffordAlgebra, tensor: torch.Tensor):
        """Wraps a single multivector tensor ``[dim]`` (values become floats)."""
        assert tensor.ndim == 1, f"from_tensor: expected shape [dim], got {tuple(tensor.shape)}"
        return cls(algebra, tensor.tolist())

    def to_tensor(self, dtype=torch.float64) -> torch.Tensor:
        """Coefficients as a ``[dim]`` tensor on the algebra's device."""
        return torch.tensor([float(c) for c in self.coefficients], dtype=dtype,
                            device=self.algebra.device)

    def _check_same_algebra(self, other: "Multivector") -> None:
        if other.algebra.signature != self.algebra.signature:
            raise TypeError(
                f"Algebras must match: {self.algebra.signature} vs {other.algebra.signature}"
            )

    @property
    def scalar(self):
        """Coefficient of the scalar blade."""
        return self.coefficients[0]

    def __getitem__(self, blade: int):
        return self.coefficients[blade]

    def __add__(self, other):
        """Element-wise addition."""
        if not isinstance(other, Multivector):
            return NotImplemented
        self._check_same_algebra(other)
        return Multivector(self.algebra, [a + b for a, b in zip(self.coefficients, other.coefficients)])

    def __sub__(self, other):
        """Element-wise subtraction."""
        if not isinstance(other, Multivector):
            return NotImplemented
        self._check_same_algebra(other)
        return Multivector(self.algebra, [a - b for a, b in zip(self.coefficients, other.coefficients)])

    def __neg__(self):
        return Multivector(self.algebra, [-a for a in self.coefficients])

    def __mul__(self, other):
        """Geometric Product (A * B), or scaling by a ring value."""
        if isinstance(other, Multivector):
            self._check_same_algebra(other)
            return Multivector(self.algebra, self.algebra.multiply(self.coefficients, other.coefficients))
        return Multivector(self.algebra, [a * other for a in self.coefficients])

    def __rmul__(self, other):
        return Multivector(self.algebra, [other * a for a in self.coefficients])

    def __invert__(self):
        """Reversion (~A)."""
        return self.reverse()

    def reverse(self):
        return Multivector(self.algebra, [
            a if reverse_sign(i) > 0 else -a for i, a in enumerate(self.coefficients)
        ])

    def grade(self, k: int):
        """Projects to grade k."""
        return Multivector(self.algebra, [
            a if grade(i) == k else null_image(a) for i, a in enumerate(self.coefficients)
        ])

    def __eq__(self, other):
        if not isinstance(other, Multivector):
            return NotImplemented
        return (self.algebra.signature == other.algebra.signature
                and all(equal(a, b) for a, b in zip(self.coefficients, other.coefficients)))

    def __hash__(self):
        return hash((self.algebra.signature, self.coefficients))

    def __str__(self):
        return format_terms(self.coefficients, [blade_name(i) for i in range(self.algebra.dim)])

    def __repr__(self):
        return f"Multivector({self.algebra.signature}, {self})"
