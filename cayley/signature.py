# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Metric signatures for flat multivector algebras.

Generators are ordered by type: the first ``negative`` square to -1, the
next ``positive`` square to +1, and the remaining ones are null. Bit ``g``
of a blade index refers to generator ``g`` in this order.
"""

from dataclasses import dataclass
from typing import Iterable

from cayley.sign import GeneratorSign


@dataclass(frozen=True)
class Signature:
    """Generator counts of a Clifford algebra.

    Attributes:
        total (int): Number of generators n. The algebra has 2^n blades.
        negative (int): Generators squaring to -1.
        positive (int): Generators squaring to +1.
    """

    total: int
    negative: int = 0
    positive: int = 0

    def __post_init__(self):
        for field in ("total", "negative", "positive"):
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{field} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{field} must be non-negative, got {value}")
        if self.negative + self.positive > self.total:
            raise ValueError(
                f"negative + positive must be <= total, got "
                f"{self.negative} + {self.positive} > {self.total}"
            )

    @classmethod
    def from_pqr(cls, p: int, q: int = 0, r: int = 0) -> "Signature":
        """Builds from the usual ``Cl(p, q, r)`` counts (p positive, q negative, r null)."""
        return cls(p + q + r, negative=q, positive=p)

    @classmethod
    def from_signs(cls, signs: Iterable) -> "Signature":
        """Builds from one sign per generator.

        The signs must already be in generator order: negatives, then
        positives, then nulls.
        """
        signs = [GeneratorSign.parse(s) for s in signs]
        rank = {GeneratorSign.NEGATIVE: 0, GeneratorSign.POSITIVE: 1, GeneratorSign.NULL: 2}
        ranks = [rank[s] for s in signs]
        if ranks != sorted(ranks):
            raise ValueError(
                "Generator signs must be ordered negative, positive, null; "
                f"got {[s.name.lower() for s in signs]}"
            )
        return cls(
            len(signs),
            negative=signs.count(GeneratorSign.NEGATIVE),
            positive=signs.count(GeneratorSign.POSITIVE),
        )

    @property
    def null(self) -> int:
        """Generators squaring to 0."""
        return self.total - self.negative - self.positive

    @property
    def dim(self) -> int:
        """Number of basis blades (2^total)."""
        return 1 << self.total

    @property
    def neg_mask(self) -> int:
        return (1 << self.negative) - 1

    @property
    def pos_mask(self) -> int:
        return ((1 << (self.negative + self.positive)) - 1) ^ self.neg_mask

    @property
    def null_mask(self) -> int:
        return (self.dim - 1) ^ ((1 << (self.negative + self.positive)) - 1)

    def generator_sign(self, g: int) -> GeneratorSign:
        """Sign of generator ``g`` (0-based)."""
        if not 0 <= g < self.total:
            raise IndexError(f"generator {g} out of range for {self}")
        if g < self.negative:
            return GeneratorSign.NEGATIVE
        if g < self.negative + self.positive:
            return GeneratorSign.POSITIVE
        return GeneratorSign.NULL

    def __str__(self):
        return f"Cl({self.total}; neg={self.negative}, pos={self.positive}, null={self.null})"
