# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Generator signs.

Every imaginary generator squares to -1, +1 or 0. The sign tag decides
what that self-product does to a ring value, and is shared by the
Cayley-Dickson doubling (one tag per level) and the basis-blade product
(one tag per generator of a signature).
"""

from enum import Enum

from cayley.ring import null_image


_ALIASES = {
    "negative": -1, "neg": -1, "-": -1, "-1": -1, "elliptic": -1,
    "positive": 1, "pos": 1, "+": 1, "+1": 1, "1": 1, "hyperbolic": 1, "split": 1,
    "null": 0, "zero": 0, "0": 0, "degenerate": 0, "dual": 0,
}


class GeneratorSign(Enum):
    """What a generator squares to.

    Members:
        NEGATIVE: e^2 = -1 (ordinary imaginary unit).
        POSITIVE: e^2 = +1 (split / hyperbolic unit).
        NULL: e^2 = 0 (dual / degenerate unit).
    """

    NEGATIVE = -1
    POSITIVE = 1
    NULL = 0

    @property
    def square(self) -> int:
        """The integer the generator squares to."""
        return self.value

    @property
    def symbol(self) -> str:
        return {-1: "-", 1: "+", 0: "0"}[self.value]

    def apply(self, x):
        """Applies the generator's self-product to ``x``.

        Args:
            x: A ring value (number, tensor, pair or opaque value).

        Returns:
            ``-x`` for NEGATIVE, ``x`` for POSITIVE, the ring's zero for NULL.
        """
        if self is GeneratorSign.NEGATIVE:
            return -x
        if self is GeneratorSign.POSITIVE:
            return x
        return null_image(x)

    @classmethod
    def parse(cls, value) -> "GeneratorSign":
        """Reads a sign from a member, an integer square or a config string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        key = str(value).strip().lower()
        if key not in _ALIASES:
            raise ValueError(
                f"Unknown generator sign: {value!r}. "
                f"Use one of negative / positive / null"
            )
        return cls(_ALIASES[key])
