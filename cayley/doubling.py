# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Cayley-Dickson doubling.

A doubled value is a pair ``(re, im)`` over a base ring ``A``. One formula
covers every flavour of doubling:

    (a, b) * (c, d) = (a c + S(d* b), d a + b c*)

where ``*`` on a single component is conjugation and ``S`` is the
generator sign of the level: negate for complex / quaternion / octonion
doubling, identity for split doubling, zero for dual doubling.

Pair *types* carry the base ring and the sign; pair *values* only carry
components. Types are built by :func:`double` and stacked by
:func:`cayley_dickson`, each level free to pick its own sign::

    Quaternion = cayley_dickson(float, 2)
    SplitComplex = double(float, "positive")
    DualComplex = cayley_dickson(float, 2, ["negative", "null"])
"""

from functools import lru_cache

from log import get_logger
from cayley.display import format_terms
from cayley.ring import (
    components,
    conjugate,
    dimension_of,
    equal,
    from_components,
    lift_into,
    null_image,
    one_of,
    scalar_of,
    zero_of,
)
from cayley.sign import GeneratorSign

logger = get_logger(__name__)


class Pair:
    """Value of a Cayley-Dickson doubled algebra.

    Do not instantiate ``Pair`` itself; concrete types come from
    :func:`double`.

    Attributes:
        re: Real half, a value of the base ring.
        im: Imaginary half, a value of the base ring.

    Class attributes:
        base: Base ring type.
        sign (GeneratorSign): What the new generator squares to.
        signs (tuple): Signs of every level, innermost first.
        depth (int): Number of doubling levels.
        dimension (int): Scalar coefficients per value (2^depth for scalar bases).
        scalar: Innermost scalar type.
    """

    __slots__ = ("re", "im")

    base = None
    sign = None
    signs = ()
    depth = 0
    dimension = 1
    scalar = None

    def __init__(self, re, im):
        if type(self).sign is None:
            raise TypeError("Pair is abstract, build a concrete type with double()")
        self.re = re
        self.im = im

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rect(cls, re, im):
        """Builds a value from its rectangular halves."""
        return cls(re, im)

    @classmethod
    def from_base(cls, x):
        """Embeds a base-ring value: ``(x, 0)`` with the zero taken from x."""
        return cls(x, GeneratorSign.NULL.apply(x))

    @classmethod
    def lift(cls, x):
        """Embeds a scalar (or a value of any ring below this one)."""
        if isinstance(x, cls):
            return x
        if isinstance(x, Pair) and x.depth >= cls.depth:
            raise TypeError(f"Cannot mix {type(x).__name__} with {cls.__name__}")
        return cls.from_base(lift_into(cls.base, x))

    @classmethod
    def one(cls):
        return cls(one_of(cls.base), zero_of(cls.base))

    @classmethod
    def zero(cls):
        return cls(zero_of(cls.base), zero_of(cls.base))

    @classmethod
    def from_coefficients(cls, coefficients):
        """Rebuilds a value from its flattened scalar coefficients.

        The real half's coefficients come first, recursively, so index k
        of a quaternion ``((a, b), (c, d))`` is ``[a, b, c, d][k]``.
        """
        coefficients = list(coefficients)
        assert len(coefficients) == cls.dimension, (
            f"{cls.__name__}: expected {cls.dimension} coefficients, "
            f"got {len(coefficients)}"
        )
        half = cls.dimension // 2
        return cls(
            from_components(cls.base, coefficients[:half]),
            from_components(cls.base, coefficients[half:]),
        )

    @classmethod
    def basis(cls, k: int):
        """The k-th unit of the flattened basis (0 is the identity)."""
        one, zero = one_of(cls.scalar), zero_of(cls.scalar)
        return cls.from_coefficients([one if n == k else zero for n in range(cls.dimension)])

    # ------------------------------------------------------------------
    # Destructuring
    # ------------------------------------------------------------------

    def to_rect(self):
        """Returns ``(re, im)``."""
        return self.re, self.im

    def coefficients(self) -> list:
        """Flattened scalar coefficients, real half first."""
        return components(self.re) + components(self.im)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def _coerce(self, other):
        if type(other) is type(self):
            return other
        return type(self).lift(other)

    def conjugate(self):
        """``(a, b)* = (a*, -b)``; recursive through nested pairs."""
        return type(self)(conjugate(self.re), -self.im)

    def __add__(self, other):
        other = self._coerce(other)
        return type(self)(self.re + other.re, self.im + other.im)

    def __radd__(self, other):
        return self._coerce(other) + self

    def __sub__(self, other):
        other = self._coerce(other)
        return type(self)(self.re - other.re, self.im - other.im)

    def __rsub__(self, other):
        return self._coerce(other) - self

    def __neg__(self):
        return type(self)(-self.re, -self.im)

    def __mul__(self, other):
        other = self._coerce(other)
        a, b = self.re, self.im
        c, d = other.re, other.im
        return type(self)(
            a * c + self.sign.apply(conjugate(d) * b),
            d * a + b * conjugate(c),
        )

    def __rmul__(self, other):
        return self._coerce(other) * self

    def __truediv__(self, other):
        """``x / y = (x y*) / n`` with ``n`` the real half of ``y y*``.

        ``n`` must be invertible in the base ring. A zero norm is not
        checked here; the base ring's own division failure propagates
        (``ZeroDivisionError`` for Python numbers).
        """
        other = self._coerce(other)
        num = self * other.conjugate()
        norm = (other * other.conjugate()).re
        return type(self)(num.re / norm, num.im / norm)

    def __rtruediv__(self, other):
        return self._coerce(other) / self

    def __pow__(self, exponent: int):
        if not isinstance(exponent, int) or exponent < 0:
            return NotImplemented
        result = type(self).one()
        for _ in range(exponent):
            result = result * self
        return result

    def inverse(self):
        """Multiplicative inverse, ``1 / x``."""
        return type(self).one() / self

    def norm_squared(self):
        """Scalar coefficient of ``x x*``."""
        return (self * self.conjugate()).coefficients()[0]

    # ------------------------------------------------------------------
    # Comparison & display
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return equal(self.re, other.re) and equal(self.im, other.im)

    def __hash__(self):
        return hash((type(self), self.re, self.im))

    def _rect(self):
        re = self.re._rect() if isinstance(self.re, Pair) else self.re
        im = self.im._rect() if isinstance(self.im, Pair) else self.im
        return re, im

    def __repr__(self):
        return f"{type(self).__name__}{self._rect()!r}"

    def __str__(self):
        labels = ["1"] + [f"e{k}" for k in range(1, type(self).dimension)]
        return format_terms(self.coefficients(), labels)


@null_image.register
def _(x: Pair):
    return type(x)(null_image(x.re), null_image(x.im))


@components.register
def _(x: Pair):
    return x.coefficients()


def double(base=float, sign=GeneratorSign.NEGATIVE):
    """Doubles a ring into pairs whose new generator squares to ``sign``.

    Args:
        base: Ring type of both halves: a numeric type (``int``, ``float``,
            ``Fraction``...), another pair type, or an opaque type.
        sign: A :class:`GeneratorSign` or its config spelling. Defaults to
            NEGATIVE (ordinary complex doubling).

    Returns:
        type: A :class:`Pair` subclass. The same ``(base, sign)`` always
        returns the same class.
    """
    return _double(base, GeneratorSign.parse(sign))


@lru_cache(maxsize=None)
def _double(base, sign: GeneratorSign):
    name = f"Pair[{getattr(base, '__name__', repr(base))}, {sign.symbol}]"
    base_depth = getattr(base, "depth", 0)
    attrs = {
        "__slots__": (),
        "__module__": __name__,
        "base": base,
        "sign": sign,
        "signs": getattr(base, "signs", ()) + (sign,),
        "depth": base_depth + 1,
        "dimension": 2 * dimension_of(base),
        "scalar": scalar_of(base),
    }
    cls = type(name, (Pair,), attrs)
    logger.debug("Built %s (dimension %d)", name, cls.dimension)
    return cls


def cayley_dickson(base=float, levels: int = 1, signs=GeneratorSign.NEGATIVE):
    """Stacks ``levels`` doublings on top of ``base``.

    Args:
        base: Scalar ring type (or any valid :func:`double` base).
        levels (int): Number of doublings. 0 returns ``base`` itself.
        signs: One sign for every level, or a sequence of ``levels``
            signs listed innermost first.

    Returns:
        type: The doubled type, of dimension ``2^levels`` over ``base``.

    Example:
        >>> Octonion = cayley_dickson(float, 3)
        >>> SplitQuaternion = cayley_dickson(float, 2, ["negative", "positive"])
    """
    if not isinstance(levels, int) or levels < 0:
        raise ValueError(f"levels must be a non-negative int, got {levels!r}")
    if isinstance(signs, (GeneratorSign, str, int)):
        signs = [signs] * levels
    signs = list(signs)
    if len(signs) != levels:
        raise ValueError(f"Expected {levels} signs (one per level), got {len(signs)}")

    ring = base
    for sign in signs:
        ring = double(ring, sign)
    return ring


def from_rect(cls, re, im):
    """Module-level shorthand for ``cls.from_rect(re, im)``."""
    return cls.from_rect(re, im)
