# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Conjugation-invariant wrapper.

Outer doubling conjugates the real half of a pair. Wrapping the base ring
in :class:`Opaque` stops that: the wrapped value keeps its own arithmetic
but conjugates to itself. Dual quaternions are the motivating case, a
null doubling over opaque quaternions.
"""

from functools import lru_cache

from cayley.ring import (
    components,
    dimension_of,
    equal,
    from_components,
    lift_into,
    null_image,
    one_of,
    scalar_of,
    zero_of,
)


def _unwrap(x):
    return x.value if isinstance(x, Opaque) else x


class Opaque:
    """A ring value whose conjugate is itself.

    Attributes:
        value: The wrapped value.

    Class attributes (set by :func:`opaque`):
        inner: Ring type of the wrapped value.
    """

    __slots__ = ("value",)

    inner = None
    depth = 0
    signs = ()
    dimension = 1
    scalar = None

    def __init__(self, value):
        self.value = value

    @classmethod
    def one(cls):
        return cls(one_of(cls.inner))

    @classmethod
    def zero(cls):
        return cls(zero_of(cls.inner))

    @classmethod
    def lift(cls, x):
        if isinstance(x, cls):
            return x
        return cls(lift_into(cls.inner, _unwrap(x)))

    @classmethod
    def from_coefficients(cls, coefficients):
        return cls(from_components(cls.inner, list(coefficients)))

    def coefficients(self) -> list:
        return components(self.value)

    def conjugate(self):
        return self

    def __add__(self, other):
        return type(self)(self.value + _unwrap(other))

    def __radd__(self, other):
        return type(self)(_unwrap(other) + self.value)

    def __sub__(self, other):
        return type(self)(self.value - _unwrap(other))

    def __rsub__(self, other):
        return type(self)(_unwrap(other) - self.value)

    def __neg__(self):
        return type(self)(-self.value)

    def __mul__(self, other):
        return type(self)(self.value * _unwrap(other))

    def __rmul__(self, other):
        return type(self)(_unwrap(other) * self.value)

    def __truediv__(self, other):
        return type(self)(self.value / _unwrap(other))

    def __rtruediv__(self, other):
        return type(self)(_unwrap(other) / self.value)

    def __eq__(self, other):
        if not isinstance(other, Opaque):
            return NotImplemented
        return equal(self.value, other.value)

    def __hash__(self):
        return hash((Opaque, self.value))

    def __repr__(self):
        return f"Opaque({self.value!r})"


@null_image.register
def _(x: Opaque):
    return type(x)(null_image(x.value))


@components.register
def _(x: Opaque):
    return x.coefficients()


def opaque(inner):
    """Returns the opaque wrapper type bound to ring ``inner``.

    The bound type can serve as a :func:`~cayley.doubling.double` base,
    since it knows its identities and how to lift scalars. The same
    ``inner`` always returns the same class.
    """
    return _opaque(inner)


@lru_cache(maxsize=None)
def _opaque(inner):
    attrs = {
        "__slots__": (),
        "__module__": __name__,
        "inner": inner,
        "depth": getattr(inner, "depth", 0),
        "signs": getattr(inner, "signs", ()),
        "dimension": dimension_of(inner),
        "scalar": scalar_of(inner),
    }
    return type(f"Opaque[{getattr(inner, '__name__', repr(inner))}]", (Opaque,), attrs)
