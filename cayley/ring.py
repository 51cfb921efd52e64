# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Base-ring capabilities used by the algebra constructions.

A base ring is any Python type with ``+``, ``-``, ``*`` and unary ``-``
(and ``/`` when division is needed). The constructions only ask a few
things of it: the conjugate of a value, the zero shaped like a value,
its identities, and how to flatten it into scalar coefficients.
Pair and opaque types register their own behaviour on these dispatchers.
"""

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from numbers import Number

import torch


RING_TYPES = {
    "int": int,
    "float": float,
    "fraction": Fraction,
    "decimal": Decimal,
}


def resolve_ring(name):
    """Resolve a ring name from configuration to a Python type.

    Types pass through unchanged.
    """
    if isinstance(name, type):
        return name
    key = str(name).lower()
    if key not in RING_TYPES:
        raise ValueError(f"Unknown ring: {name}. Available: {list(RING_TYPES.keys())}")
    return RING_TYPES[key]


@singledispatch
def conjugate(x):
    """Conjugate of a ring value.

    Values exposing ``conjugate()`` (pairs, opaque values, ``complex``,
    and the builtin reals, whose conjugate is themselves) use it.
    Anything else is treated as self-conjugate.
    """
    method = getattr(x, "conjugate", None)
    if callable(method):
        return method()
    return x


@conjugate.register
def _(x: torch.Tensor):
    return x.conj()


@singledispatch
def null_image(x):
    """The ring's additive identity, shaped like ``x``."""
    raise TypeError(f"No additive identity known for {type(x).__name__}")


@null_image.register
def _(x: Number):
    return type(x)(0)


@null_image.register
def _(x: torch.Tensor):
    return torch.zeros_like(x)


@singledispatch
def components(x) -> list:
    """Flatten a ring value into its scalar coefficients."""
    return [x]


@singledispatch
def equal(a, b) -> bool:
    """Exact equality of two ring values, as a plain bool."""
    return bool(a == b)


@equal.register
def _(a: torch.Tensor, b):
    if not isinstance(b, torch.Tensor):
        b = torch.as_tensor(b, dtype=a.dtype, device=a.device)
    return torch.equal(a, b)


def _is_tensor_ring(ring) -> bool:
    return isinstance(ring, type) and issubclass(ring, torch.Tensor)


def one_of(ring):
    """Multiplicative identity of a ring type."""
    if _is_tensor_ring(ring):
        return torch.ones(())
    factory = getattr(ring, "one", None)
    if factory is not None:
        return factory()
    return ring(1)


def zero_of(ring):
    """Additive identity of a ring type."""
    if _is_tensor_ring(ring):
        return torch.zeros(())
    factory = getattr(ring, "zero", None)
    if factory is not None:
        return factory()
    return ring(0)


def lift_into(ring, x):
    """Embed ``x`` (a scalar or a value of ``ring``) into ``ring``.

    Raises:
        TypeError: If converting ``x`` to a numeric ring would change its
            value (e.g. ``0.5`` into ``int``).
    """
    if _is_tensor_ring(ring):
        return x if isinstance(x, torch.Tensor) else torch.as_tensor(x)
    lift = getattr(ring, "lift", None)
    if lift is not None:
        return lift(x)
    if isinstance(x, ring):
        return x
    lifted = ring(x)
    if not equal(lifted, x):
        raise TypeError(f"Cannot lift {x!r} into {ring.__name__} without changing its value")
    return lifted


def from_components(ring, coefficients):
    """Inverse of :func:`components` for a ring type."""
    rebuild = None if _is_tensor_ring(ring) else getattr(ring, "from_coefficients", None)
    if rebuild is not None:
        return rebuild(coefficients)
    assert len(coefficients) == 1, (
        f"{ring.__name__}: expected 1 coefficient, got {len(coefficients)}"
    )
    return lift_into(ring, coefficients[0])


def dimension_of(ring) -> int:
    """Number of scalar coefficients in a value of ``ring``."""
    if _is_tensor_ring(ring):
        return 1
    return getattr(ring, "dimension", 1)


def scalar_of(ring):
    """The innermost scalar type underneath ``ring``."""
    if _is_tensor_ring(ring):
        return ring
    return getattr(ring, "scalar", ring)
