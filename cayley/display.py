# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Human-readable rendering of coefficient expansions."""

from typing import Sequence


def _is_zero(c) -> bool:
    try:
        return bool(c == 0)
    except (TypeError, RuntimeError):
        # tensors with more than one element have no single truth value
        return False


def format_terms(coefficients: Sequence, labels: Sequence[str]) -> str:
    """Renders ``sum(c * label)`` skipping zero coefficients.

    >>> format_terms([1, 0, -2, 3], ["1", "e1", "e2", "e12"])
    '1 - 2*e2 + 3*e12'
    """
    text = ""
    for c, label in zip(coefficients, labels):
        if _is_zero(c):
            continue
        term = str(c) if label == "1" else f"{c}*{label}"
        if not text:
            text = term
        elif term.startswith("-"):
            text += " - " + term[1:]
        else:
            text += " + " + term
    return text or "0"


def format_unit(sign: int, label: str) -> str:
    """Renders a signed basis element such as ``-e3`` (``0`` for sign 0)."""
    if sign == 0:
        return "0"
    return ("-" if sign < 0 else "") + label
