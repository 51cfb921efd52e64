# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Multiplication tables of basis elements, for inspection and the CLI."""

from typing import List

from cayley.algebra import CliffordAlgebra
from cayley.blade import blade_name
from cayley.display import format_terms, format_unit


def _unit_entry(coefficients, labels) -> str:
    nonzero = [(c, label) for c, label in zip(coefficients, labels) if c != 0]
    if not nonzero:
        return "0"
    if len(nonzero) == 1 and nonzero[0][0] in (1, -1):
        c, label = nonzero[0]
        return format_unit(1 if c > 0 else -1, label)
    return format_terms(coefficients, labels)


def doubling_table(pair_type) -> List[List[str]]:
    """Products of the flattened basis units of a Cayley-Dickson type.

    Row ``a``, column ``b`` holds ``unit_a * unit_b``. The first row and
    column hold the labels ``1, e1, e2, ...``.
    """
    labels = ["1"] + [f"e{k}" for k in range(1, pair_type.dimension)]
    units = [pair_type.basis(k) for k in range(pair_type.dimension)]
    rows = [[""] + labels]
    for a, label in zip(units, labels):
        rows.append([label] + [_unit_entry((a * b).coefficients(), labels) for b in units])
    return rows


def clifford_table(algebra: CliffordAlgebra) -> List[List[str]]:
    """Products of the basis blades of a Clifford algebra."""
    labels = [blade_name(i) for i in range(algebra.dim)]
    rows = [[""] + labels]
    for i in range(algebra.dim):
        row = [labels[i]]
        for j in range(algebra.dim):
            entry = algebra.product(i, j)
            row.append("0" if entry is None else format_unit(entry[0], labels[entry[1]]))
        rows.append(row)
    return rows


def render_table(rows: List[List[str]]) -> List[str]:
    """Right-aligns every column; returns one string per row."""
    widths = [max(len(row[c]) for row in rows) for c in range(len(rows[0]))]
    return [" ".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in rows]
