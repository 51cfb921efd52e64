# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Algebra construction kernel.

Provides generator signs, Cayley-Dickson doubling (complex, split-complex,
dual, quaternion, octonion and deeper types), the opacity wrapper, and
flat multivector algebras of arbitrary signature driven by the
basis-blade product.
"""

__version__ = "0.1.0"

from .sign import GeneratorSign
from .signature import Signature
from .doubling import Pair, double, cayley_dickson, from_rect
from .opaque import Opaque, opaque
from .blade import blade_product, blade_name, grade, reverse_sign
from .algebra import CliffordAlgebra
from .multivector import Multivector
from .ring import conjugate, null_image, resolve_ring

from .catalog import (
    ALGEBRAS,
    complex_numbers,
    split_complex_numbers,
    dual_numbers,
    quaternions,
    split_quaternions,
    octonions,
    sedenions,
    dual_quaternions,
    clifford,
)

from .table import doubling_table, clifford_table, render_table

__all__ = [
    "__version__",
    # signs & signatures
    "GeneratorSign",
    "Signature",
    # doubling
    "Pair",
    "double",
    "cayley_dickson",
    "from_rect",
    "Opaque",
    "opaque",
    # blades
    "blade_product",
    "blade_name",
    "grade",
    "reverse_sign",
    "CliffordAlgebra",
    "Multivector",
    # ring helpers
    "conjugate",
    "null_image",
    "resolve_ring",
    # catalog
    "ALGEBRAS",
    "complex_numbers",
    "split_complex_numbers",
    "dual_numbers",
    "quaternions",
    "split_quaternions",
    "octonions",
    "sedenions",
    "dual_quaternions",
    "clifford",
    # tables
    "doubling_table",
    "clifford_table",
    "render_table",
]
