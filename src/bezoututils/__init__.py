"""Bezout coefficient utilities via the Extended Euclidean Algorithm.

Solves s*a + t*b = gcd(a, b) for integers in a fixed 32-bit, fixed 64-bit or arbitrary precision regime, reduces the
coefficients to their minimal representative, and stores results as DER/PEM.

Typical usage example:

    res = solve(240, 46)  # BezoutResult(s=-9, t=47, gcd=2)
    res = shrink(res, 240, 46)  # BezoutResult(s=14, t=-73, gcd=2)
    solve(2**31 - 1, 2**31 - 2, "int32")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from bezoututils.codec import export_result
from bezoututils.codec import from_der
from bezoututils.codec import import_result
from bezoututils.codec import to_der
from bezoututils.eea import BezoutResult
from bezoututils.eea import shrink
from bezoututils.eea import solve
from bezoututils.eea import solve_minimal
from bezoututils.widths import ArithmeticOverflowError
from bezoututils.widths import BIG
from bezoututils.widths import INT32
from bezoututils.widths import INT64
from bezoututils.widths import IntWidth
from bezoututils.widths import WIDTHS

__version__ = "0.0.1"
__all__ = [
    "ArithmeticOverflowError",
    "BezoutResult",
    "BIG",
    "INT32",
    "INT64",
    "IntWidth",
    "WIDTHS",
    "export_result",
    "from_der",
    "import_result",
    "shrink",
    "solve",
    "solve_minimal",
    "to_der",
]
