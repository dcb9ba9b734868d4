"""The Extended Euclidean Algorithm and the reduction of its results to minimal Bezout coefficients.

`solve()` finds integers s, t such that s*a + t*b = gcd(a, b), with gcd >= 0. The coefficients it returns are valid
but usually not minimal; `shrink()` moves them to the representative with 0 <= s < |b / gcd|.

Both functions can run under a fixed 32-bit or 64-bit regime, in which case any intermediate value that would not fit
raises `ArithmeticOverflowError` rather than silently wrapping, or under arbitrary precision (the default).

Typical usage example:

    res = solve(120, 23)  # BezoutResult(s=-9, t=47, gcd=1)
    res = shrink(res, 120, 23)  # BezoutResult(s=14, t=-73, gcd=1)
    solve(2**40, 3, INT32)  # ValueError, operand out of range
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing
import warnings

from bezoututils.widths import BIG
from bezoututils.widths import get_width
from bezoututils.widths import IntWidth


class BezoutResult(typing.NamedTuple):
    """Bezout coefficients of a pair (a, b).

    Attributes:
        s: Coefficient of a.
        t: Coefficient of b.
        gcd: The non-negative greatest common divisor of a and b.
    """
    s: int
    t: int
    gcd: int

    def holds(self, a: int, b: int) -> bool:
        """Whether s*a + t*b == gcd."""
        return self.s * a + self.t * b == self.gcd

    def __str__(self) -> str:
        return f"({self.s},{self.t},{self.gcd})"


def solve(a: int, b: int, width: str | IntWidth = BIG) -> BezoutResult | None:
    """Solves the diophantine equation s*a + t*b = gcd(a, b).

    Runs the iterative Extended Euclidean Algorithm with truncating division, on the operands ordered by magnitude.
    The window (r2, s2, t2), (r1, s1, t1) slides forward until the next remainder is zero, at which point r1 is the
    gcd up to sign.

    Args:
        a: The first operand.
        b: The second operand.
        width: Integer regime to compute in. Defaults to arbitrary precision.

    Returns:
        The Bezout coefficients and gcd, or None if a == b == 0.

    Raises:
        TypeError: If an operand is not an integer.
        ValueError: If an operand does not fit into `width`.
        ArithmeticOverflowError: If an intermediate value does not fit into `width`.
    """
    width = get_width(width)
    width.validate(a, "a")
    width.validate(b, "b")

    swapped = abs(a) < abs(b)
    if swapped:
        a, b = b, a

    if b == 0:
        if a == 0:
            return None
        # Dividing a by itself terminates immediately with coefficients (0, 1), hence the extra flip.
        b = a
        swapped = not swapped

    r2, s2, t2 = a, 1, 0
    r1, s1, t1 = b, 0, 1
    while True:
        q, r0 = width.tdivmod(r2, r1)
        if r0 == 0:
            break
        width.check(q, "quotient")
        s0 = width.sub(s2, width.mul(q, s1, "q*s"), "s")
        t0 = width.sub(t2, width.mul(q, t1, "q*t"), "t")
        r2, s2, t2 = r1, s1, t1
        r1, s1, t1 = r0, s0, t0

    if r1 < 0:
        r1 = width.neg(r1, "gcd")
        s1 = width.neg(s1, "s")
        t1 = width.neg(t1, "t")

    if swapped:
        s1, t1 = t1, s1

    return BezoutResult(s1, t1, r1)


def shrink(result: BezoutResult, a: int, b: int, width: str | IntWidth = BIG) -> BezoutResult:
    """Reduces a result to the minimal Bezout coefficients.

    All valid s for fixed a, b form the residue class of `result.s` modulo b/gcd, each paired with a unique t. The
    minimal representative is the one with 0 <= s < |b/gcd|, with t recovered from the identity. Shrinking an already
    minimal result returns it unchanged.

    Args:
        result: Coefficients for (a, b), as returned by `solve()` or otherwise satisfying the identity.
        a: The first operand given to `solve()`.
        b: The second operand given to `solve()`. Must be nonzero.
        width: Integer regime to compute in. Defaults to arbitrary precision.

    Returns:
        A new result with the same gcd and minimal coefficients.

    Raises:
        ValueError: If `b` is zero, `result.gcd` is not a positive common divisor of a and b, or `result` does not
            satisfy the Bezout identity for (a, b).
        ArithmeticOverflowError: If an intermediate value does not fit into `width`.
    """
    width = get_width(width)
    width.validate(a, "a")
    width.validate(b, "b")
    s, t, gcd = result
    if b == 0:
        raise ValueError("b must be nonzero, its gcd-cofactor is the modulus of the reduction")
    if gcd <= 0 or a % gcd != 0 or b % gcd != 0:
        raise ValueError(f"{gcd} is not a positive common divisor of {a} and {b}")
    if not result.holds(a, b):
        raise ValueError(f"{result} does not satisfy the Bezout identity for ({a}, {b})")
    if a == 0:
        warnings.warn("Shrinking with a == 0, the only minimal coefficient is s = 0.", RuntimeWarning, stacklevel=2)

    a_gcod, _ = width.tdivmod(a, gcd)
    b_gcod, _ = width.tdivmod(b, gcd)

    q, s = width.tdivmod(s, b_gcod)
    width.check(q, "quotient")
    t = width.add(t, width.mul(q, a_gcod, "q*a/gcd"), "t")

    if s < 0:
        s = width.add(s, width.check(abs(b_gcod), "|b/gcd|"), "s")
        t = width.sub(t, a_gcod if b_gcod > 0 else width.neg(a_gcod, "-a/gcd"), "t")

    return BezoutResult(s, t, gcd)


def solve_minimal(a: int, b: int, width: str | IntWidth = BIG) -> BezoutResult | None:
    """Solves for the minimal Bezout coefficients in one go.

    Convenience wrapper of `solve()` followed by `shrink()`. When `b` is zero there is nothing to reduce by, and when
    `a` is zero the result (0, sign(b), |b|) is already minimal, so in both cases the plain `solve()` result is
    returned.

    Args:
        a: The first operand.
        b: The second operand.
        width: Integer regime to compute in. Defaults to arbitrary precision.

    Returns:
        The minimal Bezout coefficients and gcd, or None if a == b == 0.
    """
    res = solve(a, b, width)
    if res is None or a == 0 or b == 0:
        return res
    return shrink(res, a, b, width)
