"""Integer width regimes under which the Extended Euclidean Algorithm may run.

Python integers never overflow, so fixed-width behaviour is emulated: every quantity the algorithm stores is passed
through `IntWidth.check()`, which fails loudly instead of wrapping around. The arbitrary precision regime accepts
everything.

Typical usage example:

    INT32.check(2**31 - 1, "s")
    q, r = INT64.tdivmod(-20, 17)
    get_width("big")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class ArithmeticOverflowError(OverflowError):
    """Raised when an intermediate value leaves the representable range of a fixed width.

    Attributes:
        width: The width whose range was exceeded.
        value: The offending (mathematically exact) value.
    """

    def __init__(self, width: "IntWidth", value: int, what: str = "value") -> None:
        super().__init__(f"{what} = {value} does not fit into {width.name} [{width.min_value}, {width.max_value}]")
        self.width = width
        self.value = value


class IntWidth(typing.NamedTuple):
    """A signed integer regime, either two's complement of `bits` bits or arbitrary precision.

    Attributes:
        name: Short identifier, also used by the CLI.
        bits: Width in bits, None for arbitrary precision.
    """
    name: str
    bits: int | None = None

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def min_value(self) -> int | None:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int | None:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1

    def fits(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: int, what: str = "value") -> int:
        """Pass `value` through if it is representable in this width.

        Args:
            value: The exact value of an intermediate result.
            what: Name of the quantity, used in the error message.

        Returns:
            `value`, unchanged.

        Raises:
            ArithmeticOverflowError: If `value` is out of range.
        """
        if not self.fits(value):
            raise ArithmeticOverflowError(self, value, what)
        return value

    def validate(self, value: int, name: str) -> int:
        """Validates a caller supplied operand.

        Args:
            value: The operand.
            name: Name of the argument, used in error messages.

        Returns:
            `value`, unchanged.

        Raises:
            TypeError: If `value` is not an integer.
            ValueError: If `value` is out of range for this width.
        """
        # bool is an int subclass, but True/False as operands are almost certainly a bug.
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
        if not self.fits(value):
            raise ValueError(f"{name} = {value} is out of range for {self.name}")
        return value

    def add(self, x: int, y: int, what: str = "sum") -> int:
        return self.check(x + y, what)

    def sub(self, x: int, y: int, what: str = "difference") -> int:
        return self.check(x - y, what)

    def mul(self, x: int, y: int, what: str = "product") -> int:
        return self.check(x * y, what)

    def neg(self, x: int, what: str = "negation") -> int:
        return self.check(-x, what)

    def tdivmod(self, x: int, y: int) -> tuple[int, int]:
        """Truncating division with remainder.

        The quotient is rounded toward zero and the remainder takes the sign of the dividend, so that
        `x == q * y + r` and `abs(r) < abs(y)`. Python's own `divmod()` floors instead, which changes the
        coefficients the algorithm produces for negative operands.

        The remainder always fits when the operands do. The quotient is returned exact and unchecked, since
        `MIN / -1` only matters to callers that go on to use it.

        Args:
            x: Dividend.
            y: Divisor, must be nonzero.

        Returns:
            Tuple of (quotient, remainder).

        Raises:
            ZeroDivisionError: If `y` is zero.
        """
        q = abs(x) // abs(y)
        if (x < 0) != (y < 0):
            q = -q
        r = x - q * y
        return q, r


INT32 = IntWidth("int32", 32)
INT64 = IntWidth("int64", 64)
BIG = IntWidth("big")

WIDTHS: dict[str, IntWidth] = {w.name: w for w in (INT32, INT64, BIG)}


def get_width(width: str | IntWidth) -> IntWidth:
    """Resolves a width name or instance.

    Args:
        width: An `IntWidth` or one of the names in `WIDTHS`.

    Returns:
        The matching `IntWidth`.

    Raises:
        ValueError: If the name is unknown.
    """
    if isinstance(width, IntWidth):
        return width
    try:
        return WIDTHS[width]
    except KeyError:
        raise ValueError(f"Unknown width {width!r}, expected one of {', '.join(WIDTHS)}") from None
