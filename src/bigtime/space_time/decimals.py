"""Arbitrary-precision decimal helpers.

Addition, subtraction and multiplication are carried out under ``EXACT``, a
context wide enough that they never round. Division is the only operation
that may lose digits, so it always goes through :func:`divide`, which keeps
terminating quotients exact and rounds the rest HALF_EVEN to the configured
number of significant digits.
"""

import functools
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Callable, Tuple, TypeVar, Union

from ..config import division_precision

Number = Union[Decimal, int, float, str]
F = TypeVar("F", bound=Callable)

EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

ZERO = Decimal(0)
ONE = Decimal(1)


def exact_arithmetic(func: F) -> F:
    """Run ``func`` with the exact decimal context active."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext(EXACT):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def big(value: Number) -> Decimal:
    """Convert a number or numeric string to a Decimal without rounding.

    Floats are converted through their shortest repr, so ``big(9.01)`` is
    ``Decimal("9.01")`` rather than the binary expansion.

    Raises:
        ValueError: If a string does not hold a finite decimal number
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a decimal number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a finite decimal number: {value!r}")
    return result


def integer(value: Number) -> int:
    """Integer part, rounding toward zero (-9.2 -> -9)."""
    return int(big(value))


def decimals(value: Number) -> Decimal:
    """Fractional part, with the sign of the value (-9.2 -> -0.2)."""
    value = big(value)
    return EXACT.subtract(value, value.to_integral_value(rounding=ROUND_DOWN))


def floor(value: Number) -> int:
    """Round toward negative infinity (-9.2 -> -10)."""
    return int(big(value).to_integral_value(rounding=ROUND_FLOOR))


def divide(dividend: Number, divisor: Number) -> Decimal:
    """Divide, rounding HALF_EVEN only when the quotient does not terminate.

    Args:
        dividend: Number to divide
        divisor: Non-zero number to divide by

    Returns:
        The quotient, exact if it fits in the division precision

    Raises:
        ZeroDivisionError: If divisor is zero
    """
    divisor = big(divisor)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    context = Context(
        prec=division_precision(), rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN
    )
    return context.divide(big(dividend), divisor)


def divide_and_remainder(dividend: Number, divisor: Number) -> Tuple[Decimal, Decimal]:
    """Truncating division: the quotient rounds toward zero and the remainder
    takes the sign of the dividend."""
    divisor = big(divisor)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    return EXACT.divmod(big(dividend), divisor)


def round_to(value: Number, places: int, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """Round to a number of decimal places; negative places round to tens,
    hundreds and so on."""
    return big(value).quantize(ONE.scaleb(-places), rounding=rounding, context=EXACT)
