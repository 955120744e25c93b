from __future__ import annotations

import math
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow, ROUND_DOWN, Rounded
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | str | int | float

# Fixed arithmetic context, independent of the calling thread's current context.
# Precision is unbounded, and Rounded and Inexact are trapped, so add, subtract and multiply
# always give the exact result. Only `divide` and `with_scale` round.
DIVISION_ROUNDING = ROUND_DOWN
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=DIVISION_ROUNDING,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Rounded, Inexact],
)

ONE = Decimal(1)


def _context(exact: bool = True, prec: int | None = None) -> Context:
    # Fresh copy per call; signal flags are recorded on the copy only
    context = EXACT_CONTEXT.copy()
    if not exact:
        context.traps[Rounded] = False
        context.traps[Inexact] = False
    if prec is not None:
        context.prec = prec
    return context


# region Conversion


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert supported scalar types into Decimal.

    Floats are converted via their shortest repr to avoid binary precision noise.

    Args:
        value: Input value as Decimal, string, int or float.

    Returns:
        Value converted to Decimal.
    """

    if isinstance(value, Decimal):
        return value

    if isinstance(value, (float, int)):
        return decimal_from_float(value)

    return Decimal(str(value))


def decimal_from_float(value: float) -> Decimal:
    """Convert a float into Decimal using its shortest round-trip representation.

    Integral floats carry no fractional digits, so `1.0` becomes `Decimal("1")` and
    `100.00` becomes `Decimal("100")`.

    Args:
        value: Finite float (ints are accepted too, bools are not).

    Returns:
        Decimal with the same digits as `repr($value)`, so `1e23` becomes `Decimal("1E+23")`.

    Raises:
        TypeError: If $value is a bool or not a number.
        ValueError: If $value is NaN or infinite.
    """
    # Raise: $value must be a float or int, but not a bool
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        raise TypeError(f"$value must be a float, but provided value is: {value!r}")

    if isinstance(value, int):
        return Decimal(value)

    # Raise: only finite numbers can be represented as an amount
    if not math.isfinite(value):
        raise ValueError(f"Cannot call `decimal_from_float` because $value ({value}) is not finite")

    result = Decimal(repr(value))
    if value.is_integer():
        return result.to_integral_value(context=_context())

    return result


def decimal_from_str(value: str) -> Decimal:
    """Parse a decimal string like '-1050.25' into Decimal.

    Args:
        value: Decimal literal. Surrounding whitespace and '_' separators are accepted.

    Returns:
        Parsed Decimal, with the scale exactly as written ('10.00' keeps 2 fractional digits).

    Raises:
        TypeError: If $value is not a string.
        ValueError: If $value is not a finite decimal literal.
    """
    # Raise: $value must be a string
    if not isinstance(value, str):
        raise TypeError(f"$value must be a string, but provided value is: {value!r}")

    try:
        result = Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError(f"Cannot call `decimal_from_str` because $value ('{value}') is not a decimal literal") from e

    # Raise: NaN and Infinity literals parse, but are not amounts
    if not result.is_finite():
        raise ValueError(f"Cannot call `decimal_from_str` because $value ('{value}') is not finite")

    return result


# endregion

# region Arithmetic


def add(augend: Decimal, addend: Decimal) -> Decimal:
    return _context().add(augend, addend)


def subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    return _context().subtract(minuend, subtrahend)


def multiply(multiplicand: Decimal, multiplier: Decimal) -> Decimal:
    return _context().multiply(multiplicand, multiplier)


def divide(dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
    """Divide $dividend by $divisor, keeping every digit down to $scale fraction digits.

    Precision is sized to the quotient's integer digits plus $scale, so large amounts never
    lose integer digits and non-terminating quotients stay bounded. Digits beyond that are
    cut off with `DIVISION_ROUNDING`; pass the result to `with_scale` to fix its scale.

    Args:
        dividend: Finite Decimal.
        divisor: Finite, non-zero Decimal.
        scale: Count of fraction digits that must be correct (>= 0).

    Raises:
        ZeroDivisionError: If $divisor is zero.
    """
    # Raise: $divisor must be non-zero
    if divisor.is_zero():
        raise ZeroDivisionError(f"Cannot call `divide` because $divisor ({divisor}) is zero")

    # Raise: $scale must be non-negative
    if scale < 0:
        raise ValueError(f"$scale must be >= 0, but provided value is: {scale}")

    # Quotient has at most (adjusted(dividend) - adjusted(divisor) + 1) integer digits
    integer_digits = dividend.adjusted() - divisor.adjusted() + 1
    prec = max(1, integer_digits + scale + 1)
    return _context(exact=False, prec=prec).divide(dividend, divisor)


# endregion

# region Scale


def get_scale(value: Decimal) -> int:
    """Return the count of fractional digits present in $value.

    Integral values written with a positive exponent (e.g. `Decimal("1E+2")`) have scale 0.

    Raises:
        ValueError: If $value is NaN or infinite.
    """
    # Raise: scale is undefined for special values
    if not value.is_finite():
        raise ValueError(f"Cannot call `get_scale` because $value ({value}) is not finite")

    exponent = value.as_tuple().exponent
    return max(0, -exponent)


def with_scale(value: Decimal, scale: int) -> Decimal:
    """Round or pad $value to exactly $scale fractional digits.

    Rounding uses `DIVISION_ROUNDING`.

    Args:
        value: Finite Decimal.
        scale: Target count of fractional digits (>= 0).

    Returns:
        Decimal with exactly $scale fractional digits.
    """
    # Raise: $scale must be non-negative
    if scale < 0:
        raise ValueError(f"$scale must be >= 0, but provided value is: {scale}")

    return value.quantize(Decimal(1).scaleb(-scale), context=_context(exact=False))


# endregion
