from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

SUM_FRACTION_DIGITS = 10
# Largest power of ten a value may reach, in either direction.
MAX_DECIMAL_MAGNITUDE = 100

_QUANTUM = Decimal(1).scaleb(-SUM_FRACTION_DIGITS)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]{1,4})?")

# Bounded inputs fit well inside this precision, so additions stay exact.
# Any rounding during the sum traps instead of passing silently.
_SUM_PRECISION = 4 * MAX_DECIMAL_MAGNITUDE
_EXACT_CONTEXT = Context(
    prec=_SUM_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Inexact, Overflow],
)
_ROUNDING_CONTEXT = Context(
    prec=_SUM_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Overflow],
)


class InvalidNumberError(ValueError):
    pass


def parse_decimal(value: str) -> Decimal:
    if not isinstance(value, str) or not _DECIMAL_PATTERN.fullmatch(value):
        raise InvalidNumberError(f"invalid number: {value!r}")
    number = Decimal(value)
    if not number.is_zero() and (
        number.adjusted() > MAX_DECIMAL_MAGNITUDE
        or number.as_tuple().exponent < -MAX_DECIMAL_MAGNITUDE
    ):
        raise InvalidNumberError(f"number out of range: {value!r}")
    return number


def sum_decimal(values: Iterable[str]) -> str:
    """Sum decimal strings exactly and render with 10 fractional digits.

    Every value is parsed before anything is added, so an invalid entry
    anywhere in the sequence fails the whole call with InvalidNumberError.
    Values beyond 10**100, or with more than 100 fractional digits, count
    as invalid. The total is rounded half-to-even once, at the end.
    """
    numbers = [parse_decimal(value) for value in values]
    try:
        with localcontext(_EXACT_CONTEXT):
            total = sum(numbers, Decimal(0))
        quantized = total.quantize(_QUANTUM, context=_ROUNDING_CONTEXT)
    except (DecimalException, MemoryError) as exc:
        raise InvalidNumberError(f"sum failed: {exc!r}") from exc
    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return format(quantized, "f")
