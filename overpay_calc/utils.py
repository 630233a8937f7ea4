"""Utility functions for the overpayment calculator.

This module provides helpers for turning user input into ``Decimal`` values
and for checking the numeric domain of those values before any schedule is
built.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, getcontext
from typing import Union

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a number or numeric string into a finite ``Decimal``.

    Floats go through ``str`` first so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion. Commas are stripped from strings.

    Raises
    ------
    ValueError
        If the value is not numeric, is a bool, or is NaN/infinite.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            cleaned = value.replace(",", "").strip() if isinstance(value, str) else str(value)
            result = Decimal(cleaned)
        except (InvalidOperation, TypeError, AttributeError) as exc:
            raise ValueError(f"Invalid numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Non-finite numeric value: {value!r}")
    return result


def to_whole_months(value: object) -> int:
    """Return ``value`` as an ``int`` when it is an integral number.

    Accepts ``24``, ``24.0`` and ``"24"``; rejects ``24.5`` and bools.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = to_decimal(value)  # type: ignore[arg-type]
    if number != number.to_integral_value():
        raise ValueError(f"Not a whole number of months: {value!r}")
    return int(number)
