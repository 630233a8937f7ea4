"""Annual-to-monthly rate conversion and investment return policies.

Loan interest and investment growth both use the effective monthly rate
that compounds to the stated annual rate, ``(1 + annual) ** (1/12) - 1``,
rather than the nominal ``annual / 12``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from .utils import Number, to_decimal

_ONE_TWELFTH = Decimal(1) / Decimal(12)


def monthly_rate_from_annual(annual_percent: Number) -> Decimal:
    """Return the effective monthly decimal rate for an annual percentage.

    Negative rates are clamped to zero; a zero rate returns exactly
    ``Decimal(0)`` so callers can special-case it.
    """
    annual = to_decimal(annual_percent)
    if annual <= 0:
        return Decimal(0)
    return (1 + annual / 100) ** _ONE_TWELFTH - 1


class ReturnPolicy(Protocol):
    """Supplies the investment growth rate for a given month."""

    def monthly_rate(self, period: int) -> Decimal:
        ...


class FixedAnnualReturn:
    """The same annual return every month."""

    def __init__(self, annual_percent: Number) -> None:
        annual = to_decimal(annual_percent)
        self.annual_percent = annual if annual > 0 else Decimal(0)
        self._monthly = monthly_rate_from_annual(self.annual_percent)

    def monthly_rate(self, period: int) -> Decimal:
        return self._monthly

    def __repr__(self) -> str:
        return f"FixedAnnualReturn({self.annual_percent}%)"
