"""Fixed-point money for long amortization schedules.

Amounts are stored as an integer number of pence. Every operation that
involves a rate (interest, investment growth) rounds back to a whole penny
straight away, so no fractional-penny residue is carried from one month to
the next.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .utils import Number, to_decimal

PENCE_PER_UNIT = 100


def _round_pence(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


@dataclass(frozen=True, order=True)
class Amount:
    """An exact monetary amount in minor units (pence).

    Amounts may be negative (wealth is pot minus debt); the ledgers clamp
    their own balances at zero.
    """

    pence: int

    def __post_init__(self) -> None:
        if isinstance(self.pence, bool) or not isinstance(self.pence, int):
            raise TypeError(f"Amount expects integer pence, got {self.pence!r}")

    @classmethod
    def from_major(cls, value: Number) -> "Amount":
        """Build an amount from pounds, rounding to the nearest penny."""
        return cls(_round_pence(to_decimal(value) * PENCE_PER_UNIT))

    @classmethod
    def zero(cls) -> "Amount":
        return cls(0)

    def __add__(self, other: "Amount") -> "Amount":
        return Amount(self.pence + other.pence)

    def __sub__(self, other: "Amount") -> "Amount":
        return Amount(self.pence - other.pence)

    def __neg__(self) -> "Amount":
        return Amount(-self.pence)

    def __abs__(self) -> "Amount":
        return Amount(abs(self.pence))

    def __float__(self) -> float:
        return float(self.to_major())

    def min(self, other: "Amount") -> "Amount":
        return self if self.pence <= other.pence else other

    def max(self, other: "Amount") -> "Amount":
        return self if self.pence >= other.pence else other

    def times(self, factor: Decimal) -> "Amount":
        """Multiply by a rate or count and round to the nearest penny."""
        return Amount(_round_pence(Decimal(self.pence) * factor))

    def clamp_non_negative(self) -> "Amount":
        return self if self.pence >= 0 else Amount(0)

    def is_zero(self) -> bool:
        return self.pence == 0

    def is_negative(self) -> bool:
        return self.pence < 0

    def sign(self) -> int:
        return (self.pence > 0) - (self.pence < 0)

    def to_major(self) -> Decimal:
        """Return the amount in pounds as an exact two-place ``Decimal``."""
        return Decimal(self.pence).scaleb(-2)

    def __str__(self) -> str:
        return f"{self.to_major():.2f}"
