"""Data models for the overpayment calculator.

This module defines dataclasses for the records produced by the ledgers and
simulators: single amortization steps and investment pot steps, whole loan
simulations, the per-month points of the two dual-ledger paths, and the
journey results handed back to callers. All monetary fields are ``Amount``
values; rates are ``Decimal`` percentages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .money import Amount


@dataclass(frozen=True)
class AmortizationStep:
    """One month of a loan schedule.

    Attributes
    ----------
    period: int
        1-based month index.
    opening_balance: Amount
        Balance before this month's interest and payment.
    interest: Amount
        Interest accrued on the opening balance, rounded to the penny.
    principal: Amount
        Reduction of the balance; never more than ``opening_balance``.
    payment: Amount
        The planned payment for the month (required payment plus any
        overpayment). In the final month only part of it may be needed.
    closing_balance: Amount
        ``opening_balance - principal``.
    overpayment: Amount
        The part of ``payment`` above the required payment.
    """

    period: int
    opening_balance: Amount
    interest: Amount
    principal: Amount
    payment: Amount
    closing_balance: Amount
    overpayment: Amount = field(default_factory=Amount.zero)


@dataclass
class Simulation:
    """A loan schedule run until the balance reaches zero.

    ``capped`` is True when the schedule was cut off by the safety limit
    instead of reaching a zero balance.
    """

    schedule: List[AmortizationStep]
    months: int
    total_interest: Amount
    payment: Amount
    capped: bool = False

    @property
    def total_principal(self) -> Amount:
        total = Amount.zero()
        for step in self.schedule:
            total += step.principal
        return total


@dataclass(frozen=True)
class InvestmentPotStep:
    """One month of a compounding pot. The contribution is added after growth."""

    period: int
    opening: Amount
    growth: Amount
    contribution: Amount
    closing: Amount


@dataclass(frozen=True)
class LedgerPoint:
    """One month of a dual-ledger path.

    ``wealth`` is the investment pot minus the remaining loan balance.
    """

    month: int
    balance: Amount
    interest: Amount
    payment: Amount
    invest_pot: Amount
    invest_contribution: Amount
    invest_growth: Amount
    wealth: Amount


@dataclass
class PathResult:
    """A full path of the fair comparison over the horizon."""

    months: int
    schedule: List[LedgerPoint]
    total_interest: Amount
    final_pot: Amount
    final_wealth: Amount


@dataclass(frozen=True)
class FinalPots:
    """Investment pots of both paths at the end of the horizon."""

    invest_pot: Amount
    overpay_pot: Amount

    @property
    def delta(self) -> Amount:
        """Overpay pot minus invest pot; positive means overpaying ended richer."""
        return self.overpay_pot - self.invest_pot


@dataclass
class FairPaths:
    invest_path: PathResult
    overpay_path: PathResult
    at_n: FinalPots


@dataclass
class FairComparison:
    """The apples-to-apples block of a dual-ledger journey."""

    required_monthly_payment: Amount
    invest_path: PathResult
    overpay_path: PathResult
    delta_wealth_by_month: List[Amount]
    crossover_month: Optional[int]
    break_even_annual_return_percent: Optional[Decimal]
    at_n: FinalPots
    recommendation: str


@dataclass
class DualLedgerJourney:
    """Result of :func:`overpay_calc.journey.calculate_dual_ledger_journey`.

    ``required_monthly_payment`` is the annuity payment that clears the loan
    over its remaining term; ``monthly_payment`` is the payment the schedules
    were actually run with (the borrower's current payment when given).
    """

    baseline: Simulation
    with_overpay: Simulation
    interest_saved: Amount
    months_saved: int
    required_monthly_payment: Amount
    monthly_payment: Amount
    fair: FairComparison


@dataclass
class FreedPaymentProjection:
    """Value of investing the regular payment once the loan is cleared early."""

    reinvest_freed_payment_fv: Amount
    delta_net_worth: Amount


@dataclass
class InvestmentProjection:
    """Investing the overpayment instead of paying it into the loan."""

    expected_annual_return_percent: Decimal
    fv_invest: Amount
    delta_vs_overpay_simple: Amount
    required_annual_return_percent: Decimal
    fair: Optional[FreedPaymentProjection] = None


@dataclass
class RepaymentJourney:
    """Result of :func:`overpay_calc.journey.calculate_repayment_journey`."""

    baseline: Simulation
    with_overpay: Simulation
    interest_saved: Amount
    months_saved: int
    invest: Optional[InvestmentProjection] = None

    @property
    def schedule(self) -> List[AmortizationStep]:
        return self.with_overpay.schedule
