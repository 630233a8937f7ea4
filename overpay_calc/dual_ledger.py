"""Dual-ledger simulation of "invest the overpayment" against "overpay".

Both paths start from the same loan and run for the same ``N`` months with
identical end-of-month contribution timing:

* Invest: pay the regular payment ``R`` on the loan and put the overpayment
  ``O`` into an investment pot every month.
* Overpay: pay ``R + O`` on the loan until it is cleared in month ``M``,
  then pay the whole ``R + O`` into the pot for months ``M + 1 .. N``.

Wealth in either path is the pot minus the remaining debt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from .data_models import FairPaths, FinalPots, LedgerPoint, PathResult
from .ledgers import InvestmentLedger, LoanLedger
from .money import Amount
from .rates import ReturnPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DualLedgerParams:
    """Loan and contribution inputs shared by both paths.

    ``payoff_month`` is clamped to ``horizon`` when it is larger.
    """

    principal: Amount
    horizon: int
    loan_rate: Decimal
    payment: Amount
    overpayment: Amount
    payoff_month: int

    def __post_init__(self) -> None:
        if self.horizon < 1:
            raise ValueError("Horizon must be at least one month")
        if self.payoff_month > self.horizon:
            object.__setattr__(self, "payoff_month", self.horizon)

    @property
    def snowball(self) -> Amount:
        return self.payment + self.overpayment

    def overpay_contribution(self, month: int) -> Amount:
        """What the overpay path invests in ``month``: nothing until the loan clears."""
        return Amount.zero() if month <= self.payoff_month else self.snowball

    def overpay_loan_payment(self, month: int) -> Amount:
        return self.snowball if month <= self.payoff_month else Amount.zero()


def _path_result(points: List[LedgerPoint], total_interest: Amount) -> PathResult:
    last = points[-1]
    return PathResult(
        months=len(points),
        schedule=points,
        total_interest=total_interest,
        final_pot=last.invest_pot,
        final_wealth=last.wealth,
    )


def simulate_paths(params: DualLedgerParams, policy: ReturnPolicy) -> FairPaths:
    """Run both paths month by month and return their full schedules."""
    invest_debt = LoanLedger(params.principal, params.loan_rate)
    invest_pot = InvestmentLedger(policy)
    overpay_debt = LoanLedger(params.principal, params.loan_rate)
    overpay_pot = InvestmentLedger(policy)

    invest_points: List[LedgerPoint] = []
    overpay_points: List[LedgerPoint] = []
    invest_interest = Amount.zero()
    overpay_interest = Amount.zero()

    for month in range(1, params.horizon + 1):
        loan_a = invest_debt.step(params.payment)
        pot_a = invest_pot.step(params.overpayment)
        invest_interest += loan_a.interest
        invest_points.append(
            LedgerPoint(
                month=month,
                balance=loan_a.closing_balance,
                interest=loan_a.interest,
                payment=params.payment,
                invest_pot=pot_a.closing,
                invest_contribution=pot_a.contribution,
                invest_growth=pot_a.growth,
                wealth=pot_a.closing - loan_a.closing_balance,
            )
        )

        payment_b = params.overpay_loan_payment(month)
        loan_b = overpay_debt.step(payment_b)
        pot_b = overpay_pot.step(params.overpay_contribution(month))
        overpay_interest += loan_b.interest
        overpay_points.append(
            LedgerPoint(
                month=month,
                balance=loan_b.closing_balance,
                interest=loan_b.interest,
                payment=payment_b,
                invest_pot=pot_b.closing,
                invest_contribution=pot_b.contribution,
                invest_growth=pot_b.growth,
                wealth=pot_b.closing - loan_b.closing_balance,
            )
        )

    at_n = FinalPots(invest_pot=invest_pot.pot, overpay_pot=overpay_pot.pot)
    logger.debug(
        "Dual ledger over %d months (payoff month %d): invest pot %s, overpay pot %s",
        params.horizon,
        params.payoff_month,
        at_n.invest_pot,
        at_n.overpay_pot,
    )
    return FairPaths(
        invest_path=_path_result(invest_points, invest_interest),
        overpay_path=_path_result(overpay_points, overpay_interest),
        at_n=at_n,
    )


def final_pots(params: DualLedgerParams, policy: ReturnPolicy) -> FinalPots:
    """Final pots of both paths without building the schedules.

    The pots do not depend on the loan balances, only on the contribution
    pattern, so only the two investment ledgers are stepped.
    """
    invest_pot = InvestmentLedger(policy)
    overpay_pot = InvestmentLedger(policy)
    for month in range(1, params.horizon + 1):
        invest_pot.step(params.overpayment)
        overpay_pot.step(params.overpay_contribution(month))
    return FinalPots(invest_pot=invest_pot.pot, overpay_pot=overpay_pot.pot)


def wealth_deltas(paths: FairPaths) -> List[Amount]:
    """Overpay wealth minus invest wealth for every month."""
    return [
        overpay.wealth - invest.wealth
        for invest, overpay in zip(paths.invest_path.schedule, paths.overpay_path.schedule)
    ]


def crossover_month(deltas: List[Amount]) -> Optional[int]:
    """First 1-based month in which the overpay path is at least as wealthy."""
    for month, delta in enumerate(deltas, start=1):
        if not delta.is_negative():
            return month
    return None
