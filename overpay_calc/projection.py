"""Investment projections for the simple repayment journey.

The simple journey compares investing the overpayment against the interest
that overpaying saves. ``required_annual_return`` answers that comparison
with a closed-form annuity factor; it does not model the payment freed up
after an early payoff, which is what the dual-ledger solver in
``overpay_calc.solver`` does.
"""

from __future__ import annotations

from decimal import Decimal

from . import config
from .ledgers import InvestmentLedger
from .money import Amount
from .rates import ReturnPolicy


def _annuity_factor(monthly_rate: Decimal, months: int) -> Decimal:
    if monthly_rate == 0:
        return Decimal(months)
    return ((1 + monthly_rate) ** months - 1) / monthly_rate


class InvestmentProjector:
    """Projects monthly contributions under a return policy."""

    def __init__(self, policy: ReturnPolicy) -> None:
        self.policy = policy

    def project_dca(self, contribution: Amount, months: int) -> Amount:
        """Future value of ``contribution`` invested at the end of each month."""
        if months <= 0 or contribution.pence <= 0:
            return Amount.zero()
        ledger = InvestmentLedger(self.policy)
        for _ in range(months):
            ledger.step(contribution)
        return ledger.pot

    def required_annual_return(self, contribution: Amount, months: int, target: Amount) -> Decimal:
        """Annual return (percent) at which ``contribution`` for ``months`` reaches ``target``.

        Returns zero when the contributions alone already reach the target.
        """
        if target.pence <= 0 or contribution.pence <= 0 or months <= 0:
            return Decimal(0)
        ratio = Decimal(target.pence) / Decimal(contribution.pence)
        if ratio <= months:
            return Decimal(0)

        low, high = Decimal(0), Decimal(config.LEGACY_MAX_MONTHLY_RATE)
        for _ in range(config.LEGACY_MAX_ITERATIONS):
            mid = (low + high) / 2
            factor = _annuity_factor(mid, months)
            if abs(factor - ratio) < Decimal("1e-10"):
                break
            if factor < ratio:
                low = mid
            else:
                high = mid

        monthly = (low + high) / 2
        return ((1 + monthly) ** 12 - 1) * 100
