"""Single-period steppers for a loan balance and an investment pot.

``LoanLedger`` advances an amortizing balance one month at a time and
``InvestmentLedger`` does the same for a compounding pot. Both round every
interest or growth figure to the penny as it is produced. A ledger instance
belongs to a single calculation and is never shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal

from .data_models import AmortizationStep, InvestmentPotStep
from .errors import InfeasibleLoanError
from .money import Amount
from .rates import ReturnPolicy, monthly_rate_from_annual


def annuity_payment(balance: Amount, monthly_rate: Decimal, months: int) -> Amount:
    """Return the level monthly payment that clears ``balance`` in ``months``.

    The formula is:

        payment = P * r / (1 - (1 + r)^-n)

    where ``P`` is the balance, ``r`` is the monthly rate and ``n`` is the
    number of payments. When the rate is zero, the payment simplifies to
    ``P / n``. The result is rounded up to the next penny so that the
    schedule finishes within ``n`` months.
    """
    if months <= 0:
        raise ValueError("Term must be positive")
    if monthly_rate == 0:
        exact = Decimal(balance.pence) / Decimal(months)
    else:
        exact = Decimal(balance.pence) * monthly_rate / (1 - (1 + monthly_rate) ** -months)
    return Amount(int(exact.to_integral_value(rounding=ROUND_CEILING)))


def check_payment_covers_interest(balance: Amount, monthly_rate: Decimal, payment: Amount) -> None:
    """Raise ``InfeasibleLoanError`` unless ``payment`` beats the first month's interest."""
    if balance.pence <= 0:
        return
    interest = balance.times(monthly_rate)
    if payment <= interest:
        raise InfeasibleLoanError(
            f"Monthly payment {payment} does not exceed the first month's interest "
            f"{interest}. The loan balance will grow."
        )


@dataclass(frozen=True)
class Loan:
    """An outstanding loan at a fixed APR.

    Attributes
    ----------
    principal: Amount
        Outstanding balance today.
    remaining_months: int
        Months left on the original term (at least 1).
    apr_percent: Decimal
        Annual rate in percent, e.g. ``Decimal("4.25")``.
    """

    principal: Amount
    remaining_months: int
    apr_percent: Decimal

    def __post_init__(self) -> None:
        if self.remaining_months < 1:
            raise ValueError("Remaining term must be at least one month")
        if self.apr_percent < 0:
            raise ValueError("APR must not be negative")

    @property
    def monthly_rate(self) -> Decimal:
        return monthly_rate_from_annual(self.apr_percent)

    @property
    def required_monthly_payment(self) -> Amount:
        return annuity_payment(self.principal, self.monthly_rate, self.remaining_months)

    @property
    def first_month_interest(self) -> Amount:
        return self.principal.times(self.monthly_rate)


class LoanLedger:
    """Amortizes a balance one payment at a time."""

    def __init__(self, balance: Amount, monthly_rate: Decimal) -> None:
        self._balance = balance.clamp_non_negative()
        self._rate = monthly_rate
        self._period = 0

    @property
    def balance(self) -> Amount:
        return self._balance

    def step(self, payment: Amount, overpayment: Amount = Amount(0)) -> AmortizationStep:
        """Charge a month's interest and apply ``payment``.

        A payment smaller than the interest reduces nothing; the balance is
        left unchanged rather than capitalising the shortfall, so callers
        must reject such payments before simulating.
        """
        self._period += 1
        opening = self._balance
        interest = opening.times(self._rate)
        principal = (payment - interest).clamp_non_negative().min(opening)
        closing = (opening - principal).clamp_non_negative()
        self._balance = closing
        return AmortizationStep(
            period=self._period,
            opening_balance=opening,
            interest=interest,
            principal=principal,
            payment=payment,
            closing_balance=closing,
            overpayment=overpayment,
        )


class InvestmentLedger:
    """A pot that grows monthly and takes contributions at month end."""

    def __init__(self, policy: ReturnPolicy, opening: Amount = Amount(0)) -> None:
        self._policy = policy
        self._pot = opening
        self._period = 0

    @property
    def pot(self) -> Amount:
        return self._pot

    def step(self, contribution: Amount) -> InvestmentPotStep:
        self._period += 1
        opening = self._pot
        growth = opening.times(self._policy.monthly_rate(self._period))
        closing = opening + growth + contribution
        self._pot = closing
        return InvestmentPotStep(
            period=self._period,
            opening=opening,
            growth=growth,
            contribution=contribution,
            closing=closing,
        )
