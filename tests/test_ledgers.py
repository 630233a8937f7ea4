"""Unit tests for the loan and investment ledgers.

Figures use round monthly rates so each step can be checked by hand.
"""

from decimal import Decimal

import pytest

from overpay_calc.errors import InfeasibleLoanError
from overpay_calc.ledgers import (
    InvestmentLedger,
    Loan,
    LoanLedger,
    annuity_payment,
    check_payment_covers_interest,
)
from overpay_calc.money import Amount
from overpay_calc.rates import FixedAnnualReturn


class FlatMonthly:
    """Return policy with a fixed monthly rate that records the periods asked for."""

    def __init__(self, rate: str) -> None:
        self.rate = Decimal(rate)
        self.periods = []

    def monthly_rate(self, period: int) -> Decimal:
        self.periods.append(period)
        return self.rate


def pounds(value) -> Amount:
    return Amount.from_major(value)


# ── Annuity payment ───────────────────────────────────────────────────

class TestAnnuityPayment:

    def test_zero_rate_is_linear(self):
        assert annuity_payment(pounds(12_000), Decimal(0), 24) == pounds(500)

    def test_zero_rate_rounds_up(self):
        # 1000p / 3 = 333.33p -> 334p
        assert annuity_payment(Amount(1000), Decimal(0), 3) == Amount(334)

    def test_standard_mortgage(self):
        """100k at 0.5% a month over 360 months is the textbook 599.55."""
        payment = annuity_payment(pounds(100_000), Decimal("0.005"), 360)
        assert abs(payment.pence - 59955) <= 1

    def test_rejects_zero_months(self):
        with pytest.raises(ValueError):
            annuity_payment(pounds(1000), Decimal(0), 0)


class TestLoan:

    def test_required_payment(self):
        loan = Loan(principal=pounds(12_000), remaining_months=24, apr_percent=Decimal(0))
        assert loan.required_monthly_payment == pounds(500)
        assert loan.first_month_interest == Amount(0)

    def test_invalid_term(self):
        with pytest.raises(ValueError):
            Loan(principal=pounds(1000), remaining_months=0, apr_percent=Decimal(1))

    def test_negative_apr(self):
        with pytest.raises(ValueError):
            Loan(principal=pounds(1000), remaining_months=12, apr_percent=Decimal(-1))

    def test_required_payment_beats_first_interest(self):
        loan = Loan(principal=pounds(250_000), remaining_months=300, apr_percent=Decimal("4.25"))
        assert loan.required_monthly_payment > loan.first_month_interest


# ── Loan ledger ───────────────────────────────────────────────────────

class TestLoanLedger:

    def test_single_step(self):
        ledger = LoanLedger(pounds(10_000), Decimal("0.01"))
        step = ledger.step(pounds(500))
        assert step.period == 1
        assert step.opening_balance == pounds(10_000)
        assert step.interest == pounds(100)
        assert step.principal == pounds(400)
        assert step.closing_balance == pounds(9_600)
        assert ledger.balance == pounds(9_600)

    def test_closing_equals_opening_minus_principal(self):
        ledger = LoanLedger(pounds(5_000), Decimal("0.0037"))
        for _ in range(10):
            step = ledger.step(pounds(300))
            assert step.closing_balance == step.opening_balance - step.principal

    def test_payment_below_interest_reduces_nothing(self):
        ledger = LoanLedger(pounds(10_000), Decimal("0.01"))
        step = ledger.step(pounds(50))
        assert step.principal == Amount(0)
        assert step.closing_balance == pounds(10_000)

    def test_final_step_never_goes_negative(self):
        ledger = LoanLedger(pounds(100), Decimal("0.01"))
        step = ledger.step(pounds(500))
        assert step.interest == pounds(1)
        assert step.principal == pounds(100)
        assert step.closing_balance == Amount(0)

    def test_cleared_ledger_is_inert(self):
        ledger = LoanLedger(pounds(100), Decimal("0.01"))
        ledger.step(pounds(500))
        step = ledger.step(pounds(500))
        assert step.interest == Amount(0)
        assert step.principal == Amount(0)
        assert step.closing_balance == Amount(0)

    def test_interest_rounded_to_penny(self):
        # 1234.56 * 0.00347 = 4.2839... -> 4.28
        ledger = LoanLedger(pounds("1234.56"), Decimal("0.00347"))
        assert ledger.step(pounds(100)).interest == pounds("4.28")


class TestPaymentCheck:

    def test_payment_equal_to_interest_is_infeasible(self):
        with pytest.raises(InfeasibleLoanError, match="balance will grow"):
            check_payment_covers_interest(pounds(100_000), Decimal("0.01"), pounds(1_000))

    def test_zero_payment_at_zero_rate_is_infeasible(self):
        with pytest.raises(InfeasibleLoanError):
            check_payment_covers_interest(pounds(1_000), Decimal(0), Amount(0))

    def test_cleared_balance_is_fine(self):
        check_payment_covers_interest(Amount(0), Decimal("0.01"), Amount(0))

    def test_sufficient_payment(self):
        check_payment_covers_interest(pounds(100_000), Decimal("0.01"), pounds("1000.01"))


# ── Investment ledger ─────────────────────────────────────────────────

class TestInvestmentLedger:

    def test_zero_return_sums_contributions(self):
        ledger = InvestmentLedger(FixedAnnualReturn(0))
        for _ in range(3):
            step = ledger.step(pounds(100))
            assert step.growth == Amount(0)
        assert ledger.pot == pounds(300)

    def test_contribution_added_after_growth(self):
        """The first contribution earns nothing in the month it is paid in."""
        ledger = InvestmentLedger(FlatMonthly("0.01"))
        first = ledger.step(pounds(100))
        assert first.growth == Amount(0)
        assert first.closing == pounds(100)

        second = ledger.step(pounds(100))
        assert second.opening == pounds(100)
        assert second.growth == pounds(1)
        assert second.closing == pounds(201)

    def test_opening_pot(self):
        ledger = InvestmentLedger(FlatMonthly("0.01"), opening=pounds(1_000))
        step = ledger.step(pounds(100))
        assert step.growth == pounds(10)
        assert step.closing == pounds(1_110)

    def test_policy_sees_one_based_periods(self):
        policy = FlatMonthly("0")
        ledger = InvestmentLedger(policy)
        for _ in range(3):
            ledger.step(pounds(1))
        assert policy.periods == [1, 2, 3]
