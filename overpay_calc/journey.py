"""Entry points for the overpay-vs-invest calculator.

Two pure functions are exposed:

``calculate_repayment_journey``
    How much time and interest a monthly overpayment saves, with an optional
    projection of investing the overpayment instead.

``calculate_dual_ledger_journey``
    The fair comparison: both strategies run over the same horizon, with
    the freed-up payment snowballed into investments after an early payoff,
    plus the break-even return and crossover month.

Both validate every input before anything is simulated and raise
``ValidationError`` listing the problems.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from . import config
from .data_models import (
    DualLedgerJourney,
    FairComparison,
    FreedPaymentProjection,
    InvestmentProjection,
    RepaymentJourney,
    Simulation,
)
from .dual_ledger import DualLedgerParams, crossover_month, simulate_paths, wealth_deltas
from .engine import simulate_loan
from .errors import InfeasibleLoanError, ValidationError
from .ledgers import Loan
from .money import Amount
from .projection import InvestmentProjector
from .rates import FixedAnnualReturn
from .solver import break_even_annual_return
from .utils import Number, to_decimal, to_whole_months

logger = logging.getLogger(__name__)

RECOMMEND_OVERPAY = "overpay"
RECOMMEND_INVEST = "invest"
RECOMMEND_CLOSE = "close"


def validate_inputs(
    outstanding_balance: object,
    remaining_term_months: object,
    apr_percent: object,
    monthly_overpayment: object,
    current_monthly_payment: object = None,
    expected_annual_return_percent: object = None,
) -> None:
    """Check every input and raise ``ValidationError`` if any is out of domain."""
    problems: List[str] = []

    def finite(value: object) -> Optional[Decimal]:
        try:
            return to_decimal(value)  # type: ignore[arg-type]
        except ValueError:
            return None

    balance = finite(outstanding_balance)
    if balance is None or balance <= 0:
        problems.append("outstanding balance must be a finite number greater than 0")
    elif Amount.from_major(balance).is_zero():
        problems.append("outstanding balance must be at least one penny")

    try:
        term = to_whole_months(remaining_term_months)
    except ValueError:
        term = None
    if term is None or term < 1:
        problems.append("remaining term must be a whole number of months, at least 1")
    elif term > config.MAX_TERM_MONTHS:
        problems.append(f"remaining term must be at most {config.MAX_TERM_MONTHS} months")

    apr = finite(apr_percent)
    if apr is None or apr < 0:
        problems.append("APR must be a finite number, 0 or more")

    overpayment = finite(monthly_overpayment)
    if overpayment is None or overpayment < 0:
        problems.append("monthly overpayment must be a finite number, 0 or more")

    if current_monthly_payment is not None:
        payment = finite(current_monthly_payment)
        if payment is None or payment <= 0:
            problems.append("current monthly payment must be a finite number greater than 0")
        elif Amount.from_major(payment).is_zero():
            problems.append("current monthly payment must be at least one penny")

    if expected_annual_return_percent is not None:
        expected = finite(expected_annual_return_percent)
        if expected is None or expected < 0:
            problems.append("expected annual return must be a finite number, 0 or more")

    if problems:
        raise ValidationError(problems)


def _savings(baseline: Simulation, with_overpay: Simulation) -> Tuple[Amount, int]:
    interest_saved = (baseline.total_interest - with_overpay.total_interest).clamp_non_negative()
    months_saved = max(0, baseline.months - with_overpay.months)
    return interest_saved, months_saved


def recommend(delta: Amount, threshold: Amount = Amount(config.RECOMMENDATION_THRESHOLD_PENCE)) -> str:
    """Name the strategy that ends wealthier by more than ``threshold``."""
    if delta > threshold:
        return RECOMMEND_OVERPAY
    if delta < -threshold:
        return RECOMMEND_INVEST
    return RECOMMEND_CLOSE


def calculate_repayment_journey(
    outstanding_balance: Number,
    remaining_term_months: int,
    apr_percent: Number,
    monthly_overpayment: Number,
    expected_annual_return_percent: Optional[Number] = None,
    fair_compare: bool = True,
) -> RepaymentJourney:
    """Compare the standard schedule with one that overpays every month.

    The required payment is the annuity payment over the remaining term.
    When ``expected_annual_return_percent`` is given the result also holds
    an ``InvestmentProjection``: the value of investing the overpayment until
    the original end date, the return needed for that to match the interest
    saved, and (with ``fair_compare``) the value of investing the regular
    payment for the months saved.
    """
    validate_inputs(
        outstanding_balance,
        remaining_term_months,
        apr_percent,
        monthly_overpayment,
        expected_annual_return_percent=expected_annual_return_percent,
    )

    loan = Loan(
        principal=Amount.from_major(outstanding_balance),
        remaining_months=to_whole_months(remaining_term_months),
        apr_percent=to_decimal(apr_percent),
    )
    overpayment = Amount.from_major(monthly_overpayment)
    required = loan.required_monthly_payment

    baseline = simulate_loan(
        loan.principal, loan.monthly_rate, required, term_months=loan.remaining_months
    )
    with_overpay = simulate_loan(
        loan.principal,
        loan.monthly_rate,
        required + overpayment,
        term_months=loan.remaining_months,
        overpayment=overpayment,
    )
    interest_saved, months_saved = _savings(baseline, with_overpay)

    invest = None
    if expected_annual_return_percent is not None:
        expected = to_decimal(expected_annual_return_percent)
        projector = InvestmentProjector(FixedAnnualReturn(expected))
        fv_invest = projector.project_dca(overpayment, baseline.months)
        fair = None
        if fair_compare and months_saved > 0:
            reinvest_fv = projector.project_dca(required, months_saved)
            fair = FreedPaymentProjection(
                reinvest_freed_payment_fv=reinvest_fv,
                delta_net_worth=reinvest_fv - fv_invest,
            )
        invest = InvestmentProjection(
            expected_annual_return_percent=expected,
            fv_invest=fv_invest,
            delta_vs_overpay_simple=fv_invest - interest_saved,
            required_annual_return_percent=projector.required_annual_return(
                overpayment, baseline.months, interest_saved
            ),
            fair=fair,
        )

    return RepaymentJourney(
        baseline=baseline,
        with_overpay=with_overpay,
        interest_saved=interest_saved,
        months_saved=months_saved,
        invest=invest,
    )


def calculate_dual_ledger_journey(
    outstanding_balance: Number,
    remaining_term_months: int,
    apr_percent: Number,
    monthly_overpayment: Number,
    expected_annual_return_percent: Number,
    current_monthly_payment: Optional[Number] = None,
) -> DualLedgerJourney:
    """Run the fair overpay-vs-invest comparison.

    When ``current_monthly_payment`` is omitted the annuity payment over the
    remaining term is used. The comparison horizon is the longer of the
    baseline and overpayment schedules, so neither path is cut short.

    Raises
    ------
    ValidationError
        If any input is out of domain.
    InfeasibleLoanError
        If the monthly payment does not exceed the first month's interest.
    """
    validate_inputs(
        outstanding_balance,
        remaining_term_months,
        apr_percent,
        monthly_overpayment,
        current_monthly_payment=current_monthly_payment,
        expected_annual_return_percent=expected_annual_return_percent,
    )

    loan = Loan(
        principal=Amount.from_major(outstanding_balance),
        remaining_months=to_whole_months(remaining_term_months),
        apr_percent=to_decimal(apr_percent),
    )
    overpayment = Amount.from_major(monthly_overpayment)
    required = loan.required_monthly_payment
    if current_monthly_payment is None:
        payment = required
    else:
        payment = Amount.from_major(current_monthly_payment)

    if payment <= loan.first_month_interest:
        raise InfeasibleLoanError(
            "Current payment is less than the first month's interest. "
            "The loan balance will increase."
        )

    baseline = simulate_loan(
        loan.principal, loan.monthly_rate, payment, term_months=loan.remaining_months
    )
    with_overpay = simulate_loan(
        loan.principal,
        loan.monthly_rate,
        payment + overpayment,
        term_months=loan.remaining_months,
        overpayment=overpayment,
    )
    interest_saved, months_saved = _savings(baseline, with_overpay)

    horizon = max(baseline.months, with_overpay.months)
    params = DualLedgerParams(
        principal=loan.principal,
        horizon=horizon,
        loan_rate=loan.monthly_rate,
        payment=payment,
        overpayment=overpayment,
        payoff_month=with_overpay.months,
    )
    logger.debug("Comparison horizon %d months, overpay payoff month %d", horizon, params.payoff_month)

    paths = simulate_paths(params, FixedAnnualReturn(expected_annual_return_percent))
    deltas = wealth_deltas(paths)
    fair = FairComparison(
        required_monthly_payment=payment,
        invest_path=paths.invest_path,
        overpay_path=paths.overpay_path,
        delta_wealth_by_month=deltas,
        crossover_month=crossover_month(deltas),
        break_even_annual_return_percent=break_even_annual_return(params),
        at_n=paths.at_n,
        recommendation=recommend(paths.at_n.delta),
    )

    return DualLedgerJourney(
        baseline=baseline,
        with_overpay=with_overpay,
        interest_saved=interest_saved,
        months_saved=months_saved,
        required_monthly_payment=required,
        monthly_payment=payment,
        fair=fair,
    )
