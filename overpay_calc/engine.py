"""Core loan schedule engine for the overpayment calculator.

This module runs a fixed monthly payment through a ``LoanLedger`` until the
balance is cleared, collecting each month's ``AmortizationStep`` together
with the total interest paid. Results are returned as a ``Simulation``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from . import config
from .data_models import AmortizationStep, Simulation
from .ledgers import LoanLedger, check_payment_covers_interest
from .money import Amount

logger = logging.getLogger(__name__)


def simulate_loan(
    balance: Amount,
    monthly_rate: Decimal,
    payment: Amount,
    *,
    term_months: int,
    overpayment: Amount = Amount(0),
) -> Simulation:
    """Amortize ``balance`` with a constant monthly ``payment``.

    Parameters
    ----------
    balance: Amount
        Opening balance.
    monthly_rate: Decimal
        Effective monthly interest rate as a decimal.
    payment: Amount
        Total paid each month, including ``overpayment``.
    term_months: int
        The loan's remaining term. The schedule is allowed to run
        ``config.SAFETY_MARGIN_MONTHS`` past it before it is cut off.
    overpayment: Amount
        The part of ``payment`` above the required payment; recorded on each
        step for display only.

    Returns
    -------
    Simulation
        Every month until the balance is exactly zero, the month count and
        the total interest.

    Raises
    ------
    InfeasibleLoanError
        If ``payment`` does not exceed the first month's interest.
    """
    check_payment_covers_interest(balance, monthly_rate, payment)

    ledger = LoanLedger(balance, monthly_rate)
    max_months = term_months + config.SAFETY_MARGIN_MONTHS
    schedule: List[AmortizationStep] = []
    total_interest = Amount.zero()

    while not ledger.balance.is_zero() and len(schedule) < max_months:
        step = ledger.step(payment, overpayment)
        schedule.append(step)
        total_interest += step.interest

    capped = not ledger.balance.is_zero()
    if capped:
        logger.warning(
            "Schedule stopped after %d months with %s still outstanding",
            max_months,
            ledger.balance,
        )
    logger.debug(
        "Simulated payment %s: %d months, total interest %s",
        payment,
        len(schedule),
        total_interest,
    )
    return Simulation(
        schedule=schedule,
        months=len(schedule),
        total_interest=total_interest,
        payment=payment,
        capped=capped,
    )
