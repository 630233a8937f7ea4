"""Output helpers for the overpayment calculator.

This module renders journey results as plain text tables and converts them
into JSON-serialisable dictionaries. Money becomes float pounds rounded to
the penny and rates become float percentages.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from .data_models import (
    AmortizationStep,
    DualLedgerJourney,
    FairComparison,
    InvestmentProjection,
    LedgerPoint,
    PathResult,
    RepaymentJourney,
    Simulation,
)
from .money import Amount


def _money(amount: Amount) -> float:
    return float(amount)


def _rate(value: Optional[Decimal]) -> Optional[float]:
    return None if value is None else round(float(value), 6)


# ── Serialisation ─────────────────────────────────────────────────────

def step_to_dict(step: AmortizationStep) -> Dict[str, Any]:
    return {
        "period": step.period,
        "opening_balance": _money(step.opening_balance),
        "interest": _money(step.interest),
        "principal": _money(step.principal),
        "payment": _money(step.payment),
        "overpayment": _money(step.overpayment),
        "closing_balance": _money(step.closing_balance),
    }


def simulation_to_dict(sim: Simulation) -> Dict[str, Any]:
    return {
        "months": sim.months,
        "total_interest": _money(sim.total_interest),
        "payment": _money(sim.payment),
        "capped": sim.capped,
        "schedule": [step_to_dict(s) for s in sim.schedule],
    }


def point_to_dict(point: LedgerPoint) -> Dict[str, Any]:
    return {
        "month": point.month,
        "balance": _money(point.balance),
        "interest": _money(point.interest),
        "payment": _money(point.payment),
        "invest_pot": _money(point.invest_pot),
        "invest_contribution": _money(point.invest_contribution),
        "invest_growth": _money(point.invest_growth),
        "wealth": _money(point.wealth),
    }


def path_to_dict(path: PathResult) -> Dict[str, Any]:
    return {
        "months": path.months,
        "total_interest": _money(path.total_interest),
        "final_pot": _money(path.final_pot),
        "final_wealth": _money(path.final_wealth),
        "schedule": [point_to_dict(p) for p in path.schedule],
    }


def projection_to_dict(invest: InvestmentProjection) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "expected_annual_return_percent": _rate(invest.expected_annual_return_percent),
        "fv_invest": _money(invest.fv_invest),
        "delta_vs_overpay_simple": _money(invest.delta_vs_overpay_simple),
        "required_annual_return_percent": _rate(invest.required_annual_return_percent),
        "fair": None,
    }
    if invest.fair is not None:
        data["fair"] = {
            "reinvest_freed_payment_fv": _money(invest.fair.reinvest_freed_payment_fv),
            "delta_net_worth": _money(invest.fair.delta_net_worth),
        }
    return data


def journey_to_dict(journey: RepaymentJourney) -> Dict[str, Any]:
    """Serialise a simple journey.

    The full overpayment schedule is ``with_overpay["schedule"]``; it is not
    repeated at the top level.
    """
    return {
        "baseline": simulation_to_dict(journey.baseline),
        "with_overpay": simulation_to_dict(journey.with_overpay),
        "interest_saved": _money(journey.interest_saved),
        "months_saved": journey.months_saved,
        "invest": projection_to_dict(journey.invest) if journey.invest else None,
    }


def fair_to_dict(fair: FairComparison) -> Dict[str, Any]:
    return {
        "required_monthly_payment": _money(fair.required_monthly_payment),
        "invest_path": path_to_dict(fair.invest_path),
        "overpay_path": path_to_dict(fair.overpay_path),
        "delta_wealth_by_month": [_money(d) for d in fair.delta_wealth_by_month],
        "crossover_month": fair.crossover_month,
        "break_even_annual_return_percent": _rate(fair.break_even_annual_return_percent),
        "at_n": {
            "invest_pot": _money(fair.at_n.invest_pot),
            "overpay_pot": _money(fair.at_n.overpay_pot),
            "delta": _money(fair.at_n.delta),
        },
        "recommendation": fair.recommendation,
    }


def dual_ledger_to_dict(journey: DualLedgerJourney) -> Dict[str, Any]:
    return {
        "baseline": simulation_to_dict(journey.baseline),
        "with_overpay": simulation_to_dict(journey.with_overpay),
        "interest_saved": _money(journey.interest_saved),
        "months_saved": journey.months_saved,
        "required_monthly_payment": _money(journey.required_monthly_payment),
        "monthly_payment": _money(journey.monthly_payment),
        "fair": fair_to_dict(journey.fair),
    }


# ── Text output ───────────────────────────────────────────────────────

def print_summary(baseline: Simulation, with_overpay: Simulation, interest_saved: Amount, months_saved: int) -> None:
    """Print the baseline/overpayment comparison in a human‑readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Monthly payment    : {baseline.payment}")
    print(f"With overpayment   : {with_overpay.payment}")
    print(f"Baseline months    : {baseline.months}")
    print(f"Overpay months     : {with_overpay.months}")
    print(f"Baseline interest  : {baseline.total_interest}")
    print(f"Overpay interest   : {with_overpay.total_interest}")
    print(f"Interest saved     : {interest_saved}")
    if months_saved:
        print(f"Term reduction     : {months_saved} months")
    print("-" * 72)


def print_projection(invest: InvestmentProjection) -> None:
    print("Investing the overpayment instead")
    print("-" * 72)
    print(f"Expected return    : {invest.expected_annual_return_percent:.2f}%")
    print(f"Invested pot       : {invest.fv_invest}")
    print(f"Pot minus interest saved : {invest.delta_vs_overpay_simple}")
    print(f"Return to match interest saved : {invest.required_annual_return_percent:.2f}%")
    if invest.fair is not None:
        print(f"Freed payment pot  : {invest.fair.reinvest_freed_payment_fv}")
        print(f"Net worth delta    : {invest.fair.delta_net_worth}")
    print("-" * 72)


def print_fair_comparison(fair: FairComparison) -> None:
    """Print the end-of-horizon pots and the break-even figures."""
    print("Fair comparison")
    print("=" * 72)
    print(f"{'Metric':20s} {'Invest':>15s} {'Overpay':>15s} {'Difference':>15s}")
    rows = [
        ("final_pot", fair.invest_path.final_pot, fair.overpay_path.final_pot),
        ("final_wealth", fair.invest_path.final_wealth, fair.overpay_path.final_wealth),
        ("total_interest", fair.invest_path.total_interest, fair.overpay_path.total_interest),
    ]
    for key, v1, v2 in rows:
        diff = v2 - v1
        print(f"{key:20s} {_money(v1):15.2f} {_money(v2):15.2f} {_money(diff):15.2f}")
    print("=" * 72)
    if fair.break_even_annual_return_percent is None:
        print("Break-even return  : none between 0% and 100%")
    else:
        print(f"Break-even return  : {fair.break_even_annual_return_percent:.2f}%")
    if fair.crossover_month is None:
        print("Crossover month    : never")
    else:
        print(f"Crossover month    : {fair.crossover_month}")
    print(f"Recommendation     : {fair.recommendation}")


def print_schedule(schedule: Iterable[AmortizationStep]) -> None:
    """Print the amortization schedule as a simple table."""
    headers = ["Period", "StartBal", "Payment", "Principal", "Interest", "Overpay", "EndBal"]
    print("\t".join(headers))
    for step in schedule:
        row = [
            str(step.period),
            str(step.opening_balance),
            str(step.payment),
            str(step.principal),
            str(step.interest),
            str(step.overpayment),
            str(step.closing_balance),
        ]
        print("\t".join(row))


def print_ledger(points: List[LedgerPoint], title: str) -> None:
    print(title)
    print("\t".join(["Month", "Balance", "Payment", "Contrib", "Growth", "Pot", "Wealth"]))
    for p in points:
        print(
            "\t".join(
                [
                    str(p.month),
                    str(p.balance),
                    str(p.payment),
                    str(p.invest_contribution),
                    str(p.invest_growth),
                    str(p.invest_pot),
                    str(p.wealth),
                ]
            )
        )
