"""Command‑line interface for the overpay-vs-invest calculator.

This module uses the ``click`` library to implement a multi‑command
interface. ``journey`` shows what a monthly overpayment saves on a loan and
``compare`` runs the fair overpay-vs-invest comparison. Results can be
printed to the terminal or exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from . import config
from .data_models import AmortizationStep, LedgerPoint
from .formatter import (
    dual_ledger_to_dict,
    journey_to_dict,
    print_fair_comparison,
    print_ledger,
    print_projection,
    print_schedule,
    print_summary,
)
from .journey import calculate_dual_ledger_journey, calculate_repayment_journey
from .utils import to_decimal


def parse_amount(value: str) -> Decimal:
    """Parse a numeric string with optional suffixes.

    Accepts plain numbers ("250000") and shorthand with ``k``/``m`` suffixes
    (e.g., "250k" meaning 250_000). Returns a ``Decimal``.
    """
    value = value.strip().lower()
    value = value.replace(",", "").lstrip("£")
    factor = Decimal(1)
    if value.endswith("k"):
        factor = Decimal(1_000)
        value = value[:-1]
    elif value.endswith("m"):
        factor = Decimal(1_000_000)
        value = value[:-1]
    try:
        return to_decimal(value) * factor
    except ValueError:
        raise click.BadParameter(f"Invalid amount: {value}")


def parse_percent(value: str) -> Decimal:
    """Parse a percentage string such as "4.25" or "4.25%"."""
    value = value.strip()
    if value.endswith("%"):
        value = value[:-1]
    try:
        return to_decimal(value)
    except ValueError:
        raise click.BadParameter(f"Invalid percentage: {value}")


def export_to_json(path: Path, data: Dict[str, Any]) -> None:
    """Export a serialised journey to a JSON file."""
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_schedule_to_csv(path: Path, schedule: List[AmortizationStep]) -> None:
    """Export a loan schedule to a CSV file."""
    header = [
        "Period",
        "Opening_Balance",
        "Payment",
        "Principal",
        "Interest",
        "Overpayment",
        "Closing_Balance",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for s in schedule:
            writer.writerow(
                [
                    s.period,
                    float(s.opening_balance),
                    float(s.payment),
                    float(s.principal),
                    float(s.interest),
                    float(s.overpayment),
                    float(s.closing_balance),
                ]
            )


def export_ledgers_to_csv(path: Path, invest: List[LedgerPoint], overpay: List[LedgerPoint]) -> None:
    """Export both dual-ledger paths side by side to a CSV file."""
    header = [
        "Month",
        "Invest_Balance",
        "Invest_Pot",
        "Invest_Wealth",
        "Overpay_Balance",
        "Overpay_Pot",
        "Overpay_Wealth",
        "Wealth_Delta",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for a, b in zip(invest, overpay):
            writer.writerow(
                [
                    a.month,
                    float(a.balance),
                    float(a.invest_pot),
                    float(a.wealth),
                    float(b.balance),
                    float(b.invest_pot),
                    float(b.wealth),
                    float(b.wealth - a.wealth),
                ]
            )


def _check_output(output: Optional[str]) -> Optional[Path]:
    if not output:
        return None
    path = Path(output)
    if path.suffix.lower() not in (".json", ".csv"):
        raise click.BadParameter("Unsupported output format; use .json or .csv")
    return path


def _preview(rows: list, max_rows: int = config.SCHEDULE_PREVIEW_ROWS) -> list:
    if len(rows) > max_rows:
        click.echo(f"Schedule has {len(rows)} rows; showing first {max_rows} rows.")
        return rows[:max_rows]
    return rows


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log calculation details to stderr")
def cli(verbose: bool) -> None:
    """Compare overpaying a loan with investing the same money."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Outstanding loan balance")
@click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)")
@click.option("--term", "-t", "term", required=True, type=int, help="Remaining term in months")
@click.option("--overpayment", "-o", "overpayment", default="0", show_default=True, help="Monthly overpayment")
@click.option("--expected-return", "expected_return", help="Expected annual investment return (percent)")
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def journey(
    principal: str,
    rate: str,
    term: int,
    overpayment: str,
    expected_return: Optional[str],
    output: Optional[str],
) -> None:
    """Show what a monthly overpayment saves in time and interest."""
    path = _check_output(output)
    try:
        result = calculate_repayment_journey(
            parse_amount(principal),
            term,
            parse_percent(rate),
            parse_amount(overpayment),
            expected_annual_return_percent=parse_percent(expected_return) if expected_return else None,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc))

    if path is not None:
        if path.suffix.lower() == ".json":
            export_to_json(path, journey_to_dict(result))
        else:
            export_schedule_to_csv(path, result.schedule)
        click.echo(f"Journey exported to {path}")
        return

    print_summary(result.baseline, result.with_overpay, result.interest_saved, result.months_saved)
    if result.invest is not None:
        print_projection(result.invest)
    print_schedule(_preview(result.schedule))


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Outstanding loan balance")
@click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)")
@click.option("--term", "-t", "term", required=True, type=int, help="Remaining term in months")
@click.option("--overpayment", "-o", "overpayment", required=True, help="Monthly overpayment")
@click.option("--expected-return", "expected_return", default="0", show_default=True, help="Expected annual investment return (percent)")
@click.option("--payment", "payment", help="Current monthly payment (defaults to the annuity payment)")
@click.option("--show-ledger", "show_ledger", is_flag=True, help="Print both monthly ledgers")
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def compare(
    principal: str,
    rate: str,
    term: int,
    overpayment: str,
    expected_return: str,
    payment: Optional[str],
    show_ledger: bool,
    output: Optional[str],
) -> None:
    """Compare overpaying with investing over the original loan term.

    Example:

        overpay-calc compare -p 250k -r 4.25 -t 300 -o 200 --expected-return 5
    """
    path = _check_output(output)
    try:
        result = calculate_dual_ledger_journey(
            parse_amount(principal),
            term,
            parse_percent(rate),
            parse_amount(overpayment),
            parse_percent(expected_return),
            current_monthly_payment=parse_amount(payment) if payment else None,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc))

    if path is not None:
        if path.suffix.lower() == ".json":
            export_to_json(path, dual_ledger_to_dict(result))
        else:
            export_ledgers_to_csv(path, result.fair.invest_path.schedule, result.fair.overpay_path.schedule)
        click.echo(f"Comparison exported to {path}")
        return

    print_summary(result.baseline, result.with_overpay, result.interest_saved, result.months_saved)
    print_fair_comparison(result.fair)
    if show_ledger:
        print_ledger(_preview(result.fair.invest_path.schedule), "Invest path")
        print_ledger(_preview(result.fair.overpay_path.schedule), "Overpay path")


if __name__ == "__main__":
    cli()
