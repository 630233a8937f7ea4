"""Exceptions raised by the overpayment calculator.

All of them derive from ``ValueError`` so callers that already guard
calculations with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Iterable, List


class CalculatorError(ValueError):
    """Base class for calculator failures."""


class ValidationError(CalculatorError):
    """One or more inputs are outside their domain.

    Attributes
    ----------
    problems: List[str]
        One message per failed check, in the order the checks ran.
    """

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems: List[str] = list(problems)
        super().__init__("Invalid inputs: " + "; ".join(self.problems))


class InfeasibleLoanError(CalculatorError):
    """The monthly payment does not exceed the first month's interest."""
