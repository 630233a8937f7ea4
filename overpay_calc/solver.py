"""Break-even investment return by bisection.

The final wealth gap between the two dual-ledger paths has no convenient
closed form once the snowball switch at the payoff month is included, so
the rate is found by bisection on the sign of the gap alone.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Optional

from . import config
from .dual_ledger import DualLedgerParams, final_pots
from .money import Amount
from .rates import FixedAnnualReturn

logger = logging.getLogger(__name__)


def find_break_even_rate(
    delta_at: Callable[[Decimal], Amount],
    *,
    low: Decimal = Decimal(config.BREAK_EVEN_LOW_PERCENT),
    high: Decimal = Decimal(config.BREAK_EVEN_HIGH_PERCENT),
    tolerance: Amount = Amount(config.BREAK_EVEN_TOLERANCE_PENCE),
    max_iterations: int = config.BREAK_EVEN_MAX_ITERATIONS,
) -> Optional[Decimal]:
    """Return the annual percentage in ``[low, high]`` where ``delta_at`` is zero.

    Parameters
    ----------
    delta_at: Callable[[Decimal], Amount]
        Wealth gap for an annual return in percent.
    low, high: Decimal
        The bracket, in annual percent.
    tolerance: Amount
        A gap strictly smaller than this in absolute value counts as zero.
    max_iterations: int
        Upper bound on the number of halvings.

    Returns
    -------
    Optional[Decimal]
        ``low`` if the gap is already negligible there, ``None`` if the gap
        has the same sign at both ends of the bracket, otherwise the
        bisection midpoint.
    """
    f_low = delta_at(low)
    if abs(f_low) < tolerance:
        return low

    f_high = delta_at(high)
    if f_low.sign() == f_high.sign():
        logger.debug("No sign change between %s%% and %s%%", low, high)
        return None

    for _ in range(max_iterations):
        mid = (low + high) / 2
        f_mid = delta_at(mid)
        if abs(f_mid) < tolerance:
            return mid
        if f_mid.sign() == f_low.sign():
            low, f_low = mid, f_mid
        else:
            high = mid
    return (low + high) / 2


def break_even_annual_return(params: DualLedgerParams) -> Optional[Decimal]:
    """Annual return at which both dual-ledger paths end with the same pot."""

    def delta_at(annual_percent: Decimal) -> Amount:
        return final_pots(params, FixedAnnualReturn(annual_percent)).delta

    rate = find_break_even_rate(delta_at)
    logger.debug("Break-even annual return: %s", rate)
    return rate
