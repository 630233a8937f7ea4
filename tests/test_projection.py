"""Tests for the simple-journey investment projections."""

import pytest

from overpay_calc.money import Amount
from overpay_calc.projection import InvestmentProjector
from overpay_calc.rates import FixedAnnualReturn


def pounds(value) -> Amount:
    return Amount.from_major(value)


@pytest.fixture
def flat():
    return InvestmentProjector(FixedAnnualReturn(0))


@pytest.fixture
def five_percent():
    return InvestmentProjector(FixedAnnualReturn(5))


class TestProjectDca:

    @pytest.mark.parametrize("contribution, months", [(300, 240), ("0.01", 1), ("123.45", 37)])
    def test_zero_return_is_contribution_times_months(self, flat, contribution, months):
        assert flat.project_dca(pounds(contribution), months) == Amount(pounds(contribution).pence * months)

    def test_nothing_to_invest(self, five_percent):
        assert five_percent.project_dca(pounds(100), 0) == Amount(0)
        assert five_percent.project_dca(Amount(0), 120) == Amount(0)

    def test_growth_exceeds_contributions(self, five_percent):
        assert five_percent.project_dca(pounds(100), 120) > pounds(12_000)

    def test_monotonic_in_return(self):
        values = [
            InvestmentProjector(FixedAnnualReturn(rate)).project_dca(pounds(200), 300)
            for rate in (0, 2, 4, 6, 8)
        ]
        assert values == sorted(values)
        assert len(set(values)) == len(values)


class TestRequiredAnnualReturn:

    def test_contributions_already_enough(self, flat):
        assert flat.required_annual_return(pounds(100), 120, pounds(12_000)) == 0
        assert flat.required_annual_return(pounds(100), 120, pounds(5_000)) == 0

    def test_degenerate_inputs(self, flat):
        assert flat.required_annual_return(Amount(0), 120, pounds(5_000)) == 0
        assert flat.required_annual_return(pounds(100), 0, pounds(5_000)) == 0
        assert flat.required_annual_return(pounds(100), 120, Amount(0)) == 0

    def test_recovers_projection_rate(self, five_percent, flat):
        target = five_percent.project_dca(pounds(100), 120)
        rate = flat.required_annual_return(pounds(100), 120, target)
        assert float(rate) == pytest.approx(5, abs=0.01)
