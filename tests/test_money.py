"""Unit tests for the fixed-point Amount type."""

from decimal import Decimal

import pytest

from overpay_calc.money import Amount


# ── Construction ──────────────────────────────────────────────────────

class TestConstruction:

    def test_from_major_rounds_half_up(self):
        assert Amount.from_major("1234.565").pence == 123457
        assert Amount.from_major("1234.564").pence == 123456

    def test_from_float_uses_decimal_string(self):
        """0.1 pounds is exactly 10 pence, not 10.000000000000000555."""
        assert Amount.from_major(0.1).pence == 10

    def test_from_int(self):
        assert Amount.from_major(250_000).pence == 25_000_000

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), "abc", None, True])
    def test_rejects_non_finite(self, bad):
        with pytest.raises(ValueError):
            Amount.from_major(bad)

    def test_requires_integer_pence(self):
        with pytest.raises(TypeError):
            Amount(1.5)


# ── Arithmetic ────────────────────────────────────────────────────────

class TestArithmetic:

    def test_add_sub(self):
        a, b = Amount(1050), Amount(250)
        assert a + b == Amount(1300)
        assert a - b == Amount(800)
        assert b - a == Amount(-800)

    def test_min_max(self):
        a, b = Amount(1), Amount(2)
        assert a.min(b) == a
        assert a.max(b) == b

    def test_times_rounds_to_nearest_penny(self):
        # 1000p * 0.00355 = 3.55p -> 4p
        assert Amount(1000).times(Decimal("0.00355")) == Amount(4)
        # 1000p * 0.00345 = 3.45p -> 3p
        assert Amount(1000).times(Decimal("0.00345")) == Amount(3)

    def test_clamp_non_negative(self):
        assert Amount(-5).clamp_non_negative() == Amount(0)
        assert Amount(5).clamp_non_negative() == Amount(5)

    def test_sign_and_predicates(self):
        assert Amount(-3).sign() == -1
        assert Amount(0).sign() == 0
        assert Amount(3).sign() == 1
        assert Amount(0).is_zero()
        assert Amount(-1).is_negative()
        assert abs(Amount(-7)) == Amount(7)
        assert -Amount(7) == Amount(-7)

    def test_ordering(self):
        assert Amount(1) < Amount(2)
        assert Amount(2) <= Amount(2)
        assert max([Amount(3), Amount(9), Amount(1)]) == Amount(9)


# ── Conversion ────────────────────────────────────────────────────────

class TestConversion:

    def test_to_major_is_exact(self):
        assert Amount(12345).to_major() == Decimal("123.45")

    def test_float(self):
        assert float(Amount(12345)) == pytest.approx(123.45)

    def test_str(self):
        assert str(Amount(12345)) == "123.45"
        assert str(Amount(-5)) == "-0.05"
        assert str(Amount(0)) == "0.00"
