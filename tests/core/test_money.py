"""Tests for money and tax helpers."""

import pytest

from src.core.money import DEFAULT_TAX_RATE, compute_line_total, compute_tax, format_currency


class TestComputeLineTotal:
    def test_multiplies_quantity_and_price(self):
        assert compute_line_total(2, 50000) == 100000

    def test_zero_price(self):
        assert compute_line_total(3, 0) == 0

    def test_no_rounding(self):
        assert compute_line_total(3, 0.5) == pytest.approx(1.5)


class TestComputeTax:
    def test_default_rate_is_ppn(self):
        assert DEFAULT_TAX_RATE == 0.11
        assert compute_tax(130000) == pytest.approx(14300)

    def test_custom_rate(self):
        assert compute_tax(200000, 0.1) == pytest.approx(20000)

    def test_zero_subtotal(self):
        assert compute_tax(0) == 0


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "Rp 0"),
            (500, "Rp 500"),
            (144300, "Rp 144.300"),
            (1250000, "Rp 1.250.000"),
            (999.5, "Rp 1.000"),
            (999.4, "Rp 999"),
            (-5000, "-Rp 5.000"),
        ],
    )
    def test_formats_rupiah(self, amount, expected):
        assert format_currency(amount) == expected

    def test_idempotent(self):
        assert format_currency(14300.000000000002) == format_currency(14300)
