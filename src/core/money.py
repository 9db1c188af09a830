"""
Money and tax helpers.

Amounts are plain floats; nothing here rounds except the display
formatter, which drops decimals the way the Rupiah is written.
"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_TAX_RATE = 0.11  # PPN
CURRENCY_SYMBOL = "Rp"
THOUSANDS_SEPARATOR = "."


def compute_line_total(quantity: float, unit_price: float) -> float:
    """Return quantity * unit_price. No validation, no rounding."""
    return quantity * unit_price


def compute_tax(subtotal: float, rate: float = DEFAULT_TAX_RATE) -> float:
    """Return the tax owed on a subtotal."""
    return subtotal * rate


def format_currency(
    amount: float,
    symbol: str = CURRENCY_SYMBOL,
    thousands_separator: str = THOUSANDS_SEPARATOR,
) -> str:
    """
    Format an amount for display, e.g. ``Rp 1.250.000``.

    Rounds half away from zero to whole units and groups thousands.
    Negative amounts get a leading minus: ``-Rp 5.000``.
    """
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    digits = f"{abs(int(rounded)):,}".replace(",", thousands_separator)
    return f"{sign}{symbol} {digits}"
