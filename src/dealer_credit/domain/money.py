"""Rupiah amounts and rounding rules shared by the credit kernel.

All money is ``Decimal`` whole Rupiah. Rounding happens only through the
helpers below so every figure is rounded at a defined point with a defined
mode.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

CURRENCY_UNIT = Decimal("1")
PERCENT_PRECISION = Decimal("0.01")
FEE_ROUNDING_STEP = Decimal("100000")

HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


def round_currency(amount: Decimal) -> Decimal:
    """Round to whole Rupiah, half-up."""
    return amount.quantize(CURRENCY_UNIT, rounding=ROUND_HALF_UP)


def ceil_currency(amount: Decimal) -> Decimal:
    """Round up to the next whole Rupiah."""
    return amount.quantize(CURRENCY_UNIT, rounding=ROUND_CEILING)


def round_to_step(amount: Decimal, step: Decimal = FEE_ROUNDING_STEP) -> Decimal:
    """Round to the nearest multiple of ``step`` (half-up)."""
    return (amount / step).quantize(CURRENCY_UNIT, rounding=ROUND_HALF_UP) * step


def round_percentage(value: Decimal) -> Decimal:
    """Round a percentage to 2 decimal places, half-up."""
    return value.quantize(PERCENT_PRECISION, rounding=ROUND_HALF_UP)


def format_rupiah(amount: Decimal) -> str:
    """
    Format an amount the way Indonesian price tags read.

    >>> format_rupiah(Decimal("150000000"))
    'Rp 150.000.000'
    """
    rounded = round_currency(amount)
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(int(rounded)):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"
