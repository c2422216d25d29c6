"""
Decimal arithmetic for invoice lines and totals.

Every monetary result is quantized to two places with ROUND_HALF_UP, and
invoice totals are sums of the already-quantized line values, so the sum of
line amounts always equals the invoice totals exactly.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

TWO_PLACES = Decimal("0.01")
THREE_PLACES = Decimal("0.001")
HUNDRED = Decimal(100)


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    # str() keeps floats from dragging binary noise into the decimal
    return Decimal(str(value))


def to_money(value) -> Decimal:
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_quantity(value) -> Decimal:
    """Quantity at the three places the stock columns store."""
    return to_decimal(value).quantize(THREE_PLACES, rounding=ROUND_HALF_UP)


def line_taxable_value(qty, rate, discount_percent=0) -> Decimal:
    """qty * rate less the discount percentage."""
    gross = to_decimal(qty) * to_decimal(rate)
    return to_money(gross * (HUNDRED - to_decimal(discount_percent)) / HUNDRED)


def line_tax(taxable_value, tax_percent) -> Decimal:
    return to_money(to_decimal(taxable_value) * to_decimal(tax_percent) / HUNDRED)


def invoice_subtotal(taxable_values: Iterable) -> Decimal:
    return to_money(sum((to_money(v) for v in taxable_values), Decimal(0)))


def invoice_tax(taxes: Iterable) -> Decimal:
    return to_money(sum((to_money(t) for t in taxes), Decimal(0)))


def grand_total(subtotal, tax, round_off=0) -> Decimal:
    return to_money(to_decimal(subtotal) + to_decimal(tax) + to_decimal(round_off))
