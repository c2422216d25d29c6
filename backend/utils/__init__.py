from .money import (
    to_money,
    line_taxable_value,
    line_tax,
    invoice_subtotal,
    invoice_tax,
    grand_total,
)

__all__ = ['grand_total', 'invoice_subtotal', 'invoice_tax', 'line_tax', 'line_taxable_value', 'to_money']
