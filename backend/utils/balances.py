"""
Sign conventions shared by the party ledger and the outstanding report.

Both reports must agree on how each event moves a party's balance, so the
rules live here and nowhere else.
"""

from decimal import Decimal
from typing import Tuple

from models.invoices import InvoiceType
from models.parties import PartyType

# Sign applied to (debit, credit) when moving a party's balance.
# Customer balances are receivables: a sale (debit) raises them, a receipt lowers them.
# Supplier balances are payables: a purchase (credit) raises them, a payment lowers them.
BALANCE_SIGNS = {
    PartyType.CUSTOMER: (1, -1),
    PartyType.SUPPLIER: (-1, 1),
}

ZERO = Decimal(0)


def balance_delta(party_type: PartyType, debit=ZERO, credit=ZERO) -> Decimal:
    debit_sign, credit_sign = BALANCE_SIGNS[party_type]
    return debit_sign * Decimal(debit) + credit_sign * Decimal(credit)


def invoice_sides(invoice_type: InvoiceType, amount) -> Tuple[Decimal, Decimal]:
    """(debit, credit) for an invoice: sales are debits, purchases credits."""
    if invoice_type == InvoiceType.SALES:
        return Decimal(amount), ZERO
    return ZERO, Decimal(amount)


def settlement_sides(invoice_type: InvoiceType, amount) -> Tuple[Decimal, Decimal]:
    """(debit, credit) for the immediate settlement of a non-credit invoice."""
    debit, credit = invoice_sides(invoice_type, amount)
    return credit, debit


def payment_sides(party_type: PartyType, amount) -> Tuple[Decimal, Decimal]:
    """(debit, credit) for a payment, decided by the party's type.

    A supplier payment is money paid out (debit); a customer payment is money
    received (credit).
    """
    if party_type == PartyType.SUPPLIER:
        return Decimal(amount), ZERO
    return ZERO, Decimal(amount)
