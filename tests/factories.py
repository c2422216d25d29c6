"""Direct row builders for report tests, bypassing invoice assembly."""

import itertools
from decimal import Decimal

from models.invoices import Invoice, InvoiceType, PaymentMode
from models.payments import Payment, PaymentMethod

_invoice_numbers = itertools.count(1)


def add_invoice(db, party, grand_total, on, invoice_type=InvoiceType.SALES, mode=PaymentMode.CREDIT):
    number = next(_invoice_numbers)
    invoice = Invoice(
        sequence_no=number,
        invoice_no=f"T-{number:05d}",
        date=on,
        party_id=party.id,
        party_name=party.name,
        type=invoice_type,
        subtotal=Decimal(grand_total),
        tax_amount=Decimal("0"),
        round_off=Decimal("0"),
        grand_total=Decimal(grand_total),
        payment_mode=mode,
    )
    db.add(invoice)
    db.commit()
    return invoice


def add_payment(db, party, amount, on, mode=PaymentMethod.CASH, reference=None):
    payment = Payment(party_id=party.id, amount=Decimal(amount), date=on, mode=mode, reference=reference)
    db.add(payment)
    db.commit()
    return payment
