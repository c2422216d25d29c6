from datetime import date
from decimal import Decimal

import pytest

from crud import outstanding, party_ledger
from models.invoices import InvoiceType, PaymentMode
from models.parties import Party, PartyType
from models.payments import PaymentMethod
from factories import add_invoice, add_payment


def row_for(db, party):
    return next(row for row in outstanding.get_outstanding(db) if row.id == party.id)


def test_customer_outstanding(db, customer):
    add_invoice(db, customer, "500", date(2026, 4, 1))
    add_payment(db, customer, "300", date(2026, 4, 2))

    row = row_for(db, customer)
    assert row.name == "Acme"
    assert row.type == PartyType.CUSTOMER
    assert row.opening_balance == Decimal("1000.00")
    assert row.total_credit_sales == Decimal("500.00")
    assert row.total_received == Decimal("300.00")
    assert row.current_balance == Decimal("1200.00")


def test_supplier_outstanding(db, supplier):
    add_invoice(db, supplier, "2000", date(2026, 4, 1), InvoiceType.PURCHASE)
    add_payment(db, supplier, "2000", date(2026, 4, 2))

    row = row_for(db, supplier)
    assert row.total_credit_sales == Decimal("2000.00")
    assert row.total_received == Decimal("2000.00")
    assert row.current_balance == Decimal("0.00")


def test_only_credit_invoices_are_outstanding(db, customer):
    add_invoice(db, customer, "500", date(2026, 4, 1), mode=PaymentMode.CASH)
    add_invoice(db, customer, "80", date(2026, 4, 1), mode=PaymentMode.CHEQUE)
    add_invoice(db, customer, "40", date(2026, 4, 1), mode=PaymentMode.CREDIT)

    row = row_for(db, customer)
    assert row.total_credit_sales == Decimal("40.00")
    assert row.current_balance == Decimal("1040.00")


def test_every_party_is_listed(db, customer, supplier):
    assert [row.id for row in outstanding.get_outstanding(db)] == [customer.id, supplier.id]
    assert [row.id for row in outstanding.get_outstanding(db, party_id=supplier.id)] == [supplier.id]


def test_payments_of_other_parties_are_ignored(db, customer, supplier):
    add_payment(db, supplier, "75", date(2026, 4, 1))
    assert row_for(db, customer).current_balance == Decimal("1000.00")
    assert row_for(db, supplier).current_balance == Decimal("-75.00")


@pytest.mark.parametrize("party_type, opening", [
    (PartyType.CUSTOMER, Decimal("1000")),
    (PartyType.CUSTOMER, Decimal("-250.50")),
    (PartyType.SUPPLIER, Decimal("0")),
    (PartyType.SUPPLIER, Decimal("4321.09")),
])
def test_final_ledger_balance_matches_outstanding(db, party_type, opening):
    party = Party(name="Mixed", mobile="9000000009", type=party_type, opening_balance=opening)
    db.add(party)
    db.commit()
    invoice_type = InvoiceType.SALES if party_type == PartyType.CUSTOMER else InvoiceType.PURCHASE

    add_invoice(db, party, "1180.00", date(2026, 4, 1), invoice_type, PaymentMode.CREDIT)
    add_invoice(db, party, "99.99", date(2026, 4, 1), invoice_type, PaymentMode.CASH)
    add_payment(db, party, "500", date(2026, 4, 3), PaymentMethod.CHEQUE)
    add_invoice(db, party, "12.34", date(2026, 4, 4), invoice_type, PaymentMode.ONLINE)
    add_invoice(db, party, "300.01", date(2026, 4, 7), invoice_type, PaymentMode.CREDIT)
    add_payment(db, party, "0.01", date(2026, 4, 9), PaymentMethod.ONLINE)

    ledger = party_ledger.get_party_ledger(db, party.id)
    assert ledger[-1].balance == row_for(db, party).current_balance
