import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from models.invoices import Invoice, InvoiceType, PaymentMode
from models.parties import Party
from models.payments import Payment
from schemas.reports import LedgerEntry
from utils.balances import balance_delta, invoice_sides, payment_sides, settlement_sides
from utils.money import to_money

logger = logging.getLogger("party_ledger")


def _in_range(query, column, start_date: Optional[date], end_date: Optional[date]):
    if start_date:
        query = query.filter(column >= start_date)
    if end_date:
        query = query.filter(column <= end_date)
    return query


def get_party_ledger(
    db: Session,
    party_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Optional[List[LedgerEntry]]:
    """
    Chronological ledger of a party's invoices and payments with a running balance.

    The balance starts from the party's opening balance and moves by the sign
    convention of the party's type (see utils.balances). A non-credit invoice is
    followed by a same-day settlement row, so only credit invoices stay open in
    the balance.

    Returns None when the party does not exist.
    """
    party = db.query(Party).filter(Party.id == party_id).first()
    if party is None:
        return None

    invoices = _in_range(
        db.query(Invoice).filter(Invoice.party_id == party_id), Invoice.date, start_date, end_date
    ).order_by(Invoice.id.asc()).all()
    payments = _in_range(
        db.query(Payment).filter(Payment.party_id == party_id), Payment.date, start_date, end_date
    ).order_by(Payment.id.asc()).all()

    transactions = []
    for inv in invoices:
        is_sale = inv.type == InvoiceType.SALES
        debit, credit = invoice_sides(inv.type, inv.grand_total)
        transactions.append({
            "id": inv.id,
            "date": inv.date,
            "ref": inv.invoice_no,
            "type": "SALE" if is_sale else "PURCHASE",
            "description": "Sale Invoice" if is_sale else "Purchase Invoice",
            "debit": debit,
            "credit": credit,
        })
        if inv.payment_mode != PaymentMode.CREDIT:
            debit, credit = settlement_sides(inv.type, inv.grand_total)
            transactions.append({
                "id": inv.id,
                "date": inv.date,
                "ref": inv.invoice_no,
                "type": "SETTLEMENT",
                "description": f"Paid at invoice ({inv.payment_mode.value})",
                "debit": debit,
                "credit": credit,
            })

    for pay in payments:
        debit, credit = payment_sides(party.type, pay.amount)
        transactions.append({
            "id": pay.id,
            "date": pay.date,
            "ref": pay.reference or "PAY",
            "type": "PAYMENT",
            "description": f"Payment ({pay.mode.value})",
            "debit": debit,
            "credit": credit,
        })

    # sort() is stable: same-day rows keep invoice-then-payment document order
    transactions.sort(key=lambda t: t["date"])

    balance = to_money(party.opening_balance)
    entries = []
    for t in transactions:
        balance = to_money(balance + balance_delta(party.type, t["debit"], t["credit"]))
        entries.append(LedgerEntry(**t, balance=balance))

    logger.info(f"Ledger for party {party_id}: {len(entries)} rows, closing balance {balance}")
    return entries
