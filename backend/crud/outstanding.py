import logging
from collections import defaultdict
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from models.invoices import Invoice, InvoiceType, PaymentMode
from models.parties import Party, PartyType
from models.payments import Payment
from schemas.reports import OutstandingRow
from utils.balances import balance_delta, invoice_sides, payment_sides
from utils.money import to_money

logger = logging.getLogger("outstanding")


def get_outstanding(db: Session, party_id: Optional[int] = None) -> List[OutstandingRow]:
    """
    Current receivable/payable per party without replaying the ledger.

    Only credit invoices count towards the balance; cash, online and cheque
    invoices were settled when they were raised. Every payment counts.
    """
    party_query = db.query(Party)
    invoice_query = db.query(Invoice.party_id, Invoice.type, Invoice.grand_total).filter(
        Invoice.payment_mode == PaymentMode.CREDIT
    )
    payment_query = db.query(Payment.party_id, Payment.amount)
    if party_id is not None:
        party_query = party_query.filter(Party.id == party_id)
        invoice_query = invoice_query.filter(Invoice.party_id == party_id)
        payment_query = payment_query.filter(Payment.party_id == party_id)

    credit_totals = defaultdict(lambda: {InvoiceType.SALES: Decimal(0), InvoiceType.PURCHASE: Decimal(0)})
    for inv_party_id, inv_type, amount in invoice_query.all():
        credit_totals[inv_party_id][inv_type] += Decimal(amount)

    paid_totals = defaultdict(Decimal)
    for pay_party_id, amount in payment_query.all():
        paid_totals[pay_party_id] += Decimal(amount)

    report = []
    for party in party_query.order_by(Party.id.asc()).all():
        totals = credit_totals[party.id]
        total_paid = paid_totals[party.id]

        sales_debit, _ = invoice_sides(InvoiceType.SALES, totals[InvoiceType.SALES])
        _, purchase_credit = invoice_sides(InvoiceType.PURCHASE, totals[InvoiceType.PURCHASE])
        paid_debit, paid_credit = payment_sides(party.type, total_paid)
        current_balance = Decimal(party.opening_balance) + balance_delta(
            party.type,
            debit=sales_debit + paid_debit,
            credit=purchase_credit + paid_credit,
        )

        relevant_total = totals[InvoiceType.SALES] if party.type == PartyType.CUSTOMER else totals[InvoiceType.PURCHASE]
        report.append(OutstandingRow(
            id=party.id,
            name=party.name,
            mobile=party.mobile,
            type=party.type,
            opening_balance=to_money(party.opening_balance),
            total_credit_sales=to_money(relevant_total),
            total_received=to_money(total_paid),
            current_balance=to_money(current_balance),
        ))

    logger.info(f"Outstanding computed for {len(report)} parties")
    return report
