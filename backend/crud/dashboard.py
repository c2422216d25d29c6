from decimal import Decimal

from sqlalchemy.orm import Session

from config import LOW_STOCK_THRESHOLD
from crud.outstanding import get_outstanding
from models.invoices import Invoice, InvoiceType
from models.items import Item
from models.parties import PartyType
from schemas.reports import Dashboard, RecentTransaction
from utils.money import to_money


def get_dashboard(db: Session, recent_count: int = 5) -> Dashboard:
    total_sales = Decimal(0)
    total_purchase = Decimal(0)
    for invoice_type, amount in db.query(Invoice.type, Invoice.grand_total).all():
        if invoice_type == InvoiceType.SALES:
            total_sales += Decimal(amount)
        else:
            total_purchase += Decimal(amount)

    outstanding = get_outstanding(db)
    receivables = sum((row.current_balance for row in outstanding if row.type == PartyType.CUSTOMER), Decimal(0))
    payables = sum((row.current_balance for row in outstanding if row.type == PartyType.SUPPLIER), Decimal(0))

    low_stock = db.query(Item).filter(Item.stock < LOW_STOCK_THRESHOLD).count()

    recent = db.query(Invoice).order_by(Invoice.created_at.desc(), Invoice.id.desc()).limit(recent_count).all()

    return Dashboard(
        total_sales=to_money(total_sales),
        total_purchase=to_money(total_purchase),
        receivables=to_money(receivables),
        payables=to_money(payables),
        low_stock=low_stock,
        recent_transactions=[
            RecentTransaction(
                id=inv.id,
                invoice_no=inv.invoice_no,
                party=inv.party_name,
                amount=inv.grand_total,
                type="Sale" if inv.type == InvoiceType.SALES else "Purchase",
                date=inv.date,
            )
            for inv in recent
        ],
    )
