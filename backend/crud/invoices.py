import logging
from datetime import timedelta
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from config import CREDIT_DUE_DAYS, SALES_INVOICE_PREFIX, PURCHASE_INVOICE_PREFIX
from crud import stock_ledger
from database import unit_of_work
from errors import ValidationError
from models.invoices import Invoice, InvoiceType, PaymentMode
from models.invoice_lines import InvoiceLine
from models.items import Item
from models.parties import Party, PartyType
from schemas.invoices import InvoiceCreate, InvoiceLineCreate
from utils.money import (
    to_decimal,
    to_money,
    to_quantity,
    line_taxable_value,
    line_tax,
    invoice_subtotal,
    invoice_tax,
    grand_total,
)

logger = logging.getLogger("invoices")

# Which kind of party each invoice direction is raised against
PARTY_TYPE_FOR_INVOICE = {
    InvoiceType.SALES: PartyType.CUSTOMER,
    InvoiceType.PURCHASE: PartyType.SUPPLIER,
}

INVOICE_PREFIX = {
    InvoiceType.SALES: SALES_INVOICE_PREFIX,
    InvoiceType.PURCHASE: PURCHASE_INVOICE_PREFIX,
}


def _check_percent(value: Decimal, label: str, position: int):
    if value < 0 or value > 100:
        raise ValidationError(f"Line {position}: {label} must be between 0 and 100, got {value}.")


def _build_line(db: Session, position: int, line_data: InvoiceLineCreate) -> InvoiceLine:
    qty = to_quantity(line_data.qty)
    rate = to_decimal(line_data.rate)
    discount_percent = to_decimal(line_data.discount_percent)
    if qty <= 0:
        raise ValidationError(f"Line {position}: quantity must be greater than zero, got {qty}.")
    if rate < 0:
        raise ValidationError(f"Line {position}: rate cannot be negative, got {rate}.")
    _check_percent(discount_percent, "discount percent", position)

    item = None
    if line_data.item_id is not None:
        item = db.query(Item).filter(Item.id == line_data.item_id).first()

    # Snapshot name and tax from the item master so later edits never change the invoice
    name = line_data.name or (item.name if item else None)
    if not name:
        raise ValidationError(f"Line {position}: a name is required for lines without a known item.")
    if line_data.tax_percent is not None:
        tax_percent = to_decimal(line_data.tax_percent)
    else:
        tax_percent = to_decimal(item.tax_percent) if item else Decimal(0)
    _check_percent(tax_percent, "tax percent", position)

    amount = line_taxable_value(qty, rate, discount_percent)
    return InvoiceLine(
        position=position,
        item_id=line_data.item_id,
        name=name,
        qty=qty,
        rate=rate,
        discount_percent=discount_percent,
        tax_percent=tax_percent,
        amount=amount,
        tax=line_tax(amount, tax_percent),
    )


def _next_invoice_number(db: Session, invoice_type: InvoiceType):
    last_sequence_no = db.query(func.max(Invoice.sequence_no)).filter(Invoice.type == invoice_type).scalar() or 0
    next_sequence_no = last_sequence_no + 1
    return next_sequence_no, f"{INVOICE_PREFIX[invoice_type]}-{next_sequence_no:05d}"


def create_invoice(db: Session, invoice: InvoiceCreate) -> Invoice:
    """
    Assemble, persist and apply an invoice.

    The invoice row, its lines, every stock update and every stock movement are
    written in a single transaction: either all of it is committed or none.

    Raises:
        ValidationError: empty cart, bad line values, unknown or wrong-type party.
        PartialApplicationError: a stock update failed; the invoice was rolled back.
        StorageError: the database rejected the write.
    """
    if not invoice.lines:
        raise ValidationError("Invoice must contain at least one line.")

    party = db.query(Party).filter(Party.id == invoice.party_id).first()
    if party is None:
        logger.warning(f"Invoice rejected: party {invoice.party_id} not found")
        raise ValidationError(f"Party with ID {invoice.party_id} not found.")
    expected_type = PARTY_TYPE_FOR_INVOICE[invoice.type]
    if party.type != expected_type:
        logger.warning(f"Invoice rejected: party {party.id} is a {party.type.value}, {invoice.type.value} needs a {expected_type.value}")
        raise ValidationError(f"{invoice.type.value} invoices must be raised against a {expected_type.value}.")

    db_lines = [_build_line(db, position, line_data) for position, line_data in enumerate(invoice.lines, start=1)]

    subtotal = invoice_subtotal(line.amount for line in db_lines)
    tax_amount = invoice_tax(line.tax for line in db_lines)
    round_off = to_money(invoice.round_off)
    due_date = None
    if invoice.payment_mode == PaymentMode.CREDIT:
        due_date = invoice.date + timedelta(days=CREDIT_DUE_DAYS)

    with unit_of_work(db):
        sequence_no, invoice_no = _next_invoice_number(db, invoice.type)
        db_invoice = Invoice(
            sequence_no=sequence_no,
            invoice_no=invoice_no,
            date=invoice.date,
            party_id=party.id,
            party_name=party.name,
            type=invoice.type,
            subtotal=subtotal,
            tax_amount=tax_amount,
            round_off=round_off,
            grand_total=grand_total(subtotal, tax_amount, round_off),
            payment_mode=invoice.payment_mode,
            payment_details=invoice.payment_details,
            due_date=due_date,
            lines=db_lines,
        )
        db.add(db_invoice)
        db.flush()
        stock_ledger.apply_invoice(db, db_invoice)

    db.refresh(db_invoice)
    logger.info(f"{db_invoice.type.value} invoice {db_invoice.invoice_no} (ID: {db_invoice.id}) created for party {party.id}, grand total {db_invoice.grand_total}")
    return db_invoice


def get_invoice(db: Session, invoice_id: int) -> Optional[Invoice]:
    return db.query(Invoice).options(selectinload(Invoice.lines)).filter(Invoice.id == invoice_id).first()


def get_invoices(
    db: Session,
    party_id: Optional[int] = None,
    invoice_type: Optional[InvoiceType] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Invoice]:
    """All invoices, newest first."""
    query = db.query(Invoice).options(selectinload(Invoice.lines))
    if party_id is not None:
        query = query.filter(Invoice.party_id == party_id)
    if invoice_type:
        query = query.filter(Invoice.type == invoice_type)
    query = query.order_by(Invoice.created_at.desc(), Invoice.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()
