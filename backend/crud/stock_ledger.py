import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from errors import PartialApplicationError
from models.invoices import Invoice, InvoiceType
from models.items import Item
from models.stock_movements import StockMovement, MovementDirection
from schemas.reports import StockReportRow
from utils.money import to_money

logger = logging.getLogger("stock_ledger")


def apply_invoice(db: Session, invoice: Invoice) -> List[StockMovement]:
    """
    Apply the stock effect of every line of an invoice.

    Sales take stock out, purchases bring it in. Each change is an atomic
    ``stock = stock + delta`` at the database so concurrent invoices on the
    same item never lose an update, and each one is logged as a StockMovement
    referencing the invoice number. Lines without a known item are skipped.

    Nothing is committed here; the caller owns the transaction.
    """
    is_sales = invoice.type == InvoiceType.SALES
    direction = MovementDirection.OUT if is_sales else MovementDirection.IN

    item_ids = {line.item_id for line in invoice.lines if line.item_id is not None}
    known_ids = set()
    if item_ids:
        known_ids = {row[0] for row in db.query(Item.id).filter(Item.id.in_(item_ids)).all()}

    movements = []
    for line in invoice.lines:
        if line.item_id is None:
            continue
        if line.item_id not in known_ids:
            logger.warning(f"Invoice {invoice.invoice_no}: item {line.item_id} not found, stock not updated for line '{line.name}'")
            continue

        delta = -Decimal(line.qty) if is_sales else Decimal(line.qty)
        result = db.execute(
            update(Item)
            .where(Item.id == line.item_id)
            .values(stock=Item.stock + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            logger.error(f"Invoice {invoice.invoice_no}: stock update for item {line.item_id} affected {result.rowcount} rows")
            raise PartialApplicationError(invoice.invoice_no, line.item_id)

        movement = StockMovement(
            item_id=line.item_id,
            item_name=line.name,
            qty=delta,
            direction=direction,
            reference_id=invoice.invoice_no,
        )
        db.add(movement)
        movements.append(movement)

    logger.info(f"Invoice {invoice.invoice_no}: applied {len(movements)} stock movement(s)")
    return movements


def get_stock_report(db: Session) -> List[StockReportRow]:
    items = db.query(Item).order_by(Item.name.asc(), Item.id.asc()).all()
    return [
        StockReportRow(
            id=item.id,
            name=item.name,
            unit=item.unit,
            purchase_rate=item.purchase_rate,
            stock=item.stock,
            value=to_money(Decimal(item.stock) * Decimal(item.purchase_rate)),
        )
        for item in items
    ]


def get_stock_movements(db: Session, item_id: Optional[int] = None, skip: int = 0, limit: int = 100):
    query = db.query(StockMovement)
    if item_id is not None:
        query = query.filter(StockMovement.item_id == item_id)
    return query.order_by(StockMovement.id.desc()).offset(skip).limit(limit).all()
