from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from errors import NotFoundError
from crud import invoices as crud_invoices
from models.invoices import InvoiceType
from schemas.invoices import Invoice, InvoiceCreate

router = APIRouter(prefix="/invoices", tags=["Invoices"])

@router.post("/", response_model=Invoice, status_code=status.HTTP_201_CREATED)
def create_invoice(invoice: InvoiceCreate, db: Session = Depends(get_db)):
    """Create an invoice and apply its stock movements in one transaction."""
    return crud_invoices.create_invoice(db=db, invoice=invoice)

@router.get("/", response_model=List[Invoice])
def read_invoices(
    party_id: Optional[int] = None,
    type: Optional[InvoiceType] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """Retrieve invoices, newest first."""
    return crud_invoices.get_invoices(db=db, party_id=party_id, invoice_type=type, skip=skip, limit=limit)

@router.get("/{invoice_id}", response_model=Invoice)
def read_invoice(invoice_id: int, db: Session = Depends(get_db)):
    db_invoice = crud_invoices.get_invoice(db=db, invoice_id=invoice_id)
    if db_invoice is None:
        raise NotFoundError("Invoice", invoice_id)
    return db_invoice
