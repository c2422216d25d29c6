from pydantic import BaseModel
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from models.invoices import InvoiceType, PaymentMode


class InvoiceLineCreate(BaseModel):
    item_id: Optional[int] = None
    # name and tax_percent are copied from the item master when left out
    name: Optional[str] = None
    qty: Decimal
    rate: Decimal
    discount_percent: Decimal = Decimal("0")
    tax_percent: Optional[Decimal] = None

class InvoiceLine(BaseModel):
    item_id: Optional[int] = None
    name: str
    qty: Decimal
    rate: Decimal
    discount_percent: Decimal
    tax_percent: Decimal
    amount: Decimal
    tax: Decimal

    class Config:
        from_attributes = True

class InvoiceBase(BaseModel):
    party_id: int
    date: date
    type: InvoiceType
    payment_mode: PaymentMode = PaymentMode.CASH
    payment_details: Optional[str] = None
    round_off: Decimal = Decimal("0")

class InvoiceCreate(InvoiceBase):
    lines: List[InvoiceLineCreate]

class Invoice(InvoiceBase):
    id: int
    invoice_no: str
    party_name: str
    subtotal: Decimal
    tax_amount: Decimal
    grand_total: Decimal
    due_date: Optional[date] = None
    created_at: datetime
    lines: List[InvoiceLine] = []

    class Config:
        from_attributes = True
