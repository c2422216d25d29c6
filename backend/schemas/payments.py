from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from models.payments import PaymentMethod

class PaymentBase(BaseModel):
    party_id: int
    amount: Decimal
    date: date
    mode: PaymentMethod
    reference: Optional[str] = None # Cheque number, transaction ID etc.
    notes: Optional[str] = None

class PaymentCreate(PaymentBase):
    pass

class Payment(PaymentBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
