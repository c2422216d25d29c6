from pydantic import BaseModel
from typing import Optional
from decimal import Decimal
from datetime import datetime

class ItemBase(BaseModel):
    name: str
    hsn: Optional[str] = None
    unit: str = "PCS" # e.g., "PCS", "kg", "liters"
    barcode: Optional[str] = None
    purchase_rate: Decimal = Decimal("0")
    sale_rate: Decimal = Decimal("0")
    tax_percent: Decimal = Decimal("18")

class ItemCreate(ItemBase):
    stock: Decimal = Decimal("0") # Opening stock

class ItemUpdate(BaseModel):
    name: Optional[str] = None
    hsn: Optional[str] = None
    unit: Optional[str] = None
    barcode: Optional[str] = None
    purchase_rate: Optional[Decimal] = None
    sale_rate: Optional[Decimal] = None
    tax_percent: Optional[Decimal] = None
    # stock is maintained by the stock ledger, not directly updated via this schema

class Item(ItemBase):
    id: int
    stock: Decimal
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
