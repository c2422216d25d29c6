from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from decimal import Decimal
from models.parties import PartyType

class PartyBase(BaseModel):
    name: str
    mobile: str
    email: Optional[str] = None
    address: Optional[str] = None
    gst_no: Optional[str] = None
    opening_balance: Decimal = Decimal("0")
    type: PartyType

class PartyCreate(PartyBase):
    pass

class PartyUpdate(BaseModel):
    name: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    gst_no: Optional[str] = None
    opening_balance: Optional[Decimal] = None
    type: Optional[PartyType] = None

class Party(PartyBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
