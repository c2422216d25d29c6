from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from decimal import Decimal
from models.stock_movements import MovementDirection

class StockMovement(BaseModel):
    id: int
    item_id: int
    item_name: Optional[str] = None
    qty: Decimal
    direction: MovementDirection
    reference_id: Optional[str] = None
    timestamp: datetime

    class Config:
        from_attributes = True
