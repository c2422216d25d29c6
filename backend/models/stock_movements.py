from sqlalchemy import Column, Integer, String, DateTime, Numeric, Enum
from database import Base
import enum
from models.audit_mixin import now_local

class MovementDirection(enum.Enum):
    IN = "IN"
    OUT = "OUT"
    ADJUSTMENT = "ADJUSTMENT"

class StockMovement(Base):
    __tablename__ = "stock_movements"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(Integer, nullable=False, index=True)
    item_name = Column(String, nullable=True)
    qty = Column(Numeric(14, 3), nullable=False) # Positive for purchase, negative for sale
    direction = Column(Enum(MovementDirection), nullable=False)
    reference_id = Column(String, nullable=True, index=True) # Invoice number
    timestamp = Column(DateTime(timezone=True), default=now_local)
