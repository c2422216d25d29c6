from sqlalchemy import Column, Integer, String, Numeric
from database import Base
from models.audit_mixin import TimestampMixin

class Item(Base, TimestampMixin):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    hsn = Column(String, nullable=True)
    unit = Column(String, nullable=False, default="PCS") # e.g., "PCS", "kg", "liters"
    barcode = Column(String, nullable=True)
    purchase_rate = Column(Numeric(14, 2), default=0, nullable=False)
    sale_rate = Column(Numeric(14, 2), default=0, nullable=False)
    tax_percent = Column(Numeric(5, 2), default=18, nullable=False)
    # Only the stock ledger writes this once invoices are flowing. Fractional for weight/volume units.
    stock = Column(Numeric(14, 3), default=0, nullable=False)
