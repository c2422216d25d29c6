from sqlalchemy import Column, Integer, Numeric, ForeignKey, String
from sqlalchemy.orm import relationship
from database import Base

class InvoiceLine(Base):
    __tablename__ = "invoice_lines"

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id"), nullable=False)
    position = Column(Integer, nullable=False)
    item_id = Column(Integer, nullable=True) # None for ad hoc lines
    name = Column(String, nullable=False) # Snapshot at time of sale
    qty = Column(Numeric(14, 3), nullable=False)
    rate = Column(Numeric(14, 2), nullable=False)
    discount_percent = Column(Numeric(5, 2), default=0, nullable=False)
    tax_percent = Column(Numeric(5, 2), default=0, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False) # Taxable value: qty * rate less discount
    tax = Column(Numeric(14, 2), nullable=False)

    # Relationships
    invoice = relationship("Invoice", back_populates="lines")
