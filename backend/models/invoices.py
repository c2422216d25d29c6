from sqlalchemy import Column, Integer, String, Text, Numeric, Date, Enum
from sqlalchemy.orm import relationship
from database import Base
import enum
from models.audit_mixin import TimestampMixin

class InvoiceType(enum.Enum):
    SALES = "SALES"
    PURCHASE = "PURCHASE"

class PaymentMode(enum.Enum):
    CASH = "cash"
    CREDIT = "credit"
    ONLINE = "online"
    CHEQUE = "cheque"

class Invoice(Base, TimestampMixin):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    sequence_no = Column(Integer, nullable=False, index=True) # Per-type running number
    invoice_no = Column(String, unique=True, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    # Plain reference: historical invoices survive deletion of the party
    party_id = Column(Integer, nullable=False, index=True)
    party_name = Column(String, nullable=False)
    type = Column(Enum(InvoiceType), nullable=False)
    subtotal = Column(Numeric(14, 2), nullable=False)
    tax_amount = Column(Numeric(14, 2), nullable=False)
    round_off = Column(Numeric(14, 2), default=0, nullable=False)
    grand_total = Column(Numeric(14, 2), nullable=False)
    payment_mode = Column(Enum(PaymentMode), nullable=False, default=PaymentMode.CASH)
    payment_details = Column(Text, nullable=True)
    due_date = Column(Date, nullable=True) # Only for credit invoices

    # Relationships
    lines = relationship(
        "InvoiceLine",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceLine.position",
    )
