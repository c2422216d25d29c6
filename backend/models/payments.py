from sqlalchemy import Column, Integer, Numeric, Date, String, Text, Enum
from database import Base
import enum
from models.audit_mixin import TimestampMixin

class PaymentMethod(enum.Enum):
    CASH = "cash"
    ONLINE = "online"
    CHEQUE = "cheque"

class Payment(Base, TimestampMixin):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    party_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    mode = Column(Enum(PaymentMethod), nullable=False)
    reference = Column(String, nullable=True) # Cheque number, transaction ID etc.
    notes = Column(Text, nullable=True)
