from sqlalchemy import Column, Integer, String, Text, Numeric, Enum
from database import Base
import enum
from models.audit_mixin import TimestampMixin

class PartyType(enum.Enum):
    CUSTOMER = "Customer"
    SUPPLIER = "Supplier"

class Party(Base, TimestampMixin):
    __tablename__ = "parties"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    mobile = Column(String, nullable=False)
    email = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    gst_no = Column(String, nullable=True)
    # Receivable for customers, payable for suppliers
    opening_balance = Column(Numeric(14, 2), default=0, nullable=False)
    type = Column(Enum(PartyType), nullable=False)
