from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from typing import List, Optional
from models.parties import PartyType


class StockReportRow(BaseModel):
    id: int
    name: str
    unit: Optional[str] = None
    purchase_rate: Decimal
    stock: Decimal
    value: Decimal

# Party Ledger
class LedgerEntry(BaseModel):
    id: int # Invoice or payment ID
    date: date
    ref: str
    type: str # SALE, PURCHASE, SETTLEMENT or PAYMENT
    description: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    balance: Decimal

# Outstanding
class OutstandingRow(BaseModel):
    id: int
    name: str
    mobile: str
    type: PartyType
    opening_balance: Decimal
    # Credit purchases for suppliers, under the same name
    total_credit_sales: Decimal
    total_received: Decimal
    current_balance: Decimal

class RecentTransaction(BaseModel):
    id: int
    invoice_no: str
    party: str
    amount: Decimal
    type: str
    date: date

class Dashboard(BaseModel):
    total_sales: Decimal
    total_purchase: Decimal
    receivables: Decimal
    payables: Decimal
    low_stock: int
    recent_transactions: List[RecentTransaction]
