from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from errors import NotFoundError
from crud import dashboard as crud_dashboard
from crud import outstanding as crud_outstanding
from crud import party_ledger as crud_party_ledger
from crud import stock_ledger as crud_stock_ledger
from schemas.reports import Dashboard, LedgerEntry, OutstandingRow, StockReportRow
from schemas.stock_movements import StockMovement

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
)

@router.get("/stock", response_model=List[StockReportRow])
def get_stock_report(db: Session = Depends(get_db)):
    return crud_stock_ledger.get_stock_report(db=db)

@router.get("/stock-movements", response_model=List[StockMovement])
def get_stock_movements(
    item_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return crud_stock_ledger.get_stock_movements(db=db, item_id=item_id, skip=skip, limit=limit)

@router.get("/ledger/{party_id}", response_model=List[LedgerEntry])
def get_party_ledger(
    party_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """
    Party statement with a running balance seeded from the opening balance.

    Row types: SALE, PURCHASE, PAYMENT and SETTLEMENT. A SETTLEMENT row follows
    every invoice paid at the counter (cash, online, cheque) and offsets it on the
    same day; it is not a separate payment record.
    """
    entries = crud_party_ledger.get_party_ledger(db=db, party_id=party_id, start_date=start_date, end_date=end_date)
    if entries is None:
        raise NotFoundError("Party", party_id)
    return entries

@router.get("/outstanding", response_model=List[OutstandingRow])
def get_outstanding(db: Session = Depends(get_db)):
    return crud_outstanding.get_outstanding(db=db)

@router.get("/dashboard", response_model=Dashboard)
def get_dashboard(db: Session = Depends(get_db)):
    return crud_dashboard.get_dashboard(db=db)
