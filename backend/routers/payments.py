from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from errors import NotFoundError
from crud import payments as crud_payments
from schemas.payments import Payment, PaymentCreate

router = APIRouter(prefix="/payments", tags=["Payments"])

@router.post("/", response_model=Payment, status_code=status.HTTP_201_CREATED)
def create_payment(payment: PaymentCreate, db: Session = Depends(get_db)):
    """Record a payment made to a supplier or received from a customer."""
    return crud_payments.record_payment(db=db, payment=payment)

@router.get("/", response_model=List[Payment])
def read_payments(
    party_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return crud_payments.get_payments(db=db, party_id=party_id, skip=skip, limit=limit)

@router.get("/{payment_id}", response_model=Payment)
def read_payment(payment_id: int, db: Session = Depends(get_db)):
    db_payment = crud_payments.get_payment(db=db, payment_id=payment_id)
    if db_payment is None:
        raise NotFoundError("Payment", payment_id)
    return db_payment
