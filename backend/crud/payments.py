import logging
from typing import Optional

from sqlalchemy.orm import Session

from database import unit_of_work
from errors import ValidationError
from models.parties import Party
from models.payments import Payment
from schemas.payments import PaymentCreate
from utils.money import to_money

logger = logging.getLogger("payments")


def record_payment(db: Session, payment: PaymentCreate) -> Payment:
    amount = to_money(payment.amount)
    if amount <= 0:
        raise ValidationError(f"Payment amount must be greater than zero, got {payment.amount}.")
    party = db.query(Party).filter(Party.id == payment.party_id).first()
    if party is None:
        logger.warning(f"Payment rejected: party {payment.party_id} not found")
        raise ValidationError(f"Party with ID {payment.party_id} not found.")

    db_payment = Payment(**payment.model_dump(exclude={"amount"}), amount=amount)
    with unit_of_work(db):
        db.add(db_payment)
    db.refresh(db_payment)
    logger.info(f"Payment of {db_payment.amount} ({db_payment.mode.value}) recorded for {party.type.value} {party.id}")
    return db_payment


def get_payment(db: Session, payment_id: int) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.id == payment_id).first()


def get_payments(db: Session, party_id: Optional[int] = None, skip: int = 0, limit: int = 100):
    query = db.query(Payment)
    if party_id is not None:
        query = query.filter(Payment.party_id == party_id)
    return query.order_by(Payment.date.desc(), Payment.id.desc()).offset(skip).limit(limit).all()
