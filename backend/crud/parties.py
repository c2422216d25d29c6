import logging
from typing import Optional

from sqlalchemy.orm import Session

from database import unit_of_work
from errors import ValidationError
from models.invoices import Invoice
from models.parties import Party, PartyType
from models.payments import Payment
from schemas.parties import PartyCreate, PartyUpdate

logger = logging.getLogger("parties")


def get_party(db: Session, party_id: int) -> Optional[Party]:
    return db.query(Party).filter(Party.id == party_id).first()


def get_parties(db: Session, party_type: Optional[PartyType] = None, skip: int = 0, limit: int = 100):
    query = db.query(Party)
    if party_type:
        query = query.filter(Party.type == party_type)
    return query.order_by(Party.id.desc()).offset(skip).limit(limit).all()


def create_party(db: Session, party: PartyCreate) -> Party:
    db_party = Party(**party.model_dump())
    with unit_of_work(db):
        db.add(db_party)
    db.refresh(db_party)
    logger.info(f"{db_party.type.value} '{db_party.name}' created with ID {db_party.id}")
    return db_party


def is_referenced(db: Session, party_id: int) -> bool:
    """True once any invoice or payment points at the party."""
    has_invoice = db.query(Invoice.id).filter(Invoice.party_id == party_id).first() is not None
    return has_invoice or db.query(Payment.id).filter(Payment.party_id == party_id).first() is not None


def update_party(db: Session, party_id: int, party: PartyUpdate) -> Optional[Party]:
    db_party = get_party(db, party_id)
    if db_party is None:
        return None

    update_data = party.model_dump(exclude_unset=True)
    new_type = update_data.get("type")
    if new_type is not None and new_type != db_party.type and is_referenced(db, party_id):
        # Ledger sign conventions depend on the type; flipping it would rewrite history
        logger.warning(f"Rejected type change for party {party_id}: party already has transactions")
        raise ValidationError("Party type cannot be changed once invoices or payments reference the party.")

    with unit_of_work(db):
        for key, value in update_data.items():
            setattr(db_party, key, value)
    db.refresh(db_party)
    logger.info(f"Party {party_id} updated: {sorted(update_data)}")
    return db_party
