from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from errors import NotFoundError
from crud import parties as crud_parties
from models.parties import PartyType
from schemas.parties import Party, PartyCreate, PartyUpdate

router = APIRouter(prefix="/parties", tags=["Parties"])

@router.post("/", response_model=Party, status_code=status.HTTP_201_CREATED)
def create_party(party: PartyCreate, db: Session = Depends(get_db)):
    return crud_parties.create_party(db=db, party=party)

@router.get("/", response_model=List[Party])
def read_parties(
    type: Optional[PartyType] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return crud_parties.get_parties(db=db, party_type=type, skip=skip, limit=limit)

@router.get("/{party_id}", response_model=Party)
def read_party(party_id: int, db: Session = Depends(get_db)):
    db_party = crud_parties.get_party(db=db, party_id=party_id)
    if db_party is None:
        raise NotFoundError("Party", party_id)
    return db_party

@router.patch("/{party_id}", response_model=Party)
def update_party(party_id: int, party: PartyUpdate, db: Session = Depends(get_db)):
    db_party = crud_parties.update_party(db=db, party_id=party_id, party=party)
    if db_party is None:
        raise NotFoundError("Party", party_id)
    return db_party
