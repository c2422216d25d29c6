from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database import get_db
from errors import NotFoundError
from crud import items as crud_items
from schemas.items import Item, ItemCreate, ItemUpdate

router = APIRouter(prefix="/items", tags=["Items"])

@router.post("/", response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(item: ItemCreate, db: Session = Depends(get_db)):
    return crud_items.create_item(db=db, item=item)

@router.get("/", response_model=List[Item])
def read_items(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud_items.get_items(db=db, skip=skip, limit=limit)

@router.get("/{item_id}", response_model=Item)
def read_item(item_id: int, db: Session = Depends(get_db)):
    db_item = crud_items.get_item(db=db, item_id=item_id)
    if db_item is None:
        raise NotFoundError("Item", item_id)
    return db_item

@router.patch("/{item_id}", response_model=Item)
def update_item(item_id: int, item: ItemUpdate, db: Session = Depends(get_db)):
    """Update master fields. Stock is only changed by invoices."""
    db_item = crud_items.update_item(db=db, item_id=item_id, item=item)
    if db_item is None:
        raise NotFoundError("Item", item_id)
    return db_item
