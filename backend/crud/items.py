import logging
from typing import Optional

from sqlalchemy.orm import Session

from database import unit_of_work
from models.items import Item
from schemas.items import ItemCreate, ItemUpdate

logger = logging.getLogger("items")


def get_item(db: Session, item_id: int) -> Optional[Item]:
    return db.query(Item).filter(Item.id == item_id).first()


def get_items(db: Session, skip: int = 0, limit: int = 100):
    return db.query(Item).order_by(Item.name.asc()).offset(skip).limit(limit).all()


def create_item(db: Session, item: ItemCreate) -> Item:
    db_item = Item(**item.model_dump())
    with unit_of_work(db):
        db.add(db_item)
    db.refresh(db_item)
    logger.info(f"Item '{db_item.name}' created with opening stock {db_item.stock}")
    return db_item


def update_item(db: Session, item_id: int, item: ItemUpdate) -> Optional[Item]:
    db_item = get_item(db, item_id)
    if db_item is None:
        return None
    with unit_of_work(db):
        for key, value in item.model_dump(exclude_unset=True).items():
            setattr(db_item, key, value)
    db.refresh(db_item)
    return db_item
